import pytest
from fastapi.testclient import TestClient

from apps.api.main import create_app
from shared.config.settings import Settings
from shared.models import PlanInterval, Product, SubscriptionPlan, User, UserRole
from shared.security import hash_password
from shared.storage import MemStorage

PASSWORD = "secret123"


@pytest.fixture(scope="session")
def password_hash():
    # bcrypt is slow; hash once for the whole run
    return hash_password(PASSWORD)


@pytest.fixture
def app_settings():
    return Settings(
        seed_demo_data=False,
        session_secret="test-secret",
        stripe_secret_key=None,
    )


@pytest.fixture
def app(app_settings):
    return create_app(app_settings)


@pytest.fixture
def storage(app) -> MemStorage:
    return app.state.storage


@pytest.fixture
def user(storage, password_hash) -> User:
    return storage.create_user(User(
        username="alice",
        email="alice@example.com",
        password=password_hash,
        full_name="Alice Example",
    ))


@pytest.fixture
def other_user(storage, password_hash) -> User:
    return storage.create_user(User(
        username="bob",
        email="bob@example.com",
        password=password_hash,
    ))


@pytest.fixture
def admin_user(storage, password_hash) -> User:
    return storage.create_user(User(
        username="root",
        email="root@example.com",
        password=password_hash,
        role=UserRole.ADMIN,
        is_verified=True,
    ))


def login(client: TestClient, username: str, password: str = PASSWORD) -> TestClient:
    response = client.post("/api/auth/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return client


@pytest.fixture
def anon_client(app):
    return TestClient(app)


@pytest.fixture
def client(app, user):
    return login(TestClient(app), user.username)


@pytest.fixture
def other_client(app, other_user):
    return login(TestClient(app), other_user.username)


@pytest.fixture
def admin_client(app, admin_user):
    return login(TestClient(app), admin_user.username)


@pytest.fixture
def make_product(storage):
    def _make(name="Cloud Defender Pro", is_active=True, **extra):
        return storage.create_product(Product(
            name=name,
            description=f"{name} description",
            short_description=f"{name} in short",
            images=["https://images.example.com/1.png"],
            platforms=["Windows", "Linux"],
            download_link="https://download.example.com/app.zip",
            zip_password="zip-secret",
            is_active=is_active,
            **extra,
        ))
    return _make


@pytest.fixture
def make_plan(storage):
    def _make(product, interval=PlanInterval.MONTH, price=1999, name=None):
        return storage.create_subscription_plan(SubscriptionPlan(
            product_id=product.id,
            name=name or ("Annual" if interval == PlanInterval.YEAR else "Monthly"),
            price=price,
            price_crypto=10,
            interval=interval,
            features=["Email support"],
        ))
    return _make
