from .conftest import PASSWORD


def test_users_routes_require_login(anon_client):
    for path in ("/api/users/profile", "/api/users/subscriptions", "/api/users/transactions"):
        assert anon_client.get(path).status_code == 401


def test_profile(client, user):
    body = client.get("/api/users/profile").json()
    assert body["username"] == user.username
    assert body["fullName"] == "Alice Example"
    assert "password" not in body


def test_update_profile(client):
    response = client.patch("/api/users/profile", json={"fullName": "Alice B", "email": "ab@example.com"})
    assert response.status_code == 200
    assert response.json()["fullName"] == "Alice B"
    assert response.json()["email"] == "ab@example.com"


def test_update_profile_email_taken(client, other_user):
    response = client.patch("/api/users/profile", json={"email": other_user.email})
    assert response.status_code == 409


def test_change_password(client, anon_client, user):
    response = client.post("/api/users/change-password", json={
        "currentPassword": "nope", "newPassword": "another1",
    })
    assert response.status_code == 401
    assert response.json() == {"message": "Current password is incorrect"}

    response = client.post("/api/users/change-password", json={
        "currentPassword": PASSWORD, "newPassword": "another1",
    })
    assert response.status_code == 200

    assert anon_client.post("/api/auth/login", json={"username": "alice", "password": PASSWORD}).status_code == 401
    assert anon_client.post("/api/auth/login", json={"username": "alice", "password": "another1"}).status_code == 200


def test_profile_null_clears_optional_fields(client, user):
    body = client.patch("/api/users/profile", json={"fullName": None, "email": None}).json()
    assert body["fullName"] is None
    assert body["email"] == user.email
