from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
import os

DEFAULT_SESSION_SECRET = "mechxer_super_secret"


class Settings(BaseSettings):
    app_name: str = "Mechxer Storefront API"
    environment: str = "development"
    log_level: str = "INFO"

    # Session cookie
    session_secret: str = DEFAULT_SESSION_SECRET
    session_cookie: str = "mechxer_session"
    session_max_age: int = 86400  # 24 hours
    session_https_only: bool = False

    # Comma-separated list of allowed origins for the React client
    cors_origins: str = "http://localhost:3000,http://localhost:5173"

    # Pagination
    default_page_size: int = 10
    max_page_size: int = 100

    seed_demo_data: bool = True

    # Payment gateway
    stripe_secret_key: Optional[str] = None
    stripe_api_base: str = "https://api.stripe.com"
    payment_timeout: float = 30.0

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = SettingsConfigDict(
        # Look for .env file in project root
        env_file=os.path.join(os.path.dirname(__file__), "../..", ".env"),
        extra="ignore",
    )

    @property
    def allowed_origins(self) -> list:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def uses_default_session_secret(self) -> bool:
        return self.session_secret == DEFAULT_SESSION_SECRET


settings = Settings()
