# crewhub/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    All values have development defaults; override them in .env for
    anything that is not a local sandbox:
      - DATABASE_URL (SQLite file by default, Postgres supported)
      - SESSION_SECRET (signs the session token carried in the cookie)
      - ADMIN_PASSWORD (password of the seeded admin identity)
    """

    PROJECT_NAME: str = "CrewHub API"
    API_PREFIX: str = "/api"

    # Database
    DATABASE_URL: str = "sqlite:///./crewhub.db"
    DATABASE_REQUIRE_SSL: bool = False
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 0

    # Session token (JWT in an HttpOnly cookie)
    SESSION_SECRET: str = "crewhub-dev-secret-change-me"
    SESSION_ALG: str = "HS256"
    SESSION_COOKIE_NAME: str = "crewhub_session"
    SESSION_MAX_AGE_SECONDS: int = 86400
    SESSION_COOKIE_SECURE: bool = False

    # First-run seeding
    ADMIN_USERNAME: str = "admin@crewhub.com"
    ADMIN_PASSWORD: str = "admin"
    SEED_DEMO_DATA: bool = True

    CORS_ORIGINS: list[str] = [
        "http://localhost:5000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
