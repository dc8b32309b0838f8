"""
Application configuration settings.
Loads from .env file first (overrides shell env for local dev), then pydantic reads from environment.
Production: set env vars in the platform (Docker, K8s, etc.); .env is optional.

All backend-related configs and constants are centralized here.
"""
from pathlib import Path

from dotenv import load_dotenv
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env path: backend/.env (absolute path, works regardless of cwd)
_BASE_DIR = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = (_BASE_DIR / ".env").resolve()

# When .env doesn't exist (prod), this is a no-op; platform env vars are used.
if _ENV_FILE.exists():
    load_dotenv(_ENV_FILE, override=True)


class Settings(BaseSettings):
    """Application settings. Source: env vars (after dotenv load)."""

    # App
    app_name: str = "ActionTrack"
    app_version: str = "1.0.0"
    port: int = 3000

    # Database
    database_url: str = Field(
        default="sqlite:///./actiontrack.db",
        validation_alias=AliasChoices("DATABASE_URL", "MONGOOSE_URL"),
    )

    # Auth
    secret_key: str = Field(
        default="your-secret-key-change-in-production",
        validation_alias=AliasChoices("SECRET_KEY", "SECRET_ACCESS_KEY"),
    )
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    bcrypt_rounds: int = 10

    # CORS (comma separated)
    cors_origins: str = "*"

    # Redis
    redis_url: str = ""

    # Cache TTLs (seconds)
    analytics_cache_ttl: int = 60

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Split comma-separated CORS origins into a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()


def get_settings() -> Settings:
    """FastAPI dependency handing the process settings to services."""
    return settings


# --- Constants (non-env, business config) ---

ROOT_GREETING: str = "Hi, this is root page"
ANALYTICS_CACHE_KEY: str = "analytics_report"
