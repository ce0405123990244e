"""
Centralized configuration for the COI Tracker backend.

All settings are loaded from environment variables with sensible defaults.
Variables are prefixed with COI_ (e.g., COI_SUPABASE_URL, COI_AUTH_SECRET).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="COI_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "COI Tracker API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""  # direct Postgres URL, used by run_migrations.py

    # Auth / sessions
    auth_secret: str = ""
    jwt_issuer: str = "coi-tracker"
    session_cookie_name: str = "coi_session"
    session_max_age_days: int = 30
    session_cookie_secure: bool = False

    # Sharing
    share_token_bytes: int = 32
    frontend_url: str = "http://localhost:5173"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
