"""Application configuration."""

import os

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    package_name: str
    mentraos_api_key: str
    port: int = 3000
    backend_url: str = "http://localhost:8000"
    upload_timeout_seconds: float = 10.0
    photos_dir: str = "photos"
    auth_user_header: str = "X-Auth-User-Id"
    auth_secret_header: str = "X-Auth-Secret"
    max_cached_users: int | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("backend_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")
