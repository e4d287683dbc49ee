"""
Application settings.

Controller credentials and endpoint are read from the environment
(``CMON_ENDPOINT``, ``CMON_USERNAME``, ``CMON_PASSWORD``) or a local ``.env``.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CMON_ENDPOINT = "https://127.0.0.1:9501"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Controller
    cmon_endpoint: str = DEFAULT_CMON_ENDPOINT
    cmon_username: str = Field("", validate_default=True)
    cmon_password: str = Field("", validate_default=True)
    cmon_timeout: float = 30.0
    # cmon ships with a self-signed certificate
    cmon_verify_tls: bool = False

    # Logging
    log_level: str = "INFO"

    @field_validator("cmon_endpoint", mode="before")
    @classmethod
    def _default_endpoint(cls, v):
        """Treat an empty CMON_ENDPOINT as unset."""
        if v is None or not str(v).strip():
            return DEFAULT_CMON_ENDPOINT
        return str(v).strip().rstrip("/")

    @field_validator("cmon_username", "cmon_password")
    @classmethod
    def _required(cls, v: str, info) -> str:
        if not v:
            raise ValueError(f"{info.field_name.upper()} is required")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
