"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="IMAGESEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
    )

    primary_backend: AnyHttpUrl = Field(default="https://ds-zeta-flame.vercel.app")
    backup_backend: AnyHttpUrl = Field(default="http://localhost:8080")
    timeout_seconds: float = Field(default=30.0, gt=0, le=600)
    # Accepted for compatibility with existing deployments; the dispatcher
    # tries each backend exactly once per request.
    max_retries: int = Field(default=2, ge=0, le=10)
    retry_delay_seconds: float = Field(default=1.0, ge=0)
    results_per_page: int = Field(default=20, ge=1, le=200)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def endpoints(self) -> tuple[str, ...]:
        """Backends in failover order, without trailing slashes."""

        return tuple(
            str(url).rstrip("/") for url in (self.primary_backend, self.backup_backend)
        )


@lru_cache
def get_settings() -> ClientSettings:
    """Return cached settings instance."""

    return ClientSettings()


__all__ = ["ClientSettings", "get_settings"]
