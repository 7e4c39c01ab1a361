"""Configuration helpers for the API process."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3001, alias="PORT")
    mongodb_connection_string: str = Field(
        default="mongodb://localhost:27017", alias="MONGODB_CONNECTION_STRING"
    )
    cors_allow_origins: str = Field(default="*", alias="CORS_ALLOW_ORIGINS")
    static_dir: str = Field(default="public", alias="STATIC_DIR")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    build_version: str = Field(default="dev", alias="BUILD_VERSION")
    git_sha: str = Field(default="unknown", alias="GIT_SHA")

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", populate_by_name=True
    )

    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()  # type: ignore[call-arg]


def reset_settings_cache() -> None:
    """Clear cached settings (primarily for tests)."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
