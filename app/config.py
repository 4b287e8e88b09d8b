"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite+aiosqlite:///./secret_santa.db",
        description="Async SQLAlchemy database URL",
        min_length=1,
    )
    sql_echo: bool = Field(
        default=False, description="Log every SQL statement emitted by SQLAlchemy"
    )
    max_participants: int = Field(
        default=20,
        description="Maximum number of participants a room can hold",
        ge=3,
        le=1000,
    )
    min_participants_for_draw: int = Field(
        default=3,
        description="Minimum number of participants required to run the draw",
        ge=2,
    )
    app_timezone: str = Field(
        default="UTC",
        description="Timezone used to decide which gift exchange dates are in the past",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:4200", "http://localhost:5173"],
        description="Origins allowed to call the API from a browser",
    )
    log_level: str = Field(default="INFO", description="Root logging level")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unsupported LOG_LEVEL '{value}'")
        return normalized

    @model_validator(mode="after")
    def _validate_participant_limits(self) -> "Settings":
        if self.min_participants_for_draw > self.max_participants:
            raise ValueError(
                "MIN_PARTICIPANTS_FOR_DRAW cannot be greater than MAX_PARTICIPANTS"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
