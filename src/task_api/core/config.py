"""Application settings powered by ``pydantic-settings``."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Sequence
from urllib.parse import unquote, urlsplit

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .. import __version__ as package_version

EnvironmentName = Literal["development", "test", "production"]

_ENVIRONMENT_ALIASES: dict[str, EnvironmentName] = {
    "development": "development",
    "dev": "development",
    "test": "test",
    "testing": "test",
    "production": "production",
    "prod": "production",
}

_ENVIRONMENT_PROFILES: dict[EnvironmentName, dict[str, Any]] = {
    "development": {
        "log_level": "DEBUG",
        "reload": True,
        "log_errors": True,
    },
    "test": {
        "log_level": "WARNING",
        "reload": False,
        "log_errors": False,
    },
    "production": {
        "log_level": "INFO",
        "reload": False,
        "log_errors": True,
    },
}

# bcrypt only accepts cost factors within this range.
_MIN_HASH_ROUNDS = 4
_MAX_HASH_ROUNDS = 31


class Settings(BaseSettings):
    """Runtime configuration for the task API service."""

    model_config = SettingsConfigDict(
        env_prefix="TASK_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    project_name: str = "Task API"
    environment: EnvironmentName = Field(default="development")
    api_prefix: str = Field(default="")
    version: str = Field(default=package_version)

    mongo_url: str = Field(default="mongodb://localhost:27017")
    mongo_database: str = Field(default="task_api")

    password_hash_rounds: int = Field(default=10)
    auth_realm: str = Field(default="TaskAPI")

    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"],
    )
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: list[str] = Field(default_factory=lambda: ["*"])
    cors_allow_headers: list[str] = Field(default_factory=lambda: ["*"])

    app_host: str = Field(default="0.0.0.0")
    app_port: int = Field(default=3000)
    log_level: str = Field(default="INFO")
    log_errors: bool = Field(default=True)
    reload: bool = Field(default=False)

    @field_validator("environment", mode="before")
    @classmethod
    def _normalise_environment(cls, value: object) -> EnvironmentName:
        if isinstance(value, str):
            normalized = value.strip().lower()
        else:
            normalized = ""
        return _ENVIRONMENT_ALIASES.get(normalized, "development")

    @field_validator("password_hash_rounds", mode="before")
    @classmethod
    def _clamp_hash_rounds(cls, value: object) -> int:
        try:
            rounds = int(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return 10
        return min(max(rounds, _MIN_HASH_ROUNDS), _MAX_HASH_ROUNDS)

    @field_validator(
        "cors_allow_origins",
        "cors_allow_methods",
        "cors_allow_headers",
        mode="before",
    )
    @classmethod
    def _coerce_comma_separated(cls, value: object) -> list[str]:
        """Allow comma separated strings for CORS configuration."""

        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        if isinstance(value, Sequence):
            return [str(item) for item in value if str(item).strip()]
        return []

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: object) -> str:
        if not isinstance(value, str):
            return "INFO"
        return value.upper()

    @model_validator(mode="after")
    def _apply_environment_profile(self) -> "Settings":
        profile = _ENVIRONMENT_PROFILES[self.environment]
        fields_set = set(getattr(self, "model_fields_set", set()))
        for field_name, value in profile.items():
            if field_name not in fields_set:
                setattr(self, field_name, value)
        return self

    @property
    def database_name(self) -> str:
        """Return the database named in ``mongo_url``, else ``mongo_database``."""

        path = urlsplit(self.mongo_url).path.lstrip("/")
        return unquote(path) if path else self.mongo_database

    @property
    def router_prefix(self) -> str:
        """Return ``api_prefix`` normalised to ``""`` or ``/segment``."""

        prefix = self.api_prefix.strip()
        if prefix and not prefix.startswith("/"):
            prefix = f"/{prefix}"
        prefix = prefix.rstrip("/")
        return "" if prefix == "/" else prefix


@lru_cache()
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance."""

    return Settings()


__all__ = ["EnvironmentName", "Settings", "get_settings"]
