"""Pennywise settings.

Values come from the process environment first and then from the first
env file that exists among:

* the file named by ``PENNYWISE_ENV_FILE`` (relative paths resolve against
  the project root)
* ``config/.env.dev`` for local development
* ``config/.env`` for Docker deployments

Anything not set falls back to the field defaults below.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

ENV_FILE_VARIABLE = "PENNYWISE_ENV_FILE"
ENV_FILE_NAMES = (".env.dev", ".env")


def _project_root() -> Path:
    """Walk up from this file to the directory holding ``config/``."""
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if (candidate / "config").is_dir() or (candidate / ".git").is_dir():
            return candidate
        # Container image root
        if candidate == Path("/app"):
            return candidate
    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    """Directory holding the env files."""
    return _project_root() / "config"


def _env_file() -> Path | None:
    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        if not path.is_absolute():
            path = _project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()
    for name in ENV_FILE_NAMES:
        if (config_dir / name).exists():
            return config_dir / name
    return None


class Settings(BaseSettings):
    """Runtime configuration of the API, the CLI and the database layer.

    ``jwt_secret_key`` has no default: without the identity provider's
    signing secret no request can be authenticated.
    """

    model_config = SettingsConfigDict(
        env_file=_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Identity provider tokens
    jwt_secret_key: SecretStr
    jwt_audience: str | None = "authenticated"
    jwt_algorithm: str = "HS256"

    app_name: str = "Pennywise"
    default_currency: str = "USD"

    # PostgreSQL
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr | None = None
    postgres_db: str = "pennywise"

    # SQLite file, used instead of PostgreSQL when set
    sqlite_path: str | None = None

    # HTTP server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    api_cors_origins: str = ""  # comma separated, empty disables CORS

    log_level: str = "INFO"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_origins(cls, value: Any) -> str:
        if isinstance(value, (list, tuple)):
            return ",".join(str(origin) for origin in value)
        return str(value) if value else ""

    @field_validator("default_currency")
    @classmethod
    def _upper_currency(cls, value: str) -> str:
        return value.strip().upper()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """SQLite when ``sqlite_path`` is set, PostgreSQL otherwise."""
        if self.sqlite_path:
            return f"sqlite+aiosqlite:///{self.sqlite_path}"

        url = URL.create(
            "postgresql+asyncpg",
            username=self.postgres_user,
            password=(
                self.postgres_password.get_secret_value()
                if self.postgres_password
                else None
            ),
            host=self.postgres_host,
            port=self.postgres_port,
            database=self.postgres_db,
        )
        return url.render_as_string(hide_password=False)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return [
            origin.strip()
            for origin in self.api_cors_origins.split(",")
            if origin.strip()
        ]


@lru_cache()
def get_settings() -> Settings:
    """Load the settings once per process."""
    return Settings()  # type: ignore[call-arg]


def clear_settings_cache() -> None:
    """Forget the loaded settings so the next call re-reads the environment."""
    get_settings.cache_clear()
