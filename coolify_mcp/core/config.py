"""Configuration management for the Coolify MCP server."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

DEFAULT_COOLIFY_BASE_URL = "https://coolify.stuartmason.co.uk"

_REPO_ROOT = Path(__file__).resolve().parents[2]
_PACKAGE_DIR = Path(__file__).resolve().parents[1]
# Repo root .env first, then the package directory and the working directory.
_ENV_FILE_CANDIDATES: tuple[str, ...] = (
    str(_REPO_ROOT / ".env"),
    str(_PACKAGE_DIR / ".env"),
    ".env",
)


class CoolifySettings(BaseSettings):
    """Centralised configuration derived from environment variables."""

    app_env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: str | None = Field(
        None,
        description="Optional log file path; console output always goes to stderr",
    )

    coolify_base_url: str = Field(
        DEFAULT_COOLIFY_BASE_URL,
        description="Coolify instance URL, without the /api/v1 suffix",
    )
    coolify_access_token: SecretStr | None = Field(
        None,
        description="Coolify API token sent as a bearer credential",
    )

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE_CANDIDATES,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("coolify_base_url", mode="before")
    @classmethod
    def _normalise_base_url(cls, value: object) -> object:
        if value is None:
            return DEFAULT_COOLIFY_BASE_URL
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return DEFAULT_COOLIFY_BASE_URL
            return value.rstrip("/")
        return value

    def access_token(self) -> str | None:
        """Return the raw API token, or None when it is not configured."""

        if self.coolify_access_token is None:
            return None
        token = self.coolify_access_token.get_secret_value().strip()
        return token or None


@lru_cache
def get_settings() -> CoolifySettings:
    """Return a cached CoolifySettings instance."""

    try:
        return CoolifySettings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid Coolify MCP configuration: {exc}") from exc


def resolved_env_file() -> str | None:
    """Return the first readable .env file from the candidate list."""

    for candidate in _ENV_FILE_CANDIDATES:
        path = Path(candidate).expanduser()
        if path.is_file():
            return str(path)
    return None


def env_file_candidates() -> tuple[str, ...]:
    """Expose configured env file search order for diagnostics."""

    return _ENV_FILE_CANDIDATES
