"""Settings read once from a .env file and the process environment."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

from dotenv import dotenv_values, find_dotenv
from pydantic import Field, SecretStr, ValidationError

from resource_harness.exceptions import ConfigurationError
from resource_harness.models.base import Model
from resource_harness.models.config import HarnessConfig, ResourceKind

log = logging.getLogger(__name__)

# Environment variable names of the connection params each backend requires.
REQUIRED_SETTINGS: Mapping[ResourceKind, Mapping[str, str]] = {
    "browser": {},
    "database": {
        "user": "DB_USER",
        "password": "DB_PASSWORD",
        "connect_string": "DB_CONNECT_STRING",
    },
}


class Settings(Model):
    """Process-wide settings, one field per recognized environment variable."""

    db_user: str | None = None
    db_password: SecretStr | None = None
    db_connect_string: str | None = None
    harness_timeout_ms: int = Field(default=30000, gt=0)
    harness_release_timeout_ms: int = Field(default=5000, gt=0)
    harness_browser: Literal["chromium", "firefox", "webkit"] = "chromium"
    harness_headless: bool = True


def load_settings(
    env_file: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Read settings from an env file overlaid by the process environment.

    Args:
        env_file: Explicit .env file; when omitted, the nearest .env found
            from the working directory is used if there is one
        environ: Environment to overlay (default: os.environ)

    Raises:
        ConfigurationError: If env_file does not exist or a value is invalid

    """
    file_values: Mapping[str, str | None] = {}
    if env_file is not None:
        if not env_file.is_file():
            raise ConfigurationError(f"Env file not found: {env_file}")
        file_values = dotenv_values(env_file)
    elif found := find_dotenv(usecwd=True):
        log.debug("Using env file %s", found)
        file_values = dotenv_values(found)

    merged = {**file_values, **(os.environ if environ is None else environ)}
    values: dict[str, Any] = {
        key.lower(): value
        for key, value in merged.items()
        if key.lower() in Settings.model_fields and value
    }

    try:
        return Settings.model_validate(values)
    except ValidationError as exc:
        fields = ", ".join(
            str(error["loc"][0]).upper() for error in exc.errors() if error["loc"]
        )
        raise ConfigurationError(f"Invalid settings: {fields}") from exc


def build_config(
    kind: ResourceKind,
    settings: Settings,
    *,
    timeout_ms: int | None = None,
) -> HarnessConfig:
    """Build the harness configuration for one resource kind.

    Args:
        kind: Resource kind the configuration is for
        settings: Settings loaded at startup
        timeout_ms: Per-test deadline overriding HARNESS_TIMEOUT_MS

    Raises:
        ConfigurationError: Naming every required variable that is missing

    """
    params: dict[str, Any]
    if kind == "database":
        params = {
            "user": settings.db_user,
            "password": settings.db_password,
            "connect_string": settings.db_connect_string,
        }
    else:
        params = {
            "browser": settings.harness_browser,
            "headless": settings.harness_headless,
        }

    required = REQUIRED_SETTINGS[kind]
    missing = [env for field, env in required.items() if params.get(field) is None]
    if missing:
        raise ConfigurationError(
            f"Missing required setting(s) for {kind} backend: {', '.join(missing)}"
        )

    try:
        return HarnessConfig(
            timeout_ms=(
                settings.harness_timeout_ms if timeout_ms is None else timeout_ms
            ),
            resource_kind=kind,
            connection_params=params,
            release_timeout_ms=settings.harness_release_timeout_ms,
        )
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid {kind} harness config: {exc}") from exc
