from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from platformdirs import user_config_dir
from pydantic import BaseModel, ConfigDict, ValidationError

from powerctl import APP_NAME

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.yaml"
DEFAULT_FORMAT = "pretty"

ENV_TOKEN = "TIBBER_TOKEN"
ENV_HOME_ID = "TIBBER_HOME_ID"
ENV_FORMAT = "TIBBER_FORMAT"

_ENV_FIELDS = {
    "token": ENV_TOKEN,
    "home_id": ENV_HOME_ID,
    "format": ENV_FORMAT,
}


class ConfigError(ValueError):
    """Raised when configuration cannot be loaded or is incomplete."""


class FileConfig(BaseModel):
    """Shape of the YAML config file; every key is optional."""

    token: str | None = None
    home_id: str | None = None
    format: str | None = None

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True, coerce_numbers_to_str=True)


class Config(BaseModel):
    token: str = ""
    home_id: str | None = None
    format: str = DEFAULT_FORMAT

    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=True)

    def ensure_valid(self) -> None:
        """Check that the merged configuration can authenticate requests.

        Only the token is required; ``home_id`` and ``format`` are left to the
        commands that use them.
        """
        if not self.token:
            raise ConfigError(
                f"missing token: set {ENV_TOKEN} or add 'token' to the config file"
            )


def default_config_path() -> Path:
    """Return the per-user config file location without creating it."""
    return Path(user_config_dir(APP_NAME)).absolute() / CONFIG_FILENAME


def load_config(path: str | Path | None = None) -> Config:
    """Merge defaults, the YAML config file and environment variables.

    Precedence from lowest to highest: built-in defaults, file, environment.
    Each field is overridden on its own, so an unset environment variable
    keeps whatever the file provided.

    When ``path`` is empty the default location is used and a missing file
    there is not an error. An explicit ``path`` must exist and parse.
    """
    explicit = bool(path)
    config_path = Path(path) if path else default_config_path()

    merged: dict[str, Any] = {}
    if config_path.exists():
        logger.debug("Loading config file %s", config_path)
        merged.update(_read_config_file(config_path).model_dump(exclude_none=True))
    elif explicit:
        raise ConfigError(f"Config file not found: {config_path}")
    else:
        logger.debug("No config file at %s; using defaults", config_path)

    for field_name, env_var in _ENV_FIELDS.items():
        value = os.getenv(env_var, "").strip()
        if value:
            logger.debug("Using %s from environment", env_var)
            merged[field_name] = value

    try:
        return Config.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def _read_config_file(config_path: Path) -> FileConfig:
    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Config file could not be read: {config_path}: {exc}") from exc

    try:
        data: Any = yaml.safe_load(raw) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config file is not valid YAML: {config_path}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a mapping: {config_path}")

    try:
        return FileConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {config_path}: {exc}") from exc
