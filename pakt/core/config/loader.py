"""
Configuration loader — reads the optional config.yml.

pakt works with no config at all. When present, the file lives at
``<config home>/pakt/config.yml`` (or wherever ``--config`` /
``PAKT_CONFIG`` point) and may set:

    store_path: ~/dotfiles/pakt/package.json
    distro_aliases:
      rocky: dnf
      pop: apt

Location precedence for the tracking store:
    --store  >  PAKT_STORE  >  store_path  >  <config home>/pakt/package.json
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from pakt.core.data.catalog import MANAGER_CATALOG
from pakt.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

APP_DIR = "pakt"
CONFIG_FILE = "config.yml"
STORE_FILE = "package.json"

ENV_CONFIG = "PAKT_CONFIG"
ENV_STORE = "PAKT_STORE"


class PaktConfig(BaseModel):
    """Validated contents of config.yml."""

    store_path: str | None = None
    distro_aliases: dict[str, str] = Field(default_factory=dict)

    @field_validator("distro_aliases")
    @classmethod
    def _known_managers(cls, value: dict[str, str]) -> dict[str, str]:
        unknown = sorted({m for m in value.values() if m not in MANAGER_CATALOG})
        if unknown:
            raise ValueError(
                f"unknown package manager(s): {', '.join(unknown)} "
                f"(known: {', '.join(MANAGER_CATALOG)})"
            )
        return {distro.lower(): manager for distro, manager in value.items()}


def config_home() -> Path:
    """Per-user configuration directory (``$XDG_CONFIG_HOME`` or ``~/.config``).

    Raises:
        ConfigurationError: If the home directory cannot be determined.
    """
    xdg = os.environ.get("XDG_CONFIG_HOME", "")
    if xdg and Path(xdg).is_absolute():
        return Path(xdg)
    try:
        return Path.home() / ".config"
    except (RuntimeError, KeyError) as e:
        raise ConfigurationError(f"Cannot determine home directory: {e}") from e


def app_dir() -> Path:
    """``<config home>/pakt``."""
    return config_home() / APP_DIR


def find_config_file() -> Path | None:
    """Locate config.yml: ``$PAKT_CONFIG`` first, then the default location."""
    env = os.environ.get(ENV_CONFIG)
    if env:
        return Path(env).expanduser()
    candidate = app_dir() / CONFIG_FILE
    return candidate if candidate.is_file() else None


def load_config(path: Path | None = None) -> PaktConfig:
    """Load and validate config.yml.

    Args:
        path: Explicit path. If None, :func:`find_config_file` decides;
            no file at the default location means all defaults.

    Raises:
        ConfigurationError: If an explicit file is missing or invalid.
    """
    if path is None:
        path = find_config_file()
    if path is None:
        return PaktConfig()

    if not path.is_file():
        raise ConfigurationError(f"Config file not found: {path}")

    logger.debug("Loading config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return PaktConfig()
    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        return PaktConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {path}: {e}") from e


def resolve_store_path(
    explicit: Path | None = None,
    config: PaktConfig | None = None,
) -> Path:
    """Where the tracking store lives for this invocation.

    Raises:
        ConfigurationError: If no location can be determined.
    """
    if explicit is not None:
        return explicit
    env = os.environ.get(ENV_STORE)
    if env:
        return Path(env).expanduser()
    if config is not None and config.store_path:
        return Path(config.store_path).expanduser()
    return app_dir() / STORE_FILE
