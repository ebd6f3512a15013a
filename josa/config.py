"""YAML configuration for the josa command line."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from josa.errors import ConfigError

log = logging.getLogger(__name__)

CONFIG_ENV = "JOSA_CONFIG"

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

DEFAULTS: dict[str, Any] = {
    "logging": {"level": "INFO", "format": DEFAULT_LOG_FORMAT},
    "output": {"separator": " "},
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load config from ``path`` or $JOSA_CONFIG, merged over the defaults.

    A missing file is not an error; defaults are returned.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV)
    config = {section: dict(values) for section, values in DEFAULTS.items()}
    if not path:
        return config

    path = Path(path)
    if not path.exists():
        log.debug("Config not found, using defaults: %s", path)
        return config

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"invalid config {path}: {exc}") from exc

    if data is None:
        return config
    if not isinstance(data, dict):
        raise ConfigError(f"config {path} must be a mapping")

    for section, values in data.items():
        if not isinstance(values, dict):
            raise ConfigError(f"config section {section!r} must be a mapping")
        config.setdefault(section, {}).update(values)
    return config


def setup_logging(config: dict[str, Any]) -> None:
    log_cfg = config.get("logging", {})
    level = str(log_cfg.get("level", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=log_cfg.get("format", DEFAULT_LOG_FORMAT),
    )
