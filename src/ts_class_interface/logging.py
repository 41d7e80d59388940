"""Logging setup for the command-line tool.

The packaged ``resources/logging.yaml`` is applied with
``logging.config.dictConfig``; a requested level overrides every logger in
it. Library users configure logging themselves and never call this module.
"""

from __future__ import annotations

import logging
import logging.config
import sys
from importlib.resources import files
from pathlib import Path
from typing import Any

import yaml

_PACKAGE = "ts_class_interface"
_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class LoggingError(Exception):
    """Raised when a logging configuration cannot be used."""


def get_config_path() -> Path:
    """Return the path of the packaged dictConfig YAML."""
    return Path(str(files(_PACKAGE) / "resources" / "logging.yaml"))


def load_config(config_path: Path) -> dict[str, Any]:
    """Read a dictConfig mapping from a YAML file.

    Raises:
        LoggingError: If the file is unreadable, invalid YAML or not a mapping

    """
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise LoggingError(f"Failed to read config file {config_path}: {e}") from e

    try:
        config = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise LoggingError(f"Failed to parse YAML config {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise LoggingError(f"Invalid configuration format in {config_path}")
    return config


def _resolve_level(level: str) -> int:
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise LoggingError(f"Invalid log level: {level}")
    return numeric


def _apply_level(config: dict[str, Any], level: str) -> None:
    """Set every configured logger to level and let handlers pass it through."""
    numeric = _resolve_level(level)
    name = logging.getLevelName(numeric)

    for logger_config in config.get("loggers", {}).values():
        logger_config["level"] = name
    if "root" in config:
        config["root"]["level"] = name

    for handler_config in config.get("handlers", {}).values():
        handler_level = handler_config.get("level")
        if handler_level and numeric < _resolve_level(handler_level):
            handler_config["level"] = name


def setup_logging(
    config_path: Path | str | None = None,
    level: str | None = None,
    force_basic: bool = False,
) -> None:
    """Configure logging for a command run.

    Args:
        config_path: dictConfig YAML (the packaged one if None)
        level: Level applied to every configured logger and handler
        force_basic: Skip the YAML and use basic stderr logging

    """
    if force_basic:
        _setup_basic_logging(level or "INFO")
        return

    path = Path(config_path) if config_path is not None else get_config_path()
    try:
        config = load_config(path)
        if level:
            _apply_level(config, level)
        logging.config.dictConfig(config)
    except (LoggingError, KeyError, ValueError) as e:
        _setup_basic_logging(level or "INFO")
        logging.getLogger(__name__).warning(
            "Falling back to basic console logging (%s)", e
        )
        return

    logging.getLogger(__name__).debug("Logging configured from %s", path)


def _setup_basic_logging(level: str) -> None:
    numeric = logging.getLevelName(level.upper())
    logging.basicConfig(
        level=numeric if isinstance(numeric, int) else logging.INFO,
        format=_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
