"""
Configuration for plantuml-switcher host layers.

Settings come from an optional ``plantuml-switcher.toml`` file::

    [logging]
    level = "DEBUG"

    [server]
    host = "127.0.0.1"
    port = 2087

The ``PLANTUML_SWITCHER_LOG_LEVEL`` environment variable overrides the
logging level from the file.
"""

from __future__ import annotations

import logging
import os
import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .core.errors import make_config_error

CONFIG_FILENAME = "plantuml-switcher.toml"

LOG_LEVEL_ENV_VAR = "PLANTUML_SWITCHER_LOG_LEVEL"

_TOML_LOCATION = re.compile(r"at line (\d+), column (\d+)")

_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"


@dataclass
class ServerConfig:
    """Language server TCP transport (stdio ignores it)."""

    host: str = "127.0.0.1"
    port: int = 2087


@dataclass
class SwitcherConfig:
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    server: ServerConfig = field(default_factory=ServerConfig)


def _normalize_level(value: str, default: str) -> str:
    level = value.upper().strip()
    if level in _VALID_LEVELS:
        return level
    logging.getLogger(__name__).warning(
        "Unknown log level '%s'. Valid values: %s. Defaulting to %s.",
        value,
        ", ".join(_VALID_LEVELS),
        default,
    )
    return default


def _toml_error_location(error: tomllib.TOMLDecodeError) -> tuple[int | None, int | None]:
    """Return the 0-indexed line and column of a TOML syntax error, when reported."""
    lineno = getattr(error, "lineno", None)
    colno = getattr(error, "colno", None)
    if lineno is None:
        match = _TOML_LOCATION.search(str(error))
        if match is None:
            return None, None
        lineno, colno = int(match.group(1)), int(match.group(2))
    return lineno - 1, colno - 1


def get_log_level(default: str = "INFO") -> str:
    """Return the log level from PLANTUML_SWITCHER_LOG_LEVEL, or ``default``."""
    env_value = os.environ.get(LOG_LEVEL_ENV_VAR, "")
    if not env_value.strip():
        return default
    return _normalize_level(env_value, default)


def load_config(path: Path | None = None) -> SwitcherConfig:
    """
    Load configuration from ``path`` or ``./plantuml-switcher.toml``.

    A missing file yields defaults.

    Raises:
        ConfigError: If the file is not valid TOML or a value has the wrong type
    """
    config_path = path if path is not None else Path.cwd() / CONFIG_FILENAME
    if not config_path.exists():
        config = SwitcherConfig()
        config.logging.level = get_log_level(config.logging.level)
        return config

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        line, column = _toml_error_location(e)
        raise make_config_error(f"Invalid TOML: {e}", config_path, line, column) from e

    logging_data = data.get("logging", {})
    server_data = data.get("server", {})

    level = logging_data.get("level", "INFO")
    port = server_data.get("port", 2087)
    host = server_data.get("host", "127.0.0.1")
    if not isinstance(level, str):
        raise make_config_error("[logging] level must be a string", config_path)
    if not isinstance(port, int) or isinstance(port, bool):
        raise make_config_error("[server] port must be an integer", config_path)
    if not isinstance(host, str):
        raise make_config_error("[server] host must be a string", config_path)

    file_level = _normalize_level(level, "INFO")
    return SwitcherConfig(
        logging=LoggingConfig(level=get_log_level(file_level)),
        server=ServerConfig(host=host, port=port),
    )
