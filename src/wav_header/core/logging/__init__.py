"""
wav-header Structured Logging.

Numeric levels (1-4), colored console output on stderr, optional JSONL
file output and a run id for correlating the messages of one invocation.

Log Levels:
    1 = MINIMAL  - Failures only
    2 = NORMAL   - One line per decoded input (default)
    3 = VERBOSE  - Adapter activity
    4 = DEBUG    - Internal state

Configuration:
    export WAV_HEADER_LOG_LEVEL=3
    export WAV_HEADER_NO_COLOR=1

    In settings.yaml:
        logging:
          level: 2
          log_dir: logs
          jsonl_file: wav-header.jsonl

Usage:
    from wav_header.core.logging import get_logger, info, fail

    log = get_logger("wav-header.readers")
    info(log, "decoded", source="a.wav")
    fail(log, "decode_failed", code="RIFF_MISMATCH")

The console handler writes to stderr: the CLI prints its reports on
stdout and the two must not interleave.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

from .levels import LogLevel, LEVEL_MAP, coerce_level, parse_level
from .colors import Colors, supports_color, colorize, get_tag_color
from .context import (
    get_run_id,
    set_run_id,
    get_level,
    set_level,
    is_configured,
    set_configured,
    read_logging_config,
)
from .formatters import JsonlFormatter, ColoredConsoleFormatter

DEFAULT_JSONL_FILE = "wav-header.jsonl"


def configure_logging(
    level: Optional[int | str | LogLevel] = None,
    force: bool = False,
    config: Optional[Dict[str, Any]] = None,
    default_level: LogLevel = LogLevel.NORMAL,
) -> None:
    """
    Configure the root logger.

    Args:
        level: Log level (1-4, level name, or LogLevel). Overrides config.
        force: Reconfigure even if already configured.
        config: Logging section to use instead of reading settings/env.
        default_level: Level used when neither ``level`` nor config set one.
    """
    from . import colors

    if is_configured() and not force:
        return

    colors.USE_COLORS = supports_color(sys.stderr)

    log_config = dict(config) if config is not None else read_logging_config()

    current_level = coerce_level(
        level if level is not None else log_config.get("level", default_level),
        default=default_level,
    )
    set_level(current_level)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG - 10)  # filtering happens in the handlers
    for handler in root.handlers:
        handler.close()
    root.handlers = []

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(LEVEL_MAP.get(current_level, logging.INFO))
    console.setFormatter(ColoredConsoleFormatter())
    root.addHandler(console)

    log_dir = log_config.get("log_dir")
    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        jsonl_path = Path(log_dir) / str(log_config.get("jsonl_file", DEFAULT_JSONL_FILE))
        file_handler = RotatingFileHandler(
            jsonl_path,
            maxBytes=int(log_config.get("rotate_max_bytes", 10 * 1024 * 1024)),
            backupCount=int(log_config.get("rotate_backup_count", 5)),
            encoding="utf-8",
            delay=True,
        )
        file_handler.setLevel(logging.DEBUG - 10)
        file_handler.setFormatter(JsonlFormatter())
        root.addHandler(file_handler)

    set_configured(True)


def _log(
    logger: logging.Logger,
    level: int,
    tag: str,
    msg: str,
    numeric_level: int = 2,
    **fields: Any
) -> None:
    if numeric_level > get_level():
        return

    logger.log(
        level,
        msg,
        extra={
            "tag": tag,
            "run_id": get_run_id(),
            "extra_data": fields or None,
            "numeric_level": numeric_level,
        },
    )


def get_logger(name: str = "wav-header") -> logging.Logger:
    """Get a logger instance, configuring logging if needed."""
    configure_logging()
    return logging.getLogger(name)


def info(logger: logging.Logger, msg: str, **fields: Any) -> None:
    """Log an info message (level 2 = NORMAL)."""
    _log(logger, logging.INFO, "INFO", msg, numeric_level=2, **fields)


def warn(logger: logging.Logger, msg: str, **fields: Any) -> None:
    """Log a warning (level 2 = NORMAL)."""
    _log(logger, logging.WARNING, "WARN", msg, numeric_level=2, **fields)


def fail(logger: logging.Logger, msg: str, **fields: Any) -> None:
    """Log a failure (level 1 = MINIMAL)."""
    _log(logger, logging.ERROR, "FAIL", msg, numeric_level=1, **fields)


def verbose(logger: logging.Logger, msg: str, **fields: Any) -> None:
    """Log a verbose message (level 3 = VERBOSE)."""
    _log(logger, logging.DEBUG, "INFO", msg, numeric_level=3, **fields)


def debug(logger: logging.Logger, msg: str, **fields: Any) -> None:
    """Log a debug message (level 4 = DEBUG)."""
    _log(logger, logging.DEBUG - 5, "DEBUG", msg, numeric_level=4, **fields)


__all__ = [
    "LogLevel",
    "LEVEL_MAP",
    "coerce_level",
    "parse_level",
    "Colors",
    "supports_color",
    "colorize",
    "get_tag_color",
    "get_run_id",
    "set_run_id",
    "get_level",
    "read_logging_config",
    "JsonlFormatter",
    "ColoredConsoleFormatter",
    "configure_logging",
    "get_logger",
    "info",
    "warn",
    "fail",
    "verbose",
    "debug",
]
