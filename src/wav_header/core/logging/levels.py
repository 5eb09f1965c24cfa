"""
Log Level Definitions and Mapping.

wav-header uses numeric levels 1-4 instead of Python's level names:
    1 = MINIMAL  - Failures only (default for the CLI)
    2 = NORMAL   - One line per decoded input
    3 = VERBOSE  - Adapter activity (bytes read, hex digits parsed)
    4 = DEBUG    - Internal state

Mapping to Python Levels:
    MINIMAL (1) -> logging.WARNING (30)
    NORMAL (2)  -> logging.INFO (20)
    VERBOSE (3) -> logging.DEBUG (10)
    DEBUG (4)   -> logging.DEBUG - 5 (5)
"""
from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any


class LogLevel(IntEnum):
    """Numeric log levels, increasing in verbosity."""
    MINIMAL = 1
    NORMAL = 2
    VERBOSE = 3
    DEBUG = 4


LEVEL_MAP = {
    LogLevel.MINIMAL: logging.WARNING,
    LogLevel.NORMAL: logging.INFO,
    LogLevel.VERBOSE: logging.DEBUG,
    LogLevel.DEBUG: logging.DEBUG - 5,
}

_NAME_MAP = {
    "MINIMAL": LogLevel.MINIMAL,
    "NORMAL": LogLevel.NORMAL,
    "VERBOSE": LogLevel.VERBOSE,
    "DEBUG": LogLevel.DEBUG,
    "TRACE": LogLevel.DEBUG,
    # Python level names
    "CRITICAL": LogLevel.MINIMAL,
    "ERROR": LogLevel.MINIMAL,
    "WARNING": LogLevel.MINIMAL,
    "WARN": LogLevel.MINIMAL,
    "INFO": LogLevel.NORMAL,
    "1": LogLevel.MINIMAL,
    "2": LogLevel.NORMAL,
    "3": LogLevel.VERBOSE,
    "4": LogLevel.DEBUG,
}


def parse_level(value: Any) -> LogLevel:
    """
    Convert an int, level name or LogLevel to LogLevel.

    Integers 1-4 are taken as-is; larger integers are read as Python
    logging levels (WARNING and above -> MINIMAL, INFO -> NORMAL).

    Raises:
        ValueError: If ``value`` is not a recognised level.

    Examples:
        >>> parse_level(3)
        <LogLevel.VERBOSE: 3>
        >>> parse_level("warning")
        <LogLevel.MINIMAL: 1>
    """
    if isinstance(value, LogLevel):
        return value

    # bool is an int subclass, but True/False are not levels
    if isinstance(value, int) and not isinstance(value, bool):
        if 1 <= value <= 4:
            return LogLevel(value)
        if value >= logging.WARNING:
            return LogLevel.MINIMAL
        if value >= logging.INFO:
            return LogLevel.NORMAL
        if value > 0:
            return LogLevel.DEBUG

    if isinstance(value, str):
        level = _NAME_MAP.get(value.upper().strip())
        if level is not None:
            return level

    raise ValueError(f"not a known level: {value!r}")


def coerce_level(value: Any, default: LogLevel = LogLevel.NORMAL) -> LogLevel:
    """
    Like parse_level(), but anything unrecognised falls back to ``default``.

    Examples:
        >>> coerce_level("info")
        <LogLevel.NORMAL: 2>
        >>> coerce_level("loud", default=LogLevel.MINIMAL)
        <LogLevel.MINIMAL: 1>
    """
    try:
        return parse_level(value)
    except ValueError:
        return default
