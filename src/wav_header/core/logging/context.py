"""
Run Context and Configuration State for Logging.

The run id is kept in a ``contextvars.ContextVar`` so that every message
logged while one CLI invocation handles its inputs can be correlated in
the JSONL file. Level and configuration live in module-level state shared
by the whole process.
"""
from __future__ import annotations

from contextvars import ContextVar
from typing import Any, Dict, Optional

from .levels import LogLevel

_run_id: ContextVar[str] = ContextVar("run_id", default="-")

_configured: bool = False
_current_level: LogLevel = LogLevel.NORMAL


def get_run_id() -> str:
    """Return the run id for the current context, or "-" if unset."""
    return _run_id.get()


def set_run_id(rid: str) -> None:
    """Set the run id used to correlate log messages."""
    _run_id.set(rid)


def get_level() -> LogLevel:
    return _current_level


def set_level(level: LogLevel) -> None:
    global _current_level
    _current_level = level


def is_configured() -> bool:
    return _configured


def set_configured(value: bool) -> None:
    global _configured
    _configured = value


def read_logging_config(settings_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Read the validated ``logging`` section (settings file plus
    WAV_HEADER_LOG_* environment overrides, see core.config).

    Args:
        settings_path: Explicit settings file. When None the usual lookup
            (WAV_HEADER_SETTINGS, then config/settings.yaml) is used.

    Returns:
        Dictionary for configure_logging(); empty when the settings
        cannot be loaded or fail validation.
    """
    from wav_header.core.config import ConfigValidationError, load_settings

    try:
        return load_settings(settings_path).get_app_config().logging.to_dict()
    except (OSError, ConfigValidationError):
        # Unreadable settings are reported by the CLI, not here
        return {}
