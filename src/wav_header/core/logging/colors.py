"""
ANSI Color Utilities for Console Output.

Colors are disabled when:
    - stderr is not a TTY (e.g., redirected to a file)
    - NO_COLOR is set (https://no-color.org/)
    - WAV_HEADER_NO_COLOR=1 is set
"""
from __future__ import annotations

import os
import sys


class Colors:
    """ANSI escape code constants."""
    RESET = "\033[0m"

    DIM = "\033[2m"

    RED = "\033[31m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"
    GRAY = "\033[90m"

    BRIGHT_RED = "\033[91m"
    BRIGHT_YELLOW = "\033[93m"
    BRIGHT_CYAN = "\033[96m"


def supports_color(stream=None) -> bool:
    """
    Check whether ANSI colors should be written to ``stream``.

    Args:
        stream: Output stream to test. Defaults to sys.stderr, where
            the console handler writes.

    Returns:
        True if colors should be used.
    """
    if os.getenv("WAV_HEADER_NO_COLOR", "0") == "1":
        return False
    if os.getenv("NO_COLOR"):
        return False

    stream = stream if stream is not None else sys.stderr
    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty():
        return False

    if sys.platform == "win32":
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            # STD_ERROR_HANDLE = -12, enable virtual terminal processing
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-12), 7)
            return True
        except (AttributeError, OSError):
            return False

    return True


# Rechecked by configure_logging(); tests may flip it directly
USE_COLORS = supports_color()


def colorize(text: str, color: str) -> str:
    """Wrap ``text`` in ``color`` if colors are enabled."""
    if not USE_COLORS:
        return text
    return f"{color}{text}{Colors.RESET}"


def get_tag_color(tag: str) -> str:
    """Map a log tag (INFO, FAIL, ...) to its color."""
    tag_colors = {
        "FAIL": Colors.BRIGHT_RED,
        "ERROR": Colors.BRIGHT_RED,
        "WARN": Colors.BRIGHT_YELLOW,
        "WARNING": Colors.BRIGHT_YELLOW,
        "INFO": Colors.BRIGHT_CYAN,
        "DEBUG": Colors.GRAY,
    }
    return tag_colors.get(tag.upper(), Colors.WHITE)
