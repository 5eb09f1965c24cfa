"""
Log Formatters for JSON and Console Output.

    JsonlFormatter: one JSON object per line, for the log file.
    ColoredConsoleFormatter: ``HH:MM:SS [ TAG ] (rid) message key=value``.

JSONL example:
    {"ts":"2026-10-19T14:30:05+02:00","level":2,"tag":"INFO","message":"decoded","run_id":"3f2a9c1b0e4d","extra":{"source":"a.wav"}}
"""
from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any, Dict

from .colors import Colors, colorize, get_tag_color


class JsonlFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created).astimezone().isoformat()

        payload: Dict[str, Any] = {
            "ts": ts,
            "level": getattr(record, "numeric_level", 2),
            "tag": getattr(record, "tag", record.levelname),
            "message": record.getMessage(),
            "run_id": getattr(record, "run_id", "-"),
        }

        extra_data = getattr(record, "extra_data", None)
        if extra_data:
            payload["extra"] = extra_data

        return json.dumps(payload, ensure_ascii=False, default=str)


class ColoredConsoleFormatter(logging.Formatter):
    """
    Format log records for the terminal.

    Error codes (``code=...``) are highlighted in red and input sources
    (``source=...``) in cyan so a failing file stands out in a long run.
    """

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        tag = getattr(record, "tag", record.levelname)
        rid = getattr(record, "run_id", "-")

        parts = [
            colorize(ts, Colors.DIM),
            colorize(f"[{tag:^7}]", get_tag_color(tag)),
        ]
        if rid != "-":
            parts.append(colorize(f"({rid})", Colors.DIM + Colors.CYAN))
        parts.append(record.getMessage())

        extra_data = getattr(record, "extra_data", None)
        if extra_data:
            for k, v in extra_data.items():
                parts.append(colorize(f"{k}={v}", self._field_color(k)))

        return " ".join(parts)

    @staticmethod
    def _field_color(key: str) -> str:
        if key == "code":
            return Colors.RED
        if key in ("source", "path"):
            return Colors.CYAN
        return Colors.DIM
