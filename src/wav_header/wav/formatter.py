"""
Header report rendering.

    render(header)  -> multi-line text report
    to_dict(header) -> JSON-ready dict (used by ``--json``)

Each field is shown twice: the bytes as stored in the file (little-endian
hex) and the decoded decimal value.
"""
from __future__ import annotations

from typing import Any, Dict

from .decoder import WavHeader
from .layout import FIELDS


def render(header: WavHeader) -> str:
    """
    Render the text report for a decoded header.

    The two marker lines come first, then for every field a
    ``<Label> is little endian 0x<hex>`` line followed by
    ``<Label>: <value>``. A ``"fmt" Subchunk:`` line introduces the
    fmt fields.

    Args:
        header: Decoded header.

    Returns:
        The report, lines joined by newlines, without a trailing newline.
    """
    lines = [
        'Chunk Descriptor Id: "RIFF".',
        'Format: "WAVE".',
    ]
    for field in FIELDS:
        if field.name == "subchunk1_size":
            lines.append('"fmt" Subchunk:')
        lines.append(f"{field.label} is little endian 0x{header.raw_hex(field.name)}")
        lines.append(f"{field.label}: {getattr(header, field.name)}")
    return "\n".join(lines)


def to_dict(header: WavHeader) -> Dict[str, Any]:
    """
    Build the JSON payload for a decoded header.

    Args:
        header: Decoded header.

    Returns:
        Dict with ``header_hex`` (all 44 bytes as stored), ``fields``
        (``{name: {"value": int, "hex": str}}`` in layout order) and
        ``derived`` (PCM flag, expected byte rate and block align,
        duration in seconds).
    """
    fields = {
        field.name: {
            "value": getattr(header, field.name),
            "hex": header.raw_hex(field.name),
        }
        for field in FIELDS
    }
    return {
        "header_hex": header.header_hex,
        "fields": fields,
        "derived": {
            "is_pcm": header.is_pcm,
            "expected_byte_rate": header.expected_byte_rate,
            "expected_block_align": header.expected_block_align,
            "duration_seconds": round(header.duration_seconds, 6),
        },
    }
