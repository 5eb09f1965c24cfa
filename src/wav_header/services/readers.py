"""
Input Adapters for the Header Decoder.

Two ways to get header bytes:
    - Files: read the first ``read_size`` bytes (read_header_bytes)
    - Hex text: a header copied from a hex editor (parse_hex_string)

Hex Text Rules:
    - Case-insensitive hex digits
    - Any whitespace between digits is ignored ("52 49 46 46 ..." or
      "52494646...")
    - An optional leading "0x" is ignored
    - After whitespace removal the digit count must be even

Error Handling:
    - Unreadable files raise IoFailureError (chained from the OSError)
    - Bad hex text raises MalformedHexInputError
    - Short input is passed on, so decode() reports TooShortError

Usage:
    from wav_header.services.readers import decode_file, decode_hex_string

    header = decode_file("take1.wav")
    header = decode_hex_string("52 49 46 46 24 00 00 00 ...")
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import Union

from wav_header.core.config import Defaults
from wav_header.core.logging import debug, get_logger, verbose, warn
from wav_header.wav.decoder import WavHeader, decode
from wav_header.wav.errors import IoFailureError, MalformedHexInputError

_LOG = get_logger("wav-header.readers")

_WHITESPACE = re.compile(r"\s+")
_NON_HEX = re.compile(r"[^0-9A-F]")

PathLike = Union[str, Path]


def read_header_bytes(path: PathLike, read_size: int = Defaults.READER_READ_SIZE) -> bytes:
    """
    Read the leading bytes of a file.

    Args:
        path: File to read.
        read_size: Maximum number of bytes to read.

    Returns:
        Up to ``read_size`` bytes; fewer if the file is shorter.

    Raises:
        IoFailureError: If the file cannot be opened or read.
        ValueError: If read_size is below the canonical header size.
    """
    if read_size < Defaults.READER_MIN_READ_SIZE:
        raise ValueError(f"read_size must be at least {Defaults.READER_MIN_READ_SIZE}, got {read_size}")

    try:
        with open(path, "rb") as f:
            data = f.read(read_size)
    except OSError as e:
        warn(_LOG, "file_read_failed", path=str(path), error=e.strerror or str(e))
        raise IoFailureError(str(path), e.strerror or str(e)) from e

    verbose(_LOG, "file_read", path=str(path), bytes=len(data))
    return data


def parse_hex_string(text: str) -> bytes:
    """
    Convert hex-editor text to bytes.

    Args:
        text: Hex digits, optionally separated by whitespace.

    Returns:
        The decoded bytes.

    Raises:
        MalformedHexInputError: Odd digit count or a non-hex character.
    """
    digits = _WHITESPACE.sub("", text or "").upper()
    if digits.startswith("0X"):
        digits = digits[2:]

    bad = _NON_HEX.search(digits)
    if bad:
        raise MalformedHexInputError(
            f"Invalid hexadecimal character {bad.group()!r} at position {bad.start()}",
            details={"character": bad.group(), "position": bad.start()},
        )

    if len(digits) % 2:
        raise MalformedHexInputError(
            f"Hexadecimal input has an odd number of digits ({len(digits)})",
            details={"digits": len(digits)},
        )

    data = bytes.fromhex(digits)
    debug(_LOG, "hex_parsed", digits=len(digits), bytes=len(data))
    return data


def decode_file(
    path: PathLike,
    read_size: int = Defaults.READER_READ_SIZE,
    strict: bool = Defaults.DECODER_STRICT,
) -> WavHeader:
    """Read a file's leading bytes and decode them."""
    return decode(read_header_bytes(path, read_size), strict=strict)


def decode_hex_string(text: str, strict: bool = Defaults.DECODER_STRICT) -> WavHeader:
    """Parse hex-editor text and decode it."""
    return decode(parse_hex_string(text), strict=strict)
