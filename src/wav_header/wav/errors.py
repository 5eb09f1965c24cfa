"""
Header Errors.

Every failure of the decoder or its adapters is a HeaderError subclass
carrying a machine-readable ``code`` from ErrorCode, a human-readable
``message`` and a ``details`` dict with the offsets/bytes involved.

Callers either catch the specific subclass:

    try:
        header = decode(data)
    except WaveMismatchError:
        ...  # RIFF container, but not WAVE

or catch HeaderError and branch on ``e.code``.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional


class ErrorCode:
    """Standardized error codes."""
    TOO_SHORT = "TOO_SHORT"
    RIFF_MISMATCH = "RIFF_MISMATCH"
    WAVE_MISMATCH = "WAVE_MISMATCH"
    FMT_MISMATCH = "FMT_MISMATCH"
    DATA_MISMATCH = "DATA_MISMATCH"
    MALFORMED_HEX_INPUT = "MALFORMED_HEX_INPUT"
    IO_FAILURE = "IO_FAILURE"
    INCONSISTENT_FIELDS = "INCONSISTENT_FIELDS"


class HeaderError(Exception):
    """
    Base exception for header decoding failures.

    Attributes:
        message: Human-readable error message.
        code: Error code from ErrorCode.
        details: Additional context (offsets, expected/found bytes, paths).
    """
    code: str = ""

    def __init__(self, message: str, code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message
        if code is not None:
            self.code = code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the error payload printed by ``--json``."""
        result: Dict[str, Any] = {
            "ok": False,
            "error": {
                "code": self.code,
                "message": self.message,
            },
        }
        if self.details:
            result["error"]["details"] = self.details
        return result


class TooShortError(HeaderError):
    """Input is shorter than the canonical 44-byte header."""
    code = ErrorCode.TOO_SHORT

    def __init__(self, actual: int, required: int):
        super().__init__(
            f"The WAV header size does not match the canonical WAV file format "
            f"({actual} bytes, need at least {required}).",
            details={"actual": actual, "required": required},
        )
        self.actual = actual
        self.required = required


class MarkerMismatchError(HeaderError):
    """
    A fixed-offset ASCII marker did not match.

    Attributes:
        marker: Expected marker bytes (e.g. b"RIFF").
        offset: Byte offset of the marker.
        found: Bytes actually present at that offset.
    """
    description = "marker"

    def __init__(self, marker: bytes, offset: int, found: bytes):
        super().__init__(
            f"The {self.description} does not match the canonical WAV file format "
            f"(expected {marker.decode('ascii')!r} at offset {offset}, found {_show(found)}).",
            details={"marker": marker.decode("ascii"), "offset": offset, "found": found.hex().upper()},
        )
        self.marker = marker
        self.offset = offset
        self.found = found


class RiffMismatchError(MarkerMismatchError):
    code = ErrorCode.RIFF_MISMATCH
    description = '"RIFF" chunk descriptor'


class WaveMismatchError(MarkerMismatchError):
    code = ErrorCode.WAVE_MISMATCH
    description = '"WAVE" format'


class FmtMismatchError(MarkerMismatchError):
    code = ErrorCode.FMT_MISMATCH
    description = '"fmt" subchunk'


class DataMismatchError(MarkerMismatchError):
    code = ErrorCode.DATA_MISMATCH
    description = '"data" subchunk (subchunk2Id)'


class MalformedHexInputError(HeaderError):
    """Hex text had odd length or a non-hex character."""
    code = ErrorCode.MALFORMED_HEX_INPUT

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details=details)


class IoFailureError(HeaderError):
    """The header file could not be opened or read."""
    code = ErrorCode.IO_FAILURE

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot read {path}: {reason}", details={"path": path, "reason": reason})
        self.path = path
        self.reason = reason


class InconsistentHeaderError(HeaderError):
    """Strict mode only: derived fields disagree with the primary ones."""
    code = ErrorCode.INCONSISTENT_FIELDS

    def __init__(self, problems: List[str]):
        super().__init__(
            "The WAV header fields are inconsistent: " + "; ".join(problems) + ".",
            details={"problems": list(problems)},
        )
        self.problems = list(problems)


def _show(found: bytes) -> str:
    # Printable markers are shown as text, anything else as hex
    try:
        text = found.decode("ascii")
    except UnicodeDecodeError:
        return "0x" + found.hex().upper()
    if text.isprintable():
        return repr(text)
    return "0x" + found.hex().upper()
