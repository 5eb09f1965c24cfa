"""
Canonical WAV header decoding.

Components:
    - layout.py: marker and field tables of the 44-byte header
    - decoder.py: decode() and the WavHeader record
    - formatter.py: text and dict renderings of a WavHeader
    - errors.py: HeaderError hierarchy and ErrorCode
"""
from .decoder import WavHeader, check_consistency, decode
from .errors import (
    DataMismatchError,
    ErrorCode,
    FmtMismatchError,
    HeaderError,
    InconsistentHeaderError,
    IoFailureError,
    MalformedHexInputError,
    MarkerMismatchError,
    RiffMismatchError,
    TooShortError,
    WaveMismatchError,
)
from .formatter import render, to_dict
from .layout import HEADER_SIZE

__all__ = [
    "WavHeader",
    "decode",
    "check_consistency",
    "render",
    "to_dict",
    "HEADER_SIZE",
    "ErrorCode",
    "HeaderError",
    "TooShortError",
    "MarkerMismatchError",
    "RiffMismatchError",
    "WaveMismatchError",
    "FmtMismatchError",
    "DataMismatchError",
    "MalformedHexInputError",
    "IoFailureError",
    "InconsistentHeaderError",
]
