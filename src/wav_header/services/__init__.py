"""
Input adapters that feed the header decoder.

Components:
    - readers.py: file and hex-string readers
"""
from .readers import decode_file, decode_hex_string, parse_hex_string, read_header_bytes

__all__ = [
    "read_header_bytes",
    "parse_hex_string",
    "decode_file",
    "decode_hex_string",
]
