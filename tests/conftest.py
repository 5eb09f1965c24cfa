"""Shared fixtures: canonical header bytes and a header builder."""
from __future__ import annotations

import os
import struct

import pytest

# Mono, 16-bit, 44100 Hz PCM, empty data chunk
CANONICAL_HEX = (
    "52 49 46 46 24 00 00 00 57 41 56 45 66 6D 74 20 "
    "10 00 00 00 01 00 01 00 44 AC 00 00 88 58 01 00 "
    "02 00 10 00 64 61 74 61 00 00 00 00"
)
CANONICAL_BYTES = bytes.fromhex(CANONICAL_HEX)

_LAYOUT = struct.Struct("<4sI4s4sIHHIIHH4sI")


def make_header(
    chunk_size: int = 36,
    subchunk1_size: int = 16,
    audio_format: int = 1,
    num_channels: int = 1,
    sample_rate: int = 44100,
    byte_rate: int = 88200,
    block_align: int = 2,
    bits_per_sample: int = 16,
    subchunk2_size: int = 0,
    riff: bytes = b"RIFF",
    wave: bytes = b"WAVE",
    fmt: bytes = b"fmt ",
    data: bytes = b"data",
) -> bytes:
    """Pack a 44-byte header; defaults give CANONICAL_BYTES."""
    return _LAYOUT.pack(
        riff, chunk_size, wave, fmt, subchunk1_size, audio_format, num_channels,
        sample_rate, byte_rate, block_align, bits_per_sample, data, subchunk2_size,
    )


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep WAV_HEADER_* variables from the outer shell out of the tests."""
    for name in list(os.environ):
        if name.startswith("WAV_HEADER_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def canonical_bytes() -> bytes:
    return CANONICAL_BYTES


@pytest.fixture
def canonical_hex() -> str:
    return CANONICAL_HEX


@pytest.fixture
def wav_file(tmp_path):
    """Write a file starting with the canonical header plus some audio bytes."""
    path = tmp_path / "canonical.wav"
    path.write_bytes(CANONICAL_BYTES + b"\x00\x01" * 8)
    return path
