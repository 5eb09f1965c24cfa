"""
Canonical WAV Header Decoder.

Turns the first 44 bytes of a PCM WAV file into an immutable WavHeader.

Decoding steps:
    1. Length check (>= 44 bytes, else TooShortError)
    2. Marker checks in layout order: "RIFF", "WAVE", "fmt ", "data"
       (each mismatch raises its own MarkerMismatchError subclass)
    3. Little-endian unpack of the nine integer fields
    4. Strict mode only: derived-field consistency (InconsistentHeaderError)

Bytes past offset 43 are ignored. The decoder is a pure function: it
neither logs nor prints, so it can be reused outside the CLI.

Example:
    >>> header = decode(open("a.wav", "rb").read(44))
    >>> header.sample_rate
    44100
"""
from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import List, Union

from .errors import InconsistentHeaderError, TooShortError
from .layout import FIELDS, FIELDS_BY_NAME, HEADER_SIZE, MARKERS, PCM_FMT_CHUNK_SIZE, PCM_FORMAT

BytesLike = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True)
class WavHeader:
    """
    Decoded canonical WAV header.

    Field values are exactly what the file declares; nothing is
    recomputed or corrected. The ``expected_*`` properties give the
    values the derived fields should have.
    """
    chunk_size: int
    subchunk1_size: int
    audio_format: int
    num_channels: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int
    subchunk2_size: int

    @property
    def expected_byte_rate(self) -> int:
        return self.sample_rate * self.num_channels * self.bits_per_sample // 8

    @property
    def expected_block_align(self) -> int:
        return self.num_channels * self.bits_per_sample // 8

    @property
    def is_pcm(self) -> bool:
        return self.audio_format == PCM_FORMAT

    @property
    def duration_seconds(self) -> float:
        """Playback length declared by the data chunk size."""
        if self.byte_rate == 0:
            return 0.0
        return self.subchunk2_size / self.byte_rate

    def raw_hex(self, name: str) -> str:
        """
        Return a field's bytes as stored in the file (little-endian), in hex.

        >>> header.raw_hex("sample_rate")
        '44AC0000'
        """
        field = FIELDS_BY_NAME[name]
        return struct.pack(field.fmt, getattr(self, name)).hex().upper()

    @property
    def header_hex(self) -> str:
        """The whole 44-byte header in hex, byte for byte as stored."""
        buf = bytearray(HEADER_SIZE)
        for marker in MARKERS:
            buf[marker.offset:marker.offset + len(marker.value)] = marker.value
        for f in FIELDS:
            struct.pack_into(f.fmt, buf, f.offset, getattr(self, f.name))
        return buf.hex().upper()


def decode(data: BytesLike, strict: bool = False) -> WavHeader:
    """
    Decode a canonical WAV header.

    Args:
        data: At least 44 bytes starting at the beginning of the file.
        strict: Also reject headers whose derived fields are inconsistent
            (see check_consistency).

    Returns:
        The decoded WavHeader.

    Raises:
        TooShortError: Fewer than 44 bytes.
        RiffMismatchError, WaveMismatchError, FmtMismatchError,
        DataMismatchError: A marker did not match.
        InconsistentHeaderError: Strict mode and check_consistency failed.
    """
    data = bytes(data[:HEADER_SIZE])
    if len(data) < HEADER_SIZE:
        raise TooShortError(len(data), HEADER_SIZE)

    for marker in MARKERS:
        found = data[marker.offset:marker.offset + len(marker.value)]
        if found != marker.value:
            raise marker.error(marker.value, marker.offset, found)

    header = WavHeader(**{
        f.name: struct.unpack_from(f.fmt, data, f.offset)[0]
        for f in FIELDS
    })

    if strict:
        problems = check_consistency(header)
        if problems:
            raise InconsistentHeaderError(problems)

    return header


def check_consistency(header: WavHeader) -> List[str]:
    """
    List the ways a header departs from canonical PCM.

    Checks:
        - audio_format is 1 (PCM)
        - subchunk1_size is 16
        - byte_rate == sample_rate * num_channels * bits_per_sample / 8
        - block_align == num_channels * bits_per_sample / 8

    Returns:
        Problem descriptions; empty when the header is consistent.
    """
    problems: List[str] = []

    if not header.is_pcm:
        problems.append(f"audio format is {header.audio_format}, not PCM ({PCM_FORMAT})")
    if header.subchunk1_size != PCM_FMT_CHUNK_SIZE:
        problems.append(f"subchunk 1 size is {header.subchunk1_size}, not {PCM_FMT_CHUNK_SIZE}")
    if header.byte_rate != header.expected_byte_rate:
        problems.append(f"byte rate is {header.byte_rate}, expected {header.expected_byte_rate}")
    if header.block_align != header.expected_block_align:
        problems.append(f"block align is {header.block_align}, expected {header.expected_block_align}")

    return problems
