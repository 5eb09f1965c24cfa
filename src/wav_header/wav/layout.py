"""
Canonical 44-byte WAV header layout.

    Offset  Size  Field           Value
    0       4     ChunkID         "RIFF"
    4       4     ChunkSize       u32 LE
    8       4     Format          "WAVE"
    12      4     Subchunk1ID     "fmt "
    16      4     Subchunk1Size   u32 LE (16 for PCM)
    20      2     AudioFormat     u16 LE (1 = PCM)
    22      2     NumChannels     u16 LE
    24      4     SampleRate      u32 LE
    28      4     ByteRate        u32 LE
    32      2     BlockAlign      u16 LE
    34      2     BitsPerSample   u16 LE
    36      4     Subchunk2ID     "data"
    40      4     Subchunk2Size   u32 LE
"""
from __future__ import annotations

from typing import NamedTuple, Tuple, Type

from .errors import (
    DataMismatchError,
    FmtMismatchError,
    MarkerMismatchError,
    RiffMismatchError,
    WaveMismatchError,
)

HEADER_SIZE = 44

PCM_FORMAT = 1
PCM_FMT_CHUNK_SIZE = 16


class Marker(NamedTuple):
    offset: int
    value: bytes
    error: Type[MarkerMismatchError]


class Field(NamedTuple):
    name: str       # WavHeader attribute
    label: str      # report label
    offset: int
    width: int      # bytes; 2 -> u16, 4 -> u32

    @property
    def fmt(self) -> str:
        return "<H" if self.width == 2 else "<I"


# Checked in this order; the first mismatch wins
MARKERS: Tuple[Marker, ...] = (
    Marker(0, b"RIFF", RiffMismatchError),
    Marker(8, b"WAVE", WaveMismatchError),
    Marker(12, b"fmt ", FmtMismatchError),
    Marker(36, b"data", DataMismatchError),
)

# Report order
FIELDS: Tuple[Field, ...] = (
    Field("chunk_size", "Chunk Size", 4, 4),
    Field("subchunk1_size", "Subchunk 1 Size", 16, 4),
    Field("audio_format", "Audio Format", 20, 2),
    Field("num_channels", "Number Of Channels", 22, 2),
    Field("sample_rate", "Sample Rate", 24, 4),
    Field("byte_rate", "Byte Rate", 28, 4),
    Field("block_align", "Block Align", 32, 2),
    Field("bits_per_sample", "Bits Per Sample", 34, 2),
    Field("subchunk2_size", "Subchunk 2 Size", 40, 4),
)

FIELDS_BY_NAME = {f.name: f for f in FIELDS}
