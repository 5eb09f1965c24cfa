"""
Tests for report rendering.

Tests cover:
- render() line layout and field order
- Little-endian hex next to each decoded value
- to_dict() structure used by --json
"""
import json

from conftest import CANONICAL_BYTES, make_header
from wav_header.wav import decode, render, to_dict


class TestRender:
    """Tests for render()."""

    def test_canonical_report(self):
        """The full report for the reference header."""
        expected = "\n".join([
            'Chunk Descriptor Id: "RIFF".',
            'Format: "WAVE".',
            "Chunk Size is little endian 0x24000000",
            "Chunk Size: 36",
            '"fmt" Subchunk:',
            "Subchunk 1 Size is little endian 0x10000000",
            "Subchunk 1 Size: 16",
            "Audio Format is little endian 0x0100",
            "Audio Format: 1",
            "Number Of Channels is little endian 0x0100",
            "Number Of Channels: 1",
            "Sample Rate is little endian 0x44AC0000",
            "Sample Rate: 44100",
            "Byte Rate is little endian 0x88580100",
            "Byte Rate: 88200",
            "Block Align is little endian 0x0200",
            "Block Align: 2",
            "Bits Per Sample is little endian 0x1000",
            "Bits Per Sample: 16",
            "Subchunk 2 Size is little endian 0x00000000",
            "Subchunk 2 Size: 0",
        ])
        assert render(decode(CANONICAL_BYTES)) == expected

    def test_field_order(self):
        """Fields appear in header order."""
        report = render(decode(CANONICAL_BYTES))
        labels = [
            "Chunk Size:", "Subchunk 1 Size:", "Audio Format:", "Number Of Channels:",
            "Sample Rate:", "Byte Rate:", "Block Align:", "Bits Per Sample:", "Subchunk 2 Size:",
        ]
        positions = [report.index(label) for label in labels]
        assert positions == sorted(positions)

    def test_render_is_deterministic(self):
        header = decode(CANONICAL_BYTES)
        assert render(header) == render(header)

    def test_large_values(self):
        report = render(decode(make_header(subchunk2_size=0xFFFFFFFF)))
        assert "Subchunk 2 Size is little endian 0xFFFFFFFF" in report
        assert "Subchunk 2 Size: 4294967295" in report

    def test_no_trailing_newline(self):
        assert not render(decode(CANONICAL_BYTES)).endswith("\n")


class TestToDict:
    """Tests for to_dict()."""

    def test_fields_have_value_and_hex(self):
        data = to_dict(decode(CANONICAL_BYTES))
        assert data["fields"]["sample_rate"] == {"value": 44100, "hex": "44AC0000"}
        assert data["fields"]["num_channels"] == {"value": 1, "hex": "0100"}
        assert len(data["fields"]) == 9

    def test_derived_values(self):
        data = to_dict(decode(make_header(subchunk2_size=88200)))
        assert data["derived"] == {
            "is_pcm": True,
            "expected_byte_rate": 88200,
            "expected_block_align": 2,
            "duration_seconds": 1.0,
        }

    def test_header_hex(self, canonical_hex):
        data = to_dict(decode(CANONICAL_BYTES))
        assert data["header_hex"] == canonical_hex.replace(" ", "")
        assert len(data["header_hex"]) == 88

    def test_json_serializable(self):
        text = json.dumps(to_dict(decode(CANONICAL_BYTES)))
        assert json.loads(text)["fields"]["byte_rate"]["value"] == 88200
