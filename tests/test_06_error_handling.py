"""
Tests for error classes.

Tests cover:
- ErrorCode values
- HeaderError message/code/details and to_dict()
- Each subclass carries its own code
- Exception inheritance
"""
import pytest

from wav_header.wav.errors import (
    DataMismatchError,
    ErrorCode,
    FmtMismatchError,
    HeaderError,
    InconsistentHeaderError,
    IoFailureError,
    MalformedHexInputError,
    RiffMismatchError,
    TooShortError,
    WaveMismatchError,
)


class TestErrorCode:
    """Tests for ErrorCode constants."""

    @pytest.mark.parametrize("name", [
        "TOO_SHORT", "RIFF_MISMATCH", "WAVE_MISMATCH", "FMT_MISMATCH",
        "DATA_MISMATCH", "MALFORMED_HEX_INPUT", "IO_FAILURE", "INCONSISTENT_FIELDS",
    ])
    def test_code_value_matches_name(self, name):
        assert getattr(ErrorCode, name) == name


class TestHeaderError:
    """Tests for the HeaderError base class."""

    def test_message_and_str(self):
        error = HeaderError("something broke")
        assert error.message == "something broke"
        assert str(error) == "something broke"

    def test_default_details_is_empty_dict(self):
        assert HeaderError("x").details == {}

    def test_explicit_code(self):
        assert HeaderError("x", code=ErrorCode.IO_FAILURE).code == ErrorCode.IO_FAILURE

    def test_to_dict(self):
        error = HeaderError("x", code="SOME_CODE", details={"offset": 8})
        assert error.to_dict() == {
            "ok": False,
            "error": {"code": "SOME_CODE", "message": "x", "details": {"offset": 8}},
        }

    def test_to_dict_without_details(self):
        assert "details" not in HeaderError("x").to_dict()["error"]


class TestSubclasses:
    """Each concrete error has its code and context."""

    def test_too_short(self):
        error = TooShortError(10, 44)
        assert error.code == ErrorCode.TOO_SHORT
        assert error.details == {"actual": 10, "required": 44}
        assert "canonical WAV file format" in error.message

    @pytest.mark.parametrize("cls,marker,offset,code,label", [
        (RiffMismatchError, b"RIFF", 0, ErrorCode.RIFF_MISMATCH, '"RIFF" chunk descriptor'),
        (WaveMismatchError, b"WAVE", 8, ErrorCode.WAVE_MISMATCH, '"WAVE" format'),
        (FmtMismatchError, b"fmt ", 12, ErrorCode.FMT_MISMATCH, '"fmt" subchunk'),
        (DataMismatchError, b"data", 36, ErrorCode.DATA_MISMATCH, '"data" subchunk'),
    ])
    def test_marker_errors(self, cls, marker, offset, code, label):
        error = cls(marker, offset, b"XXXX")
        assert error.code == code
        assert label in error.message
        assert error.details == {"marker": marker.decode(), "offset": offset, "found": "58585858"}

    def test_malformed_hex(self):
        error = MalformedHexInputError("bad", details={"digits": 3})
        assert error.code == ErrorCode.MALFORMED_HEX_INPUT
        assert error.details == {"digits": 3}

    def test_io_failure(self):
        error = IoFailureError("/tmp/a.wav", "No such file or directory")
        assert error.code == ErrorCode.IO_FAILURE
        assert error.message == "Cannot read /tmp/a.wav: No such file or directory"

    def test_inconsistent(self):
        error = InconsistentHeaderError(["a", "b"])
        assert error.code == ErrorCode.INCONSISTENT_FIELDS
        assert error.problems == ["a", "b"]
        assert error.message.endswith("a; b.")

    def test_all_are_header_errors(self):
        for cls in (TooShortError, RiffMismatchError, MalformedHexInputError,
                    IoFailureError, InconsistentHeaderError):
            assert issubclass(cls, HeaderError)
            assert issubclass(cls, Exception)

    def test_catchable_as_base(self):
        with pytest.raises(HeaderError):
            raise WaveMismatchError(b"WAVE", 8, b"AVI ")
