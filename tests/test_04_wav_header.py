"""Decode headers of WAV files written by libsndfile."""
import pytest

np = pytest.importorskip("numpy")
sf = pytest.importorskip("soundfile")

from wav_header.services.readers import decode_file  # noqa: E402
from wav_header.wav import check_consistency, render  # noqa: E402


def _write_sine(path, sr: int, channels: int) -> int:
    t = np.linspace(0, 0.1, int(sr * 0.1), endpoint=False, dtype=np.float32)
    wav = 0.1 * np.sin(2 * np.pi * 440 * t).astype(np.float32)
    if channels > 1:
        wav = np.stack([wav] * channels, axis=1)
    sf.write(str(path), wav, sr, format="WAV", subtype="PCM_16")
    return len(t)


def test_mono_pcm16_header(tmp_path):
    path = tmp_path / "mono.wav"
    frames = _write_sine(path, 24000, 1)

    header = decode_file(path)

    assert header.audio_format == 1
    assert header.num_channels == 1
    assert header.sample_rate == 24000
    assert header.bits_per_sample == 16
    assert header.byte_rate == 48000
    assert header.block_align == 2
    assert header.subchunk2_size == frames * 2
    assert check_consistency(header) == []
    assert "Sample Rate: 24000" in render(header)


def test_stereo_pcm16_header(tmp_path):
    path = tmp_path / "stereo.wav"
    frames = _write_sine(path, 22050, 2)

    header = decode_file(path, strict=True)

    assert header.num_channels == 2
    assert header.sample_rate == 22050
    assert header.block_align == 4
    assert header.subchunk2_size == frames * 4
    assert header.duration_seconds == pytest.approx(frames / 22050)
