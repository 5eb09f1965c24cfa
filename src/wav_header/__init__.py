"""
wav-header: canonical PCM WAV header reader.

Decodes the fixed 44-byte RIFF/WAVE header of a PCM WAV file, from the
file itself or from a hexadecimal string copied out of a hex editor, and
prints each field both as stored (little-endian hex) and decoded.

Example Usage:
    >>> from wav_header.services import decode_file
    >>> from wav_header.wav import render
    >>>
    >>> header = decode_file("take1.wav")
    >>> print(header.sample_rate, header.num_channels)
    44100 1
    >>> print(render(header))
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
