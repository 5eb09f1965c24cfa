"""
Command-Line Interface for wav-header.

Prints the fields of a canonical WAV header, read either from files or
from a hexadecimal string copied out of a hex editor.

Usage Examples:
    # One or more files
    wav-header take1.wav
    wav-header take1.wav take2.wav

    # Hex string on the command line
    wav-header --hex "52 49 46 46 24 00 00 00 57 41 56 45 ..."

    # No arguments: prompt for a hex string
    wav-header

    # Machine-readable output, strict consistency checks
    wav-header take1.wav --json --strict

Exit Codes:
    0 = every input decoded
    1 = at least one input failed
    2 = usage or settings error

Environment Variables:
    WAV_HEADER_SETTINGS: Settings file (default config/settings.yaml)
    WAV_HEADER_READ_SIZE: Bytes read from each file
    WAV_HEADER_STRICT: Enable strict checks (1/0)
    WAV_HEADER_LOG_LEVEL: Log level (1-4 or name)
    WAV_HEADER_LOG_DIR: Directory for a JSONL log file
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional
from uuid import uuid4

from wav_header.core.config import ConfigValidationError, Defaults, load_settings
from wav_header.core.logging import (
    LogLevel,
    configure_logging,
    fail,
    get_logger,
    info,
    parse_level,
    set_run_id,
)
from wav_header.services.readers import decode_file, decode_hex_string
from wav_header.wav.decoder import WavHeader
from wav_header.wav.errors import HeaderError
from wav_header.wav.formatter import render, to_dict

PROMPT = "Enter the WAV file header hexadecimal string: "
HEX_SOURCE = "<hex>"


@dataclass
class _Outcome:
    source: str
    header: Optional[WavHeader] = None
    error: Optional[HeaderError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _log_level(value: str) -> LogLevel:
    try:
        return parse_level(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wav-header",
        description="wav-header CLI (canonical WAV header reader)",
    )

    parser.add_argument("paths", nargs="*", metavar="PATH", help="WAV file(s) to read")
    parser.add_argument("--hex", metavar="TEXT", help="Header as a hexadecimal string")

    parser.add_argument("--json", action="store_true", help="Print JSON instead of text reports")
    parser.add_argument("--strict", action="store_true",
                        help="Reject inconsistent byte rate / block align, non-PCM formats")
    parser.add_argument("--read-size", type=int, metavar="N",
                        help=f"Bytes read from each file (default {Defaults.READER_READ_SIZE})")

    parser.add_argument("--settings", metavar="FILE", help="Settings YAML file")
    parser.add_argument("--log-level", type=_log_level, metavar="LEVEL", help="Log level (1-4 or name)")

    args = parser.parse_args(argv)
    if args.paths and args.hex is not None:
        parser.error("use either PATH arguments or --hex, not both")
    if args.read_size is not None and args.read_size < Defaults.READER_MIN_READ_SIZE:
        parser.error(f"--read-size must be at least {Defaults.READER_MIN_READ_SIZE}")
    return args


def _prompt_hex(to_stderr: bool) -> str:
    """Ask for a hex string on stdin. EOF reads as an empty string."""
    out = sys.stderr if to_stderr else sys.stdout
    print(PROMPT, file=out, flush=True)
    line = sys.stdin.readline()
    return line.rstrip("\r\n")


def _run(source: str, action: Callable[[], WavHeader], log) -> _Outcome:
    try:
        header = action()
    except HeaderError as e:
        fail(log, "decode_failed", source=source, code=e.code, error=e.message)
        return _Outcome(source, error=e)

    info(log, "decoded", source=source, sample_rate=header.sample_rate,
         channels=header.num_channels, bits=header.bits_per_sample)
    return _Outcome(source, header=header)


def _print_text(outcomes: List[_Outcome]) -> None:
    titled = len(outcomes) > 1
    for i, outcome in enumerate(outcomes):
        if i:
            print()
        if titled:
            print(f"== {outcome.source} ==")
        if outcome.ok:
            print(render(outcome.header))
        else:
            print(f"error: {outcome.error.message}")


def _print_json(outcomes: List[_Outcome]) -> None:
    items = []
    for outcome in outcomes:
        if outcome.ok:
            items.append({"source": outcome.source, "ok": True, **to_dict(outcome.header)})
        else:
            items.append({"source": outcome.source, **outcome.error.to_dict()})
    payload = {"ok": all(o.ok for o in outcomes), "items": items}
    print(json.dumps(payload, ensure_ascii=False))


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

        1. Parse arguments, load settings
        2. Configure logging (failures only unless configured otherwise)
        3. Decode each file, the --hex string, or a prompted string
        4. Print text or JSON reports

    Args:
        argv: Optional list of command-line arguments.

    Returns:
        Exit code (0 success, 1 decode failure, 2 settings error).
    """
    args = _parse_args(argv)

    try:
        app = load_settings(args.settings).get_app_config()
    except (FileNotFoundError, ConfigValidationError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    configure_logging(
        level=args.log_level,
        force=True,
        config=app.logging.to_dict(),
        default_level=LogLevel(Defaults.LOGGING_CLI_LEVEL),
    )
    log = get_logger("wav-header.cli")
    set_run_id(uuid4().hex[:12])

    read_size = args.read_size or app.reader.read_size
    strict = args.strict or app.decoder.strict

    if args.paths:
        outcomes = [
            _run(path, lambda p=path: decode_file(p, read_size=read_size, strict=strict), log)
            for path in args.paths
        ]
    else:
        text = args.hex if args.hex is not None else _prompt_hex(to_stderr=args.json)
        outcomes = [_run(HEX_SOURCE, lambda: decode_hex_string(text, strict=strict), log)]

    if args.json:
        _print_json(outcomes)
    else:
        _print_text(outcomes)

    return 0 if all(o.ok for o in outcomes) else 1


if __name__ == "__main__":
    raise SystemExit(main())
