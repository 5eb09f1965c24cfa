"""
Configuration Management for wav-header.

Configuration Hierarchy (highest priority first):
    1. Command-line options (applied by the CLI)
    2. Environment variables (see below)
    3. YAML settings file
    4. Defaults class values

Settings file lookup:
    1. Explicit path (``--settings``); must exist
    2. WAV_HEADER_SETTINGS environment variable; must exist
    3. config/settings.yaml, if present
    4. No file: defaults only

Environment overrides:
    WAV_HEADER_READ_SIZE          reader.read_size
    WAV_HEADER_STRICT             decoder.strict
    WAV_HEADER_LOG_LEVEL          logging.level
    WAV_HEADER_LOG_DIR            logging.log_dir
    WAV_HEADER_JSONL_FILE         logging.jsonl_file
    WAV_HEADER_LOG_ROTATE_BYTES   logging.rotate_max_bytes
    WAV_HEADER_LOG_ROTATE_BACKUP  logging.rotate_backup_count

Example settings.yaml:
    reader:
      read_size: 128

    decoder:
      strict: false

    logging:
      level: 1
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional
import os
import yaml

from wav_header.core.logging.levels import parse_level

DEFAULT_SETTINGS_PATH = "config/settings.yaml"


class ConfigValidationError(Exception):
    """Raised when a configuration value is malformed or out of bounds."""
    pass


class Defaults:
    """Centralized default configuration values."""

    # Reader
    READER_READ_SIZE = 128              # bytes read from the start of a file
    READER_MIN_READ_SIZE = 44           # canonical header length

    # Decoder
    DECODER_STRICT = False              # check derived-field consistency

    # Logging
    LOGGING_CLI_LEVEL = 1               # 1=MINIMAL: failures only
    LOGGING_JSONL_FILE = "wav-header.jsonl"
    LOGGING_ROTATE_MAX_BYTES = 10 * 1024 * 1024
    LOGGING_ROTATE_BACKUP_COUNT = 5


@dataclass
class ReaderConfig:
    """File reader configuration."""
    read_size: int = Defaults.READER_READ_SIZE


@dataclass
class DecoderConfig:
    """
    Header decoder configuration.

    ``strict`` turns on the derived-field checks (byte rate, block align,
    PCM format, 16-byte fmt chunk). Off by default: real files that break
    these rules still decode.
    """
    strict: bool = Defaults.DECODER_STRICT


@dataclass
class LoggingConfig:
    """
    Logging configuration.

    Log levels:
        1 = MINIMAL, 2 = NORMAL, 3 = VERBOSE, 4 = DEBUG

    ``level`` is None when neither the file nor the environment sets it;
    the caller of configure_logging() then picks the default.
    """
    level: Optional[int] = None
    log_dir: Optional[str] = None
    jsonl_file: str = Defaults.LOGGING_JSONL_FILE
    rotate_max_bytes: int = Defaults.LOGGING_ROTATE_MAX_BYTES
    rotate_backup_count: int = Defaults.LOGGING_ROTATE_BACKUP_COUNT

    def to_dict(self) -> Dict[str, Any]:
        """Keyword dict for configure_logging(config=...); unset keys omitted."""
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass
class AppConfig:
    """
    Validated configuration for the readers and the CLI.

    Usage:
        settings = load_settings()
        config = AppConfig.from_settings(settings)
        print(config.reader.read_size)
    """
    reader: ReaderConfig = field(default_factory=ReaderConfig)
    decoder: DecoderConfig = field(default_factory=DecoderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "AppConfig":
        """
        Build AppConfig from raw Settings, applying defaults and env overrides.

        Raises:
            ConfigValidationError: If any value fails validation.
        """
        raw = settings.raw

        reader_raw = cls._section(raw, "reader")
        read_size = os.getenv("WAV_HEADER_READ_SIZE") or reader_raw.get("read_size", Defaults.READER_READ_SIZE)
        reader = ReaderConfig(read_size=cls._as_int("reader.read_size", read_size))
        cls._validate_min("reader.read_size", reader.read_size, Defaults.READER_MIN_READ_SIZE)

        decoder_raw = cls._section(raw, "decoder")
        strict_env = os.getenv("WAV_HEADER_STRICT")
        strict = strict_env if strict_env is not None else decoder_raw.get("strict", Defaults.DECODER_STRICT)
        decoder = DecoderConfig(strict=cls._as_bool("decoder.strict", strict))

        logging_raw = cls._section(raw, "logging")
        level_raw = os.getenv("WAV_HEADER_LOG_LEVEL") or logging_raw.get("level")
        log_dir = os.getenv("WAV_HEADER_LOG_DIR") or logging_raw.get("log_dir")
        jsonl_file = os.getenv("WAV_HEADER_JSONL_FILE") or logging_raw.get("jsonl_file", Defaults.LOGGING_JSONL_FILE)
        rotate_bytes = os.getenv("WAV_HEADER_LOG_ROTATE_BYTES") or logging_raw.get(
            "rotate_max_bytes", Defaults.LOGGING_ROTATE_MAX_BYTES)
        rotate_backup = os.getenv("WAV_HEADER_LOG_ROTATE_BACKUP") or logging_raw.get(
            "rotate_backup_count", Defaults.LOGGING_ROTATE_BACKUP_COUNT)

        logging_cfg = LoggingConfig(
            level=cls._as_level("logging.level", level_raw) if level_raw is not None else None,
            log_dir=str(log_dir) if log_dir else None,
            jsonl_file=str(jsonl_file),
            rotate_max_bytes=cls._as_int("logging.rotate_max_bytes", rotate_bytes),
            rotate_backup_count=cls._as_int("logging.rotate_backup_count", rotate_backup),
        )
        cls._validate_min("logging.rotate_max_bytes", logging_cfg.rotate_max_bytes, 1)
        cls._validate_min("logging.rotate_backup_count", logging_cfg.rotate_backup_count, 0)

        return cls(reader=reader, decoder=decoder, logging=logging_cfg)

    @staticmethod
    def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
        section = raw.get(name) or {}
        if not isinstance(section, dict):
            raise ConfigValidationError(f"{name} must be a mapping, got {type(section).__name__}")
        return section

    @staticmethod
    def _as_int(name: str, value: Any) -> int:
        if isinstance(value, bool):
            raise ConfigValidationError(f"{name} must be an integer, got {value!r}")
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ConfigValidationError(f"{name} must be an integer, got {value!r}") from None

    @staticmethod
    def _as_bool(name: str, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in ("1", "true", "yes", "on"):
            return True
        if isinstance(value, str) and value.strip().lower() in ("0", "false", "no", "off", ""):
            return False
        if isinstance(value, int):
            return bool(value)
        raise ConfigValidationError(f"{name} must be a boolean, got {value!r}")

    @staticmethod
    def _as_level(name: str, value: Any) -> int:
        try:
            return int(parse_level(value))
        except ValueError:
            raise ConfigValidationError(f"{name} is not a known level: {value!r}") from None

    @staticmethod
    def _validate_min(name: str, value: int, min_val: int) -> None:
        """Validate that a value is at least min_val."""
        if value < min_val:
            raise ConfigValidationError(f"{name} must be at least {min_val}, got {value}")


@dataclass(frozen=True)
class Settings:
    """
    Immutable settings container loaded from YAML.

    Attributes:
        raw: Dictionary of raw configuration values.
        source: Path the settings were read from, or None for defaults.
    """
    raw: Dict[str, Any]
    source: Optional[str] = None

    def get_app_config(self) -> AppConfig:
        """
        Get validated AppConfig from these settings.

        Raises:
            ConfigValidationError: If validation fails.
        """
        return AppConfig.from_settings(self)


def resolve_settings_path(path: Optional[str] = None) -> Optional[Path]:
    """
    Find the settings file to load.

    Returns:
        The path to load, or None when no file applies.

    Raises:
        FileNotFoundError: If an explicitly requested file is missing.
    """
    explicit = path or os.getenv("WAV_HEADER_SETTINGS")
    if explicit:
        p = Path(explicit)
        if not p.exists():
            raise FileNotFoundError(f"settings file not found: {p.resolve()}")
        return p

    default = Path(DEFAULT_SETTINGS_PATH)
    return default if default.exists() else None


def load_settings(path: Optional[str] = None) -> Settings:
    """
    Load settings from a YAML configuration file.

    Args:
        path: Settings file. See the module docstring for the lookup
            order when omitted.

    Returns:
        Settings object (empty ``raw`` when no file applies).

    Raises:
        FileNotFoundError: If an explicitly requested file is missing.
        ConfigValidationError: If the file is not valid YAML or not a mapping.
    """
    p = resolve_settings_path(path)
    if p is None:
        return Settings(raw={})

    with p.open("r", encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"invalid YAML in {p}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigValidationError(f"settings file {p} must contain a mapping")

    return Settings(raw=raw, source=str(p))
