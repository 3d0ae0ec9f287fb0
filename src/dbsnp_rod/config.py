"""Configuration file support for dbsnp-rod."""

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .genome_loc import ContigLocator
from .models import STANDARD_DBSNP_TRACK_NAME

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    pass


@dataclass
class DbSNPConfig:
    """Settings for reading dbSNP catalog files."""

    track_name: str = STANDARD_DBSNP_TRACK_NAME
    skip_malformed: bool = True
    reference_index: Path | None = None
    log_level: str = "INFO"

    def build_locator(self) -> ContigLocator:
        """Locator backed by the reference index, or a permissive one."""
        if self.reference_index is None:
            return ContigLocator()
        return ContigLocator.from_reference_index(self.reference_index)


def validate_config(config_dict: dict[str, Any]) -> None:
    """Validate configuration values.

    Raises:
        ConfigValidationError: If any configuration value is invalid.
    """
    if "track_name" in config_dict:
        track_name = config_dict["track_name"]
        if not isinstance(track_name, str):
            raise ConfigValidationError(
                f"track_name must be a string, got {type(track_name).__name__}"
            )
        if not track_name.strip():
            raise ConfigValidationError("track_name cannot be empty")

    if "skip_malformed" in config_dict:
        skip_malformed = config_dict["skip_malformed"]
        if not isinstance(skip_malformed, bool):
            raise ConfigValidationError(
                f"skip_malformed must be a boolean, got {type(skip_malformed).__name__}"
            )

    if "reference_index" in config_dict:
        reference_index = config_dict["reference_index"]
        if not isinstance(reference_index, str | Path):
            raise ConfigValidationError(
                f"reference_index must be a path, got {type(reference_index).__name__}"
            )

    if "log_level" in config_dict:
        log_level = config_dict["log_level"]
        if not isinstance(log_level, str):
            raise ConfigValidationError(
                f"log_level must be a string, got {type(log_level).__name__}"
            )
        if log_level.upper() not in VALID_LOG_LEVELS:
            raise ConfigValidationError(
                f"log_level must be one of {VALID_LOG_LEVELS}, got '{log_level}'"
            )


def load_config(config_path: Path, overrides: dict[str, Any] | None = None) -> DbSNPConfig:
    """Load configuration from a TOML file.

    Args:
        config_path: Path to the TOML configuration file.
        overrides: Optional dict of values to override loaded config.

    Returns:
        DbSNPConfig instance with loaded values.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        ConfigValidationError: If the file is not valid TOML or a value is invalid.
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "rb") as f:
        try:
            toml_data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigValidationError(f"Invalid TOML in {config_path}: {e}") from e

    config_dict = toml_data.get("dbsnp_rod", {})

    if overrides:
        config_dict.update(overrides)

    validate_config(config_dict)

    valid_fields = {"track_name", "skip_malformed", "reference_index", "log_level"}
    unknown = set(config_dict) - valid_fields
    if unknown:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(sorted(unknown)))

    filtered_config = {k: v for k, v in config_dict.items() if k in valid_fields}

    if filtered_config.get("reference_index") is not None:
        reference_index = Path(filtered_config["reference_index"])
        if not reference_index.is_absolute():
            reference_index = config_path.parent / reference_index
        filtered_config["reference_index"] = reference_index
    if "log_level" in filtered_config:
        filtered_config["log_level"] = filtered_config["log_level"].upper()

    return DbSNPConfig(**filtered_config)
