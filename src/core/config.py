"""Codec configuration read from the environment."""

import os
from dataclasses import dataclass

DEFAULT_MAX_PART_OF_DEPTH = 64
# Stays below the recursion limit of pydantic-core validation and serialization
MAX_PART_OF_DEPTH_LIMIT = 128
DEFAULT_LOG_LEVEL = "WARNING"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got {raw!r}")


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for decoding Location documents."""

    warn_unknown_codes: bool = False
    max_part_of_depth: int = DEFAULT_MAX_PART_OF_DEPTH
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if not 0 <= self.max_part_of_depth <= MAX_PART_OF_DEPTH_LIMIT:
            raise ValueError(
                f"LOCATION_MAX_PART_OF_DEPTH must be between 0 and "
                f"{MAX_PART_OF_DEPTH_LIMIT}, got {self.max_part_of_depth}"
            )

    @classmethod
    def from_env(cls) -> "CodecConfig":
        """Create config from environment variables.

        Optional environment variables:
            LOCATION_WARN_UNKNOWN_CODES: Issue UnknownCodeWarning for codes
                outside a closed set (default: false)
            LOCATION_MAX_PART_OF_DEPTH: Maximum partOf nesting (default: 64,
                at most 128)
            LOCATION_LOG_LEVEL: Log level for the CLI (default: WARNING)

        Raises:
            ValueError: If a variable is set to an invalid value.
        """
        warn_unknown_codes = _parse_bool(
            "LOCATION_WARN_UNKNOWN_CODES",
            os.getenv("LOCATION_WARN_UNKNOWN_CODES", "false"),
        )

        raw_depth = os.getenv(
            "LOCATION_MAX_PART_OF_DEPTH", str(DEFAULT_MAX_PART_OF_DEPTH)
        )
        try:
            max_part_of_depth = int(raw_depth)
        except ValueError:
            raise ValueError(
                f"LOCATION_MAX_PART_OF_DEPTH must be an integer, got {raw_depth!r}"
            ) from None

        log_level = os.getenv("LOCATION_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if log_level not in _LOG_LEVELS:
            raise ValueError(
                f"LOCATION_LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, "
                f"got {log_level!r}"
            )

        return cls(
            warn_unknown_codes=warn_unknown_codes,
            max_part_of_depth=max_part_of_depth,
            log_level=log_level,
        )
