"""Tests for codec configuration."""

import pytest

from src.core.config import (
    DEFAULT_MAX_PART_OF_DEPTH,
    MAX_PART_OF_DEPTH_LIMIT,
    CodecConfig,
)


class TestCodecConfigFromEnv:
    """Tests for CodecConfig.from_env."""

    def test_defaults(self) -> None:
        """Test configuration with no environment variables set."""
        config = CodecConfig.from_env()
        assert config.warn_unknown_codes is False
        assert config.max_part_of_depth == DEFAULT_MAX_PART_OF_DEPTH
        assert config.log_level == "WARNING"

    @pytest.mark.parametrize("raw", ["1", "true", "TRUE", "yes", "on"])
    def test_warn_unknown_codes_true(
        self, monkeypatch: pytest.MonkeyPatch, raw: str
    ) -> None:
        """Test the accepted spellings of true."""
        monkeypatch.setenv("LOCATION_WARN_UNKNOWN_CODES", raw)
        assert CodecConfig.from_env().warn_unknown_codes is True

    @pytest.mark.parametrize("raw", ["0", "false", "no", "off", ""])
    def test_warn_unknown_codes_false(
        self, monkeypatch: pytest.MonkeyPatch, raw: str
    ) -> None:
        """Test the accepted spellings of false."""
        monkeypatch.setenv("LOCATION_WARN_UNKNOWN_CODES", raw)
        assert CodecConfig.from_env().warn_unknown_codes is False

    def test_invalid_bool(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that unrecognized booleans are rejected."""
        monkeypatch.setenv("LOCATION_WARN_UNKNOWN_CODES", "sometimes")
        with pytest.raises(ValueError, match="LOCATION_WARN_UNKNOWN_CODES"):
            CodecConfig.from_env()

    def test_max_depth(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test reading the partOf depth limit."""
        monkeypatch.setenv("LOCATION_MAX_PART_OF_DEPTH", "5")
        assert CodecConfig.from_env().max_part_of_depth == 5

    @pytest.mark.parametrize("raw", ["deep", "-1", "2.5"])
    def test_invalid_max_depth(
        self, monkeypatch: pytest.MonkeyPatch, raw: str
    ) -> None:
        """Test that non-integer or negative limits are rejected."""
        monkeypatch.setenv("LOCATION_MAX_PART_OF_DEPTH", raw)
        with pytest.raises(ValueError, match="LOCATION_MAX_PART_OF_DEPTH"):
            CodecConfig.from_env()

    def test_log_level_is_normalized(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that log levels are upper-cased."""
        monkeypatch.setenv("LOCATION_LOG_LEVEL", "debug")
        assert CodecConfig.from_env().log_level == "DEBUG"

    def test_invalid_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that unknown log levels are rejected."""
        monkeypatch.setenv("LOCATION_LOG_LEVEL", "LOUD")
        with pytest.raises(ValueError, match="LOCATION_LOG_LEVEL"):
            CodecConfig.from_env()

    def test_read_on_every_call(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that configuration is not cached between calls."""
        assert CodecConfig.from_env().max_part_of_depth == DEFAULT_MAX_PART_OF_DEPTH
        monkeypatch.setenv("LOCATION_MAX_PART_OF_DEPTH", "3")
        assert CodecConfig.from_env().max_part_of_depth == 3

    def test_is_frozen(self) -> None:
        """Test that configuration objects are immutable."""
        config = CodecConfig()
        with pytest.raises(AttributeError):
            config.max_part_of_depth = 1  # type: ignore[misc]


class TestCodecConfigLimits:
    """Tests for the partOf depth bounds."""

    def test_limit_is_accepted(self) -> None:
        """Test that the largest supported depth is accepted."""
        config = CodecConfig(max_part_of_depth=MAX_PART_OF_DEPTH_LIMIT)
        assert config.max_part_of_depth == MAX_PART_OF_DEPTH_LIMIT

    def test_above_limit_is_rejected(self) -> None:
        """Test that depths past the supported limit are rejected."""
        with pytest.raises(ValueError, match="between 0 and"):
            CodecConfig(max_part_of_depth=MAX_PART_OF_DEPTH_LIMIT + 1)

    def test_above_limit_from_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that the environment cannot raise the depth past the limit."""
        monkeypatch.setenv("LOCATION_MAX_PART_OF_DEPTH", "1000")
        with pytest.raises(ValueError, match="LOCATION_MAX_PART_OF_DEPTH"):
            CodecConfig.from_env()
