"""Tests for coded values (extensible and closed code lists)."""

import logging
import warnings

import pytest
from pydantic import BaseModel, ValidationError

from src.core.errors import UnrecognizedCodeError
from src.models.coding import (
    ClosedEnum,
    Coded,
    ExtensibleEnum,
    UnknownCode,
    UnknownCodeWarning,
    decode_code,
    encode_code,
    is_unknown,
)
from src.models.enums import (
    AddressType,
    DaysOfWeek,
    LocationOperationalStatus,
    LocationPhysicalType,
    LocationStatus,
)
from src.models.registry import CODE_SYSTEMS


class CasingCodes(ExtensibleEnum):
    """Code list whose codes differ only by case."""

    LOWER = "abc"
    UPPER = "ABC"
    LOWER_AGAIN = "abc"


class StatusHolder(BaseModel):
    """Minimal model with one extensible and one closed field."""

    model_config = {"frozen": True}

    status: Coded[LocationStatus]
    day: DaysOfWeek


class TestExtensibleDecode:
    """Tests for ExtensibleEnum.decode."""

    @pytest.mark.parametrize("enum_cls", list(CODE_SYSTEMS.values()))
    def test_canonical_codes_round_trip(self, enum_cls) -> None:
        """Test that every canonical code decodes to its member and back."""
        for member in enum_cls:
            assert enum_cls.decode(member.value) is member
            assert encode_code(enum_cls.decode(member.value)) == member.value

    @pytest.mark.parametrize(
        "enum_cls", [c for c in CODE_SYSTEMS.values() if issubclass(c, ExtensibleEnum)]
    )
    def test_upper_and_lower_case_codes(self, enum_cls) -> None:
        """Test that every code decodes in upper and lower case."""
        for member in enum_cls:
            assert enum_cls.decode(member.value.upper()) is member
            assert enum_cls.decode(member.value.lower()) is member

    def test_match_ignores_case(self) -> None:
        """Test that decoding compares codes case-insensitively."""
        assert LocationStatus.decode("ACTIVE") is LocationStatus.ACTIVE
        assert LocationStatus.decode("Suspended") is LocationStatus.SUSPENDED
        assert AddressType.decode("postal") is AddressType.POSTAL
        assert LocationPhysicalType.decode("LVL") is LocationPhysicalType.LEVEL

    def test_matched_member_encodes_canonical_casing(self) -> None:
        """Test that a case-insensitive match re-encodes as declared."""
        value = LocationOperationalStatus.decode("k")
        assert value is LocationOperationalStatus.CONTAMINATED
        assert encode_code(value) == "K"

    def test_unknown_code_is_preserved(self) -> None:
        """Test that codes outside the list keep their original text."""
        value = LocationStatus.decode("deprecated")
        assert value == UnknownCode(LocationStatus, "deprecated")
        assert is_unknown(value)
        assert encode_code(value) == "deprecated"

    def test_unknown_code_keeps_case_and_whitespace(self) -> None:
        """Test that fallback values are not normalized."""
        for raw in ["Deprecated", " active", "active ", "ACTIVE\n"]:
            assert encode_code(LocationStatus.decode(raw)) == raw

    def test_empty_string_is_unknown(self) -> None:
        """Test that the empty string decodes to a fallback."""
        value = LocationStatus.decode("")
        assert is_unknown(value)
        assert encode_code(value) == ""

    def test_declaration_order_wins(self) -> None:
        """Test that the first declared member wins a case-insensitive tie."""
        assert CasingCodes.decode("ABC") is CasingCodes.LOWER
        assert CasingCodes.decode("aBc") is CasingCodes.LOWER
        assert CasingCodes.LOWER_AGAIN is CasingCodes.LOWER

    def test_non_string_is_type_error(self) -> None:
        """Test that non-string input is rejected."""
        with pytest.raises(TypeError, match="must be a string"):
            LocationStatus.decode(1)  # type: ignore[arg-type]

    def test_decode_code_function(self) -> None:
        """Test the function form of decode."""
        assert decode_code(LocationStatus, "inactive") is LocationStatus.INACTIVE
        assert is_unknown(decode_code(LocationStatus, "retired"))


class TestUnknownCode:
    """Tests for the UnknownCode fallback value."""

    def test_equality_includes_code_system(self) -> None:
        """Test that equal text from different code lists is not equal."""
        assert UnknownCode(LocationStatus, "x") == UnknownCode(LocationStatus, "x")
        assert UnknownCode(LocationStatus, "x") != UnknownCode(AddressType, "x")

    def test_fallback_never_equals_member(self) -> None:
        """Test that a fallback is distinct from the member with that code."""
        assert UnknownCode(LocationStatus, "active") != LocationStatus.ACTIVE

    def test_hashable_and_immutable(self) -> None:
        """Test that fallbacks can be hashed and not modified."""
        value = UnknownCode(LocationStatus, "x")
        assert len({value, UnknownCode(LocationStatus, "x")}) == 1
        with pytest.raises(AttributeError):
            value.value = "y"  # type: ignore[misc]

    def test_str_and_repr(self) -> None:
        """Test text representations."""
        value = UnknownCode(LocationStatus, "retired")
        assert str(value) == "retired"
        assert repr(value) == "UnknownCode(LocationStatus, 'retired')"


class TestClosedDecode:
    """Tests for the closed DaysOfWeek code list."""

    def test_exact_codes_decode(self) -> None:
        """Test that every day decodes by its exact code."""
        assert DaysOfWeek.decode("mon") is DaysOfWeek.MONDAY
        assert DaysOfWeek.decode("sun") is DaysOfWeek.SUNDAY

    @pytest.mark.parametrize("raw", ["MON", "Mon", "monday", "", "xyz"])
    def test_anything_else_fails(self, raw: str) -> None:
        """Test that closed lists do not fall back or ignore case."""
        with pytest.raises(UnrecognizedCodeError) as exc_info:
            DaysOfWeek.decode(raw)
        assert exc_info.value.code_system == "DaysOfWeek"
        assert exc_info.value.value == raw

    def test_closed_list_is_not_extensible(self) -> None:
        """Test the class hierarchy of the closed list."""
        assert issubclass(DaysOfWeek, ClosedEnum)
        assert not issubclass(DaysOfWeek, ExtensibleEnum)


class TestDiagnostics:
    """Tests for the unknown-code diagnostic."""

    def test_fallback_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that a fallback decode logs a warning naming the code."""
        with caplog.at_level(logging.WARNING, logger="src.models.coding"):
            LocationStatus.decode("deprecated")
        assert "LocationStatus" in caplog.text
        assert "'deprecated'" in caplog.text

    def test_known_code_is_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that recognized codes decode silently."""
        with caplog.at_level(logging.WARNING, logger="src.models.coding"):
            LocationStatus.decode("ACTIVE")
        assert caplog.records == []

    def test_no_warning_by_default(self) -> None:
        """Test that the default configuration never raises a warning."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert is_unknown(LocationStatus.decode("deprecated"))

    def test_warning_when_enabled(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that the warning is issued when configured."""
        monkeypatch.setenv("LOCATION_WARN_UNKNOWN_CODES", "true")
        with pytest.warns(UnknownCodeWarning, match="deprecated"):
            LocationStatus.decode("deprecated")

    def test_invalid_config_does_not_break_decode(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that a bad environment value is logged, not raised."""
        monkeypatch.setenv("LOCATION_WARN_UNKNOWN_CODES", "maybe")
        with caplog.at_level(logging.WARNING, logger="src.models.coding"):
            assert is_unknown(LocationStatus.decode("deprecated"))
        assert "Ignoring invalid codec configuration" in caplog.text


class TestCodedFields:
    """Tests for coded values inside pydantic models."""

    def test_model_decodes_and_encodes(self) -> None:
        """Test that a model field decodes with fallback and re-encodes."""
        holder = StatusHolder.model_validate({"status": "Retired", "day": "tue"})
        assert holder.status == UnknownCode(LocationStatus, "Retired")
        assert holder.day is DaysOfWeek.TUESDAY
        assert holder.model_dump(mode="json") == {"status": "Retired", "day": "tue"}

    def test_model_accepts_member(self) -> None:
        """Test that members can be passed directly."""
        holder = StatusHolder(status=LocationStatus.ACTIVE, day=DaysOfWeek.FRIDAY)
        assert holder.model_dump(mode="json") == {"status": "active", "day": "fri"}

    def test_model_rejects_fallback_of_other_list(self) -> None:
        """Test that a fallback from another code list is rejected."""
        with pytest.raises(ValidationError, match="code_system_mismatch"):
            StatusHolder(status=UnknownCode(AddressType, "x"), day=DaysOfWeek.MONDAY)

    def test_model_rejects_non_string_code(self) -> None:
        """Test that a number in a coded field is a validation error."""
        with pytest.raises(ValidationError, match="code_type"):
            StatusHolder.model_validate({"status": 3, "day": "mon"})

    def test_model_rejects_unknown_day(self) -> None:
        """Test that a closed field rejects codes outside its list."""
        with pytest.raises(ValidationError, match="unrecognized_code"):
            StatusHolder.model_validate({"status": "active", "day": "funday"})
