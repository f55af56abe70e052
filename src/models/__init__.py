"""Data models for the Location resource."""

from src.models.coding import (
    ClosedEnum,
    CodeEnum,
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
    AddressUse,
    ContactPointSystem,
    ContactPointUse,
    DaysOfWeek,
    LocationMode,
    LocationOperationalStatus,
    LocationPhysicalType,
    LocationStatus,
)
from src.models.location import (
    Address,
    ContactPoint,
    HoursOfOperation,
    Location,
    Position,
)
from src.models.references import Identifier, Organization, Period
from src.models.registry import CODE_SYSTEMS, get_code_system

__all__ = [
    # Coded values
    "CodeEnum",
    "ExtensibleEnum",
    "ClosedEnum",
    "UnknownCode",
    "UnknownCodeWarning",
    "Coded",
    "decode_code",
    "encode_code",
    "is_unknown",
    # Enums
    "AddressType",
    "AddressUse",
    "ContactPointSystem",
    "ContactPointUse",
    "DaysOfWeek",
    "LocationMode",
    "LocationOperationalStatus",
    "LocationPhysicalType",
    "LocationStatus",
    "CODE_SYSTEMS",
    "get_code_system",
    # Records
    "Address",
    "ContactPoint",
    "HoursOfOperation",
    "Location",
    "Position",
    "Period",
    "Identifier",
    "Organization",
]
