"""Code lists used by the Location resource and its parts.

Canonical codes follow the FHIR value sets and are reproduced with their
exact casing; decoding compares them case-insensitively.
"""

from src.models.coding import ClosedEnum, ExtensibleEnum


class AddressType(ExtensibleEnum):
    """Distinguishes mailing addresses from visiting addresses."""

    POSTAL = "POSTAL"
    PHYSICAL = "PHYSICAL"
    BOTH = "BOTH"


class AddressUse(ExtensibleEnum):
    """The purpose of an address."""

    HOME = "home"
    WORK = "work"
    TEMP = "temp"
    OLD = "old"  # Old / incorrect
    BILLING = "billing"


class ContactPointSystem(ExtensibleEnum):
    """Telecommunications form for a contact point."""

    PHONE = "phone"
    FAX = "fax"
    EMAIL = "email"
    PAGER = "pager"
    URL = "url"
    SMS = "sms"
    OTHER = "other"


class ContactPointUse(ExtensibleEnum):
    """Purpose of a contact point."""

    HOME = "home"
    WORK = "work"
    TEMP = "temp"
    OLD = "old"
    MOBILE = "mobile"
    OTHER = "other"


class LocationMode(ExtensibleEnum):
    """Whether a Location is a specific place or a class of places."""

    # A specific instance of a location (e.g. Operating Theatre 1A)
    INSTANCE = "instance"
    # A class of locations (e.g. any operating theatre)
    KIND = "kind"


class LocationOperationalStatus(ExtensibleEnum):
    """Operational status of a location, typically a bed or room (HL7 v2 0116)."""

    CLOSED = "C"
    HOUSEKEEPING = "H"
    OCCUPIED = "O"
    UNOCCUPIED = "U"
    CONTAMINATED = "K"
    ISOLATED = "I"


class LocationStatus(ExtensibleEnum):
    """Whether a location is still in use."""

    ACTIVE = "active"  # Operational
    SUSPENDED = "suspended"  # Temporarily closed
    INACTIVE = "inactive"  # No longer used


class LocationPhysicalType(ExtensibleEnum):
    """Physical form of a location."""

    SITE = "si"  # Collection of buildings, e.g. a campus
    BUILDING = "bu"
    WING = "wi"
    WARD = "wa"
    LEVEL = "lvl"
    CORRIDOR = "co"
    ROOM = "ro"
    BED = "bd"  # The space a bed occupies, not the bed itself
    VEHICLE = "ve"
    HOUSE = "ho"
    CABINET = "ca"
    ROAD = "rd"
    AREA = "area"  # Physical boundary, e.g. a flood zone or postcode
    JURISDICTION = "jdn"  # Conceptual domain, e.g. a nation or business


class DaysOfWeek(ClosedEnum):
    """Day of the week, matched exactly."""

    MONDAY = "mon"
    TUESDAY = "tue"
    WEDNESDAY = "wed"
    THURSDAY = "thu"
    FRIDAY = "fri"
    SATURDAY = "sat"
    SUNDAY = "sun"
