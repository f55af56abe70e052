"""Lookup of the code lists by name, for tooling."""

from collections.abc import Mapping
from types import MappingProxyType

from src.models.coding import CodeEnum
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
from src.terminology.role_types import ServiceDeliveryLocationRoleType

CODE_SYSTEMS: Mapping[str, type[CodeEnum]] = MappingProxyType(
    {
        enum_cls.__name__: enum_cls
        for enum_cls in (
            AddressType,
            AddressUse,
            ContactPointSystem,
            ContactPointUse,
            LocationMode,
            LocationOperationalStatus,
            LocationStatus,
            LocationPhysicalType,
            DaysOfWeek,
            ServiceDeliveryLocationRoleType,
        )
    }
)


def get_code_system(name: str) -> type[CodeEnum] | None:
    """Get a code list by class name, ignoring case.

    Args:
        name: Enum class name (e.g., 'LocationStatus').

    Returns:
        The enum class, or None if no code list has that name.
    """
    wanted = name.lower()
    for system_name, enum_cls in CODE_SYSTEMS.items():
        if system_name.lower() == wanted:
            return enum_cls
    return None
