"""Location resource data models.

Source: https://hl7.org/fhir/location.html
"""

from datetime import datetime

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr

from src.models.coding import Coded
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
from src.models.references import RECORD_CONFIG, Identifier, Organization, Period
from src.terminology.role_types import ServiceDeliveryLocationRoleType


class Address(BaseModel):
    """Postal or physical address of a location."""

    model_config = RECORD_CONFIG

    id: StrictStr = Field(..., description="Element id")
    use: Coded[AddressUse] = Field(
        ..., description="home | work | temp | old | billing"
    )
    type: Coded[AddressType] = Field(..., description="POSTAL | PHYSICAL | BOTH")
    text: StrictStr = Field(..., description="Text representation of the address")
    lines: tuple[StrictStr, ...] = Field(
        ..., description="Street name, number, direction and P.O. box"
    )
    city: StrictStr = Field(..., description="Name of city, town, etc.")
    district: StrictStr = Field(..., description="District name (aka county)")
    state: StrictStr = Field(..., description="Sub-unit of country")
    postal_code: StrictStr = Field(..., description="Postal code for area")
    country: StrictStr = Field(..., description="Country (e.g. ISO 3166 code)")
    period: Period = Field(..., description="Time period when address was in use")


class ContactPoint(BaseModel):
    """Contact details of a location."""

    model_config = RECORD_CONFIG

    system: Coded[ContactPointSystem] = Field(
        ..., description="phone | fax | email | pager | url | sms | other"
    )
    value: StrictStr = Field(..., description="The actual contact point details")
    use: Coded[ContactPointUse] = Field(
        ..., description="home | work | temp | old | mobile | other"
    )
    rank: StrictInt = Field(
        ..., ge=0, description="Preferred order of use (1 = highest)"
    )
    period: Period = Field(..., description="Time period when the contact was in use")


class Position(BaseModel):
    """Absolute geographic location (WGS84 datum)."""

    model_config = RECORD_CONFIG

    longitude: StrictFloat = Field(..., description="Longitude with WGS84 datum")
    latitude: StrictFloat = Field(..., description="Latitude with WGS84 datum")
    altitude: StrictFloat = Field(..., description="Altitude with WGS84 datum")


class HoursOfOperation(BaseModel):
    """When during the week a location is usually open."""

    model_config = RECORD_CONFIG

    days_of_week: DaysOfWeek = Field(
        ..., description="mon | tue | wed | thu | fri | sat | sun"
    )
    all_day: StrictBool = Field(..., description="The location is open all day")
    opening_time: datetime = Field(..., description="Time that the location opens")
    closing_time: datetime = Field(..., description="Time that the location closes")


class Location(BaseModel):
    """Physical place where services are provided.

    A location may be part of another location (a bed in a room in a ward in
    a building), which ``part_of`` expresses. Decoding materializes the whole
    chain; ``ancestors()`` walks it.
    """

    model_config = RECORD_CONFIG

    identifiers: tuple[Identifier, ...] = Field(
        ..., description="Codes or numbers identifying the location to its users"
    )
    status: Coded[LocationStatus] = Field(
        ..., description="active | suspended | inactive"
    )
    operational_status: Coded[LocationOperationalStatus] = Field(
        ..., description="Operational status (typically only for a bed/room)"
    )
    name: StrictStr = Field(..., description="Name of the location as used by humans")
    aliases: tuple[StrictStr, ...] = Field(
        ..., description="Names the location is or was known as"
    )
    description: StrictStr = Field(
        ..., description="Further details that help identify the location"
    )
    mode: Coded[LocationMode] = Field(..., description="instance | kind")
    types: tuple[Coded[ServiceDeliveryLocationRoleType], ...] = Field(
        ..., description="Type of function performed"
    )
    telecoms: tuple[ContactPoint, ...] = Field(
        ..., description="Contact details of the location"
    )
    address: Address = Field(..., description="Physical location")
    physical_type: Coded[LocationPhysicalType] = Field(
        ..., description="Physical form of the location"
    )
    position: Position = Field(..., description="The absolute geographic location")
    managing_organization: Organization = Field(
        ..., description="Organization responsible for provisioning and upkeep"
    )
    part_of: "Location | None" = Field(
        default=None, description="Another Location this one is physically a part of"
    )
    hours_of_operation: HoursOfOperation = Field(
        ..., description="What days/times during a week the location is usually open"
    )
    availability_exceptions: StrictStr = Field(
        ..., description="Description of availability exceptions"
    )

    def ancestors(self) -> list["Location"]:
        """Return the locations this one is part of, nearest first."""
        chain: list[Location] = []
        current = self.part_of
        while current is not None:
            chain.append(current)
            current = current.part_of
        return chain

    @property
    def root(self) -> "Location":
        """The outermost location in the partOf chain (self if none)."""
        chain = self.ancestors()
        return chain[-1] if chain else self

    @property
    def depth(self) -> int:
        """Number of locations above this one in the partOf chain."""
        return len(self.ancestors())
