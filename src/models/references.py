"""Shared record configuration and the types Location refers to."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictStr
from pydantic.alias_generators import to_camel

# Immutable value objects; camelCase on the wire, snake_case in Python.
RECORD_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


class Period(BaseModel):
    """Time range defined by start and end date/time."""

    model_config = RECORD_CONFIG

    start: datetime = Field(..., description="Starting time, inclusive")
    end: datetime | None = Field(
        default=None, description="End time, inclusive (None if ongoing)"
    )


class Identifier(BaseModel):
    """Business identifier (stub of the FHIR Identifier datatype)."""

    model_config = RECORD_CONFIG

    system: StrictStr = Field(..., description="Namespace for the identifier value")
    value: StrictStr = Field(..., description="The identifier value")


class Organization(BaseModel):
    """Organization reference (stub of the FHIR Organization resource)."""

    model_config = RECORD_CONFIG

    name: StrictStr = Field(..., description="Name used for the organization")
    identifiers: tuple[Identifier, ...] = Field(
        ..., description="Identifiers for the organization"
    )
