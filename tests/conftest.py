"""Pytest configuration and fixtures."""

import copy
import json
from pathlib import Path
from typing import Any

import pytest

PERIOD = {"start": "2020-01-01T00:00:00Z", "end": None}

WARD_DOCUMENT: dict[str, Any] = {
    "identifiers": [{"system": "urn:oid:2.16.840.1.113883.19.5", "value": "B1-S.F2"}],
    "status": "active",
    "operationalStatus": "U",
    "name": "South Wing, second floor",
    "aliases": ["BU MC, SW, F2", "Burgers University Medical Center, South Wing"],
    "description": "Second floor of the Old South Wing",
    "mode": "instance",
    "types": ["HOSP", "ICU"],
    "telecoms": [
        {
            "system": "phone",
            "value": "2328",
            "use": "work",
            "rank": 1,
            "period": PERIOD,
        },
        {
            "system": "email",
            "value": "second wing admissions",
            "use": "work",
            "rank": 2,
            "period": PERIOD,
        },
    ],
    "address": {
        "id": "addr-1",
        "use": "work",
        "type": "PHYSICAL",
        "text": "Galapagosweg 91, Building A, 9105 PZ Den Burg",
        "lines": ["Galapagosweg 91, Building A"],
        "city": "Den Burg",
        "district": "Texel",
        "state": "Noord-Holland",
        "postalCode": "9105 PZ",
        "country": "NLD",
        "period": PERIOD,
    },
    "physicalType": "wi",
    "position": {"longitude": -83.6945691, "latitude": 42.25475478, "altitude": 0.0},
    "managingOrganization": {
        "name": "Burgers University Medical Center",
        "identifiers": [{"system": "urn:ietf:rfc:3986", "value": "f001"}],
    },
    "partOf": None,
    "hoursOfOperation": {
        "daysOfWeek": "mon",
        "allDay": False,
        "openingTime": "2020-01-01T08:00:00Z",
        "closingTime": "2020-01-01T17:00:00Z",
    },
    "availabilityExceptions": "Only available on Mondays",
}


def make_location_document(**overrides: Any) -> dict[str, Any]:
    """Build a complete Location document, replacing top-level fields."""
    document = copy.deepcopy(WARD_DOCUMENT)
    document.update(overrides)
    return document


@pytest.fixture
def location_document() -> dict[str, Any]:
    """Return a complete, valid Location document."""
    return make_location_document()


@pytest.fixture
def nested_location_document() -> dict[str, Any]:
    """Return a room that is part of a ward that is part of a building."""
    building = make_location_document(
        name="Building A", physicalType="bu", types=["HOSP"]
    )
    ward = make_location_document(name="Ward 3", physicalType="wa", partOf=building)
    return make_location_document(
        name="Room 12", physicalType="ro", types=["PEDICU"], partOf=ward
    )


@pytest.fixture
def location_file(tmp_path: Path, location_document: dict[str, Any]) -> Path:
    """Write the sample Location document to a temporary file."""
    path = tmp_path / "ward.json"
    path.write_text(json.dumps(location_document), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clean_codec_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test with the default codec configuration."""
    for name in (
        "LOCATION_WARN_UNKNOWN_CODES",
        "LOCATION_MAX_PART_OF_DEPTH",
        "LOCATION_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_document():
    """Return a factory for Location documents with overridden fields."""
    return make_location_document
