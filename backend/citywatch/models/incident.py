"""Incident domain model."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class IncidentCategory(StrEnum):
    """Known incident categories. Unknown values are kept as plain strings."""

    FIRE = "Fire"
    MEDICAL = "Medical"
    CRIME = "Crime"
    ACCIDENT = "Accident"
    TRAFFIC = "Traffic"
    GARBAGE = "Garbage"
    POLLUTION = "Pollution"
    POTHOLES = "Potholes"


class IncidentStatus(StrEnum):
    """Resolution workflow states."""

    NEW = "New"
    ACKNOWLEDGED = "Acknowledged"
    RESOLVED = "Resolved"

    @classmethod
    def parse(cls, value: object) -> "IncidentStatus | None":
        """Exact match against the enum values, or None."""
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def coerce(cls, value: str | None) -> "IncidentStatus":
        """Lenient parse for source data: case-insensitive, defaults to New."""
        if value:
            wanted = value.strip().lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        return cls.NEW


class Role(StrEnum):
    """Operational role of a viewer."""

    PUBLIC = "public"
    POLICE = "police"
    MEDICAL = "medical"
    FIREFIGHTER = "firefighter"


class Coordinates(BaseModel):
    """Geographic point as (longitude, latitude)."""

    model_config = ConfigDict(frozen=True)

    longitude: float
    latitude: float


class Incident(BaseModel):
    """
    A single reported incident.

    Every field except ``status`` is frozen after construction. Coordinates
    are attached by the geo resolver through ``model_copy``, which returns a
    new instance.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(frozen=True)
    text: str = Field(default="", frozen=True)
    category: str = Field(default="", frozen=True)
    type: str = Field(default="", frozen=True)
    location: str = Field(default="", frozen=True)
    time: datetime | None = Field(default=None, frozen=True)
    status: IncidentStatus = IncidentStatus.NEW
    coordinates: Coordinates | None = Field(default=None, frozen=True)

    def __repr__(self) -> str:
        return f"<Incident {self.id}: {self.category} [{self.status}]>"
