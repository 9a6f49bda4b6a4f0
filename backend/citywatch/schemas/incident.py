"""Pydantic schemas for incidents."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from citywatch.models.incident import Coordinates, Incident, IncidentStatus
from citywatch.reference import category_color, category_icon, status_color


class IncidentOut(BaseModel):
    """
    Incident response schema.

    Every field is always present; ``coordinates`` and ``time`` are null
    rather than omitted when unknown.
    """

    id: str
    text: str
    category: str
    type: str
    location: str
    time: datetime | None
    status: IncidentStatus
    coordinates: Coordinates | None

    color: str
    icon: str
    status_color: str

    @classmethod
    def from_incident(cls, incident: Incident) -> "IncidentOut":
        return cls(
            id=incident.id,
            text=incident.text,
            category=incident.category,
            type=incident.type,
            location=incident.location,
            time=incident.time,
            status=incident.status,
            coordinates=incident.coordinates,
            color=category_color(incident.category),
            icon=category_icon(incident.category),
            status_color=status_color(incident.status),
        )


class IncidentsResponse(BaseModel):
    """Role-scoped list of incidents."""

    role: str
    incidents: list[IncidentOut]
    total: int


class StatusUpdateIn(BaseModel):
    """Status change request body. Any JSON value; the workflow classifies it."""

    status: Any


class StatusUpdateOut(BaseModel):
    """Successful status change."""

    success: bool = True
    message: str
    changed: bool
    previous_status: IncidentStatus
    new_status: IncidentStatus
    incident: IncidentOut
