"""Domain models."""

from citywatch.models.incident import (
    Coordinates,
    Incident,
    IncidentCategory,
    IncidentStatus,
    Role,
)
from citywatch.models.user import User

__all__ = [
    "Coordinates",
    "Incident",
    "IncidentCategory",
    "IncidentStatus",
    "Role",
    "User",
]
