"""Pydantic schemas for API request/response validation."""

from citywatch.schemas.auth import LoginIn, LoginOut
from citywatch.schemas.incident import (
    IncidentOut,
    IncidentsResponse,
    StatusUpdateIn,
    StatusUpdateOut,
)

__all__ = [
    "IncidentOut",
    "IncidentsResponse",
    "LoginIn",
    "LoginOut",
    "StatusUpdateIn",
    "StatusUpdateOut",
]
