"""Viewer-side incident filters (category, status, location, time, text)."""

from collections.abc import Iterable
from datetime import UTC, datetime

from pydantic import BaseModel, Field

from citywatch.models.incident import Incident


def _aligned(a: datetime, b: datetime) -> tuple[datetime, datetime]:
    """
    Make two datetimes comparable when only one of them is aware.

    Naive values are taken as UTC, so the aware one is converted to UTC
    before its tzinfo is dropped.
    """
    if (a.tzinfo is None) != (b.tzinfo is None):
        return _naive_utc(a), _naive_utc(b)
    return a, b


def _naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


class IncidentFilters(BaseModel):
    """
    Narrowing filters applied after the role filter.

    An empty list means "no constraint" for that field.
    """

    category: list[str] = Field(default_factory=list)
    status: list[str] = Field(default_factory=list)
    location: list[str] = Field(default_factory=list)
    since: datetime | None = None
    until: datetime | None = None
    q: str | None = None

    def matches(self, incident: Incident) -> bool:
        if self.category and incident.category not in self.category:
            return False
        if self.status and incident.status not in self.status:
            return False
        if self.location and incident.location not in self.location:
            return False

        if self.since or self.until:
            if incident.time is None:
                return False
            if self.since:
                when, since = _aligned(incident.time, self.since)
                if when < since:
                    return False
            if self.until:
                when, until = _aligned(incident.time, self.until)
                if when > until:
                    return False

        term = self.q.strip().lower() if self.q else ""
        if term:
            haystack = " ".join(
                (incident.text, incident.type, incident.location, incident.category)
            ).lower()
            if term not in haystack:
                return False

        return True


def apply_filters(
    incidents: Iterable[Incident], filters: IncidentFilters | None
) -> list[Incident]:
    """Keep incidents matching all filters, preserving order."""
    if filters is None:
        return list(incidents)
    return [incident for incident in incidents if filters.matches(incident)]
