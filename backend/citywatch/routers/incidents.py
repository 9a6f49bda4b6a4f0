"""API routes for role-scoped incidents and status changes."""

import logging
from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from citywatch.dependencies import get_store, get_viewer_role
from citywatch.reference import CATEGORIES
from citywatch.schemas.incident import (
    IncidentOut,
    IncidentsResponse,
    StatusUpdateIn,
    StatusUpdateOut,
)
from citywatch.services.search import IncidentFilters
from citywatch.services.store import IncidentStore
from citywatch.services.workflow import Outcome

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/incidents", tags=["incidents"])

OUTCOME_STATUS_CODES = {
    Outcome.INVALID_STATUS: 400,
    Outcome.UNAUTHORIZED: 403,
    Outcome.NOT_FOUND: 404,
}


@router.get("", response_model=IncidentsResponse)
async def list_incidents(
    store: Annotated[IncidentStore, Depends(get_store)],
    role: Annotated[str, Depends(get_viewer_role)],
    category: list[str] | None = Query(None, description="Filter by category"),
    status: list[str] | None = Query(None, description="Filter by status"),
    location: list[str] | None = Query(None, description="Filter by location label"),
    since: datetime | None = Query(None, description="Only incidents at or after this time"),
    until: datetime | None = Query(None, description="Only incidents at or before this time"),
    q: str | None = Query(None, description="Search text, type, location and category"),
) -> IncidentsResponse:
    """
    List incidents visible to the viewer's role.

    Filters only narrow the role-scoped view, they never widen it.
    """
    filters = IncidentFilters(
        category=category or [],
        status=status or [],
        location=location or [],
        since=since,
        until=until,
        q=q,
    )
    incidents = store.visible_to(role, filters)

    return IncidentsResponse(
        role=role,
        incidents=[IncidentOut.from_incident(i) for i in incidents],
        total=len(incidents),
    )


@router.get("/categories", response_model=list[str])
async def list_categories(
    store: Annotated[IncidentStore, Depends(get_store)],
    role: Annotated[str, Depends(get_viewer_role)],
) -> list[str]:
    """Categories the viewer's role may see, in display order."""
    visible = store.access.categories_visible_to(role)
    return [category for category in CATEGORIES if category in visible]


@router.get("/locations", response_model=list[str])
async def list_locations(
    store: Annotated[IncidentStore, Depends(get_store)],
) -> list[str]:
    """Location labels with known coordinates."""
    return store.resolver.known_locations()


@router.get("/{incident_id}", response_model=IncidentOut)
async def get_incident(
    incident_id: str,
    store: Annotated[IncidentStore, Depends(get_store)],
    role: Annotated[str, Depends(get_viewer_role)],
) -> IncidentOut:
    """Get one incident. Incidents outside the role's view are reported as missing."""
    incident = store.get_visible(incident_id, role)
    if incident is None:
        raise HTTPException(status_code=404, detail="Incident not found")
    return IncidentOut.from_incident(incident)


@router.patch("/{incident_id}", response_model=StatusUpdateOut)
async def update_incident_status(
    incident_id: str,
    payload: StatusUpdateIn,
    store: Annotated[IncidentStore, Depends(get_store)],
    role: Annotated[str, Depends(get_viewer_role)],
) -> StatusUpdateOut:
    """
    Change an incident's status.

    400 for a status outside New/Acknowledged/Resolved, 403 when the role may
    not act on the incident, 404 for an unknown id or, with write scope
    enforced, an incident outside the role's view.
    """
    result = store.update_status(incident_id, payload.status, role)

    if not result.ok:
        raise HTTPException(
            status_code=OUTCOME_STATUS_CODES[result.outcome],
            detail=result.message,
        )

    incident = store.get(incident_id)
    return StatusUpdateOut(
        message=result.message,
        changed=result.changed,
        previous_status=result.previous_status,
        new_status=result.status,
        incident=IncidentOut.from_incident(incident),
    )
