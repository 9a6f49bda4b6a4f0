"""Health, readiness and reload endpoints."""

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from citywatch.dependencies import get_store, get_viewer_role
from citywatch.exceptions import LoadFailure
from citywatch.models.incident import IncidentStatus, Role
from citywatch.services.store import IncidentStore

router = APIRouter(tags=["health"])


class DataSourceStatus(BaseModel):
    """Status of the incident source table."""

    source: str | None
    loaded_at: datetime | None
    record_count: int
    by_status: dict[str, int]
    last_error: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    incidents: DataSourceStatus


@router.get("/health", response_model=HealthResponse)
async def health_check(
    store: Annotated[IncidentStore, Depends(get_store)],
) -> HealthResponse:
    """
    Health check endpoint with load status.

    ``degraded`` means the last load attempt failed.
    """
    incidents = store.all()
    by_status = {s.value: 0 for s in IncidentStatus}
    for incident in incidents:
        by_status[incident.status.value] += 1

    return HealthResponse(
        status="degraded" if store.last_error else "healthy",
        timestamp=datetime.now(UTC),
        incidents=DataSourceStatus(
            source=str(store.source_path) if store.source_path else None,
            loaded_at=store.loaded_at,
            record_count=len(incidents),
            by_status=by_status,
            last_error=store.last_error,
        ),
    )


class ReloadResult(BaseModel):
    """Result of a manual reload."""

    source: str
    records_loaded: int
    message: str


@router.post("/reload", response_model=ReloadResult)
async def reload_incidents(
    store: Annotated[IncidentStore, Depends(get_store)],
    role: Annotated[str, Depends(get_viewer_role)],
) -> ReloadResult:
    """
    Re-read the source table.

    Ids are positional, so they restart from zero and in-memory status
    changes are discarded. Only roles that may change statuses (known,
    non-public) may reload.
    """
    if role == Role.PUBLIC or not store.access.is_known_role(role):
        raise HTTPException(status_code=403, detail="Reload requires an operational role")

    try:
        count = store.reload()
    except LoadFailure as e:
        raise HTTPException(status_code=503, detail=str(e)) from e

    return ReloadResult(
        source=str(store.source_path),
        records_loaded=count,
        message=f"Successfully loaded {count} incidents",
    )


@router.get("/ready")
async def readiness_check() -> dict:
    """Readiness check for container orchestration."""
    return {"status": "ready"}


@router.get("/live")
async def liveness_check() -> dict:
    """Liveness check for container orchestration."""
    return {"status": "alive"}
