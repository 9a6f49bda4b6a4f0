"""In-memory incident store: runs the ingestion pipeline and mediates status changes."""

import logging
from collections.abc import Iterable
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Protocol

from citywatch.config import Settings
from citywatch.exceptions import LoadFailure
from citywatch.models.incident import Incident, IncidentStatus
from citywatch.services.access import AccessControl
from citywatch.services.geo import GeoResolver
from citywatch.services.ingestion import RecordIngestor, load_table
from citywatch.services.search import IncidentFilters, apply_filters
from citywatch.services.workflow import Outcome, StatusWorkflow, TransitionResult

logger = logging.getLogger(__name__)


class StatusSink(Protocol):
    """Persistence collaborator, called after a status actually changed."""

    def record_status(self, incident: Incident, previous: IncidentStatus) -> None: ...


class LoggingStatusSink:
    """Default sink: status changes only live in memory and are logged."""

    def record_status(self, incident: Incident, previous: IncidentStatus) -> None:
        logger.info(
            f"Incident {incident.id} ({incident.category}) status "
            f"{previous.value} -> {incident.status.value}"
        )


class IncidentStore:
    """
    Holds the incident collection for the running process.

    Features:
    - Load pipeline: raw rows -> incidents -> coordinates attached
    - Role-scoped views and lookups by id
    - Status changes checked by the workflow, then handed to the sink

    No locking is done here. Concurrent writers to the same incident resolve
    as last-write-wins; a sink that needs ordering must serialize per id.
    """

    def __init__(
        self,
        ingestor: RecordIngestor | None = None,
        resolver: GeoResolver | None = None,
        access: AccessControl | None = None,
        workflow: StatusWorkflow | None = None,
        sink: StatusSink | None = None,
        source_path: str | Path | None = None,
    ):
        self.ingestor = ingestor or RecordIngestor()
        self.resolver = resolver or GeoResolver()
        self.access = access or AccessControl()
        self.workflow = workflow or StatusWorkflow(self.access)
        self.sink = sink or LoggingStatusSink()
        self.source_path = source_path

        self._incidents: list[Incident] = []
        self._by_id: dict[str, Incident] = {}
        self.loaded_at: datetime | None = None
        self.last_error: str | None = None

    @classmethod
    def from_settings(cls, settings: Settings, sink: StatusSink | None = None) -> "IncidentStore":
        access = AccessControl(enforce_write_scope=settings.enforce_write_scope)
        return cls(access=access, sink=sink, source_path=settings.incidents_csv_path)

    def __len__(self) -> int:
        return len(self._incidents)

    def load_from_rows(self, rows: Iterable[Any]) -> int:
        """Run the pipeline over already-materialized rows and replace the collection."""
        incidents = self.resolver.attach_all(self.ingestor.ingest(rows))

        self._incidents = incidents
        self._by_id = {incident.id: incident for incident in incidents}
        self.loaded_at = datetime.now(UTC)
        self.last_error = None

        unknown = sum(1 for i in incidents if not self.resolver.is_known(i.location))
        if unknown:
            logger.info(f"{unknown} incidents have unknown locations; using city center")
        logger.info(f"Loaded {len(incidents)} incidents")
        return len(incidents)

    def load_from_csv(self, path: str | Path | None = None) -> int:
        """
        Load from a CSV file.

        On LoadFailure the current collection is kept and the error re-raised.
        """
        path = path or self.source_path
        if path is None:
            raise LoadFailure("<unset>", "no incidents CSV path configured")

        try:
            rows = load_table(path)
        except LoadFailure as e:
            self.last_error = str(e)
            logger.error(f"Incident load failed: {e}")
            raise

        self.source_path = path
        return self.load_from_rows(rows)

    def reload(self) -> int:
        return self.load_from_csv()

    def all(self) -> list[Incident]:
        return list(self._incidents)

    def visible_to(
        self, role: str, filters: IncidentFilters | None = None
    ) -> list[Incident]:
        """Role-scoped view, optionally narrowed by viewer filters."""
        return apply_filters(self.access.filter_by_role(self._incidents, role), filters)

    def get(self, incident_id: str) -> Incident | None:
        return self._by_id.get(incident_id)

    def get_visible(self, incident_id: str, role: str) -> Incident | None:
        """Lookup by id that treats invisible incidents as missing."""
        incident = self._by_id.get(incident_id)
        if incident is None or not self.access.can_view(incident, role):
            return None
        return incident

    def update_status(
        self, incident_id: str, new_status: object, role: str
    ) -> TransitionResult:
        """
        Change one incident's status.

        With write scope enforced, an incident the role cannot see is
        reported as NOT_FOUND, the same as an unknown id. If the sink
        raises, the in-memory status is rolled back before the error
        propagates.
        """
        incident = self._by_id.get(incident_id)
        # Under write scope, incidents outside the role's view do not exist for it
        if incident is None or (
            self.access.enforce_write_scope and not self.access.can_view(incident, role)
        ):
            return TransitionResult(
                outcome=Outcome.NOT_FOUND,
                incident_id=incident_id,
                message="Incident not found",
            )

        previous = incident.status
        result = self.workflow.request_transition(incident, new_status, role)

        if not result.ok:
            logger.warning(
                f"Rejected status change on incident {incident_id} by {role!r}: "
                f"{result.outcome.value} ({result.message})"
            )
            return result

        if result.changed:
            try:
                self.sink.record_status(incident, previous)
            except Exception:
                incident.status = previous
                raise

        return result
