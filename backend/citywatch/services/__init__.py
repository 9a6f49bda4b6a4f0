"""Core services: ingestion, geo resolution, access control and workflow."""

from citywatch.services.access import AccessControl
from citywatch.services.auth import UserDirectory
from citywatch.services.geo import GeoResolver
from citywatch.services.ingestion import RecordIngestor, load_table
from citywatch.services.store import IncidentStore, LoggingStatusSink, StatusSink
from citywatch.services.workflow import Outcome, StatusWorkflow, TransitionResult

__all__ = [
    "AccessControl",
    "GeoResolver",
    "IncidentStore",
    "LoggingStatusSink",
    "Outcome",
    "RecordIngestor",
    "StatusSink",
    "StatusWorkflow",
    "TransitionResult",
    "UserDirectory",
    "load_table",
]
