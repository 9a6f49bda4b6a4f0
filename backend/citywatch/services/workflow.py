"""Incident status workflow (New, Acknowledged, Resolved)."""

from enum import StrEnum

from pydantic import BaseModel

from citywatch.models.incident import Incident, IncidentStatus
from citywatch.services.access import AccessControl


class Outcome(StrEnum):
    """Result kinds of a status change request."""

    OK = "ok"
    INVALID_STATUS = "invalid_status"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"


class TransitionResult(BaseModel):
    """Outcome of a status change request."""

    outcome: Outcome
    incident_id: str
    previous_status: IncidentStatus | None = None
    status: IncidentStatus | None = None
    changed: bool = False
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome == Outcome.OK


class StatusWorkflow:
    """
    Validates and applies status transitions.

    Transitions are unordered: any state may move to any other, including
    Resolved back to New. Requesting the current status is a successful
    no-op. Failed requests leave the incident untouched.
    """

    def __init__(self, access: AccessControl):
        self.access = access

    def request_transition(
        self, incident: Incident, new_status: object, requesting_role: str
    ) -> TransitionResult:
        current = incident.status

        status = IncidentStatus.parse(new_status)
        if status is None:
            allowed = ", ".join(s.value for s in IncidentStatus)
            return TransitionResult(
                outcome=Outcome.INVALID_STATUS,
                incident_id=incident.id,
                previous_status=current,
                status=current,
                message=f"Invalid status {new_status!r}; expected one of {allowed}",
            )

        reason = self.access.authorization_error(incident, requesting_role)
        if reason is not None:
            return TransitionResult(
                outcome=Outcome.UNAUTHORIZED,
                incident_id=incident.id,
                previous_status=current,
                status=current,
                message=reason,
            )

        if status == current:
            return TransitionResult(
                outcome=Outcome.OK,
                incident_id=incident.id,
                previous_status=current,
                status=current,
                changed=False,
                message=f"Status already {current.value}",
            )

        incident.status = status
        return TransitionResult(
            outcome=Outcome.OK,
            incident_id=incident.id,
            previous_status=current,
            status=status,
            changed=True,
            message="Status updated successfully",
        )
