"""Shared FastAPI dependencies."""

from typing import Annotated

from fastapi import Header, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from citywatch.models.incident import Role
from citywatch.services.auth import UserDirectory
from citywatch.services.store import IncidentStore

# Rate limiter
limiter = Limiter(key_func=get_remote_address)

_user_directory = UserDirectory()


def get_store(request: Request) -> IncidentStore:
    """The process-wide incident store, built in the app lifespan."""
    return request.app.state.store


def get_user_directory() -> UserDirectory:
    return _user_directory


def get_viewer_role(
    x_role: Annotated[str | None, Header(description="Viewer role")] = None,
) -> str:
    """
    Viewer role for this request.

    A missing header means public. Unknown values are passed through and
    filtered fail-closed by access control.
    """
    if x_role is None or not x_role.strip():
        return Role.PUBLIC.value
    return x_role.strip().lower()
