"""Caller identity produced by the user directory."""

from pydantic import BaseModel

from citywatch.models.incident import Role


class User(BaseModel):
    """Authenticated viewer. Never carries credentials."""

    id: str
    name: str
    role: Role
    email: str
