"""Pydantic schemas for login."""

from pydantic import BaseModel

from citywatch.models.user import User


class LoginIn(BaseModel):
    """Login credentials."""

    email: str
    password: str


class LoginOut(BaseModel):
    """Identity returned after a successful login."""

    user: User
