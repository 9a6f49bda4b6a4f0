"""Login route: credential check against the static user directory."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request

from citywatch.config import get_settings
from citywatch.dependencies import get_user_directory, limiter
from citywatch.schemas.auth import LoginIn, LoginOut
from citywatch.services.auth import UserDirectory

logger = logging.getLogger(__name__)
settings = get_settings()
router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginOut)
@limiter.limit(settings.login_rate_limit)
async def login(
    request: Request,
    credentials: LoginIn,
    directory: Annotated[UserDirectory, Depends(get_user_directory)],
) -> LoginOut:
    """
    Check credentials and return the caller identity.

    The client sends the returned role back in the ``X-Role`` header.
    """
    user = directory.authenticate(credentials.email, credentials.password)
    if user is None:
        logger.info(f"Failed login for {credentials.email!r}")
        raise HTTPException(status_code=401, detail="Invalid credentials")

    logger.info(f"Login: {user.email} as {user.role.value}")
    return LoginOut(user=user)
