# This project was developed with assistance from AI tools.
"""
HTTP Basic gate for the admin endpoints.

The owner routes are open; only ``/api/admin/*`` needs credentials. They are
checked against SQLADMIN_USER / SQLADMIN_PASSWORD, the same pair that guards
the SQLAdmin dashboard.

Set AUTH_DISABLED=true to bypass the check (tests / local dev).
"""

import logging
import secrets
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from ..core.config import settings

logger = logging.getLogger(__name__)

_basic = HTTPBasic(auto_error=False)


def credentials_match(credentials: HTTPBasicCredentials) -> bool:
    """Constant-time comparison of both username and password."""
    user_ok = secrets.compare_digest(
        credentials.username.encode(), settings.SQLADMIN_USER.encode()
    )
    password_ok = secrets.compare_digest(
        credentials.password.encode(), settings.SQLADMIN_PASSWORD.encode()
    )
    return user_ok and password_ok


async def require_admin(
    credentials: Annotated[HTTPBasicCredentials | None, Depends(_basic)],
) -> str:
    """FastAPI dependency: return the admin username or raise 401."""
    if settings.AUTH_DISABLED:
        return settings.SQLADMIN_USER

    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing admin credentials",
            headers={"WWW-Authenticate": "Basic"},
        )

    if not credentials_match(credentials):
        logger.warning("Admin auth denied for user=%s", credentials.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid admin credentials",
            headers={"WWW-Authenticate": "Basic"},
        )

    return credentials.username
