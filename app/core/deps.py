"""
FastAPI dependencies for authentication and authorization.

A bearer token is optional on every route: a valid one identifies the caller,
a missing or broken one leaves the caller anonymous. Admin-only routes then
require the admin claim on top of that.
"""

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError

from app.core.exceptions import UnauthorizedError
from app.core.security import decode_token

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme (Authorization: Bearer <token>)
# auto_error=False so a missing header is reported as our own 401 body
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[dict]:
    """
    Extract the token claims of the current caller.

    Returns None if no token is provided or the token does not decode
    (expired, wrong signature, malformed). Callers that need an identity
    must check for None themselves.
    """
    if not credentials:
        return None

    try:
        payload = decode_token(credentials.credentials)
    except JWTError:
        logger.info("Ignoring invalid bearer token")
        return None

    if payload.get("sub") is None:
        return None

    return payload


async def get_admin_user(
    user: Optional[dict] = Depends(get_current_user),
) -> dict:
    """
    Require a caller whose token carries is_admin=true.

    Anonymous callers and regular users are both rejected with 401.

    Raises:
        UnauthorizedError: If the caller is not an admin
    """
    if user is None or not user.get("is_admin"):
        raise UnauthorizedError()
    return user
