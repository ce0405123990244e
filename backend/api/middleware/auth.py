"""
Session authentication dependencies.

Accepts the session token either as an Authorization bearer header or
as the session cookie set at sign-in. The header wins when both are sent.
"""

from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from shared.config import get_settings
from shared.exceptions import AuthenticationError
from shared.models import AuthenticatedUser
from modules.auth.exceptions import MissingTokenError
from modules.auth.tokens import decode_session_token, user_from_payload

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


def extract_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
) -> Optional[str]:
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(get_settings().session_cookie_name) or None


def authenticate_token(token: str) -> AuthenticatedUser:
    """
    Decode a session token into an AuthenticatedUser.

    Raises:
        AuthenticationError: If the token is invalid or expired
    """
    payload = decode_session_token(token, get_settings())
    return user_from_payload(payload)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    token = extract_token(request, credentials)
    if token is None:
        raise MissingTokenError()
    return authenticate_token(token)


async def get_optional_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[AuthenticatedUser]:
    """
    Dependency that optionally extracts user if authenticated.

    An invalid or expired token is treated as signed out.
    """
    token = extract_token(request, credentials)
    if token is None:
        return None

    try:
        return authenticate_token(token)
    except AuthenticationError:
        return None
