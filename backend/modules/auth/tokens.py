"""
Session token encoding and decoding (HS256 JWT via PyJWT).
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from shared.config import Settings
from shared.models import AuthenticatedUser

from .models import SessionTokenPayload
from .exceptions import (
    AuthNotConfiguredError,
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
)

ALGORITHM = "HS256"


def encode_session_token(
    user_id: str,
    email: str,
    settings: Settings,
    now: Optional[datetime] = None,
) -> str:
    if not settings.auth_secret:
        raise AuthNotConfiguredError()

    issued_at = now or datetime.now(timezone.utc)
    expires_at = issued_at + timedelta(days=settings.session_max_age_days)
    payload = {
        "sub": user_id,
        "email": email,
        "iss": settings.jwt_issuer,
        "iat": int(issued_at.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    return jwt.encode(payload, settings.auth_secret, algorithm=ALGORITHM)


def decode_session_token(token: str, settings: Settings) -> SessionTokenPayload:
    """
    Decode and validate a session token.

    Raises:
        MissingTokenError: If the token is empty
        AuthNotConfiguredError: If no signing secret is configured
        ExpiredTokenError: If the token has expired
        InvalidTokenError: For any other decoding failure
    """
    if not token:
        raise MissingTokenError()
    if not settings.auth_secret:
        raise AuthNotConfiguredError()

    try:
        payload = jwt.decode(
            token,
            settings.auth_secret,
            algorithms=[ALGORITHM],
            issuer=settings.jwt_issuer,
            options={"require": ["sub", "exp", "iat"]},
        )
        return SessionTokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise ExpiredTokenError()
    except jwt.InvalidTokenError as e:
        raise InvalidTokenError(f"Invalid token: {str(e)}")
    except ValueError:
        # Claims present but of the wrong shape
        raise InvalidTokenError()


def user_from_payload(payload: SessionTokenPayload) -> AuthenticatedUser:
    return AuthenticatedUser(
        id=payload.sub,
        email=payload.email,
        signed_in_at=datetime.fromtimestamp(payload.iat, tz=timezone.utc),
    )
