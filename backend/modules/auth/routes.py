"""
Authentication API endpoints.

Sign-in sets the session cookie and also returns the token in the body,
so both browser and bearer clients are served.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Response

from api.middleware.auth import get_optional_user
from api.dependencies import get_auth_service
from shared.config import get_settings
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import (
    RegisterRequest,
    RegisterResponse,
    RegisteredUser,
    SignInRequest,
    SignInResponse,
    SessionResponse,
    MessageResponse,
)

router = APIRouter()


def _set_session_cookie(response: Response, token: str) -> None:
    settings = get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_max_age_days * 24 * 60 * 60,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
        path="/",
    )


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> RegisterResponse:
    """
    Register with email and password.

    Returns 409 if the email is already registered.
    """
    user = await service.register(request)
    return RegisterResponse(
        user=RegisteredUser(
            id=user.id,
            email=user.email,
            name=user.name,
            created_at=user.created_at,
        )
    )


@router.post("/signin", response_model=SignInResponse)
async def sign_in(
    request: SignInRequest,
    response: Response,
    service: IAuthService = Depends(get_auth_service),
) -> SignInResponse:
    """
    Sign in with email and password.
    """
    user = await service.authenticate(request.email, request.password)
    token = service.issue_session_token(user)
    _set_session_cookie(response, token)
    return SignInResponse(user=user, access_token=token)


@router.get("/session", response_model=SessionResponse)
async def get_session(
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: IAuthService = Depends(get_auth_service),
) -> SessionResponse:
    """
    Current session user, or {"user": null} when signed out.
    """
    if user is None:
        return SessionResponse(user=None)
    return SessionResponse(user=await service.get_session_user(user.id))


@router.post("/signout", response_model=MessageResponse)
async def sign_out(response: Response) -> MessageResponse:
    settings = get_settings()
    response.delete_cookie(key=settings.session_cookie_name, path="/")
    return MessageResponse(message="Signed out")
