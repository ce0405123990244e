"""
Authentication module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, EmailStr


class SessionTokenPayload(BaseModel):
    """Claims carried by a session token."""

    sub: str = Field(..., description="Subject (user ID)")
    email: str = Field(..., description="User's email")
    iss: str = Field(..., description="Issuer")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")


class RegisterRequest(BaseModel):
    """Registration with email and password."""

    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., min_length=1, max_length=1024, description="Password")
    name: Optional[str] = Field(None, max_length=200, description="Display name")


class SignInRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class SessionUser(BaseModel):
    """The signed-in user as exposed to the client."""

    id: str
    email: str
    name: Optional[str] = None


class RegisteredUser(SessionUser):
    created_at: datetime


class RegisterResponse(BaseModel):
    message: str = "User created successfully"
    user: RegisteredUser


class SignInResponse(BaseModel):
    """
    Sign-in result.

    The token is also set as an HttpOnly cookie; bearer clients can use
    the body copy instead.
    """

    user: SessionUser
    access_token: str
    token_type: str = "bearer"


class SessionResponse(BaseModel):
    user: Optional[SessionUser] = None


class MessageResponse(BaseModel):
    message: str
