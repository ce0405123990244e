"""
Users module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


def normalize_email(email: str) -> str:
    """Emails are stored and looked up lower-cased and trimmed."""
    return email.strip().lower()


class UserProfile(BaseModel):
    """
    Public view of a user record.

    Never carries the password hash.
    """

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="Email address (normalized)")
    name: Optional[str] = Field(None, description="Display name")
    image: Optional[str] = Field(None, description="Avatar URL")
    email_verified: Optional[datetime] = Field(None, description="When the email was verified")
    created_at: datetime = Field(..., description="Account creation time")
    updated_at: datetime = Field(..., description="Last update time")


class UserCredentials(BaseModel):
    """User record including the password hash, for sign-in only."""

    id: str
    email: str
    name: Optional[str] = None
    password_hash: Optional[str] = None
    created_at: datetime


class UpdateUserRequest(BaseModel):
    """
    Profile update.

    Only name and image are editable; email is fixed at registration.
    """

    name: Optional[str] = Field(None, max_length=200, description="Display name")
    image: Optional[str] = Field(None, max_length=2048, description="Avatar URL")
