"""
Accounts module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


# Provider used for email/password users
CREDENTIALS_PROVIDER = "credentials"


class Account(BaseModel):
    """
    Grouping entity between a user and the certificates they own.

    Email/password users get one default account with the credentials
    provider; other providers can attach further accounts later.
    """

    id: str = Field(..., description="Account ID (UUID)")
    user_id: str = Field(..., description="Owning user ID")
    type: str = Field(default=CREDENTIALS_PROVIDER, description="Account type")
    provider: str = Field(default=CREDENTIALS_PROVIDER, description="Identity provider")
    provider_account_id: str = Field(..., description="ID of the user at the provider")
    created_at: Optional[datetime] = Field(None, description="Creation time")
