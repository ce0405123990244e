"""
Certificates module data models.

These models define the insurance certificate record and the requests
that create, update and share it.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from shared.clock import ensure_utc


class CertificateStatus(str, Enum):
    """Certificate status, derived from dates or set by acceptance."""

    PENDING = "pending"    # Not yet effective
    ACTIVE = "active"      # Within [effective_date, expiration_date]
    EXPIRED = "expired"    # Past expiration_date
    ACCEPTED = "accepted"  # Accepted through the share link (terminal)


class CreateCertificateRequest(BaseModel):
    """Request to create a certificate. Status is never client-supplied."""

    certificate_number: str = Field(..., min_length=1, max_length=255)
    insured_party: str = Field(..., min_length=1, max_length=255)
    insurance_company: str = Field(..., min_length=1, max_length=255)
    effective_date: datetime = Field(..., description="Coverage start (ISO-8601)")
    expiration_date: datetime = Field(..., description="Coverage end (ISO-8601)")

    @field_validator("effective_date", "expiration_date")
    @classmethod
    def normalize_dates(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class UpdateCertificateRequest(BaseModel):
    """
    Partial update. Only fields present in the request body are applied.
    """

    certificate_number: Optional[str] = Field(None, min_length=1, max_length=255)
    insured_party: Optional[str] = Field(None, min_length=1, max_length=255)
    insurance_company: Optional[str] = Field(None, min_length=1, max_length=255)
    effective_date: Optional[datetime] = None
    expiration_date: Optional[datetime] = None

    @field_validator("effective_date", "expiration_date")
    @classmethod
    def normalize_dates(cls, value: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(value) if value is not None else None


class InsuranceCertificate(BaseModel):
    """
    Full certificate record as seen by its owner.
    """

    id: str = Field(..., description="Certificate ID (UUID)")
    certificate_number: str = Field(..., description="Certificate number")
    insured_party: str = Field(..., description="Insured party name")
    insurance_company: str = Field(..., description="Issuing insurer")
    effective_date: datetime = Field(..., description="Coverage start")
    expiration_date: datetime = Field(..., description="Coverage end")
    status: CertificateStatus = Field(..., description="Current status")
    account_id: str = Field(..., description="Owning account ID")

    # Sharing
    share_token: Optional[str] = Field(None, description="Public share token, if shared")
    viewed_at: Optional[datetime] = Field(None, description="First public view")
    accepted_at: Optional[datetime] = Field(None, description="Public acceptance time")

    # Timestamps
    created_at: datetime = Field(..., description="Creation time")
    updated_at: datetime = Field(..., description="Last update time")


class PublicCertificate(BaseModel):
    """Certificate as shown to a third party holding the share link."""

    id: str
    certificate_number: str
    insured_party: str
    insurance_company: str
    effective_date: datetime
    expiration_date: datetime
    status: CertificateStatus
    viewed_at: Optional[datetime] = None
    accepted_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_certificate(cls, certificate: InsuranceCertificate) -> "PublicCertificate":
        return cls(**certificate.model_dump(exclude={"account_id", "share_token"}))


class ShareLinkResponse(BaseModel):
    """Result of sharing a certificate."""

    share_token: str = Field(..., description="Opaque public token")
    share_url: str = Field(..., description="Link to hand to the certificate holder")
    certificate: InsuranceCertificate
