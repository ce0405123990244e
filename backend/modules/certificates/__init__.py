"""
Certificates module.

Certificate-of-insurance records: CRUD, status lifecycle and public
sharing by token.

Public API:
- ICertificateService: Interface for certificate operations
- InsuranceCertificate: Full certificate record
- PublicCertificate: What a share-link holder sees
- CertificateStatus: pending / active / expired / accepted
- derive_status: Pure status derivation
"""

from .interfaces import ICertificateService
from .lifecycle import derive_status, generate_share_token
from .models import (
    CertificateStatus,
    CreateCertificateRequest,
    UpdateCertificateRequest,
    InsuranceCertificate,
    PublicCertificate,
    ShareLinkResponse,
)
from .exceptions import (
    CertificateNotFoundError,
    CertificateAccessDeniedError,
    ShareTokenNotFoundError,
    InvalidDateRangeError,
    MissingFieldError,
)

__all__ = [
    # Interface
    "ICertificateService",
    # Lifecycle
    "derive_status",
    "generate_share_token",
    # Models
    "CertificateStatus",
    "CreateCertificateRequest",
    "UpdateCertificateRequest",
    "InsuranceCertificate",
    "PublicCertificate",
    "ShareLinkResponse",
    # Exceptions
    "CertificateNotFoundError",
    "CertificateAccessDeniedError",
    "ShareTokenNotFoundError",
    "InvalidDateRangeError",
    "MissingFieldError",
]
