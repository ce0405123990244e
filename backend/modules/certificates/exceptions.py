"""
Certificates module exceptions.
"""

from datetime import datetime

from shared.exceptions import (
    NotFoundError,
    ValidationError,
    AuthorizationError,
)


class CertificateNotFoundError(NotFoundError):
    """Raised when a certificate is missing or soft-deleted."""

    def __init__(self, certificate_id: str):
        super().__init__(
            "Certificate not found",
            code="CERTIFICATE_NOT_FOUND",
            details={"certificate_id": certificate_id},
        )


class ShareTokenNotFoundError(NotFoundError):
    """Raised when a share token matches no live certificate."""

    def __init__(self):
        # The token itself is a credential and is not echoed back
        super().__init__("Certificate not found", code="SHARE_TOKEN_NOT_FOUND")


class CertificateAccessDeniedError(AuthorizationError):
    """Raised when the caller's accounts do not include the certificate's account."""

    def __init__(self, certificate_id: str, user_id: str):
        super().__init__(
            "You can only access your own certificates",
            code="CERTIFICATE_ACCESS_DENIED",
            details={"certificate_id": certificate_id, "user_id": user_id},
        )


class InvalidDateRangeError(ValidationError):
    """Raised when expiration_date is not strictly after effective_date."""

    def __init__(self, effective_date: datetime, expiration_date: datetime):
        super().__init__(
            "Expiration date must be after effective date",
            code="INVALID_DATE_RANGE",
            details={
                "effective_date": effective_date.isoformat(),
                "expiration_date": expiration_date.isoformat(),
            },
        )


class MissingFieldError(ValidationError):
    """Raised when a required field is explicitly set to null."""

    def __init__(self, fields: list[str]):
        super().__init__(
            f"Missing required fields: {', '.join(fields)}",
            code="MISSING_FIELDS",
            details={"fields": fields},
        )
