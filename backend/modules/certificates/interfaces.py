"""
Certificates module interface.

This is the core business logic interface for the COI tracker.
The API layer depends on ICertificateService for all certificate operations.
"""

from typing import Protocol, runtime_checkable

from .models import (
    InsuranceCertificate,
    CreateCertificateRequest,
    UpdateCertificateRequest,
    ShareLinkResponse,
)


@runtime_checkable
class ICertificateService(Protocol):
    """
    Interface for certificate lifecycle and sharing operations.

    Authenticated operations take the caller's user ID and enforce
    account ownership. Share-token operations are public.
    """

    async def create_certificate(
        self,
        user_id: str,
        request: CreateCertificateRequest,
    ) -> InsuranceCertificate:
        """
        Create a certificate under the caller's default account.

        The account is created on first use. Status is derived from the
        dates at creation time.

        Raises:
            InvalidDateRangeError: If expiration_date <= effective_date
        """
        ...

    async def get_certificate(
        self,
        certificate_id: str,
        user_id: str,
    ) -> InsuranceCertificate:
        """
        Get one of the caller's certificates.

        Raises:
            CertificateNotFoundError: If missing or soft-deleted
            CertificateAccessDeniedError: If owned by another user
        """
        ...

    async def list_certificates(self, user_id: str) -> list[InsuranceCertificate]:
        """
        List the caller's live certificates across all their accounts,
        most recent first.
        """
        ...

    async def update_certificate(
        self,
        certificate_id: str,
        user_id: str,
        request: UpdateCertificateRequest,
    ) -> InsuranceCertificate:
        """
        Apply a partial update.

        If either date is present the resulting pair is re-validated and
        the status re-derived (accepted certificates keep their status).

        Raises:
            CertificateNotFoundError: If missing or soft-deleted
            CertificateAccessDeniedError: If owned by another user
            InvalidDateRangeError: If the resulting dates are inverted
            MissingFieldError: If a field is explicitly null
        """
        ...

    async def delete_certificate(self, certificate_id: str, user_id: str) -> None:
        """
        Soft-delete a certificate.

        Raises:
            CertificateNotFoundError: If missing or already deleted
            CertificateAccessDeniedError: If owned by another user
        """
        ...

    async def can_modify(self, user_id: str, certificate_id: str) -> bool:
        """
        Whether the certificate belongs to one of the caller's accounts.

        False for missing or deleted certificates.
        """
        ...

    async def share_certificate(
        self,
        certificate_id: str,
        user_id: str,
    ) -> ShareLinkResponse:
        """
        Issue a share token, or return the existing one.

        Raises:
            CertificateNotFoundError: If missing or soft-deleted
            CertificateAccessDeniedError: If owned by another user
        """
        ...

    async def view_shared_certificate(self, share_token: str) -> InsuranceCertificate:
        """
        Resolve a certificate by share token and record the first view.

        Raises:
            ShareTokenNotFoundError: If no live certificate has this token
        """
        ...

    async def accept_shared_certificate(self, share_token: str) -> InsuranceCertificate:
        """
        Accept a shared certificate. Accepting twice is a no-op.

        Raises:
            ShareTokenNotFoundError: If no live certificate has this token
        """
        ...
