"""
Certificates service implementation.

Orchestrates validation, account resolution, ownership checks, status
derivation and share-token transitions on top of the repositories.
"""

import logging
from typing import Any, Optional

from modules.accounts.repository import AccountRepository
from shared.clock import Clock, utcnow
from shared.ownership import OwnershipChecker

from .interfaces import ICertificateService
from .lifecycle import (
    DEFAULT_SHARE_TOKEN_BYTES,
    derive_status,
    generate_share_token,
    status_after_date_change,
    validate_date_range,
)
from .models import (
    InsuranceCertificate,
    CreateCertificateRequest,
    UpdateCertificateRequest,
    ShareLinkResponse,
)
from .repository import CertificateRepository
from .exceptions import (
    CertificateNotFoundError,
    CertificateAccessDeniedError,
    MissingFieldError,
    ShareTokenNotFoundError,
)

logger = logging.getLogger(__name__)


class CertificateService(ICertificateService):
    """
    Certificate service backed by Supabase repositories.

    Implements ICertificateService. Holds no per-request state; one
    instance serves every request.
    """

    def __init__(
        self,
        repository: CertificateRepository,
        accounts: AccountRepository,
        clock: Clock = utcnow,
        frontend_url: str = "",
        share_token_bytes: int = DEFAULT_SHARE_TOKEN_BYTES,
    ):
        self._repo = repository
        self._accounts = accounts
        self._clock = clock
        self._frontend_url = frontend_url.rstrip("/")
        self._share_token_bytes = share_token_bytes
        self._ownership: OwnershipChecker[InsuranceCertificate] = OwnershipChecker(
            load=repository.find_by_id,
            owner_of=lambda certificate: certificate.account_id,
            owner_keys_for=accounts.list_account_ids,
        )

    # -------------------------------------------------------------------------
    # Authenticated CRUD
    # -------------------------------------------------------------------------

    async def create_certificate(
        self,
        user_id: str,
        request: CreateCertificateRequest,
    ) -> InsuranceCertificate:
        """Create a certificate with status derived from its dates."""
        validate_date_range(request.effective_date, request.expiration_date)

        account = self._accounts.get_or_create_default(user_id)
        status = derive_status(request.effective_date, request.expiration_date, self._clock())

        data = {
            "certificate_number": request.certificate_number,
            "insured_party": request.insured_party,
            "insurance_company": request.insurance_company,
            "effective_date": request.effective_date.isoformat(),
            "expiration_date": request.expiration_date.isoformat(),
            "status": status.value,
            "account_id": account.id,
        }
        certificate = self._repo.create(data)
        logger.info(
            f"Created certificate {certificate.id} for account {account.id} "
            f"with status {status.value}"
        )
        return certificate

    async def get_certificate(
        self,
        certificate_id: str,
        user_id: str,
    ) -> InsuranceCertificate:
        return self._load_owned(certificate_id, user_id)

    async def list_certificates(self, user_id: str) -> list[InsuranceCertificate]:
        account_ids = self._accounts.list_account_ids(user_id)
        return self._repo.find_by_account_ids(account_ids)

    async def update_certificate(
        self,
        certificate_id: str,
        user_id: str,
        request: UpdateCertificateRequest,
    ) -> InsuranceCertificate:
        """Apply only the supplied fields, re-deriving status on date edits."""
        existing = self._load_owned(certificate_id, user_id)

        patch = request.model_dump(exclude_unset=True)
        nulls = sorted(field for field, value in patch.items() if value is None)
        if nulls:
            raise MissingFieldError(nulls)

        data: dict[str, Any] = {
            field: value for field, value in patch.items()
            if field not in ("effective_date", "expiration_date")
        }

        if "effective_date" in patch or "expiration_date" in patch:
            effective_date = patch.get("effective_date", existing.effective_date)
            expiration_date = patch.get("expiration_date", existing.expiration_date)
            validate_date_range(effective_date, expiration_date)

            if "effective_date" in patch:
                data["effective_date"] = effective_date.isoformat()
            if "expiration_date" in patch:
                data["expiration_date"] = expiration_date.isoformat()

            status = status_after_date_change(
                existing.accepted_at, effective_date, expiration_date, self._clock()
            )
            if status is not None:
                data["status"] = status.value

        updated = self._repo.update(certificate_id, data)
        if updated is None:
            # Deleted between the ownership check and the write
            raise CertificateNotFoundError(certificate_id)
        return updated

    async def delete_certificate(self, certificate_id: str, user_id: str) -> None:
        self._load_owned(certificate_id, user_id)

        if not self._repo.set_deleted_at(certificate_id, self._clock()):
            raise CertificateNotFoundError(certificate_id)
        logger.info(f"Soft-deleted certificate {certificate_id}")

    async def can_modify(self, user_id: str, certificate_id: str) -> bool:
        return self._ownership.can_modify(user_id, certificate_id)

    # -------------------------------------------------------------------------
    # Sharing
    # -------------------------------------------------------------------------

    async def share_certificate(
        self,
        certificate_id: str,
        user_id: str,
    ) -> ShareLinkResponse:
        """Issue a share token once; later calls return the same token."""
        certificate = self._load_owned(certificate_id, user_id)

        if certificate.share_token is None:
            token = generate_share_token(self._share_token_bytes)
            shared = self._repo.set_share_token(certificate_id, token)
            if shared is None:
                # Someone else issued a token first, or the row went away
                shared = self._repo.find_by_id(certificate_id)
                if shared is None:
                    raise CertificateNotFoundError(certificate_id)
            else:
                logger.info(f"Issued share token for certificate {certificate_id}")
            certificate = shared

        return ShareLinkResponse(
            share_token=certificate.share_token,
            share_url=self._share_url(certificate.share_token),
            certificate=certificate,
        )

    async def view_shared_certificate(self, share_token: str) -> InsuranceCertificate:
        """Public read; the first view stamps viewed_at, later views don't."""
        certificate = self._find_by_token(share_token)
        if certificate.viewed_at is not None:
            return certificate

        viewed = self._repo.mark_viewed(share_token, self._clock())
        if viewed is None:
            # A concurrent request recorded the first view
            return self._find_by_token(share_token)

        logger.info(f"Certificate {viewed.id} viewed through share link")
        return viewed

    async def accept_shared_certificate(self, share_token: str) -> InsuranceCertificate:
        """Public accept; idempotent once accepted."""
        certificate = self._find_by_token(share_token)
        if certificate.accepted_at is not None:
            return certificate

        accepted = self._repo.mark_accepted(share_token, self._clock())
        if accepted is None:
            return self._find_by_token(share_token)

        logger.info(f"Certificate {accepted.id} accepted through share link")
        return accepted

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _load_owned(self, certificate_id: str, user_id: str) -> InsuranceCertificate:
        """Load a live certificate and verify the caller owns it."""
        certificate = self._repo.find_by_id(certificate_id)
        if certificate is None:
            raise CertificateNotFoundError(certificate_id)
        if not self._ownership.owns(user_id, certificate):
            logger.warning(f"User {user_id} denied access to certificate {certificate_id}")
            raise CertificateAccessDeniedError(certificate_id, user_id)
        return certificate

    def _find_by_token(self, share_token: str) -> InsuranceCertificate:
        certificate = self._repo.find_by_share_token(share_token)
        if certificate is None:
            raise ShareTokenNotFoundError()
        return certificate

    def _share_url(self, share_token: Optional[str]) -> str:
        return f"{self._frontend_url}/public/certificates/{share_token}"
