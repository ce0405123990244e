"""
Certificate repository for database access.

Encapsulates all Supabase queries and data mapping for the
insurance_certificates table. Every read and write filters out
soft-deleted rows (deleted_at is not null).
"""

from datetime import datetime
from typing import Optional, Any

from postgrest.exceptions import APIError

from shared.repository import BaseRepository
from .models import CertificateStatus, InsuranceCertificate


TABLE = "insurance_certificates"


class CertificateRepository(BaseRepository[InsuranceCertificate]):
    """
    Repository for certificate data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying account ownership.
    """

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def find_by_id(self, certificate_id: str) -> Optional[InsuranceCertificate]:
        """Get a live certificate by ID."""
        result = (
            self._db.table(TABLE)
            .select("*")
            .eq("id", certificate_id)
            .is_("deleted_at", "null")
            .execute()
        )
        row = self._first(result.data)
        return self._map_to_certificate(row) if row else None

    def find_by_account_ids(self, account_ids: list[str]) -> list[InsuranceCertificate]:
        """
        Live certificates across the given accounts, newest first.
        """
        if not account_ids:
            return []

        result = (
            self._db.table(TABLE)
            .select("*")
            .in_("account_id", account_ids)
            .is_("deleted_at", "null")
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_to_certificate(row) for row in result.data]

    def find_by_share_token(self, share_token: str) -> Optional[InsuranceCertificate]:
        """Get a live certificate by its public share token."""
        result = (
            self._db.table(TABLE)
            .select("*")
            .eq("share_token", share_token)
            .is_("deleted_at", "null")
            .execute()
        )
        row = self._first(result.data)
        return self._map_to_certificate(row) if row else None

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def create(self, data: dict[str, Any]) -> InsuranceCertificate:
        """
        Insert a certificate.

        Args:
            data: Column values (account_id, dates as ISO strings, status, ...)
        """
        result = self._db.table(TABLE).insert(data).execute()
        return self._map_to_certificate(result.data[0])

    def update(self, certificate_id: str, data: dict[str, Any]) -> Optional[InsuranceCertificate]:
        """
        Patch the given columns of a live certificate.

        Returns:
            Updated certificate, or None if it is missing or deleted.
        """
        payload = {**data, "updated_at": self._now_iso()}
        result = (
            self._db.table(TABLE)
            .update(payload)
            .eq("id", certificate_id)
            .is_("deleted_at", "null")
            .execute()
        )
        row = self._first(result.data)
        return self._map_to_certificate(row) if row else None

    def set_deleted_at(self, certificate_id: str, deleted_at: datetime) -> bool:
        """
        Soft-delete a certificate.

        Returns:
            True if a live row was marked deleted.
        """
        result = (
            self._db.table(TABLE)
            .update({"deleted_at": deleted_at.isoformat()})
            .eq("id", certificate_id)
            .is_("deleted_at", "null")
            .execute()
        )
        return bool(result.data)

    def set_share_token(self, certificate_id: str, share_token: str) -> Optional[InsuranceCertificate]:
        """
        Attach a share token if the certificate has none yet.

        Returns:
            Updated certificate, or None if a token was already set (or the
            row is gone) so the caller should re-read.

        Raises:
            ConflictError: If the token collides with another certificate's
        """
        try:
            result = (
                self._db.table(TABLE)
                .update({"share_token": share_token, "updated_at": self._now_iso()})
                .eq("id", certificate_id)
                .is_("share_token", "null")
                .is_("deleted_at", "null")
                .execute()
            )
        except APIError as e:
            self._raise_conflict_or_reraise(e, "Share token already in use")
        row = self._first(result.data)
        return self._map_to_certificate(row) if row else None

    def mark_viewed(self, share_token: str, viewed_at: datetime) -> Optional[InsuranceCertificate]:
        """
        Stamp viewed_at if it is still empty.

        Returns:
            Updated certificate, or None if it was already viewed.
        """
        result = (
            self._db.table(TABLE)
            .update({"viewed_at": viewed_at.isoformat()})
            .eq("share_token", share_token)
            .is_("viewed_at", "null")
            .is_("deleted_at", "null")
            .execute()
        )
        row = self._first(result.data)
        return self._map_to_certificate(row) if row else None

    def mark_accepted(self, share_token: str, accepted_at: datetime) -> Optional[InsuranceCertificate]:
        """
        Stamp accepted_at and set status to accepted, once.

        Returns:
            Updated certificate, or None if it was already accepted.
        """
        timestamp = accepted_at.isoformat()
        result = (
            self._db.table(TABLE)
            .update({
                "status": CertificateStatus.ACCEPTED.value,
                "accepted_at": timestamp,
                "updated_at": timestamp,
            })
            .eq("share_token", share_token)
            .is_("accepted_at", "null")
            .is_("deleted_at", "null")
            .execute()
        )
        row = self._first(result.data)
        return self._map_to_certificate(row) if row else None

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_to_certificate(self, data: dict[str, Any]) -> InsuranceCertificate:
        """Map database row to InsuranceCertificate model."""
        return InsuranceCertificate(
            id=str(data["id"]),
            certificate_number=data["certificate_number"],
            insured_party=data["insured_party"],
            insurance_company=data["insurance_company"],
            effective_date=data["effective_date"],
            expiration_date=data["expiration_date"],
            status=CertificateStatus(data["status"]),
            account_id=str(data["account_id"]),
            share_token=data.get("share_token"),
            viewed_at=data.get("viewed_at"),
            accepted_at=data.get("accepted_at"),
            created_at=data["created_at"],
            updated_at=data.get("updated_at") or data["created_at"],
        )
