"""Tests for certificate request and response models."""

import pytest
from datetime import datetime, timezone, timedelta
from pydantic import ValidationError

from modules.certificates.models import (
    CertificateStatus,
    CreateCertificateRequest,
    UpdateCertificateRequest,
    InsuranceCertificate,
    PublicCertificate,
)


def valid_create_payload(**overrides) -> dict:
    payload = {
        "certificate_number": "COI-001",
        "insured_party": "Acme Builders",
        "insurance_company": "Shield Mutual",
        "effective_date": "2025-01-01T00:00:00Z",
        "expiration_date": "2025-12-31T00:00:00Z",
    }
    payload.update(overrides)
    return payload


class TestCreateCertificateRequest:
    def test_parses_iso_dates(self):
        request = CreateCertificateRequest(**valid_create_payload())
        assert request.effective_date == datetime(2025, 1, 1, tzinfo=timezone.utc)

    def test_naive_dates_become_utc(self):
        request = CreateCertificateRequest(
            **valid_create_payload(effective_date="2025-01-01T00:00:00")
        )
        assert request.effective_date.tzinfo is not None
        assert request.effective_date.utcoffset() == timedelta(0)

    def test_offset_dates_converted_to_utc(self):
        request = CreateCertificateRequest(
            **valid_create_payload(effective_date="2025-01-01T02:00:00+02:00")
        )
        assert request.effective_date == datetime(2025, 1, 1, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "field",
        ["certificate_number", "insured_party", "insurance_company", "effective_date", "expiration_date"],
    )
    def test_required_fields(self, field):
        payload = valid_create_payload()
        del payload[field]
        with pytest.raises(ValidationError):
            CreateCertificateRequest(**payload)

    def test_empty_string_rejected(self):
        with pytest.raises(ValidationError):
            CreateCertificateRequest(**valid_create_payload(insured_party=""))

    def test_unparseable_date_rejected(self):
        with pytest.raises(ValidationError):
            CreateCertificateRequest(**valid_create_payload(effective_date="not a date"))

    def test_status_is_not_client_supplied(self):
        request = CreateCertificateRequest(**valid_create_payload(status="accepted"))
        assert not hasattr(request, "status")


class TestUpdateCertificateRequest:
    def test_tracks_only_supplied_fields(self):
        request = UpdateCertificateRequest(insured_party="New Party")
        assert request.model_dump(exclude_unset=True) == {"insured_party": "New Party"}

    def test_explicit_null_is_kept_as_set(self):
        request = UpdateCertificateRequest(**{"insured_party": None})
        assert request.model_dump(exclude_unset=True) == {"insured_party": None}


class TestPublicCertificate:
    def test_hides_account_and_token(self):
        now = datetime.now(timezone.utc)
        certificate = InsuranceCertificate(
            id="cert-1",
            certificate_number="COI-001",
            insured_party="Acme Builders",
            insurance_company="Shield Mutual",
            effective_date=now,
            expiration_date=now + timedelta(days=365),
            status=CertificateStatus.ACTIVE,
            account_id="account-1",
            share_token="secret-token",
            created_at=now,
            updated_at=now,
        )

        public = PublicCertificate.from_certificate(certificate).model_dump()

        assert "account_id" not in public
        assert "share_token" not in public
        assert public["id"] == "cert-1"
        assert public["status"] == CertificateStatus.ACTIVE
