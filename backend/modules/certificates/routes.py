"""
Insurance certificate API endpoints.

Owner endpoints require a session; the /public/{share_token} endpoints
are reachable by anyone holding the token. Domain exceptions propagate
to the handlers registered in api.errors.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_certificate_service
from shared.models import AuthenticatedUser

from .interfaces import ICertificateService
from .models import (
    CreateCertificateRequest,
    UpdateCertificateRequest,
    InsuranceCertificate,
    PublicCertificate,
    ShareLinkResponse,
)

router = APIRouter()


# -----------------------------------------------------------------------------
# Public (token) endpoints
# -----------------------------------------------------------------------------


@router.get("/public/{share_token}", response_model=PublicCertificate)
async def view_shared_certificate(
    share_token: str,
    service: ICertificateService = Depends(get_certificate_service),
) -> PublicCertificate:
    """
    View a shared certificate. The first view is recorded.
    """
    certificate = await service.view_shared_certificate(share_token)
    return PublicCertificate.from_certificate(certificate)


@router.post("/public/{share_token}/accept", response_model=PublicCertificate)
async def accept_shared_certificate(
    share_token: str,
    service: ICertificateService = Depends(get_certificate_service),
) -> PublicCertificate:
    """
    Accept a shared certificate. Accepting again returns the same record.
    """
    certificate = await service.accept_shared_certificate(share_token)
    return PublicCertificate.from_certificate(certificate)


# -----------------------------------------------------------------------------
# Owner endpoints
# -----------------------------------------------------------------------------


@router.post("", response_model=InsuranceCertificate, status_code=201)
async def create_certificate(
    request: CreateCertificateRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICertificateService = Depends(get_certificate_service),
) -> InsuranceCertificate:
    """
    Create a certificate. Status is computed from the dates.
    """
    return await service.create_certificate(user.id, request)


@router.get("", response_model=list[InsuranceCertificate])
async def list_certificates(
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICertificateService = Depends(get_certificate_service),
) -> list[InsuranceCertificate]:
    """
    List the current user's certificates, most recent first.
    """
    return await service.list_certificates(user.id)


@router.get("/{certificate_id}", response_model=InsuranceCertificate)
async def get_certificate(
    certificate_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICertificateService = Depends(get_certificate_service),
) -> InsuranceCertificate:
    return await service.get_certificate(certificate_id, user.id)


@router.put("/{certificate_id}", response_model=InsuranceCertificate)
async def update_certificate(
    certificate_id: str,
    request: UpdateCertificateRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICertificateService = Depends(get_certificate_service),
) -> InsuranceCertificate:
    """
    Update any subset of fields. Changing a date re-derives the status.
    """
    return await service.update_certificate(certificate_id, user.id, request)


@router.delete("/{certificate_id}", status_code=204)
async def delete_certificate(
    certificate_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICertificateService = Depends(get_certificate_service),
) -> None:
    await service.delete_certificate(certificate_id, user.id)


@router.post("/{certificate_id}/share", response_model=ShareLinkResponse)
async def share_certificate(
    certificate_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICertificateService = Depends(get_certificate_service),
) -> ShareLinkResponse:
    """
    Get a public share link for a certificate, creating it on first call.
    """
    return await service.share_certificate(certificate_id, user.id)
