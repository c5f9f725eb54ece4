"""Admin certificate management."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from portfolio.handlers.dependencies import get_certificate_service, require_admin
from portfolio.models import Certificate, CertificateInput
from portfolio.services.content import CertificateService

router = APIRouter(
    prefix="/api/admin/certifications",
    tags=["certifications"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=list[Certificate])
def list_certificates(service: CertificateService = Depends(get_certificate_service)):
    return service.list()


@router.post("", response_model=Certificate, status_code=201)
def create_certificate(body: CertificateInput, service: CertificateService = Depends(get_certificate_service)):
    return service.create(body)


@router.put("/{cert_id}", response_model=Certificate)
def update_certificate(
    cert_id: str,
    body: CertificateInput,
    service: CertificateService = Depends(get_certificate_service),
):
    return service.update(cert_id, body)


@router.delete("/{cert_id}", status_code=204)
def delete_certificate(cert_id: str, service: CertificateService = Depends(get_certificate_service)):
    service.delete(cert_id)
    return Response(status_code=204)
