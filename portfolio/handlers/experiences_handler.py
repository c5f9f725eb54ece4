"""Admin experience management."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from portfolio.handlers.dependencies import get_experience_service, require_admin
from portfolio.models import Experience, ExperienceInput
from portfolio.services.content import ExperienceService

router = APIRouter(prefix="/api/admin/experiences", tags=["experiences"], dependencies=[Depends(require_admin)])


@router.get("", response_model=list[Experience])
def list_experiences(service: ExperienceService = Depends(get_experience_service)):
    return service.list()


@router.post("", response_model=Experience, status_code=201)
def create_experience(body: ExperienceInput, service: ExperienceService = Depends(get_experience_service)):
    return service.create(body)


@router.put("/{experience_id}", response_model=Experience)
def update_experience(
    experience_id: str,
    body: ExperienceInput,
    service: ExperienceService = Depends(get_experience_service),
):
    return service.update(experience_id, body)


@router.delete("/{experience_id}", status_code=204)
def delete_experience(experience_id: str, service: ExperienceService = Depends(get_experience_service)):
    service.delete(experience_id)
    return Response(status_code=204)
