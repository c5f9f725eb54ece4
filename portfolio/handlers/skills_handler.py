"""Admin skill management."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from portfolio.handlers.dependencies import get_skill_service, require_admin
from portfolio.models import Skill, SkillInput
from portfolio.services.content import SkillService

router = APIRouter(prefix="/api/admin/skills", tags=["skills"], dependencies=[Depends(require_admin)])


@router.get("", response_model=list[Skill])
def list_skills(service: SkillService = Depends(get_skill_service)):
    return service.list()


@router.post("", response_model=Skill, status_code=201)
def create_skill(body: SkillInput, service: SkillService = Depends(get_skill_service)):
    return service.create(body)


@router.put("/{skill_id}", response_model=Skill)
def update_skill(skill_id: str, body: SkillInput, service: SkillService = Depends(get_skill_service)):
    return service.update(skill_id, body)


@router.delete("/{skill_id}", status_code=204)
def delete_skill(skill_id: str, service: SkillService = Depends(get_skill_service)):
    service.delete(skill_id)
    return Response(status_code=204)
