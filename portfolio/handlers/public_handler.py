"""Read-only endpoints behind the public portfolio sections."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from portfolio.handlers.dependencies import (
    get_certificate_service,
    get_experience_service,
    get_profile_service,
    get_project_service,
    get_skill_service,
)
from portfolio.models import Certificate, Experience, ProfileSettings, Project, Skill
from portfolio.services.content import CertificateService, ExperienceService, SkillService
from portfolio.services.profile import ProfileService
from portfolio.services.projects import ProjectService

router = APIRouter(prefix="/api/public", tags=["public"])


@router.get("/profile", response_model=ProfileSettings)
def profile(service: ProfileService = Depends(get_profile_service)):
    return service.get_or_default()


@router.get("/projects", response_model=list[Project])
def projects(
    category: str | None = None,
    featured: bool | None = None,
    service: ProjectService = Depends(get_project_service),
):
    return service.list_published(category=category, featured=featured)


@router.get("/projects/{project_id}", response_model=Project)
def project_detail(project_id: str, service: ProjectService = Depends(get_project_service)):
    return service.get_published(project_id)


@router.get("/skills", response_model=list[Skill])
def skills(service: SkillService = Depends(get_skill_service)):
    return service.list()


@router.get("/experiences", response_model=list[Experience])
def experiences(service: ExperienceService = Depends(get_experience_service)):
    return service.list()


@router.get("/certifications", response_model=list[Certificate])
def certifications(service: CertificateService = Depends(get_certificate_service)):
    return service.list()
