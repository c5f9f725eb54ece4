"""Admin project management."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response

from portfolio.handlers.dependencies import get_project_service, require_admin
from portfolio.models import BulkDeleteRequest, BulkDeleteResult, Project, ProjectInput
from portfolio.services.projects import ProjectService

router = APIRouter(prefix="/api/admin/projects", tags=["projects"], dependencies=[Depends(require_admin)])
logger = logging.getLogger(__name__)


@router.get("", response_model=list[Project])
def list_projects(service: ProjectService = Depends(get_project_service)):
    return service.list()


@router.post("", response_model=Project, status_code=201)
def create_project(body: ProjectInput, service: ProjectService = Depends(get_project_service)):
    return service.create(body)


@router.get("/{project_id}", response_model=Project)
def get_project(project_id: str, service: ProjectService = Depends(get_project_service)):
    return service.get_for_editing(project_id)


@router.put("/{project_id}", response_model=Project)
def update_project(project_id: str, body: ProjectInput, service: ProjectService = Depends(get_project_service)):
    return service.update(project_id, body)


@router.delete("/{project_id}", status_code=204)
def delete_project(project_id: str, service: ProjectService = Depends(get_project_service)):
    service.delete(project_id)
    return Response(status_code=204)


@router.post("/bulk-delete", response_model=BulkDeleteResult)
async def bulk_delete_projects(body: BulkDeleteRequest, service: ProjectService = Depends(get_project_service)):
    result = await service.bulk_delete(body.ids)
    if result.failed:
        logger.warning("Bulk delete left %d project(s) in place: %s", len(result.failed), result.failed)
    return result
