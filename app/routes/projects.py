"""Project API routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from app.models.projects import ProjectInput, ProjectRead
from app.models.responses import PaginatedResponse, PaginationParams, SuccessResponse
from app.routes.deps import get_acting_staff, get_project_service
from app.schemas.staff import Staff
from app.services.project_service import PROJECTS_PATH, ProjectService

router = APIRouter(prefix=PROJECTS_PATH, tags=["projects"])


@router.get("", response_model=PaginatedResponse[ProjectRead])
async def list_projects(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    service: ProjectService = Depends(get_project_service),
) -> PaginatedResponse[ProjectRead]:
    """List active projects."""
    return await service.list_projects(PaginationParams(page=page, limit=limit))


@router.get("/{project_id}", response_model=SuccessResponse)
async def get_project(
    project_id: int,
    service: ProjectService = Depends(get_project_service),
) -> SuccessResponse:
    return await service.get_project(project_id)


@router.post("", status_code=201, response_model=SuccessResponse)
async def create_project(
    body: ProjectInput,
    staff: Staff = Depends(get_acting_staff),
    service: ProjectService = Depends(get_project_service),
) -> SuccessResponse:
    return await service.create_project(body, staff)


@router.put("/{project_id}", response_model=SuccessResponse)
async def update_project(
    project_id: int,
    body: ProjectInput,
    staff: Staff = Depends(get_acting_staff),
    service: ProjectService = Depends(get_project_service),
) -> SuccessResponse:
    return await service.update_project(body, staff, project_id)


@router.delete("/{project_id}", response_model=SuccessResponse)
async def delete_project(
    project_id: int,
    staff: Staff = Depends(get_acting_staff),
    service: ProjectService = Depends(get_project_service),
) -> SuccessResponse:
    """Soft delete a project."""
    return await service.delete_project(staff, project_id)
