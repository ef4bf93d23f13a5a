"""Season API routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from app.models.responses import PaginatedResponse, PaginationParams, SuccessResponse
from app.models.seasons import SeasonInput, SeasonRead
from app.routes.deps import get_acting_staff, get_season_service
from app.schemas.staff import Staff
from app.services.season_service import SEASONS_PATH, SeasonService

router = APIRouter(prefix=SEASONS_PATH, tags=["seasons"])


@router.get("/enabled", response_model=SuccessResponse)
async def get_enabled_season(
    service: SeasonService = Depends(get_season_service),
) -> SuccessResponse:
    """Current season with stages and requirements."""
    return await service.get_enabled_season()


@router.get("", response_model=PaginatedResponse[SeasonRead])
async def list_seasons(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    service: SeasonService = Depends(get_season_service),
) -> PaginatedResponse[SeasonRead]:
    return await service.list_seasons(PaginationParams(page=page, limit=limit))


@router.get("/{season_id}", response_model=SuccessResponse)
async def get_season(
    season_id: int,
    service: SeasonService = Depends(get_season_service),
) -> SuccessResponse:
    return await service.get_season(season_id)


@router.post("", status_code=201, response_model=SuccessResponse)
async def create_season(
    body: SeasonInput,
    staff: Staff = Depends(get_acting_staff),
    service: SeasonService = Depends(get_season_service),
) -> SuccessResponse:
    return await service.create_season(body, staff)


@router.put("/enable/{season_id}", response_model=SuccessResponse)
async def enable_season(
    season_id: int,
    staff: Staff = Depends(get_acting_staff),
    service: SeasonService = Depends(get_season_service),
) -> SuccessResponse:
    """Make this the only enabled season."""
    return await service.enable_season(staff, season_id)


@router.put("/{season_id}", response_model=SuccessResponse)
async def update_season(
    season_id: int,
    body: SeasonInput,
    staff: Staff = Depends(get_acting_staff),
    service: SeasonService = Depends(get_season_service),
) -> SuccessResponse:
    return await service.update_season(body, staff, season_id)


@router.delete("/{season_id}", response_model=SuccessResponse)
async def delete_season(
    season_id: int,
    staff: Staff = Depends(get_acting_staff),
    service: SeasonService = Depends(get_season_service),
) -> SuccessResponse:
    """Soft delete a season and detach its stages."""
    return await service.delete_season(staff, season_id)
