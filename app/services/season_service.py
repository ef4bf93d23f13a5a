"""Season service: listing, CRUD, soft delete and the single-enabled toggle."""

from __future__ import annotations

import asyncio
import logging

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from app.models.responses import PaginatedResponse, PaginationParams, SuccessResponse
from app.models.seasons import SeasonInput, SeasonRead
from app.schemas.base import utcnow
from app.schemas.seasons import Season, Stage
from app.schemas.staff import Staff
from app.utils.errors import CustomError, internal_errors
from app.utils.pagination import build_page_links, page_offset
from app.utils.relations import fetch_for_connect

logger = logging.getLogger(__name__)

SEASONS_PATH = "/api/season"

_SEASON_RELATIONS = (
    selectinload(Season.stages).selectinload(Stage.requirements),  # type: ignore[arg-type]
)


async def _load_season(session: AsyncSession, season_id: int) -> Season | None:
    result = await session.execute(
        select(Season)
        .where(Season.id == season_id)  # type: ignore[arg-type]
        .options(*_SEASON_RELATIONS)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def _name_taken(
    session: AsyncSession, name: str, exclude_id: int | None = None
) -> bool:
    query = select(Season.id).where(Season.name == name)  # type: ignore[arg-type]
    if exclude_id is not None:
        query = query.where(Season.id != exclude_id)  # type: ignore[arg-type]
    return (await session.scalar(query.limit(1))) is not None


def _to_read(season: Season) -> SeasonRead:
    return SeasonRead.model_validate(season, from_attributes=True)


class SeasonService:
    """CRUD, soft delete and enable toggle over seasons."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get_enabled_season(self) -> SuccessResponse:
        """Return the enabled season with its stages and their requirements."""
        with internal_errors("get enabled season"):
            async with self._session_factory() as session:
                result = await session.execute(
                    select(Season)
                    .where(Season.enable_state.is_(True))  # type: ignore[attr-defined]
                    .options(*_SEASON_RELATIONS)
                    .order_by(Season.id)  # type: ignore[arg-type]
                    .limit(1)
                )
                season = result.scalar_one_or_none()
                if season is None:
                    raise CustomError.bad_request("Enable a season first")
                return SuccessResponse(result=_to_read(season))

    async def get_season(self, season_id: int) -> SuccessResponse:
        """Fetch one season by id, including soft-deleted ones."""
        with internal_errors("get season"):
            async with self._session_factory() as session:
                season = await _load_season(session, season_id)
                if season is None:
                    raise CustomError.bad_request("Season does not exist")
                return SuccessResponse(result=_to_read(season))

    async def _count_active(self) -> int:
        async with self._session_factory() as session:
            total = await session.scalar(
                select(func.count(Season.id)).where(  # type: ignore[arg-type]
                    Season.state.is_(True)  # type: ignore[attr-defined]
                )
            )
            return total or 0

    async def _fetch_active_page(self, page: int, limit: int) -> list[SeasonRead]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(Season)
                .where(Season.state.is_(True))  # type: ignore[attr-defined]
                .options(*_SEASON_RELATIONS)
                .order_by(Season.id)  # type: ignore[arg-type]
                .offset(page_offset(page, limit))
                .limit(limit)
            )
            return [_to_read(season) for season in result.scalars().all()]

    async def list_seasons(
        self, pagination: PaginationParams
    ) -> PaginatedResponse[SeasonRead]:
        page, limit = pagination.page, pagination.limit
        with internal_errors("list seasons", message="Internal Server Error"):
            total, seasons = await asyncio.gather(
                self._count_active(), self._fetch_active_page(page, limit)
            )

        next_link, prev_link = build_page_links(SEASONS_PATH, page, limit)
        return PaginatedResponse[SeasonRead](
            page=page,
            limit=limit,
            total=total,
            next=next_link,
            prev=prev_link,
            items=seasons,
        )

    async def create_season(self, dto: SeasonInput, acting_user: Staff) -> SuccessResponse:
        """Create a season and connect the given stages to it.

        Stages already attached to another season move to the new one.
        """
        with internal_errors("create season"):
            async with self._session_factory() as session, session.begin():
                if await _name_taken(session, dto.name):
                    raise CustomError.bad_request("Season already exists")

                stages = await fetch_for_connect(session, Stage, dto.stages)
                season = Season(name=dto.name, stages=stages)
                session.add(season)
                await session.flush()

                created = await _load_season(session, season.id)  # type: ignore[arg-type]
                result = _to_read(created)  # type: ignore[arg-type]

        logger.info("Season %s created by staff %s", result.id, acting_user.id)
        return SuccessResponse(result=result)

    async def update_season(
        self, dto: SeasonInput, acting_user: Staff, season_id: int
    ) -> SuccessResponse:
        """Rename a season and replace its stage set wholesale."""
        with internal_errors("update season"):
            async with self._session_factory() as session, session.begin():
                if await _name_taken(session, dto.name, exclude_id=season_id):
                    raise CustomError.bad_request(
                        "A season with the same name already exists"
                    )
                season = await _load_season(session, season_id)
                if season is None:
                    raise CustomError.bad_request("Season does not exist")

                # Dropped stages get season_id cleared on flush
                season.stages = await fetch_for_connect(session, Stage, dto.stages)
                season.name = dto.name
                season.updated_at = utcnow()
                await session.flush()

                updated = await _load_season(session, season_id)
                result = _to_read(updated)  # type: ignore[arg-type]

        logger.info("Season %s updated by staff %s", season_id, acting_user.id)
        return SuccessResponse(result=result)

    async def delete_season(self, acting_user: Staff, season_id: int) -> SuccessResponse:
        """Soft delete the season and detach all of its stages."""
        with internal_errors("delete season"):
            async with self._session_factory() as session, session.begin():
                season = await _load_season(session, season_id)
                if season is None:
                    raise CustomError.bad_request("Season does not exist")
                season.state = False
                season.stages = []
                season.updated_at = utcnow()

        logger.info("Season %s deleted by staff %s", season_id, acting_user.id)
        return SuccessResponse(message="Season deleted")

    async def enable_season(self, acting_user: Staff, season_id: int) -> SuccessResponse:
        """Make ``season_id`` the only enabled season.

        Clearing the others and setting the target happen in the same
        transaction, so readers never observe zero or two enabled seasons.
        """
        with internal_errors("enable season"):
            async with self._session_factory() as session, session.begin():
                if await session.get(Season, season_id) is None:
                    raise CustomError.bad_request("Season does not exist")

                await session.execute(
                    update(Season)
                    .where(Season.id != season_id)  # type: ignore[arg-type]
                    .values(enable_state=False)
                    .execution_options(synchronize_session=False)
                )
                await session.execute(
                    update(Season)
                    .where(Season.id == season_id)  # type: ignore[arg-type]
                    .values(enable_state=True, updated_at=utcnow())
                    .execution_options(synchronize_session=False)
                )

                enabled = await _load_season(session, season_id)
                result = _to_read(enabled)  # type: ignore[arg-type]

        logger.info("Season %s enabled by staff %s", season_id, acting_user.id)
        return SuccessResponse(result=result)
