"""FastAPI dependencies: session factory, services and the acting staff member."""

from __future__ import annotations

from fastapi import Depends, Header, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.schemas.staff import Staff
from app.services.project_service import ProjectService
from app.services.season_service import SeasonService

STAFF_ID_HEADER = "X-Staff-Id"


def get_session_factory(request: Request) -> async_sessionmaker[AsyncSession]:
    """Return the session factory built by the application lifespan."""
    return request.app.state.session_factory


def get_project_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> ProjectService:
    return ProjectService(session_factory)


def get_season_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> SeasonService:
    return SeasonService(session_factory)


async def get_acting_staff(
    staff_id: int | None = Header(default=None, alias=STAFF_ID_HEADER),
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> Staff:
    """Resolve the staff member named by the request header (or raise 401).

    Credentials are checked upstream; this only maps the id to an active row.
    """
    if staff_id is None:
        raise HTTPException(status_code=401, detail="Not authenticated")

    async with session_factory() as session:
        staff = await session.get(Staff, staff_id)
    if staff is None or not staff.is_active:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return staff
