"""Project service: paginated listing, create, update and soft delete.

Every write runs its existence/uniqueness checks and the mutation inside one
transaction. Failed checks raise ``CustomError.bad_request``; anything else
that goes wrong becomes ``CustomError.internal_server``.
"""

from __future__ import annotations

import asyncio
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from app.models.projects import ProjectInput, ProjectRead
from app.models.responses import PaginatedResponse, PaginationParams, SuccessResponse
from app.schemas.base import utcnow
from app.schemas.projects import Project, Student
from app.schemas.staff import Staff
from app.utils.errors import CustomError, internal_errors
from app.utils.pagination import build_page_links, page_offset
from app.utils.relations import fetch_for_connect

logger = logging.getLogger(__name__)

PROJECTS_PATH = "/api/project"

# Code assigned to every new project; nothing generates real codes yet.
PLACEHOLDER_PROJECT_CODE = "sdsss"

_PROJECT_RELATIONS = (
    selectinload(Project.category),  # type: ignore[arg-type]
    selectinload(Project.type_project),  # type: ignore[arg-type]
    selectinload(Project.students),  # type: ignore[arg-type]
    selectinload(Project.season),  # type: ignore[arg-type]
    selectinload(Project.staff),  # type: ignore[arg-type]
    selectinload(Project.project_histories),  # type: ignore[arg-type]
)


async def _load_project(session: AsyncSession, project_id: int) -> Project | None:
    """Fetch a project by id with every relation, refreshing stale identity rows."""
    result = await session.execute(
        select(Project)
        .where(Project.id == project_id)  # type: ignore[arg-type]
        .options(*_PROJECT_RELATIONS)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def _title_taken(
    session: AsyncSession, title: str, exclude_id: int | None = None
) -> bool:
    query = select(Project.id).where(Project.title == title)  # type: ignore[arg-type]
    if exclude_id is not None:
        query = query.where(Project.id != exclude_id)  # type: ignore[arg-type]
    return (await session.scalar(query.limit(1))) is not None


def _to_read(project: Project) -> ProjectRead:
    return ProjectRead.model_validate(project, from_attributes=True)


class ProjectService:
    """CRUD and soft delete over projects."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def _count_active(self) -> int:
        async with self._session_factory() as session:
            total = await session.scalar(
                select(func.count(Project.id)).where(  # type: ignore[arg-type]
                    Project.state.is_(True)  # type: ignore[attr-defined]
                )
            )
            return total or 0

    async def _fetch_active_page(self, page: int, limit: int) -> list[ProjectRead]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(Project)
                .where(Project.state.is_(True))  # type: ignore[attr-defined]
                .options(*_PROJECT_RELATIONS)
                .order_by(Project.id)  # type: ignore[arg-type]
                .offset(page_offset(page, limit))
                .limit(limit)
            )
            return [_to_read(project) for project in result.scalars().all()]

    async def list_projects(
        self, pagination: PaginationParams
    ) -> PaginatedResponse[ProjectRead]:
        """List active projects one page at a time.

        Count and page queries run concurrently on separate sessions.
        """
        page, limit = pagination.page, pagination.limit
        with internal_errors("list projects", message="Internal Server Error"):
            total, projects = await asyncio.gather(
                self._count_active(), self._fetch_active_page(page, limit)
            )

        next_link, prev_link = build_page_links(PROJECTS_PATH, page, limit)
        return PaginatedResponse[ProjectRead](
            page=page,
            limit=limit,
            total=total,
            next=next_link,
            prev=prev_link,
            items=projects,
        )

    async def get_project(self, project_id: int) -> SuccessResponse:
        """Fetch one project by id, including soft-deleted ones."""
        with internal_errors("get project"):
            async with self._session_factory() as session:
                project = await _load_project(session, project_id)
                if project is None:
                    raise CustomError.bad_request("Project does not exist")
                return SuccessResponse(result=_to_read(project))

    async def create_project(
        self, dto: ProjectInput, acting_user: Staff
    ) -> SuccessResponse:
        """Create a project owned by ``acting_user`` with the given roster.

        Raises:
            CustomError: bad request if the title is already used.
        """
        with internal_errors("create project"):
            async with self._session_factory() as session, session.begin():
                if await _title_taken(session, dto.title):
                    raise CustomError.bad_request("Project already exists")

                students = await fetch_for_connect(session, Student, dto.students)
                project = Project(
                    **dto.model_dump(exclude={"students"}),
                    code=PLACEHOLDER_PROJECT_CODE,
                    staff_id=acting_user.id,
                    students=students,
                )
                session.add(project)
                await session.flush()

                created = await _load_project(session, project.id)  # type: ignore[arg-type]
                result = _to_read(created)  # type: ignore[arg-type]

        logger.info(
            "Project %s created by staff %s with %d student(s)",
            result.id,
            acting_user.id,
            len(result.students),
        )
        return SuccessResponse(result=result)

    async def update_project(
        self, dto: ProjectInput, acting_user: Staff, project_id: int
    ) -> SuccessResponse:
        """Replace a project's roster and scalar fields.

        Raises:
            CustomError: bad request if another project holds the title or the
                project does not exist.
        """
        with internal_errors("update project"):
            async with self._session_factory() as session, session.begin():
                if await _title_taken(session, dto.title, exclude_id=project_id):
                    raise CustomError.bad_request(
                        "A project with the same title already exists"
                    )
                project = await _load_project(session, project_id)
                if project is None:
                    raise CustomError.bad_request("Project does not exist")

                # Whole roster is swapped: every current link goes, the new list comes in
                project.students = await fetch_for_connect(session, Student, dto.students)
                # Fields the client left out keep their stored values
                for field, value in dto.model_dump(
                    exclude={"students"}, exclude_unset=True
                ).items():
                    setattr(project, field, value)
                project.updated_at = utcnow()
                await session.flush()

                updated = await _load_project(session, project_id)
                result = _to_read(updated)  # type: ignore[arg-type]

        logger.info("Project %s updated by staff %s", project_id, acting_user.id)
        return SuccessResponse(result=result)

    async def delete_project(
        self, acting_user: Staff, project_id: int
    ) -> SuccessResponse:
        """Soft delete: flip ``state`` off and leave relations alone."""
        with internal_errors("delete project"):
            async with self._session_factory() as session, session.begin():
                project = await session.get(Project, project_id)
                if project is None:
                    raise CustomError.bad_request("Project does not exist")
                project.state = False
                project.updated_at = utcnow()

        logger.info("Project %s deleted by staff %s", project_id, acting_user.id)
        return SuccessResponse(message="Project deleted")
