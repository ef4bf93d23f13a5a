"""Integration tests for ProjectService against a real database."""

from __future__ import annotations

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.models.projects import ProjectInput
from app.models.responses import PaginationParams
from app.schemas.projects import ProjectStudentLink
from app.schemas.staff import Staff
from app.services.project_service import PLACEHOLDER_PROJECT_CODE, ProjectService
from app.utils.errors import CustomError, ErrorKind
from tests.factories import (
    create_category,
    create_project_type,
    create_season,
    create_students,
)


def _input(title: str, students: list[int] | None = None, **fields) -> ProjectInput:
    return ProjectInput(title=title, students=students or [], **fields)


@pytest.mark.asyncio
class TestCreateProject:
    """Tests for ProjectService.create_project()."""

    async def test_creates_with_relations(
        self,
        project_service: ProjectService,
        db_session: AsyncSession,
        staff: Staff,
    ):
        """New project carries the acting staff, placeholder code and roster."""
        category = await create_category(db_session)
        project_type = await create_project_type(db_session)
        season = await create_season(db_session, "Spring")
        students = await create_students(db_session, 2)

        response = await project_service.create_project(
            _input(
                "Water Quality",
                students=[s.id for s in students],
                category_id=category.id,
                type_project_id=project_type.id,
                season_id=season.id,
            ),
            staff,
        )

        project = response.result
        assert project.title == "Water Quality"
        assert project.code == PLACEHOLDER_PROJECT_CODE
        assert project.state is True
        assert project.staff.id == staff.id
        assert project.category.name == "Research"
        assert project.type_project.name == "Thesis"
        assert project.season.name == "Spring"
        assert [s.id for s in project.students] == [s.id for s in students]
        assert project.project_histories == []

    async def test_duplicate_title_is_rejected(
        self, project_service: ProjectService, staff: Staff
    ):
        """Exact title match with an existing project is a client error."""
        await project_service.create_project(_input("Solar Kiln"), staff)

        with pytest.raises(CustomError) as exc_info:
            await project_service.create_project(_input("Solar Kiln"), staff)

        assert exc_info.value.kind is ErrorKind.BAD_REQUEST
        assert exc_info.value.message == "Project already exists"

    async def test_title_match_is_case_sensitive(
        self, project_service: ProjectService, staff: Staff
    ):
        await project_service.create_project(_input("Solar Kiln"), staff)

        response = await project_service.create_project(_input("solar kiln"), staff)

        assert response.result.title == "solar kiln"

    async def test_unknown_student_is_internal_error(
        self,
        project_service: ProjectService,
        staff: Staff,
    ):
        """Connecting a missing student fails the whole create."""
        with pytest.raises(CustomError) as exc_info:
            await project_service.create_project(_input("Orphan", students=[999]), staff)

        assert exc_info.value.kind is ErrorKind.INTERNAL_SERVER
        assert "999" in exc_info.value.message

        listing = await project_service.list_projects(PaginationParams())
        assert listing.total == 0


@pytest.mark.asyncio
class TestUpdateProject:
    """Tests for ProjectService.update_project()."""

    async def test_replaces_roster_and_fields(
        self,
        project_service: ProjectService,
        db_session: AsyncSession,
        session_factory: async_sessionmaker[AsyncSession],
        staff: Staff,
    ):
        s1, s2, s3 = await create_students(db_session, 3)
        created = await project_service.create_project(
            _input("Bridge Survey", students=[s1.id, s2.id]), staff
        )
        project_id = created.result.id

        response = await project_service.update_project(
            _input("Bridge Survey II", students=[s3.id]),
            staff,
            project_id,
        )

        assert response.result.title == "Bridge Survey II"
        assert [s.id for s in response.result.students] == [s3.id]

        async with session_factory() as session:
            links = (
                await session.execute(
                    select(ProjectStudentLink.student_id).where(
                        ProjectStudentLink.project_id == project_id  # type: ignore[arg-type]
                    )
                )
            ).scalars().all()
        assert list(links) == [s3.id]

    async def test_keeping_own_title_succeeds(
        self, project_service: ProjectService, staff: Staff
    ):
        created = await project_service.create_project(_input("Same Title"), staff)

        response = await project_service.update_project(
            _input("Same Title"), staff, created.result.id
        )

        assert response.result.title == "Same Title"

    async def test_title_held_by_other_project_is_rejected(
        self, project_service: ProjectService, staff: Staff
    ):
        await project_service.create_project(_input("First"), staff)
        second = await project_service.create_project(_input("Second"), staff)

        with pytest.raises(CustomError) as exc_info:
            await project_service.update_project(_input("First"), staff, second.result.id)

        assert exc_info.value.kind is ErrorKind.BAD_REQUEST
        assert "same title" in exc_info.value.message

    async def test_missing_project_is_rejected(
        self, project_service: ProjectService, staff: Staff
    ):
        with pytest.raises(CustomError) as exc_info:
            await project_service.update_project(_input("Ghost"), staff, 404)

        assert exc_info.value.kind is ErrorKind.BAD_REQUEST
        assert exc_info.value.message == "Project does not exist"

    async def test_title_only_update_keeps_other_fields(
        self,
        project_service: ProjectService,
        db_session: AsyncSession,
        staff: Staff,
    ):
        category = await create_category(db_session)
        season = await create_season(db_session, "Spring")
        created = await project_service.create_project(
            _input("Soil Study", category_id=category.id, season_id=season.id),
            staff,
        )

        response = await project_service.update_project(
            _input("Soil Study (revised)"), staff, created.result.id
        )

        project = response.result
        assert project.title == "Soil Study (revised)"
        assert project.category_id == category.id
        assert project.season_id == season.id
        assert project.season.name == "Spring"

    async def test_explicit_null_clears_field(
        self,
        project_service: ProjectService,
        db_session: AsyncSession,
        staff: Staff,
    ):
        category = await create_category(db_session)
        created = await project_service.create_project(
            _input("Clearable", category_id=category.id), staff
        )

        response = await project_service.update_project(
            _input("Clearable", category_id=None), staff, created.result.id
        )

        assert response.result.category_id is None
        assert response.result.category is None

    async def test_failed_update_rolls_back(
        self,
        project_service: ProjectService,
        db_session: AsyncSession,
        staff: Staff,
    ):
        """An unknown student aborts the whole update: title and roster stay."""
        s1, s2 = await create_students(db_session, 2)
        created = await project_service.create_project(
            _input("Tidal Energy", students=[s1.id, s2.id]), staff
        )
        project_id = created.result.id

        with pytest.raises(CustomError) as exc_info:
            await project_service.update_project(
                _input("Tidal Energy II", students=[s1.id, 9999]), staff, project_id
            )
        assert exc_info.value.kind is ErrorKind.INTERNAL_SERVER

        current = await project_service.get_project(project_id)
        assert current.result.title == "Tidal Energy"
        assert [s.id for s in current.result.students] == [s1.id, s2.id]

    async def test_update_moves_updated_at_only(
        self, project_service: ProjectService, staff: Staff
    ):
        created = await project_service.create_project(_input("Timed"), staff)

        response = await project_service.update_project(
            _input("Timed Again"), staff, created.result.id
        )

        assert response.result.created_at == created.result.created_at
        assert response.result.updated_at >= created.result.updated_at


@pytest.mark.asyncio
class TestDeleteProject:
    """Tests for ProjectService.delete_project()."""

    async def test_soft_delete_hides_from_listing(
        self,
        project_service: ProjectService,
        db_session: AsyncSession,
        staff: Staff,
    ):
        """Deleted projects drop out of listings but keep their relations."""
        students = await create_students(db_session, 2)
        created = await project_service.create_project(
            _input("Retired", students=[s.id for s in students]),
            staff,
        )
        project_id = created.result.id

        response = await project_service.delete_project(staff, project_id)
        assert response.message == "Project deleted"
        assert response.result is None

        listing = await project_service.list_projects(PaginationParams())
        assert listing.total == 0
        assert listing.items == []

        fetched = await project_service.get_project(project_id)
        assert fetched.result.state is False
        assert len(fetched.result.students) == 2
        assert fetched.result.staff.id == staff.id

    async def test_missing_project_is_rejected(
        self, project_service: ProjectService, staff: Staff
    ):
        with pytest.raises(CustomError) as exc_info:
            await project_service.delete_project(staff, 12345)

        assert exc_info.value.kind is ErrorKind.BAD_REQUEST


@pytest.mark.asyncio
class TestListProjects:
    """Tests for ProjectService.list_projects()."""

    async def test_paginates_active_projects(
        self, project_service: ProjectService, staff: Staff
    ):
        for n in range(5):
            await project_service.create_project(_input(f"Project {n}"), staff)

        first = await project_service.list_projects(PaginationParams(page=1, limit=2))
        assert first.total == 5
        assert [p.title for p in first.items] == ["Project 0", "Project 1"]
        assert first.next == "/api/project?page=2&limit=2"
        assert first.prev is None

        last = await project_service.list_projects(PaginationParams(page=3, limit=2))
        assert [p.title for p in last.items] == ["Project 4"]
        assert last.next == "/api/project?page=4&limit=2"
        assert last.prev == "/api/project?page=2&limit=2"

    async def test_page_past_end_is_empty(
        self, project_service: ProjectService, staff: Staff
    ):
        await project_service.create_project(_input("Only"), staff)

        listing = await project_service.list_projects(PaginationParams(page=4, limit=10))

        assert listing.total == 1
        assert listing.items == []

    async def test_data_access_fault_is_internal_error(self):
        """Any failure while listing surfaces as a generic internal error."""

        def broken_factory():
            raise RuntimeError("connection refused")

        service = ProjectService(broken_factory)  # type: ignore[arg-type]

        with pytest.raises(CustomError) as exc_info:
            await service.list_projects(PaginationParams())

        assert exc_info.value.kind is ErrorKind.INTERNAL_SERVER
        assert exc_info.value.message == "Internal Server Error"
