"""Helpers that insert rows directly for test setup."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from app.schemas.projects import Category, ProjectType, Student
from app.schemas.seasons import Requirement, Season, Stage
from app.schemas.staff import Staff


async def create_staff(
    db: AsyncSession,
    *,
    email: str,
    name: str = "Staff Member",
    is_active: bool = True,
) -> Staff:
    staff = Staff(name=name, email=email, is_active=is_active)
    db.add(staff)
    await db.commit()
    return staff


async def create_category(db: AsyncSession, name: str = "Research") -> Category:
    category = Category(name=name)
    db.add(category)
    await db.commit()
    return category


async def create_project_type(db: AsyncSession, name: str = "Thesis") -> ProjectType:
    project_type = ProjectType(name=name)
    db.add(project_type)
    await db.commit()
    return project_type


async def create_students(db: AsyncSession, count: int) -> list[Student]:
    students = [
        Student(name=f"Student {n}", email=f"student{n}@example.com")
        for n in range(1, count + 1)
    ]
    db.add_all(students)
    await db.commit()
    return students


async def create_stage(
    db: AsyncSession,
    name: str,
    *,
    position: int = 0,
    requirements: list[str] | None = None,
) -> Stage:
    stage = Stage(name=name, position=position)
    stage.requirements = [
        Requirement(description=text) for text in (requirements or [])
    ]
    db.add(stage)
    await db.commit()
    return stage


async def create_season(
    db: AsyncSession,
    name: str,
    *,
    enable_state: bool = False,
    state: bool = True,
) -> Season:
    season = Season(name=name, enable_state=enable_state, state=state)
    db.add(season)
    await db.commit()
    return season
