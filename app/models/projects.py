"""Request and response models for projects."""

from datetime import datetime
from typing import List, Optional

from pydantic import field_validator
from sqlmodel import Field as SQLField
from sqlmodel import SQLModel

from app.models.seasons import SeasonSummary


class CategoryRead(SQLModel):
    id: int
    name: str


class ProjectTypeRead(SQLModel):
    id: int
    name: str


class StudentRead(SQLModel):
    id: int
    name: str
    email: str


class StaffRead(SQLModel):
    id: int
    name: str
    email: str


class ProjectHistoryRead(SQLModel):
    id: int
    description: str
    created_at: datetime


class ProjectRead(SQLModel):
    """Project with every relation attached."""

    id: int
    title: str
    code: str
    state: bool
    category_id: Optional[int] = None
    type_project_id: Optional[int] = None
    season_id: Optional[int] = None
    staff_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    category: Optional[CategoryRead] = None
    type_project: Optional[ProjectTypeRead] = None
    season: Optional[SeasonSummary] = None
    staff: Optional[StaffRead] = None
    students: List[StudentRead] = []
    project_histories: List[ProjectHistoryRead] = []


class ProjectInput(SQLModel):
    """Body for creating or updating a project.

    ``students`` is the full roster by student id; on update it replaces the
    current roster.
    """

    title: str = SQLField(min_length=1)
    category_id: Optional[int] = None
    type_project_id: Optional[int] = None
    season_id: Optional[int] = None
    students: List[int] = []

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be blank")
        return v
