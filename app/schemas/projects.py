"""Project tables and the lookup tables they reference."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import DateTime
from sqlmodel import Field, Relationship, SQLModel

from app.schemas.base import SoftDeleteMixin, TimestampMixin, utcnow
from app.schemas.seasons import Season
from app.schemas.staff import Staff


class Category(SQLModel, table=True):  # type: ignore[call-arg]
    __tablename__ = "categories"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True, index=True)


class ProjectType(SQLModel, table=True):  # type: ignore[call-arg]
    __tablename__ = "project_types"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True, index=True)


class ProjectStudentLink(SQLModel, table=True):  # type: ignore[call-arg]
    """Many-to-many link between projects and the students on their roster."""

    __tablename__ = "project_students"

    project_id: Optional[int] = Field(
        default=None, foreign_key="projects.id", primary_key=True
    )
    student_id: Optional[int] = Field(
        default=None, foreign_key="students.id", primary_key=True
    )


class Student(SQLModel, table=True):  # type: ignore[call-arg]
    __tablename__ = "students"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    email: str = Field(unique=True, index=True)


class Project(SoftDeleteMixin, TimestampMixin, table=True):  # type: ignore[call-arg]
    """Student project owned by a staff member within a season."""

    __tablename__ = "projects"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(index=True)
    code: str
    category_id: Optional[int] = Field(default=None, foreign_key="categories.id")
    type_project_id: Optional[int] = Field(default=None, foreign_key="project_types.id")
    season_id: Optional[int] = Field(default=None, foreign_key="seasons.id", index=True)
    staff_id: Optional[int] = Field(default=None, foreign_key="staff.id", index=True)

    category: Optional[Category] = Relationship()
    type_project: Optional[ProjectType] = Relationship()
    season: Optional[Season] = Relationship()
    staff: Optional[Staff] = Relationship()
    students: List[Student] = Relationship(
        link_model=ProjectStudentLink,
        sa_relationship_kwargs={"order_by": "Student.id"},
    )
    project_histories: List["ProjectHistory"] = Relationship(
        back_populates="project",
        sa_relationship_kwargs={"order_by": "ProjectHistory.created_at"},
    )


class ProjectHistory(SQLModel, table=True):  # type: ignore[call-arg]
    """Audit trail entry attached to a project."""

    __tablename__ = "project_histories"

    id: Optional[int] = Field(default=None, primary_key=True)
    project_id: int = Field(foreign_key="projects.id", index=True)
    description: str
    created_at: datetime = Field(
        default_factory=utcnow, sa_type=DateTime(timezone=True)  # type: ignore[call-overload]
    )

    project: Optional[Project] = Relationship(back_populates="project_histories")
