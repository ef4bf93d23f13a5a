"""Season, stage and requirement tables."""

from typing import List, Optional

from sqlmodel import Field, Relationship, SQLModel

from app.schemas.base import SoftDeleteMixin, TimestampMixin


class Season(SoftDeleteMixin, TimestampMixin, table=True):  # type: ignore[call-arg]
    """Academic season; at most one row carries enable_state=True."""

    __tablename__ = "seasons"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True, unique=True, description="Season name like 'Spring 2025'")
    enable_state: bool = Field(default=False, index=True)

    stages: List["Stage"] = Relationship(
        back_populates="season",
        sa_relationship_kwargs={"order_by": "Stage.position"},
    )


class Stage(SQLModel, table=True):  # type: ignore[call-arg]
    """A step within a season. Belongs to zero or one season at a time."""

    __tablename__ = "stages"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    position: int = Field(default=0)
    season_id: Optional[int] = Field(default=None, foreign_key="seasons.id", index=True)

    season: Optional[Season] = Relationship(back_populates="stages")
    requirements: List["Requirement"] = Relationship(
        back_populates="stage",
        sa_relationship_kwargs={"order_by": "Requirement.id"},
    )


class Requirement(SQLModel, table=True):  # type: ignore[call-arg]
    __tablename__ = "requirements"

    id: Optional[int] = Field(default=None, primary_key=True)
    stage_id: int = Field(foreign_key="stages.id", index=True)
    description: str

    stage: Optional[Stage] = Relationship(back_populates="requirements")
