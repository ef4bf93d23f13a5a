"""Request and response models for seasons."""

from datetime import datetime
from typing import List, Optional

from pydantic import field_validator
from sqlmodel import Field as SQLField
from sqlmodel import SQLModel


class RequirementRead(SQLModel):
    id: int
    description: str


class StageRead(SQLModel):
    id: int
    name: str
    position: int
    season_id: Optional[int] = None
    requirements: List[RequirementRead] = []


class SeasonSummary(SQLModel):
    """Season without its stages, embedded in project responses."""

    id: int
    name: str
    state: bool
    enable_state: bool


class SeasonRead(SeasonSummary):
    created_at: datetime
    updated_at: datetime
    stages: List[StageRead] = []


class SeasonInput(SQLModel):
    """Body for creating or updating a season.

    ``stages`` is the complete list of stage ids the season should own; on
    update it replaces the current set.
    """

    name: str = SQLField(min_length=1)
    stages: List[int] = []

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be blank")
        return v
