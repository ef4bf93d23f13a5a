"""Staff accounts that act on projects and seasons.

Authentication lives outside this service; requests identify the acting staff
member and the routes resolve it against this table.
"""

from typing import Optional

from sqlmodel import Field, SQLModel

from app.schemas.base import TimestampMixin


class Staff(TimestampMixin, table=True):  # type: ignore[call-arg]
    """Staff member (project owner / acting user)."""

    __tablename__ = "staff"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    email: str = Field(unique=True, index=True)
    is_active: bool = Field(default=True, index=True)
