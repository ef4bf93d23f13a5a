"""Base Classes to Use as MixIns Elsewhere in App"""

from datetime import UTC, datetime

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    """Timezone-aware current time; every timestamp column stores UTC."""
    return datetime.now(UTC)


class SoftDeleteMixin(SQLModel):
    # False once the record has been soft-deleted; rows are never removed
    state: bool = Field(default=True, index=True)


class TimestampMixin(SQLModel):
    created_at: datetime = Field(
        default_factory=utcnow, sa_type=DateTime(timezone=True)  # type: ignore[call-overload]
    )
    updated_at: datetime = Field(
        default_factory=utcnow, sa_type=DateTime(timezone=True)  # type: ignore[call-overload]
    )
