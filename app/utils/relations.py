"""Connect/disconnect helpers for relation collections."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

ModelT = TypeVar("ModelT", bound=SQLModel)


async def fetch_for_connect(
    session: AsyncSession, model: type[ModelT], ids: Sequence[int]
) -> list[ModelT]:
    """Load the rows to connect, in the order given, ignoring repeated ids.

    Raises:
        LookupError: if any id has no matching row.
    """
    wanted = list(dict.fromkeys(ids))
    if not wanted:
        return []

    result = await session.execute(
        select(model).where(model.id.in_(wanted))  # type: ignore[attr-defined]
    )
    by_id = {row.id: row for row in result.scalars().all()}  # type: ignore[attr-defined]
    missing = [row_id for row_id in wanted if row_id not in by_id]
    if missing:
        raise LookupError(f"{model.__tablename__}: no rows for id(s) {missing}")
    return [by_id[row_id] for row_id in wanted]
