"""Existence checks shared by the stores.

Guards only answer questions; the calling store decides which error to raise.
They take the caller's session so the check and the mutation that follows it
run in the same transaction.
"""

from collections.abc import Iterable

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from repup.core.errors import InvalidInputError


def require_id(value: int | None, field: str = "id") -> int:
    """Reject missing and non-positive ids before any storage access."""
    if value is None or isinstance(value, bool) or value < 1:
        raise InvalidInputError(f"{field} must be a positive integer")
    return value


def require_text(value: str | None, field: str) -> str:
    if value is None or not value.strip():
        raise InvalidInputError(f"{field} is required")
    return value


async def is_referenced(session: AsyncSession, column: InstrumentedAttribute, value: int) -> bool:
    """True when at least one row of column's table has column == value."""
    result = await session.execute(select(exists().where(column == value)))
    return bool(result.scalar())


async def missing_ids(session: AsyncSession, column: InstrumentedAttribute, ids: Iterable[int]) -> set[int]:
    """Subset of ids with no row where column == id."""
    wanted = set(ids)
    if not wanted:
        return set()
    result = await session.execute(select(column).where(column.in_(wanted)))
    return wanted - set(result.scalars().all())


async def row_exists(session: AsyncSession, model: type, row_id: int) -> bool:
    return await is_referenced(session, model.id, row_id)
