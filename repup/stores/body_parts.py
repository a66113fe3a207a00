"""BodyPart store: single-table CRUD with a unique name."""

from __future__ import annotations

import logging

from sqlalchemy import delete, exists, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from repup.core.errors import DuplicateRecordError, RecordNotFoundError, ReferentialIntegrityError
from repup.db.session import Database
from repup.models import BodyPart, Exercise
from repup.stores.guards import is_referenced, require_id, require_text

logger = logging.getLogger(__name__)


class BodyPartStore:
    def __init__(self, database: Database):
        self.database = database

    async def get_by_id(self, body_part_id: int) -> BodyPart:
        require_id(body_part_id)
        async with self.database.transaction() as session:
            body_part = await session.get(BodyPart, body_part_id)
        if body_part is None:
            raise RecordNotFoundError(f"body part {body_part_id} not found")
        return body_part

    async def get_all(self) -> list[BodyPart]:
        """All body parts ordered by name."""
        async with self.database.transaction() as session:
            result = await session.execute(select(BodyPart).order_by(BodyPart.name))
            return list(result.scalars().all())

    async def create(self, body_part: BodyPart) -> BodyPart:
        """Insert body_part and assign its generated id onto it."""
        require_text(body_part.name, "name")
        try:
            async with self.database.transaction() as session:
                if await self._name_taken(session, body_part.name):
                    raise DuplicateRecordError(f"body part {body_part.name!r} already exists")
                session.add(body_part)
                await session.flush()
        except IntegrityError as exc:
            # Lost the race against a concurrent insert; the unique index decides
            raise DuplicateRecordError(f"body part {body_part.name!r} already exists") from exc
        logger.info("Created body part %s (%s)", body_part.id, body_part.name)
        return body_part

    async def update(self, body_part: BodyPart) -> BodyPart:
        """Rename an existing body part. Returns the stored row."""
        require_id(body_part.id)
        require_text(body_part.name, "name")
        try:
            async with self.database.transaction() as session:
                if await self._name_taken(session, body_part.name, exclude_id=body_part.id):
                    raise DuplicateRecordError(f"body part {body_part.name!r} already exists")
                result = await session.execute(
                    update(BodyPart).where(BodyPart.id == body_part.id).values(name=body_part.name)
                )
                if result.rowcount == 0:
                    raise RecordNotFoundError(f"body part {body_part.id} not found")
                stored = await session.get(BodyPart, body_part.id)
        except IntegrityError as exc:
            raise DuplicateRecordError(f"body part {body_part.name!r} already exists") from exc
        logger.info("Updated body part %s", stored.id)
        return stored

    async def delete(self, body_part_id: int) -> None:
        """Delete a body part no exercise refers to."""
        require_id(body_part_id)
        try:
            async with self.database.transaction() as session:
                if await is_referenced(session, Exercise.body_part_id, body_part_id):
                    logger.info("Refused to delete body part %s: referenced by exercises", body_part_id)
                    raise ReferentialIntegrityError(
                        f"body part {body_part_id} is referenced by existing exercises"
                    )
                result = await session.execute(delete(BodyPart).where(BodyPart.id == body_part_id))
                if result.rowcount == 0:
                    raise RecordNotFoundError(f"body part {body_part_id} not found")
        except IntegrityError as exc:
            raise ReferentialIntegrityError(
                f"body part {body_part_id} is referenced by existing exercises"
            ) from exc
        logger.info("Deleted body part %s", body_part_id)

    @staticmethod
    async def _name_taken(session: AsyncSession, name: str, exclude_id: int | None = None) -> bool:
        condition = BodyPart.name == name
        if exclude_id is not None:
            condition = condition & (BodyPart.id != exclude_id)
        result = await session.execute(select(exists().where(condition)))
        return bool(result.scalar())
