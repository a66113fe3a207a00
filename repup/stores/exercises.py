"""Exercise store: CRUD gated by the parent body part and by workout entries."""

from __future__ import annotations

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from repup.core.errors import InvalidInputError, RecordNotFoundError, ReferentialIntegrityError
from repup.db.session import Database
from repup.models import BodyPart, Exercise, WorkoutExercise
from repup.stores.guards import is_referenced, require_id, require_text, row_exists

logger = logging.getLogger(__name__)


class ExerciseStore:
    def __init__(self, database: Database):
        self.database = database

    async def get_by_id(self, exercise_id: int) -> Exercise:
        require_id(exercise_id)
        async with self.database.transaction() as session:
            exercise = await session.get(Exercise, exercise_id)
        if exercise is None:
            raise RecordNotFoundError(f"exercise {exercise_id} not found")
        return exercise

    async def get_all(self) -> list[Exercise]:
        async with self.database.transaction() as session:
            result = await session.execute(select(Exercise).order_by(Exercise.name))
            return list(result.scalars().all())

    async def get_by_body_part(self, body_part_id: int) -> list[Exercise]:
        """Exercises for one body part ordered by name; empty when there are none."""
        require_id(body_part_id, "body_part_id")
        async with self.database.transaction() as session:
            result = await session.execute(
                select(Exercise).where(Exercise.body_part_id == body_part_id).order_by(Exercise.name)
            )
            return list(result.scalars().all())

    async def create(self, exercise: Exercise) -> Exercise:
        self._validate(exercise)
        async with self.database.transaction() as session:
            await self._require_body_part(session, exercise.body_part_id)
            if exercise.description is None:
                exercise.description = ""
            session.add(exercise)
            await session.flush()
        logger.info("Created exercise %s (%s)", exercise.id, exercise.name)
        return exercise

    async def update(self, exercise: Exercise) -> Exercise:
        """Overwrite name, description and body part. Returns the stored row."""
        require_id(exercise.id)
        self._validate(exercise)
        async with self.database.transaction() as session:
            await self._require_body_part(session, exercise.body_part_id)
            result = await session.execute(
                update(Exercise)
                .where(Exercise.id == exercise.id)
                .values(
                    name=exercise.name,
                    description=exercise.description or "",
                    body_part_id=exercise.body_part_id,
                )
            )
            if result.rowcount == 0:
                raise RecordNotFoundError(f"exercise {exercise.id} not found")
            stored = await session.get(Exercise, exercise.id)
        logger.info("Updated exercise %s", stored.id)
        return stored

    async def delete(self, exercise_id: int) -> None:
        """Delete an exercise no workout entry refers to."""
        require_id(exercise_id)
        try:
            async with self.database.transaction() as session:
                if await is_referenced(session, WorkoutExercise.exercise_id, exercise_id):
                    logger.info("Refused to delete exercise %s: used in workouts", exercise_id)
                    raise ReferentialIntegrityError(f"exercise {exercise_id} is used in existing workouts")
                result = await session.execute(delete(Exercise).where(Exercise.id == exercise_id))
                if result.rowcount == 0:
                    raise RecordNotFoundError(f"exercise {exercise_id} not found")
        except IntegrityError as exc:
            raise ReferentialIntegrityError(f"exercise {exercise_id} is used in existing workouts") from exc
        logger.info("Deleted exercise %s", exercise_id)

    @staticmethod
    def _validate(exercise: Exercise) -> None:
        require_text(exercise.name, "name")
        require_id(exercise.body_part_id, "body_part_id")

    @staticmethod
    async def _require_body_part(session: AsyncSession, body_part_id: int) -> None:
        if not await row_exists(session, BodyPart, body_part_id):
            raise InvalidInputError(f"body part {body_part_id} does not exist")
