"""Workout aggregate store.

A workout and its exercise entries are read and written as one unit, each
operation inside a single scoped transaction. Updates replace the entry list
wholesale: existing rows are deleted and the submitted entries re-inserted,
so a failure anywhere leaves the previously stored aggregate untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from repup.core.errors import InvalidInputError, RecordNotFoundError
from repup.db.session import Database
from repup.models import Exercise, Workout, WorkoutExercise
from repup.stores.guards import missing_ids, require_id, require_text

logger = logging.getLogger(__name__)


class WorkoutStore:
    def __init__(self, database: Database):
        self.database = database

    async def get_by_id(self, workout_id: int) -> Workout:
        """Workout header plus all entries in ascending entry id order."""
        require_id(workout_id)
        async with self.database.transaction() as session:
            result = await session.execute(
                select(Workout).where(Workout.id == workout_id).options(selectinload(Workout.entries))
            )
            workout = result.scalar_one_or_none()
            if workout is None:
                raise RecordNotFoundError(f"workout {workout_id} not found")
        return workout

    async def get_all_for_user(self, user_id: int) -> list[Workout]:
        """Headers only (entries are not loaded), most recent date first."""
        require_id(user_id, "user_id")
        async with self.database.transaction() as session:
            result = await session.execute(
                select(Workout)
                .where(Workout.user_id == user_id)
                .order_by(Workout.date.desc(), Workout.id.desc())
            )
            return list(result.scalars().all())

    async def create(self, workout: Workout) -> Workout:
        """Insert the header, then every entry stamped with the new workout id.

        Generated ids are written back onto workout and onto each of its entries.
        """
        entries = self._validate(workout)
        async with self.database.transaction() as session:
            await self._require_exercises(session, entries)
            header = Workout(
                user_id=workout.user_id,
                name=workout.name,
                date=workout.date,
                notes=workout.notes or "",
            )
            session.add(header)
            await session.flush()
            workout.id = header.id
            await self._insert_entries(session, header.id, entries)
        logger.info("Created workout %s with %d entries", workout.id, len(entries))
        return workout

    async def update(self, workout: Workout) -> Workout:
        """Overwrite the header and replace the full entry list."""
        require_id(workout.id)
        entries = self._validate(workout)
        async with self.database.transaction() as session:
            await self._require_exercises(session, entries)
            result = await session.execute(
                update(Workout)
                .where(Workout.id == workout.id)
                .values(
                    user_id=workout.user_id,
                    name=workout.name,
                    date=workout.date,
                    notes=workout.notes or "",
                )
            )
            if result.rowcount == 0:
                raise RecordNotFoundError(f"workout {workout.id} not found")
            await session.execute(delete(WorkoutExercise).where(WorkoutExercise.workout_id == workout.id))
            await self._insert_entries(session, workout.id, entries)
        logger.info("Updated workout %s, replaced entries with %d", workout.id, len(entries))
        return workout

    async def delete(self, workout_id: int) -> None:
        """Delete the entries, then the header."""
        require_id(workout_id)
        async with self.database.transaction() as session:
            await session.execute(delete(WorkoutExercise).where(WorkoutExercise.workout_id == workout_id))
            result = await session.execute(delete(Workout).where(Workout.id == workout_id))
            if result.rowcount == 0:
                raise RecordNotFoundError(f"workout {workout_id} not found")
        logger.info("Deleted workout %s", workout_id)

    @staticmethod
    def _validate(workout: Workout) -> list[WorkoutExercise]:
        require_id(workout.user_id, "user_id")
        require_text(workout.name, "name")
        if workout.date is None:
            raise InvalidInputError("date is required")
        entries = list(workout.entries)
        for position, entry in enumerate(entries):
            require_id(entry.exercise_id, f"details[{position}].exercise_id")
            if entry.sets is None or entry.sets < 1:
                raise InvalidInputError(f"details[{position}].sets must be at least 1")
            if entry.reps is None or entry.reps < 1:
                raise InvalidInputError(f"details[{position}].reps must be at least 1")
        return entries

    @staticmethod
    async def _require_exercises(session: AsyncSession, entries: Sequence[WorkoutExercise]) -> None:
        missing = await missing_ids(session, Exercise.id, (entry.exercise_id for entry in entries))
        if missing:
            ids = ", ".join(str(i) for i in sorted(missing))
            raise InvalidInputError(f"exercise(s) {ids} do not exist")

    @staticmethod
    async def _insert_entries(session: AsyncSession, workout_id: int, entries: Sequence[WorkoutExercise]) -> None:
        # Fresh rows, so entries carried over from an earlier read are inserted rather than re-attached
        rows = [
            WorkoutExercise(
                workout_id=workout_id,
                exercise_id=entry.exercise_id,
                sets=entry.sets,
                reps=entry.reps,
                weight=entry.weight,
                notes=entry.notes or "",
            )
            for entry in entries
        ]
        session.add_all(rows)
        await session.flush()
        for entry, row in zip(entries, rows):
            entry.id = row.id
            entry.workout_id = workout_id
            entry.notes = row.notes
            entry.created_at = row.created_at
            entry.updated_at = row.updated_at
