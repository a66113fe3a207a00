"""Read-side join of workout entries with their exercise."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import contains_eager

from repup.db.session import Database
from repup.models import WorkoutExercise
from repup.stores.guards import require_id


class WorkoutExerciseStore:
    def __init__(self, database: Database):
        self.database = database

    async def get_by_workout_id(self, workout_id: int) -> list[WorkoutExercise]:
        """Entries of one workout, each with .exercise populated, in ascending entry id order.

        Never writes. An unknown workout simply has no entries.
        """
        require_id(workout_id, "workout_id")
        async with self.database.transaction() as session:
            result = await session.execute(
                select(WorkoutExercise)
                .join(WorkoutExercise.exercise)
                .options(contains_eager(WorkoutExercise.exercise))
                .where(WorkoutExercise.workout_id == workout_id)
                .order_by(WorkoutExercise.id)
            )
            return list(result.scalars().all())
