"""Debug helpers: health snapshot, table listing, sample workout.

Works only through the stores and the storage handle it is given.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone

from repup.core.constants import DEBUG_WORKOUT_NAME, DEBUG_WORKOUT_USER_ID
from repup.core.errors import InvalidInputError
from repup.db.session import Database
from repup.models import Workout, WorkoutExercise
from repup.stores import ExerciseStore, WorkoutStore

logger = logging.getLogger(__name__)

# (sets, reps, weight, notes) for each sample entry, in order
SAMPLE_ENTRIES = [
    (3, 10, 135.5, "Warmup set included"),
    (4, 8, 185.0, "Focus on form"),
]


class DebugService:
    def __init__(self, database: Database, exercises: ExerciseStore, workouts: WorkoutStore):
        self.database = database
        self.exercises = exercises
        self.workouts = workouts

    async def health(self) -> dict:
        try:
            await self.database.ping()
            db_status = "healthy"
        except Exception as e:
            logger.warning("Database ping failed: %s", e)
            db_status = "unhealthy"
        return {
            "status": "ok",
            "db_status": db_status,
            "timestamp": datetime.now(timezone.utc),
        }

    async def list_tables(self) -> list[str]:
        return await self.database.list_tables()

    async def create_sample_workout(self) -> Workout:
        """Build a workout for the debug user from the first exercises in the catalog."""
        exercises = await self.exercises.get_all()
        if not exercises:
            raise InvalidInputError("create at least one exercise before creating a sample workout")
        workout = Workout(
            user_id=DEBUG_WORKOUT_USER_ID,
            name=DEBUG_WORKOUT_NAME,
            date=date.today(),
            notes="Test workout created via debug endpoint",
        )
        workout.entries = [
            WorkoutExercise(exercise_id=exercise.id, sets=sets, reps=reps, weight=weight, notes=notes)
            for exercise, (sets, reps, weight, notes) in zip(exercises, SAMPLE_ENTRIES)
        ]
        return await self.workouts.create(workout)
