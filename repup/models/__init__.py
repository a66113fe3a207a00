"""ORM models - import all so Base.metadata is complete for migrations."""

from repup.models.body_part import BodyPart
from repup.models.exercise import Exercise
from repup.models.user import User
from repup.models.workout import Workout, WorkoutExercise

__all__ = [
    "BodyPart",
    "Exercise",
    "User",
    "Workout",
    "WorkoutExercise",
]
