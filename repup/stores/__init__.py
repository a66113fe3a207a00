"""Persistence stores: one per entity, plus the workout aggregate."""

from repup.stores.body_parts import BodyPartStore
from repup.stores.exercises import ExerciseStore
from repup.stores.users import UserStore
from repup.stores.workout_exercises import WorkoutExerciseStore
from repup.stores.workouts import WorkoutStore

__all__ = [
    "BodyPartStore",
    "ExerciseStore",
    "UserStore",
    "WorkoutExerciseStore",
    "WorkoutStore",
]
