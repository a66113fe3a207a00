"""FastAPI dependencies: the storage handle and the stores built on it."""

from fastapi import Depends, Request

from repup.db.session import Database
from repup.services.debug import DebugService
from repup.stores import BodyPartStore, ExerciseStore, WorkoutExerciseStore, WorkoutStore


def get_database(request: Request) -> Database:
    """The handle created by the application lifespan."""
    return request.app.state.database


def get_body_part_store(database: Database = Depends(get_database)) -> BodyPartStore:
    return BodyPartStore(database)


def get_exercise_store(database: Database = Depends(get_database)) -> ExerciseStore:
    return ExerciseStore(database)


def get_workout_store(database: Database = Depends(get_database)) -> WorkoutStore:
    return WorkoutStore(database)


def get_workout_exercise_store(database: Database = Depends(get_database)) -> WorkoutExerciseStore:
    return WorkoutExerciseStore(database)


def get_debug_service(
    database: Database = Depends(get_database),
    exercises: ExerciseStore = Depends(get_exercise_store),
    workouts: WorkoutStore = Depends(get_workout_store),
) -> DebugService:
    return DebugService(database, exercises, workouts)
