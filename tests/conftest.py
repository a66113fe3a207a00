"""Pytest configuration and fixtures."""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from repup.core.config import Settings
from repup.db.session import Database
from repup.main import create_application
from repup.models import BodyPart, Exercise, Workout, WorkoutExercise
from repup.stores import (
    BodyPartStore,
    ExerciseStore,
    UserStore,
    WorkoutExerciseStore,
    WorkoutStore,
)


@pytest.fixture
async def database(tmp_path):
    """Fresh SQLite file with the full schema."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
def body_parts(database):
    return BodyPartStore(database)


@pytest.fixture
def exercises(database):
    return ExerciseStore(database)


@pytest.fixture
def workouts(database):
    return WorkoutStore(database)


@pytest.fixture
def workout_exercises(database):
    return WorkoutExerciseStore(database)


@pytest.fixture
def users(database):
    return UserStore(database)


@pytest.fixture
async def chest(body_parts):
    return await body_parts.create(BodyPart(name="Chest"))


@pytest.fixture
async def bench_press(exercises, chest):
    return await exercises.create(
        Exercise(name="Bench Press", description="Flat barbell press", body_part_id=chest.id)
    )


@pytest.fixture
async def incline_press(exercises, chest):
    return await exercises.create(Exercise(name="Incline Press", body_part_id=chest.id))


def make_workout(*entries, user_id=7, name="Push Day", day=date(2024, 1, 1), notes=""):
    """Transient workout with one WorkoutExercise per (exercise_id, sets, reps, weight) tuple."""
    workout = Workout(user_id=user_id, name=name, date=day, notes=notes)
    workout.entries = [
        WorkoutExercise(exercise_id=exercise_id, sets=sets, reps=reps, weight=weight, notes="")
        for exercise_id, sets, reps, weight in entries
    ]
    return workout


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
        database_create_tables=True,
        debug_endpoints=True,
        environment="test",
    )


@pytest.fixture
def client(settings):
    """TestClient running the full lifespan against a temporary SQLite file."""
    app = create_application(settings)
    with TestClient(app) as test_client:
        yield test_client
