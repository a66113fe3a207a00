"""Exercise CRUD endpoints."""

from fastapi import APIRouter, Depends

from repup.api.deps import get_exercise_store
from repup.models import Exercise
from repup.schemas.common import Envelope
from repup.schemas.exercise import ExerciseCreate, ExerciseRead, ExerciseUpdate
from repup.stores import ExerciseStore

router = APIRouter()


@router.get("", response_model=Envelope[list[ExerciseRead]])
async def list_exercises(
    body_part_id: int | None = None,
    store: ExerciseStore = Depends(get_exercise_store),
):
    """List exercises ordered by name, optionally only those for one body part."""
    if body_part_id is None:
        exercises = await store.get_all()
    else:
        exercises = await store.get_by_body_part(body_part_id)
    return {"data": [ExerciseRead.model_validate(e) for e in exercises]}


@router.post("", response_model=Envelope[ExerciseRead], status_code=201)
async def create_exercise(
    payload: ExerciseCreate,
    store: ExerciseStore = Depends(get_exercise_store),
):
    """Create an exercise under an existing body part."""
    exercise = await store.create(Exercise(**payload.model_dump()))
    return {"data": ExerciseRead.model_validate(exercise)}


@router.get("/{exercise_id}", response_model=Envelope[ExerciseRead])
async def get_exercise(
    exercise_id: int,
    store: ExerciseStore = Depends(get_exercise_store),
):
    exercise = await store.get_by_id(exercise_id)
    return {"data": ExerciseRead.model_validate(exercise)}


@router.put("/{exercise_id}", response_model=Envelope[ExerciseRead])
async def update_exercise(
    exercise_id: int,
    payload: ExerciseUpdate,
    store: ExerciseStore = Depends(get_exercise_store),
):
    exercise = await store.update(Exercise(id=exercise_id, **payload.model_dump()))
    return {"data": ExerciseRead.model_validate(exercise)}


@router.delete("/{exercise_id}", status_code=204)
async def delete_exercise(
    exercise_id: int,
    store: ExerciseStore = Depends(get_exercise_store),
):
    """Delete an exercise (409 while workouts still use it)."""
    await store.delete(exercise_id)
    return None
