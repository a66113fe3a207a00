"""Workout endpoints. A workout is always written together with its full entry list."""

from fastapi import APIRouter, Depends

from repup.api.deps import get_workout_exercise_store, get_workout_store
from repup.schemas.common import Envelope
from repup.schemas.workout import (
    WorkoutCreate,
    WorkoutExerciseDetailRead,
    WorkoutRead,
    WorkoutReadWithDetails,
    WorkoutUpdate,
)
from repup.stores import WorkoutExerciseStore, WorkoutStore

router = APIRouter()


@router.get("", response_model=Envelope[list[WorkoutRead]])
async def list_workouts(
    user_id: int,
    store: WorkoutStore = Depends(get_workout_store),
):
    """List a user's workouts (headers only), most recent first."""
    workouts = await store.get_all_for_user(user_id)
    return {"data": [WorkoutRead.model_validate(w) for w in workouts]}


@router.post("", response_model=Envelope[WorkoutReadWithDetails], status_code=201)
async def create_workout(
    payload: WorkoutCreate,
    store: WorkoutStore = Depends(get_workout_store),
):
    """Create a workout and all of its entries in one transaction."""
    workout = await store.create(payload.to_model())
    return {"data": WorkoutReadWithDetails.from_workout(workout)}


@router.get("/{workout_id}", response_model=Envelope[WorkoutReadWithDetails])
async def get_workout(
    workout_id: int,
    store: WorkoutStore = Depends(get_workout_store),
):
    """Get a workout with all entries."""
    workout = await store.get_by_id(workout_id)
    return {"data": WorkoutReadWithDetails.from_workout(workout)}


@router.put("/{workout_id}", response_model=Envelope[WorkoutReadWithDetails])
async def update_workout(
    workout_id: int,
    payload: WorkoutUpdate,
    store: WorkoutStore = Depends(get_workout_store),
):
    """Replace a workout: header fields and the complete entry list."""
    workout = await store.update(payload.to_model(workout_id))
    return {"data": WorkoutReadWithDetails.from_workout(workout)}


@router.delete("/{workout_id}", status_code=204)
async def delete_workout(
    workout_id: int,
    store: WorkoutStore = Depends(get_workout_store),
):
    """Delete a workout and its entries."""
    await store.delete(workout_id)
    return None


@router.get("/{workout_id}/exercises", response_model=Envelope[list[WorkoutExerciseDetailRead]])
async def list_workout_exercises(
    workout_id: int,
    store: WorkoutExerciseStore = Depends(get_workout_exercise_store),
):
    """Entries of a workout with exercise name, description and body part."""
    entries = await store.get_by_workout_id(workout_id)
    return {"data": [WorkoutExerciseDetailRead.model_validate(e) for e in entries]}
