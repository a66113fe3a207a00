"""Workout and WorkoutExercise schemas."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from repup.core.constants import NAME_MAX_LENGTH, NOTES_MAX_LENGTH
from repup.models import Workout, WorkoutExercise


class ExerciseRef(BaseModel):
    """Descriptive exercise fields embedded in enriched entries."""

    id: int
    name: str
    description: str
    body_part_id: int

    model_config = ConfigDict(from_attributes=True)


class WorkoutExerciseBase(BaseModel):
    exercise_id: int
    sets: int
    reps: int
    weight: float | None = None  # null/missing = not recorded, 0 = zero
    notes: str = Field(default="", max_length=NOTES_MAX_LENGTH)


class WorkoutExerciseCreate(WorkoutExerciseBase):
    def to_model(self) -> WorkoutExercise:
        return WorkoutExercise(**self.model_dump())


class WorkoutExerciseRead(WorkoutExerciseBase):
    model_config = ConfigDict(from_attributes=True)
    id: int
    workout_id: int
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None


class WorkoutExerciseDetailRead(WorkoutExerciseRead):
    """Entry joined with its exercise (for the workout exercises view)."""

    exercise: ExerciseRef


class WorkoutBase(BaseModel):
    user_id: int
    name: str = Field(..., max_length=NAME_MAX_LENGTH)
    date: dt.date
    notes: str = ""


class WorkoutCreate(WorkoutBase):
    details: list[WorkoutExerciseCreate] = []

    def to_model(self, workout_id: int | None = None) -> Workout:
        workout = Workout(
            user_id=self.user_id,
            name=self.name,
            date=self.date,
            notes=self.notes,
        )
        if workout_id is not None:
            workout.id = workout_id
        workout.entries = [detail.to_model() for detail in self.details]
        return workout


class WorkoutUpdate(WorkoutCreate):
    """PUT body: header plus the complete entry list that replaces the stored one."""


class WorkoutRead(WorkoutBase):
    """Header only (list view)."""

    model_config = ConfigDict(from_attributes=True)
    id: int


class WorkoutReadWithDetails(WorkoutRead):
    details: list[WorkoutExerciseRead] = []

    @classmethod
    def from_workout(cls, workout: Workout) -> WorkoutReadWithDetails:
        return cls(
            id=workout.id,
            user_id=workout.user_id,
            name=workout.name,
            date=workout.date,
            notes=workout.notes,
            details=[WorkoutExerciseRead.model_validate(entry) for entry in workout.entries],
        )
