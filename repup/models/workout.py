"""Workout and WorkoutExercise models."""

from __future__ import annotations

import datetime as dt

from sqlalchemy import CheckConstraint, Date, DateTime, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from repup.core.constants import NAME_MAX_LENGTH, NOTES_MAX_LENGTH
from repup.db.base import Base


class Workout(Base):
    """A dated workout owned by one user. Its entries are replaced as a whole on update."""

    __tablename__ = "workouts"
    __table_args__ = (Index("ix_workouts_user_id_date", "user_id", "date"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False)  # Issued by the auth layer, not an FK
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # Never lazy-loaded: list views carry headers only, detail views load entries explicitly
    entries: Mapped[list["WorkoutExercise"]] = relationship(
        "WorkoutExercise",
        cascade="all, delete-orphan",
        order_by="WorkoutExercise.id",
        lazy="raise",
    )


class WorkoutExercise(Base):
    """One exercise entry in a workout: sets x reps at an optional weight.

    weight is None when no weight was recorded; 0 is a real value (e.g. bodyweight).
    """

    __tablename__ = "workout_exercises"
    __table_args__ = (
        CheckConstraint("sets >= 1", name="sets_positive"),
        CheckConstraint("reps >= 1", name="reps_positive"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    workout_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    exercise_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("exercises.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    sets: Mapped[int] = mapped_column(Integer, nullable=False)
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    weight: Mapped[float | None] = mapped_column(Numeric(8, 2, asdecimal=False), nullable=True)
    notes: Mapped[str] = mapped_column(String(NOTES_MAX_LENGTH), nullable=False, default="")
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: dt.datetime.now(dt.timezone.utc)
    )
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: dt.datetime.now(dt.timezone.utc),
        onupdate=lambda: dt.datetime.now(dt.timezone.utc),
    )

    # Populated only by the enriched read (see WorkoutExerciseStore.get_by_workout_id)
    exercise: Mapped["Exercise"] = relationship("Exercise", lazy="raise")
