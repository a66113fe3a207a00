"""Exercise schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from repup.core.constants import DESCRIPTION_MAX_LENGTH, NAME_MAX_LENGTH


class ExerciseBase(BaseModel):
    name: str = Field(..., max_length=NAME_MAX_LENGTH)
    description: str = Field(default="", max_length=DESCRIPTION_MAX_LENGTH)
    body_part_id: int


class ExerciseCreate(ExerciseBase):
    pass


class ExerciseUpdate(ExerciseBase):
    """PUT body: the full exercise, every field overwritten."""


class ExerciseRead(ExerciseBase):
    model_config = ConfigDict(from_attributes=True)
    id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None
