"""Body part schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from repup.core.constants import BODY_PART_NAME_MAX_LENGTH


class BodyPartBase(BaseModel):
    name: str = Field(..., max_length=BODY_PART_NAME_MAX_LENGTH)


class BodyPartCreate(BodyPartBase):
    pass


class BodyPartUpdate(BodyPartBase):
    pass


class BodyPartRead(BodyPartBase):
    model_config = ConfigDict(from_attributes=True)
    id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None
