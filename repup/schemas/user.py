"""User schemas. oauth_id stays server-side and is never serialized."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    email: str
    name: str
    oauth_provider: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
