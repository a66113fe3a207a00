"""Response envelopes shared by every endpoint."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Success body: {"data": ...}."""

    data: T


class ErrorResponse(BaseModel):
    """Failure body: {"error": "..."}."""

    error: str
