"""BodyPart model - the grouping every exercise belongs to."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from repup.core.constants import BODY_PART_NAME_MAX_LENGTH
from repup.db.base import Base


class BodyPart(Base):
    """Body part (e.g. Chest, Legs). Name is unique, exact and case-sensitive."""

    __tablename__ = "body_parts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(BODY_PART_NAME_MAX_LENGTH), nullable=False, unique=True, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
