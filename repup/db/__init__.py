"""Database package: base, storage handle."""

from repup.db.base import Base
from repup.db.session import Database

__all__ = ["Base", "Database"]
