"""Shared enums for stores and API."""

from enum import Enum


class ErrorKind(str, Enum):
    """Outcome kinds a store operation can fail with."""

    INVALID_INPUT = "invalid_input"  # Missing field, non-positive id or count
    NOT_FOUND = "not_found"  # No row matched the id
    DUPLICATE_RECORD = "duplicate_record"  # Uniqueness would be violated
    REFERENTIAL_INTEGRITY = "referential_integrity"  # Delete would orphan dependents
    STORAGE = "storage"  # Anything else the database raised
