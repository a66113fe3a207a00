"""Typed failures raised by the stores.

Every store operation either returns a record (or a list of records) or raises
one of the errors below. Anything the database raises that is not classified
here propagates unchanged as a SQLAlchemy exception.
"""

from repup.core.enums import ErrorKind


class StoreError(Exception):
    """Base class for classified store failures."""

    kind: ErrorKind = ErrorKind.STORAGE
    default_message = "storage failure"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(StoreError):
    """Raised before touching storage when a field or id is malformed."""

    kind = ErrorKind.INVALID_INPUT
    default_message = "invalid input"


class RecordNotFoundError(StoreError):
    """Raised when the targeted id has no matching row."""

    kind = ErrorKind.NOT_FOUND
    default_message = "record not found"


class DuplicateRecordError(StoreError):
    kind = ErrorKind.DUPLICATE_RECORD
    default_message = "record already exists"


class ReferentialIntegrityError(StoreError):
    kind = ErrorKind.REFERENTIAL_INTEGRITY
    default_message = "cannot delete record due to referential integrity constraint"
