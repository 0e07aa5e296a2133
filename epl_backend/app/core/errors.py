"""
Error types raised by the record services.

Business failures come in two kinds: a payload with an empty required
field (``EmptyFieldsError``) and a lookup of an id that is not in the
store (``NotFoundError``).  ``StorageError`` wraps a failure of the
SQLite backend; it is fatal to the request that hit it, and the
transaction it interrupted has already been rolled back when it is
raised.

Every error carries a ``code`` and an ``http_status`` so that the API
layer can turn it into a response with a single exception handler.
"""

from typing import Any, Dict


class RecordError(Exception):
    """Base class for all errors raised by the record services."""

    code = "RECORD_ERROR"
    http_status = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> Dict[str, Any]:
        """Return the JSON error envelope sent to API clients."""
        return {"error": {"code": self.code, "message": self.message}}


class EmptyFieldsError(RecordError):
    """A required field is empty (or zero where nonzero is required)."""

    code = "EMPTY_FIELDS"
    http_status = 400


class NotFoundError(RecordError):
    """No record of the given kind exists under the given id."""

    code = "NOT_FOUND"
    http_status = 404

    def __init__(self, kind: str, record_id: int) -> None:
        super().__init__(f"{kind} with ID {record_id} not found")
        self.kind = kind
        self.record_id = record_id


class StorageError(RecordError):
    """The SQLite backend failed; the interrupted transaction was rolled back."""

    code = "STORAGE_ERROR"
    http_status = 500
