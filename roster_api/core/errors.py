"""Error taxonomy shared by the store, the services and the HTTP layer."""
from __future__ import annotations


class RosterError(Exception):
    """Base error carrying the HTTP status used to render it."""

    status_code = 500
    code = "error"

    def __init__(self, message: str, code: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code


class ValidationError(RosterError):
    """Missing or invalid fields in a request payload."""

    status_code = 400
    code = "invalid"


class NotFoundError(RosterError):
    """A record (or the target of a join) does not exist."""

    status_code = 404
    code = "not_found"


class CorruptDataError(RosterError):
    """A collection file holds something other than a JSON array of objects."""

    status_code = 500
    code = "corrupt_data"
