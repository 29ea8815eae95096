"""Error taxonomy shared by handlers, services and collaborators."""

from __future__ import annotations

from fastapi import status


class RecordsApiError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(RecordsApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(RecordsApiError):
    status_code = status.HTTP_404_NOT_FOUND


class PersistenceError(RecordsApiError):
    """A storage collaborator failed; the raw message is passed to the caller."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
