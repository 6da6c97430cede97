"""
Error kinds raised by the people services.

Services never raise ``HTTPException`` themselves; they raise one of the
classes below and the endpoint layer turns ``status_code`` into the HTTP
response.
"""

from fastapi import status


class PeopleError(Exception):
    """Base class for failures of a people operation."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(PeopleError):
    """No person exists for the given identifier."""

    status_code = status.HTTP_404_NOT_FOUND

    @classmethod
    def for_id(cls, person_id: str) -> "NotFoundError":
        return cls(f"People with id '{person_id}' not found")


class ConflictError(PeopleError):
    """Another person already uses the same firstname and lastname."""

    status_code = status.HTTP_409_CONFLICT

    @classmethod
    def for_name(cls, firstname: str, lastname: str) -> "ConflictError":
        return cls(
            f"People with lastname '{lastname}' and firstname '{firstname}' already exists"
        )


class UnprocessableError(PeopleError):
    """Storage rejected the operation (validation, malformed id, connectivity)."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
