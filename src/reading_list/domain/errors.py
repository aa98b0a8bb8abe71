"""Errors raised by reading list operations."""

from reading_list.domain.models import UserId


class ReadingListError(Exception):
    """Base class for reading list domain errors."""


class NoSuchUserError(ReadingListError):
    """Raised when an operation needs a user that is not stored."""

    def __init__(self, user_id: UserId) -> None:
        super().__init__(f"No such user: {user_id}")
        self.user_id = user_id


class MissingIdentityError(ValueError):
    """Raised by a backend when asked to store a record without an id."""
