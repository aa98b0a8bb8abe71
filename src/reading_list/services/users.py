"""User persistence contract."""

from typing import Protocol

from reading_list.domain.models import User, UserId
from reading_list.effects import Computation


class UserRepository(Protocol):
    """Persistence interface for users, returning computations of one kind."""

    def get_user(self, user_id: UserId) -> Computation[User | None]:
        """Return the user for an id, or ``None`` when it is not stored."""

    def add_user(self, user: User) -> Computation[None]:
        """Store a user under its id, replacing any previous record."""

    def update_user(self, user: User) -> Computation[None]:
        """Replace the user stored under its id, creating it when absent."""
