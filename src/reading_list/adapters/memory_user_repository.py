"""In-memory user repository."""

from dataclasses import dataclass, field

from reading_list.adapters.keys import user_key
from reading_list.domain.models import User, UserId
from reading_list.effects import Try
from reading_list.services.users import UserRepository


@dataclass
class InMemoryUserRepository(UserRepository):
    """User repository backed by a mutable dict.

    Not safe for concurrent writers; callers must serialize access.
    """

    users: dict[UserId, User] = field(default_factory=dict)

    def get_user(self, user_id: UserId) -> Try[User | None]:
        return Try.of(lambda: self.users.get(user_id))

    def add_user(self, user: User) -> Try[None]:
        return Try.of(lambda: self._put(user))

    def update_user(self, user: User) -> Try[None]:
        return Try.of(lambda: self._put(user))

    def _put(self, user: User) -> None:
        self.users[user_key(user)] = user
