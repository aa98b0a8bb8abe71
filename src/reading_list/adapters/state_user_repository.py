"""User repository expressed as pure state transitions."""

from dataclasses import dataclass

from reading_list.adapters.keys import user_key
from reading_list.adapters.state_store import StoreState
from reading_list.domain.models import User, UserId
from reading_list.effects import StateAction
from reading_list.services.users import UserRepository


@dataclass(frozen=True)
class StateUserRepository(UserRepository):
    """Reads and writes the ``users`` half of a ``StoreState``."""

    def get_user(self, user_id: UserId) -> StateAction[StoreState, User | None]:
        return StateAction.inspect(lambda state: state.users.get(user_id))

    def add_user(self, user: User) -> StateAction[StoreState, None]:
        return StateAction.modify(lambda state: state.with_user(user_key(user), user))

    def update_user(self, user: User) -> StateAction[StoreState, None]:
        return self.add_user(user)
