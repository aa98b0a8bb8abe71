"""Dependency container wiring for the application."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from reading_list.adapters.memory_book_repository import InMemoryBookRepository
from reading_list.adapters.memory_user_repository import InMemoryUserRepository
from reading_list.adapters.state_book_repository import StateBookRepository
from reading_list.adapters.state_store import StoreState
from reading_list.adapters.state_user_repository import StateUserRepository
from reading_list.config import Settings, parse_backend
from reading_list.domain.models import Book, User
from reading_list.effects import (
    STATE_EFFECT,
    TRY_EFFECT,
    Computation,
    Effect,
    StateAction,
    Try,
)
from reading_list.services.books import BookRepository
from reading_list.services.reading_list import ReadingListService
from reading_list.services.users import UserRepository


@dataclass
class StateRunner:
    """Runs state actions, keeping the latest snapshot between runs."""

    state: StoreState = field(default_factory=StoreState)

    def __call__(self, action: StateAction[StoreState, Any]) -> Try[Any]:
        self.state, outcome = action.run(self.state)
        return outcome


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    backend: str
    user_repository: UserRepository
    book_repository: BookRepository
    effect: Effect
    reading_list_service: ReadingListService
    run: Callable[[Computation[Any]], Try[Any]]

    def seed(self, users: list[User], books: list[Book]) -> None:
        """Load initial users and books, raising if any record is rejected."""
        computation = self.effect.traverse(
            books, self.book_repository.add_book
        ).bind(lambda _: self.effect.traverse(users, self.user_repository.add_user))
        self.run(computation).get()


def _run_try(computation: Try[Any]) -> Try[Any]:
    return computation


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the dependency container for the configured backend."""
    resolved_settings = settings or Settings()
    backend = parse_backend(resolved_settings.backend)
    user_repository: UserRepository
    book_repository: BookRepository
    if backend == "state":
        user_repository = StateUserRepository()
        book_repository = StateBookRepository()
        effect: Effect = STATE_EFFECT
        run: Callable[[Any], Try[Any]] = StateRunner()
    else:
        user_repository = InMemoryUserRepository()
        book_repository = InMemoryBookRepository()
        effect = TRY_EFFECT
        run = _run_try
    reading_list_service = ReadingListService(
        user_repository=user_repository,
        book_repository=book_repository,
        effect=effect,
    )
    return AppContainer(
        settings=resolved_settings,
        backend=backend,
        user_repository=user_repository,
        book_repository=book_repository,
        effect=effect,
        reading_list_service=reading_list_service,
        run=run,
    )
