"""Reading list business logic, generic over the repositories' computation type."""

import logging
from dataclasses import dataclass, replace

from reading_list.domain.errors import NoSuchUserError
from reading_list.domain.models import BookId, ReadingList, User, UserId
from reading_list.effects import Computation, Effect
from reading_list.services.books import BookRepository
from reading_list.services.users import UserRepository

_logger = logging.getLogger(__name__)


@dataclass
class ReadingListService:
    """Application service for reading list operations.

    Both repositories and ``effect`` must agree on the computation type. Every
    operation is a chain of repository calls in that type, so a failing step
    stops the chain before any later write runs.
    """

    user_repository: UserRepository
    book_repository: BookRepository
    effect: Effect

    def get_reading_list(self, user_id: UserId) -> Computation[ReadingList]:
        """Return the user with their books resolved in reading order.

        Book ids that no longer resolve are skipped rather than failing.
        """
        return self._require_user(user_id).bind(self._resolve)

    def add_to_reading_list(
        self, user_id: UserId, book_id: BookId
    ) -> Computation[None]:
        """Append a book id to the user's reading list.

        The book is not looked up, and a repeated id is appended again.
        """
        return self._require_user(user_id).bind(
            lambda user: self._save(
                replace(user, books=(*user.books, book_id)), "add", book_id
            )
        )

    def remove_from_reading_list(
        self, user_id: UserId, book_id: BookId
    ) -> Computation[None]:
        """Remove every occurrence of a book id from the user's reading list."""
        return self._require_user(user_id).bind(
            lambda user: self._save(
                replace(
                    user,
                    books=tuple(entry for entry in user.books if entry != book_id),
                ),
                "remove",
                book_id,
            )
        )

    def _require_user(self, user_id: UserId) -> Computation[User]:
        """Look up a user, turning absence into ``NoSuchUserError``."""

        def check(user: User | None) -> Computation[User]:
            if user is None:
                _logger.info("Reading list user missing: user_id=%s", user_id)
                return self.effect.fail(NoSuchUserError(user_id))
            return self.effect.pure(user)

        return self.user_repository.get_user(user_id).bind(check)

    def _resolve(self, user: User) -> Computation[ReadingList]:
        return self.effect.traverse(user.books, self.book_repository.get_book).map(
            lambda found: ReadingList(
                user=user, books=tuple(book for book in found if book is not None)
            )
        )

    def _save(self, user: User, action: str, book_id: BookId) -> Computation[None]:
        _logger.info(
            "Reading list %s: user_id=%s book_id=%s", action, user.id, book_id
        )
        return self.user_repository.update_user(user)
