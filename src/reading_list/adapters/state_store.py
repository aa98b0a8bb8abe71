"""Immutable snapshot threaded through the state-backed repositories."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from reading_list.domain.models import Book, BookId, User, UserId


@dataclass(frozen=True)
class StoreState:
    """Books and users held together so one run sees a single snapshot.

    Both maps are copied on construction and exposed read-only; every write
    builds a new ``StoreState``.
    """

    books: Mapping[BookId, Book] = field(default_factory=dict)
    users: Mapping[UserId, User] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "books", MappingProxyType(dict(self.books)))
        object.__setattr__(self, "users", MappingProxyType(dict(self.users)))

    def __hash__(self) -> int:
        return hash((frozenset(self.books.items()), frozenset(self.users.items())))

    def with_book(self, book_id: BookId, book: Book) -> "StoreState":
        """Return a snapshot where ``book_id`` maps to ``book``."""
        return StoreState(books={**self.books, book_id: book}, users=self.users)

    def with_user(self, user_id: UserId, user: User) -> "StoreState":
        """Return a snapshot where ``user_id`` maps to ``user``."""
        return StoreState(books=self.books, users={**self.users, user_id: user})
