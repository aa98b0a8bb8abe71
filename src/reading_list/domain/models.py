"""Domain models for the reading list."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class UserId:
    """Opaque identifier of a user."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BookId:
    """Opaque identifier of a book."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class User:
    """Represents a user and the ordered ids of the books they want to read."""

    id: UserId | None
    first_name: str
    last_name: str
    books: tuple[BookId, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Book:
    """Represents a book stored in the catalogue."""

    id: BookId | None
    title: str
    author: str


@dataclass(frozen=True)
class ReadingList:
    """A user paired with the books their reading list resolves to."""

    user: User
    books: tuple[Book, ...]
