"""Book persistence contract."""

from typing import Protocol

from reading_list.domain.models import Book, BookId
from reading_list.effects import Computation


class BookRepository(Protocol):
    """Persistence interface for the book catalogue."""

    def list_books(self) -> Computation[list[Book]]:
        """Return every stored book in the backend's iteration order."""

    def get_book(self, book_id: BookId) -> Computation[Book | None]:
        """Return a book by id, if present."""

    def add_book(self, book: Book) -> Computation[None]:
        """Store a book under its id, replacing any previous record."""
