"""In-memory book repository."""

from dataclasses import dataclass, field

from reading_list.adapters.keys import book_key
from reading_list.domain.models import Book, BookId
from reading_list.effects import Try
from reading_list.services.books import BookRepository


@dataclass
class InMemoryBookRepository(BookRepository):
    """Book repository backed by a mutable dict, listed in insertion order."""

    books: dict[BookId, Book] = field(default_factory=dict)

    def list_books(self) -> Try[list[Book]]:
        return Try.of(lambda: list(self.books.values()))

    def get_book(self, book_id: BookId) -> Try[Book | None]:
        return Try.of(lambda: self.books.get(book_id))

    def add_book(self, book: Book) -> Try[None]:
        def put() -> None:
            self.books[book_key(book)] = book

        return Try.of(put)
