"""Book repository expressed as pure state transitions."""

from dataclasses import dataclass

from reading_list.adapters.keys import book_key
from reading_list.adapters.state_store import StoreState
from reading_list.domain.models import Book, BookId
from reading_list.effects import StateAction
from reading_list.services.books import BookRepository


@dataclass(frozen=True)
class StateBookRepository(BookRepository):
    """Reads and writes the ``books`` half of a ``StoreState``."""

    def list_books(self) -> StateAction[StoreState, list[Book]]:
        return StateAction.inspect(lambda state: list(state.books.values()))

    def get_book(self, book_id: BookId) -> StateAction[StoreState, Book | None]:
        return StateAction.inspect(lambda state: state.books.get(book_id))

    def add_book(self, book: Book) -> StateAction[StoreState, None]:
        return StateAction.modify(lambda state: state.with_book(book_key(book), book))
