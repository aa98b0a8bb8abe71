"""Extract the storage key of a record."""

from reading_list.domain.errors import MissingIdentityError
from reading_list.domain.models import Book, BookId, User, UserId


def user_key(user: User) -> UserId:
    """Return the id a user is stored under."""
    if user.id is None:
        raise MissingIdentityError(
            f"Cannot store user without an id: {user.first_name} {user.last_name}"
        )
    return user.id


def book_key(book: Book) -> BookId:
    """Return the id a book is stored under."""
    if book.id is None:
        raise MissingIdentityError(f"Cannot store book without an id: {book.title}")
    return book.id
