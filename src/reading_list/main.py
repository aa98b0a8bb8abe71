"""Demo entry point that prints a sample reading list."""

import logging

from reading_list.app_logging import configure_logging
from reading_list.config import Settings
from reading_list.containers import build_container
from reading_list.domain.models import Book, BookId, User, UserId

_logger = logging.getLogger(__name__)

SAMPLE_BOOKS = [
    Book(id=BookId("1"), title="A Game of Thrones", author="George R. R. Martin"),
    Book(id=BookId("2"), title="A Clash of Kings", author="George R. R. Martin"),
]
SAMPLE_USER = User(
    id=UserId("1"),
    first_name="Eli",
    last_name="Jordan",
    books=(BookId("1"), BookId("2")),
)


def main() -> None:
    """Seed the configured backend and print the sample user's reading list."""
    settings = Settings()
    configure_logging(settings.log_level)
    container = build_container(settings)
    _logger.info(
        "Reading list demo: environment=%s backend=%s",
        settings.environment,
        container.backend,
    )
    container.seed([SAMPLE_USER], SAMPLE_BOOKS)

    service = container.reading_list_service
    reading_list = container.run(service.get_reading_list(SAMPLE_USER.id)).get()

    user = reading_list.user
    name = f"{user.first_name} {user.last_name}"
    print(f"Reading list for {name} ({container.backend}):")
    for position, book in enumerate(reading_list.books, start=1):
        print(f"{position}. {book.title} by {book.author}")


if __name__ == "__main__":
    main()
