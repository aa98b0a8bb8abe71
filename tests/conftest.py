"""Shared test fixtures."""

import pytest

from reading_list.config import Settings
from reading_list.containers import AppContainer, build_container
from reading_list.domain.models import Book, BookId, User, UserId

USER_ID = UserId("1")


@pytest.fixture
def book1() -> Book:
    return Book(id=BookId("1"), title="A Game of Thrones", author="George R. R. Martin")


@pytest.fixture
def book2() -> Book:
    return Book(id=BookId("2"), title="A Clash of Kings", author="George R. R. Martin")


@pytest.fixture
def user() -> User:
    return User(
        id=USER_ID,
        first_name="Eli",
        last_name="Jordan",
        books=(BookId("1"), BookId("2")),
    )


@pytest.fixture(params=["memory", "state"])
def backend(request: pytest.FixtureRequest) -> str:
    return request.param


@pytest.fixture
def settings(backend: str) -> Settings:
    return Settings(backend=backend, log_level="DEBUG")


@pytest.fixture
def container(
    settings: Settings, user: User, book1: Book, book2: Book
) -> AppContainer:
    built = build_container(settings)
    built.seed([user], [book1, book2])
    return built
