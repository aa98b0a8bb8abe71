"""Tests for the state-threaded repositories."""

from dataclasses import replace

import pytest

from reading_list.adapters.state_book_repository import StateBookRepository
from reading_list.adapters.state_store import StoreState
from reading_list.adapters.state_user_repository import StateUserRepository
from reading_list.domain.errors import MissingIdentityError
from reading_list.domain.models import Book, User, UserId
from reading_list.effects import Success


def test_added_user_can_be_retrieved(user: User) -> None:
    repository = StateUserRepository()
    action = repository.add_user(user).bind(lambda _: repository.get_user(user.id))

    _, outcome = action.run(StoreState())

    assert outcome == Success(user)


def test_user_can_be_updated(user: User) -> None:
    repository = StateUserRepository()
    action = (
        repository.add_user(user)
        .bind(lambda _: repository.update_user(replace(user, first_name="Fred")))
        .bind(lambda _: repository.get_user(UserId("1")))
    )

    _, outcome = action.run(StoreState())

    assert outcome.get().first_name == "Fred"


def test_update_user_is_idempotent(user: User) -> None:
    repository = StateUserRepository()
    once, _ = repository.update_user(user).run(StoreState())
    twice, _ = repository.update_user(user).run(once)

    assert twice == once


def test_writes_do_not_touch_the_input_snapshot(user: User) -> None:
    repository = StateUserRepository()
    initial = StoreState()

    updated, _ = repository.add_user(user).run(initial)

    assert initial.users == {}
    assert updated.users == {user.id: user}


def test_user_without_id_fails_without_changing_state() -> None:
    repository = StateUserRepository()
    initial = StoreState()

    state, outcome = repository.add_user(
        User(id=None, first_name="No", last_name="Id")
    ).run(initial)

    assert state is initial
    assert isinstance(outcome.error, MissingIdentityError)


def test_added_book_can_be_retrieved(book1: Book) -> None:
    repository = StateBookRepository()
    action = repository.add_book(book1).bind(lambda _: repository.get_book(book1.id))

    _, outcome = action.run(StoreState())

    assert outcome == Success(book1)


def test_added_book_can_be_listed(book1: Book) -> None:
    repository = StateBookRepository()
    action = repository.add_book(book1).bind(lambda _: repository.list_books())

    _, outcome = action.run(StoreState())

    assert outcome == Success([book1])


def test_both_repositories_share_one_snapshot(user: User, book1: Book) -> None:
    users = StateUserRepository()
    books = StateBookRepository()
    action = books.add_book(book1).bind(lambda _: users.add_user(user))

    state, _ = action.run(StoreState())

    assert state == StoreState(books={book1.id: book1}, users={user.id: user})


def test_later_snapshot_cannot_change_earlier_one(
    user: User, book1: Book, book2: Book
) -> None:
    initial = StoreState(books={book1.id: book1})

    after, _ = StateUserRepository().add_user(user).run(initial)

    with pytest.raises(TypeError):
        after.books[book2.id] = book2
    assert after.books is not initial.books
    assert dict(initial.books) == {book1.id: book1}


def test_snapshot_is_detached_from_callers_dict(book1: Book, book2: Book) -> None:
    books = {book1.id: book1}
    state = StoreState(books=books)

    books[book2.id] = book2

    assert dict(state.books) == {book1.id: book1}


def test_equal_snapshots_hash_equally(user: User, book1: Book, book2: Book) -> None:
    first = StoreState(books={book1.id: book1, book2.id: book2}, users={user.id: user})
    second = StoreState(books={book2.id: book2, book1.id: book1}, users={user.id: user})

    assert first == second
    assert hash(first) == hash(second)
    assert hash(StoreState()) == hash(StoreState())
