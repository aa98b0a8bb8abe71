"""Computation types that repositories return and services compose.

A repository never hands back a bare value. It returns a computation that
may fail, and the service chains those computations with ``map`` and
``bind``. Two computation types are provided:

* ``Try``: evaluated eagerly, holding either the value or the exception.
* ``StateAction``: a pure transition ``state -> (state, Try)`` that does
  nothing until ``run`` is called with a state snapshot.

Services build values in a computation type through an ``Effect``, so the
same business logic works for both.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

T = TypeVar("T")
U = TypeVar("U")
S = TypeVar("S")


class Computation(Protocol[T]):
    """Anything that can be sequenced with ``map`` and ``bind``."""

    def map(self, func: Callable[[T], U]) -> "Computation[U]":
        """Transform the produced value."""

    def bind(self, func: Callable[[T], "Computation[U]"]) -> "Computation[U]":
        """Feed the produced value into the next computation."""


class Try(Generic[T]):
    """Outcome of a synchronous computation: a value or the raised error."""

    @staticmethod
    def of(thunk: Callable[[], T]) -> "Try[T]":
        """Evaluate ``thunk`` and capture what it raises."""
        try:
            return Success(thunk())
        except Exception as exc:  # noqa: BLE001
            return Failure(exc)

    def map(self, func: Callable[[T], U]) -> "Try[U]":
        raise NotImplementedError

    def bind(self, func: Callable[[T], "Try[U]"]) -> "Try[U]":
        raise NotImplementedError

    def get(self) -> T:
        raise NotImplementedError

    def is_success(self) -> bool:
        raise NotImplementedError

    def is_failure(self) -> bool:
        return not self.is_success()


@dataclass(frozen=True)
class Success(Try[T]):
    """A computation that produced ``value``."""

    value: T

    def map(self, func: Callable[[T], U]) -> Try[U]:
        return Try.of(lambda: func(self.value))

    def bind(self, func: Callable[[T], Try[U]]) -> Try[U]:
        try:
            return func(self.value)
        except Exception as exc:  # noqa: BLE001
            return Failure(exc)

    def get(self) -> T:
        return self.value

    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure(Try[T]):
    """A computation that failed with ``error``."""

    error: Exception

    def map(self, func: Callable[[T], U]) -> Try[U]:
        return Failure(self.error)

    def bind(self, func: Callable[[T], Try[U]]) -> Try[U]:
        return Failure(self.error)

    def get(self) -> T:
        raise self.error

    def is_success(self) -> bool:
        return False


@dataclass(frozen=True)
class StateAction(Generic[S, T]):
    """A pure state transition producing a ``Try``.

    Once a step fails, the steps bound after it are never evaluated and the
    state reached at the failing step is returned as is. An exception raised
    inside a transition becomes a ``Failure`` and leaves the state unchanged.

    ``bind`` only records the continuation; ``run`` walks the recorded chain
    in a loop, so chain length is not limited by the interpreter stack.
    """

    step: Callable[[S], tuple[S, Try[Any]]]
    continuations: tuple[Callable[[Any], "StateAction[S, Any]"], ...] = ()

    @staticmethod
    def inspect(func: Callable[[S], T]) -> "StateAction[S, T]":
        """Read a value out of the state without changing it."""
        return StateAction(lambda state: (state, Success(func(state))))

    @staticmethod
    def modify(func: Callable[[S], S]) -> "StateAction[S, None]":
        """Replace the state with ``func(state)``."""
        return StateAction(lambda state: (func(state), Success(None)))

    def run(self, state: S) -> tuple[S, Try[T]]:
        """Execute the transition against ``state``."""
        step = self.step
        pending = list(reversed(self.continuations))
        while True:
            try:
                state, outcome = step(state)
            except Exception as exc:  # noqa: BLE001
                return state, Failure(exc)
            if outcome.is_failure() or not pending:
                return state, outcome
            following = outcome.map(pending.pop())
            if following.is_failure():
                return state, Failure(following.error)
            action = following.get()
            step = action.step
            pending.extend(reversed(action.continuations))

    def map(self, func: Callable[[T], U]) -> "StateAction[S, U]":
        return self.bind(
            lambda value: StateAction(lambda state: (state, Success(func(value))))
        )

    def bind(self, func: Callable[[T], "StateAction[S, U]"]) -> "StateAction[S, U]":
        return StateAction(self.step, (*self.continuations, func))


class Effect(Protocol):
    """Builds values inside one computation type."""

    def pure(self, value: Any) -> Any:
        """Wrap a value that is already known."""

    def fail(self, error: Exception) -> Any:
        """Wrap a failure."""

    def traverse(self, items: Iterable[T], func: Callable[[T], Any]) -> Any:
        """Run ``func`` for each item in order and collect the results."""


class TryEffect(Effect):
    """Effect for eagerly evaluated ``Try`` computations."""

    def pure(self, value: T) -> Try[T]:
        return Success(value)

    def fail(self, error: Exception) -> Try[Any]:
        return Failure(error)

    def traverse(
        self, items: Iterable[T], func: Callable[[T], Try[U]]
    ) -> Try[list[U]]:
        results: list[U] = []
        for item in items:
            outcome = Success(item).bind(func)
            if outcome.is_failure():
                return Failure(outcome.error)
            results.append(outcome.get())
        return Success(results)


class StateEffect(Effect):
    """Effect for ``StateAction`` computations."""

    def pure(self, value: T) -> StateAction[Any, T]:
        return StateAction(lambda state: (state, Success(value)))

    def fail(self, error: Exception) -> StateAction[Any, Any]:
        return StateAction(lambda state: (state, Failure(error)))

    def traverse(
        self, items: Iterable[T], func: Callable[[T], StateAction[S, U]]
    ) -> StateAction[S, list[U]]:
        snapshot = tuple(items)

        def step(state: S) -> tuple[S, Try[list[U]]]:
            results: list[U] = []
            for item in snapshot:
                state, outcome = func(item).run(state)
                if outcome.is_failure():
                    return state, Failure(outcome.error)
                results.append(outcome.get())
            return state, Success(results)

        return StateAction(step)


TRY_EFFECT = TryEffect()
STATE_EFFECT = StateEffect()
