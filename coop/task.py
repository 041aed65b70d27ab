from __future__ import annotations

from collections.abc import Awaitable
from collections.abc import Callable
from collections.abc import Generator
from enum import Enum
from functools import wraps
from typing import Any

from .handle import Computation
from .handle import Handle
from .result import unwrap
from .resumable import Body
from .resumable import NOTHING
from .resumable import Resumable
from .resumable import resumable


class StartPolicy(Enum):
    EAGER = "eager"
    LAZY = "lazy"


class Task[R](Awaitable[R]):
    """A computation that produces a single value, or fails.

    The task owns its computation exclusively. It is stepped only when
    the caller asks, and a failure in the body is held until the result
    is requested with ``get``.
    """

    def __init__(
        self,
        body: Resumable[R] | Body[R] | Awaitable[R] | None = None,
        /,
        *,
        start: StartPolicy = StartPolicy.EAGER,
    ):
        if body is None:
            self.__handle = Handle[R]()
            return

        self.__handle = Handle(Computation(resumable=resumable(body)))
        if start is StartPolicy.EAGER:
            self.advance()

    def __repr__(self):
        if self.__handle.empty:
            state = "empty"
        elif self.__handle.computation.done:
            state = "done"
        else:
            state = "pending"
        return f"<{type(self).__name__} {state}>"

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __enter__(self) -> Task[R]:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __await__(self) -> Generator[Any, None, R]:
        self.advance()
        while not self.is_done():
            yield NOTHING
            self.advance()
        return self.get()

    def is_empty(self) -> bool:
        return self.__handle.empty

    def is_done(self) -> bool:
        return self.__handle.computation.done

    def advance(self) -> None:
        """Step the computation once, unless it is already done."""
        computation = self.__handle.computation
        if not computation.done:
            computation.resume()

    def wait(self) -> None:
        """Step the computation until it is done."""
        computation = self.__handle.computation
        while not computation.done:
            computation.resume()

    def get(self) -> R:
        """Wait for the result and take it, leaving the task empty."""
        self.wait()
        handle = self.__handle.take()
        outcome = handle.computation.outcome
        handle.close()
        assert outcome is not None
        return unwrap(outcome)

    take_result = get

    def move(self) -> Task[R]:
        """Move the computation into a new task, leaving this one empty."""
        task = Task[R]()
        task.__handle = self.__handle.take()
        return task

    def close(self) -> None:
        """Destroy the computation, finished or not."""
        self.__handle.close()


def task[**A, R](fn: Callable[A, Body[R]]) -> Callable[A, Task[R]]:
    """Decorate a generator or coroutine function to start tasks eagerly."""

    @wraps(fn)
    def wrapper(*args: A.args, **kwargs: A.kwargs) -> Task[R]:
        return Task(fn(*args, **kwargs), start=StartPolicy.EAGER)

    return wrapper


def lazy_task[**A, R](fn: Callable[A, Body[R]]) -> Callable[A, Task[R]]:
    """Decorate a generator or coroutine function to create tasks lazily."""

    @wraps(fn)
    def wrapper(*args: A.args, **kwargs: A.kwargs) -> Task[R]:
        return Task(fn(*args, **kwargs), start=StartPolicy.LAZY)

    return wrapper
