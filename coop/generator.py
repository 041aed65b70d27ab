from __future__ import annotations

from collections.abc import Awaitable
from collections.abc import Callable
from functools import wraps
from typing import Any

from .handle import Computation
from .handle import Handle
from .handle import InvalidOperation
from .handle import InvalidState
from .result import Err
from .result import Ok
from .resumable import Body
from .resumable import Completed
from .resumable import NOTHING
from .resumable import Resumable
from .resumable import Step
from .resumable import Suspended
from .resumable import resumable


class Generator[T]:
    """A lazily produced, single-pass sequence of values.

    Nothing in the body runs until ``begin`` is called. The iterator it
    returns takes over the computation, so each generator can be walked
    through exactly once.
    """

    def __init__(
        self,
        body: Resumable[Any] | Body[Any] | Awaitable[Any] | None = None,
        /,
    ):
        if body is None:
            self.__handle = Handle[Any]()
        else:
            self.__handle = Handle(Computation(resumable=resumable(body)))

    def __repr__(self):
        state = "empty" if self.__handle.empty else "ready"
        return f"<{type(self).__name__} {state}>"

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __iter__(self) -> Iterator[T]:
        return self.begin()

    def __enter__(self) -> Generator[T]:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def is_empty(self) -> bool:
        return self.__handle.empty

    def begin(self) -> Iterator[T]:
        """Start producing values, handing the computation to an iterator."""
        if self.__handle.empty:
            raise InvalidState("Accessing an empty generator")
        iterator = Iterator[T](self.__handle.take())
        iterator.advance()
        return iterator

    @staticmethod
    def end() -> Iterator[Any]:
        return END

    def move(self) -> Generator[T]:
        """Move the computation into a new generator, leaving this one empty."""
        generator = Generator[T]()
        generator.__handle = self.__handle.take()
        return generator

    def close(self) -> None:
        self.__handle.close()


class Iterator[T]:
    """The single iterator over a generator's values.

    A live iterator holds the most recent value, or the failure that
    ended the computation until that failure has been raised. Once the
    computation is over and nothing is left to deliver, the iterator is
    at the end, and only end iterators compare equal.
    """

    def __init__(self, handle: Handle[Any] | None = None, /):
        self.__handle = handle if handle is not None else Handle[Any]()
        self.__current: Ok[T] | Err[Exception] | None = None
        self.__handed_out = False

    def __repr__(self):
        if self.is_end():
            return f"<{type(self).__name__} end>"
        match self.__current:
            case Err(error=error):
                state = f"failed {error!r}"
            case Ok(value=value):
                state = f"at {value!r}"
            case _:
                state = "not started"
        return f"<{type(self).__name__} {state}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Iterator):
            return NotImplemented
        return self.is_end() and other.is_end()

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if self.__handed_out and not self.is_end():
            self.advance()
        if self.is_end():
            raise StopIteration
        self.__handed_out = True
        return self.current_value()

    def __enter__(self) -> Iterator[T]:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def is_end(self) -> bool:
        return self.__current is None and self.__handle.empty

    def current_value(self) -> T:
        """Give the most recent value, or raise the failure that ended the body."""
        match self.__current:
            case Ok(value=value):
                return value
            case Err(error=error):
                self.__current = None
                raise error
            case _:
                raise InvalidOperation("dereference of end iterator")

    def advance(self) -> None:
        """Resume the computation until it yields a value or finishes."""
        if self.is_end():
            raise InvalidOperation("advance past end")
        if isinstance(self.__current, Err):
            # Raises the failure that is still pending.
            self.current_value()

        self.__handed_out = False
        match self.__resume():
            case Suspended(value=value):
                self.__current = Ok(value)
            case Completed(outcome=Err() as failure):
                self.__handle.close()
                self.__current = failure
            case Completed():
                self.__handle.close()
                self.__current = None

    def close(self) -> None:
        """Abandon the sequence, tearing down the computation if still running.

        A failure that ended the body but has not been raised yet is raised
        here, after the iterator has reached the end.
        """
        pending = self.__current
        self.__handle.close()
        self.__current = None
        if isinstance(pending, Err):
            raise pending.error

    def __resume(self) -> Step[Any]:
        computation = self.__handle.computation
        try:
            step = computation.resume()
            # Awaiting a task suspends without producing anything.
            while isinstance(step, Suspended) and step.value is NOTHING:
                step = computation.resume()
        except BaseException:
            self.__handle.close()
            self.__current = None
            raise
        return step


END = Iterator[Any]()


def generator[**A](fn: Callable[A, Body[Any]]) -> Callable[A, Generator[Any]]:
    """Decorate a generator or coroutine function to return Generators."""

    @wraps(fn)
    def wrapper(*args: A.args, **kwargs: A.kwargs) -> Generator[Any]:
        return Generator(fn(*args, **kwargs))

    return wrapper
