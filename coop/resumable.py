from abc import ABC
from abc import abstractmethod
from collections.abc import Awaitable
from collections.abc import Coroutine
from collections.abc import Generator
from dataclasses import dataclass
from dataclasses import field
from typing import Any

from .result import Err
from .result import Ok
from .result import Result

type Body[R] = Generator[Any, None, R] | Coroutine[Any, None, R]


class Nothing:
    """Yielded by a body that suspends without producing a value."""

    def __repr__(self):
        return "NOTHING"


NOTHING = Nothing()


@dataclass(eq=False, kw_only=True)
class Suspended:
    """The computation paused at a suspension point."""

    value: Any = field(default=None, repr=False)


@dataclass(eq=False, kw_only=True)
class Completed[R]:
    """The computation finished, and its outcome is fixed."""

    outcome: Result[R, Exception]


type Step[R] = Suspended | Completed[R]


class Resumable[R](ABC):
    """A computation that can be stepped from one suspension point to the next."""

    @abstractmethod
    def step(self) -> Step[R]:
        """Run until the next suspension point or completion."""
        raise NotImplementedError("Subclasses must implement this method.")

    @abstractmethod
    def close(self) -> None:
        """Tear down the computation and release what it holds."""
        raise NotImplementedError("Subclasses must implement this method.")


class CoroutineResumable[R](Resumable[R]):
    """Step a native generator or coroutine object."""

    def __init__(self, body: Body[R]):
        self.__body = body

    def __repr__(self):
        return f"<{type(self).__name__} {self.__body!r}>"

    def step(self) -> Step[R]:
        try:
            value = self.__body.send(None)
        except StopIteration as stop:
            return Completed(outcome=Ok(stop.value))
        except Exception as exception:
            return Completed(outcome=Err(exception))
        return Suspended(value=value)

    def close(self) -> None:
        self.__body.close()


def resumable[R](body: Resumable[R] | Body[R] | Awaitable[R], /) -> Resumable[R]:
    """Convert a computation body into something that can be stepped."""
    match body:
        case Resumable():
            return body
        case Generator() | Coroutine():
            return CoroutineResumable(body)
        case Awaitable():
            return CoroutineResumable(body.__await__())
        case _:
            raise TypeError(f"Cannot step {body!r}: expected a generator or coroutine.")
