from collections.abc import Awaitable
from collections.abc import Generator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, kw_only=True)
class Suspend(Awaitable[None]):
    """A single suspension point for ``async def`` bodies.

    Awaiting it hands ``value`` to whoever is driving the computation,
    and resumes with ``None`` the next time the computation is stepped.
    """

    value: Any = None

    def __await__(self) -> Generator[Any, None, None]:
        yield self.value


def suspend(value: Any = None, /) -> Suspend:
    return Suspend(value=value)
