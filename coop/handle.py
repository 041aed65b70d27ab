from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field

from .resumable import Completed
from .resumable import Resumable
from .resumable import Step
from .result import Err
from .result import Result


class InvalidState(Exception):
    """The handle does not own a computation."""


class InvalidOperation(Exception):
    """The operation is not valid in the current state."""


@dataclass(eq=False, kw_only=True)
class Computation[R]:
    """A resumable computation together with its outcome, once it has one."""

    resumable: Resumable[R]
    outcome: Result[R, BaseException] | None = field(default=None, repr=False)

    @property
    def done(self) -> bool:
        return self.outcome is not None

    def resume(self) -> Step[R]:
        if self.done:
            raise InvalidOperation("Resuming a completed computation")
        try:
            step = self.resumable.step()
        except BaseException as exception:
            # Interrupts escape the body unrecorded, so the outcome is fixed here.
            self.outcome = Err(exception)
            self.resumable.close()
            raise
        if isinstance(step, Completed):
            self.outcome = step.outcome
        return step

    def close(self) -> None:
        self.resumable.close()


class Handle[R]:
    """Exclusive ownership of a single computation.

    A handle is either empty or owns exactly one computation. Ownership
    moves between handles with ``take``, which leaves the source empty,
    and ``close`` destroys the computation that is owned.
    """

    def __init__(self, computation: Computation[R] | None = None, /):
        self.__computation = computation

    def __repr__(self):
        if self.__computation is None:
            return f"<{type(self).__name__} empty>"
        return f"<{type(self).__name__} {self.__computation.resumable!r}>"

    def __bool__(self) -> bool:
        return self.__computation is not None

    @property
    def empty(self) -> bool:
        return self.__computation is None

    @property
    def computation(self) -> Computation[R]:
        if self.__computation is None:
            raise InvalidState("Accessing an empty coroutine handle")
        return self.__computation

    def take(self) -> Handle[R]:
        """Move the computation into a new handle."""
        computation, self.__computation = self.__computation, None
        return Handle(computation)

    def close(self) -> None:
        computation, self.__computation = self.__computation, None
        if computation is not None:
            computation.close()
