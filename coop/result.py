from dataclasses import dataclass


@dataclass
class Ok[T]:
    value: T


@dataclass
class Err[E: BaseException]:
    error: E


type Result[T, E: BaseException] = Ok[T] | Err[E]


def unwrap[T](result: Result[T, BaseException], /) -> T:
    """Give the value of a result, or raise its error."""
    match result:
        case Ok(value=value):
            return value
        case Err(error=error):
            raise error
