import pytest

from .result import Err
from .result import Ok
from .result import unwrap


def test_unwrap_gives_the_value():
    assert unwrap(Ok(7)) == 7
    assert unwrap(Ok(None)) is None


def test_unwrap_raises_the_error_itself():
    error = LookupError("missing")
    with pytest.raises(LookupError) as info:
        unwrap(Err(error))
    assert info.value is error
