"""Result monad for the I/O edges of Pointlist.

The task core never fails, but reading seed files and the config file
can. Those operations return a Result (an Ok value or an Err message)
instead of raising, so callers decide how to surface the problem.

Example usage:
    >>> result = SeedRepository().load(Path("tasks.json"))
    >>> if is_ok(result):
    ...     session = TaskSession(tasks=result.value)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful result.

    Attributes:
        value: The success value of type T.
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed result.

    Attributes:
        error: The error value of type E, usually a message.
    """

    error: E


# Using Union here as TypeVar aliases don't work with | syntax at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007


def is_ok(result: Ok[T] | Err[E]) -> bool:
    """Return True if the result is Ok."""
    return isinstance(result, Ok)


def is_err(result: Ok[T] | Err[E]) -> bool:
    """Return True if the result is Err."""
    return isinstance(result, Err)
