"""Result types for railway-oriented programming.

Storage calls can fail for reasons outside the caller's control (connection
loss, malformed query, server-side error). The policy store returns a Result
instead of raising, and the adapter decides how a Failure surfaces to Casbin.

Usage:
    result = map_value(await self._run(...), lambda docs: len(docs) > 0)
    match result:
        case Success(value=removed):
            ...
        case Failure(error=error):
            ...
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar, Union

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped success type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful storage call; ``value`` is what the caller asked for."""

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed storage call; ``error`` is a DomainError subclass."""

    error: E


Result: TypeAlias = Union[Success[T], Failure[E]]


def map_value(result: Result[T, E], fn: Callable[[T], U]) -> Result[U, E]:
    """Apply ``fn`` to a Success value; pass a Failure through unchanged.

    Args:
        result: Result to transform.
        fn: Conversion for the success value (e.g. documents to entities).

    Returns:
        Success(fn(value)) or the original Failure.
    """
    if isinstance(result, Failure):
        return result
    return Success(value=fn(result.value))
