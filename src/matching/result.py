"""Fallible results - a value that is either a success payload or an error message.

Errors in the report flow travel as ``Failure`` values instead of
exceptions, so two independently fetched inputs can be combined and the
first failure (left to right) is what the caller sees.
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying a payload."""

    value: T

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Failed outcome carrying a human-readable message."""

    message: str

    @property
    def is_success(self) -> bool:
        return False


FallibleResult = Union[Success[T], Failure]


def map_result(result: "FallibleResult[T]", fn: Callable[[T], U]) -> "FallibleResult[U]":
    """Apply *fn* to a success payload; a Failure passes through untouched."""
    if isinstance(result, Failure):
        return result
    return Success(fn(result.value))


def combine(
    first: "FallibleResult[T]",
    second: "FallibleResult[U]",
    fn: Callable[[T, U], R],
) -> "FallibleResult[R]":
    """Combine two independent results with a two-argument function.

    Checked in fixed order: a failed *first* wins even when *second* also
    failed, then a failed *second*, and only when both succeeded is *fn*
    called with the unwrapped payloads.
    """
    if isinstance(first, Failure):
        return first
    if isinstance(second, Failure):
        return second
    return Success(fn(first.value, second.value))


def flatten(result: "FallibleResult[FallibleResult[T]]") -> "FallibleResult[T]":
    """Collapse a nested result into a single level."""
    if isinstance(result, Failure):
        return result
    return result.value


def get_or_else(result: "FallibleResult[T]", on_failure: Callable[[str], T]) -> T:
    """Unwrap a success payload, or build a fallback from the failure message."""
    if isinstance(result, Failure):
        return on_failure(result.message)
    return result.value
