from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E


Result: TypeAlias = Ok[T] | Err[E]


def ok_values(results: Iterable[Result[T, E]]) -> list[T]:
    """Keep the values of the Ok results, dropping every Err."""
    return [r.value for r in results if isinstance(r, Ok)]
