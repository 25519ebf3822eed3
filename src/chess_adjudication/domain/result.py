from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome of a parse, mapping or rule construction."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome; ``error`` is one of the ``CaraError`` variants."""

    error: E


Result: TypeAlias = Ok[T] | Err[E]
