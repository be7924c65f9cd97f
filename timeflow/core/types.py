# timeflow/core/types.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, NamedTuple, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")          # Time: totally ordered (hashable for collect)
V = TypeVar("V")          # Value
W = TypeVar("W")          # mapped Value
Src = TypeVar("Src", contravariant=True)
Dst = TypeVar("Dst", covariant=True)

Clock = Callable[[], int]


class Occurrence(NamedTuple):
    """One (time, value) entry of an Event. Equal to the plain tuple."""

    time: Any
    value: Any


@runtime_checkable
class TimeVaryingFunction(Protocol[Src, Dst]):
    """
    The value type a Behaviour must carry to be used with Event.apply().
    """

    @property
    def transform(self) -> Callable[[Src], Dst]:
        ...


@dataclass(frozen=True)
class Function(Generic[V, W]):
    """
    Nominal wrapper around a single-argument pure function.
    """

    transform: Callable[[V], W]

    def __call__(self, value: V) -> W:
        return self.transform(value)
