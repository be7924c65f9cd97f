"""
Event contract + leaf sources

Contract:
- occurrences() returns the full log, ascending by time (equal times allowed)
- every call recomputes from current upstream state; nothing is cached

Only Source owns data. Everything built from an Event holds a reference
to it and reads through on demand.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from bisect import bisect_left, insort
from operator import attrgetter
from typing import TYPE_CHECKING, Any, Callable, Generic, List, Optional

from timeflow.core.time import wall_clock_us
from timeflow.core.types import Clock, Occurrence, T, TimeVaryingFunction, V, W
from timeflow.utils.logger import logs

if TYPE_CHECKING:
    from timeflow.core.behaviours import Accumulator, Behaviour, Stepper
    from timeflow.core.derived import (
        AppliedEvent,
        CollectEvent,
        FilteredEvent,
        MappedEvent,
        UnionEvent,
    )

_time = attrgetter("time")


class Event(ABC, Generic[T, V]):
    """
    Discrete, time-ordered log of occurrences.

    Preconditions (not checked):
      - Time is totally ordered
      - collect() additionally needs hashable Time with exact equality
    """

    @abstractmethod
    def occurrences(self) -> List[Occurrence]:
        """Fresh, ascending-by-time list of (time, value)."""

    # --------------------------------------------------
    # combinators
    # --------------------------------------------------
    def map(self, transform: Callable[[V], W]) -> "MappedEvent":
        from timeflow.core.derived import MappedEvent

        return MappedEvent(self, transform)

    def filter(self, predicate: Callable[[V], bool]) -> "FilteredEvent":
        from timeflow.core.derived import FilteredEvent

        return FilteredEvent(self, predicate)

    def union(self, *others: "Event") -> "UnionEvent":
        from timeflow.core.derived import UnionEvent

        return UnionEvent([self, *others])

    def collect(self, *others: "Event") -> "CollectEvent":
        from timeflow.core.derived import CollectEvent

        return CollectEvent([self, *others])

    def apply(self, behaviour: "Behaviour[T, TimeVaryingFunction[V, W]]") -> "AppliedEvent":
        from timeflow.core.derived import AppliedEvent

        return AppliedEvent(self, behaviour)

    # --------------------------------------------------
    # behaviours
    # --------------------------------------------------
    def stepper(self, initial: V) -> "Stepper":
        from timeflow.core.behaviours import Stepper

        return Stepper(self, initial)

    def accumulate(self, initial: Any, combine: Callable[[Any, V], Any]) -> "Accumulator":
        from timeflow.core.behaviours import Accumulator

        return Accumulator(self, initial, combine)


class Never(Event[T, V]):
    """Zero occurrences, always. Identity element of union."""

    def occurrences(self) -> List[Occurrence]:
        return []

    def __repr__(self) -> str:
        return "Never()"


class Source(Event[T, V]):
    """
    Source (the only mutable Event)

    Invariants:
      - log is non-strictly ascending by time after every add / prune_to
      - equal times keep arrival order (insert before the first strictly later)
      - version increments on every mutation that changed the log
    """

    def __init__(self) -> None:
        self._occurrences: List[Occurrence] = []
        self._version = 0

    @property
    def version(self) -> int:
        return self._version

    def occurrences(self) -> List[Occurrence]:
        return list(self._occurrences)

    def add(self, value: V, time: T) -> None:
        insort(self._occurrences, Occurrence(time, value), key=_time)
        self._version += 1
        logs.debug(f"[Source] add t={time} (size={len(self._occurrences)})")

    def prune_to(self, cutoff: T) -> None:
        """Drop every occurrence with time < cutoff."""
        n = bisect_left(self._occurrences, cutoff, key=_time)
        if n == 0:
            return

        del self._occurrences[:n]
        self._version += 1
        logs.debug(f"[Source] pruned {n} occurrences before t={cutoff}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self._occurrences)})"


class TimestampedSource(Source[int, V]):
    """
    Source stamped with an integer microsecond clock.

    - add(value) stamps clock() and appends at the tail
    - add(value, time) back-dates through the sorted insert
    - retention_us (optional) prunes everything older than stamp - retention_us
    """

    def __init__(
        self,
        clock: Clock = wall_clock_us,
        retention_us: Optional[int] = None,
    ) -> None:
        super().__init__()
        self.clock = clock
        self.retention_us = retention_us

    def now(self) -> int:
        return self.clock()

    def add(self, value: V, time: Optional[int] = None) -> None:
        if time is not None:
            super().add(value, time)
            return

        stamp = self.now()
        if self._occurrences and stamp < self._occurrences[-1].time:
            # non-monotonic clock: keep the ordering invariant anyway
            logs.warning(
                f"[TimestampedSource] clock regression: {stamp} < {self._occurrences[-1].time}"
            )
            super().add(value, stamp)
        else:
            self._occurrences.append(Occurrence(stamp, value))
            self._version += 1

        if self.retention_us is not None:
            self.prune_to(stamp - self.retention_us)


# --------------------------------------------------
# n-ary helpers
# --------------------------------------------------
def union(*events: Event) -> Event:
    """Merge any number of Events; union() is Never()."""
    if not events:
        return Never()
    first, *rest = events
    return first.union(*rest)


def collect(*events: Event) -> Event:
    """Group any number of Events by exact time; collect() is Never()."""
    if not events:
        return Never()
    first, *rest = events
    return first.collect(*rest)
