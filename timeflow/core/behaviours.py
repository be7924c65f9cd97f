# timeflow/core/behaviours.py
from __future__ import annotations

from abc import ABC, abstractmethod
from bisect import bisect_right
from functools import reduce
from operator import attrgetter
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, Iterator

from timeflow.core.types import Occurrence, T, V

if TYPE_CHECKING:
    from timeflow.core.events import Event

_time = attrgetter("time")


class Behaviour(ABC, Generic[T, V]):
    """
    Behaviour (pull-based)

    A pure function Time -> Value, sampled on demand by the host.
    It never notifies; every at() reads the upstream Event afresh.
    """

    @abstractmethod
    def at(self, time: T) -> V:
        ...

    def sample(self, times: Iterable[T]) -> Iterator[Occurrence]:
        """
        Sample once per host tick, e.g. over a ReplayClock.
        """
        for t in times:
            yield Occurrence(t, self.at(t))


class Constant(Behaviour[T, V]):
    def __init__(self, value: V) -> None:
        self.value = value

    def at(self, time: T) -> V:
        return self.value


class Stepper(Behaviour[T, V]):
    """
    Value of the last occurrence with time <= query time, else initial.
    """

    def __init__(self, event: "Event[T, V]", initial: V) -> None:
        self.event = event
        self.initial = initial

    def at(self, time: T) -> V:
        occurrences = self.event.occurrences()
        # index of the first occurrence strictly after `time`
        index = bisect_right(occurrences, time, key=_time)
        if index == 0:
            return self.initial
        return occurrences[index - 1].value


class Accumulator(Behaviour[T, Any]):
    """
    Left fold of combine over every occurrence with time <= query time,
    starting from initial. Fold order is ascending time.
    """

    def __init__(
        self,
        event: "Event[T, V]",
        initial: Any,
        combine: Callable[[Any, V], Any],
    ) -> None:
        self.event = event
        self.initial = initial
        self.combine = combine

    def at(self, time: T) -> Any:
        values = (v for t, v in self.event.occurrences() if t <= time)
        return reduce(self.combine, values, self.initial)
