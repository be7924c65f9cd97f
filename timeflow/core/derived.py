# timeflow/core/derived.py
"""
Derived Events (stateless views)

Each view keeps a reference to its upstream(s) plus one function and
recomputes on every occurrences() call. Upstream mutations are visible on
the next read.
"""
from __future__ import annotations

from itertools import chain
from operator import attrgetter
from typing import Any, Callable, Dict, List, Sequence

from timeflow.core.behaviours import Behaviour
from timeflow.core.events import Event
from timeflow.core.types import Occurrence, TimeVaryingFunction

_time = attrgetter("time")


class MappedEvent(Event):
    def __init__(self, source: Event, transform: Callable[[Any], Any]) -> None:
        self.source = source
        self.transform = transform

    def occurrences(self) -> List[Occurrence]:
        return [Occurrence(t, self.transform(v)) for t, v in self.source.occurrences()]


class FilteredEvent(Event):
    def __init__(self, source: Event, predicate: Callable[[Any], bool]) -> None:
        self.source = source
        self.predicate = predicate

    def occurrences(self) -> List[Occurrence]:
        return [occ for occ in self.source.occurrences() if self.predicate(occ.value)]


class UnionEvent(Event):
    """
    Merge of several Events.

    Ordering (deterministic):
      - ascending by time
      - equal times: earlier source in the list first, then that source's own order
    """

    def __init__(self, sources: Sequence[Event]) -> None:
        self.sources = list(sources)

    def occurrences(self) -> List[Occurrence]:
        # sorted() is stable, so concatenation order is the tie-break
        merged = chain.from_iterable(s.occurrences() for s in self.sources)
        return sorted(merged, key=_time)


class CollectEvent(Event):
    """
    One occurrence per distinct time across all sources.

    value = [source-order values at that time]; times are compared by exact
    equality (hash), never by proximity.
    """

    def __init__(self, sources: Sequence[Event]) -> None:
        self.sources = list(sources)

    def occurrences(self) -> List[Occurrence]:
        collected: Dict[Any, List[Any]] = {}
        for source in self.sources:
            for t, v in source.occurrences():
                collected.setdefault(t, []).append(v)

        return [Occurrence(t, collected[t]) for t in sorted(collected)]


class AppliedEvent(Event):
    """
    (t, v) -> (t, behaviour.at(t)(v))

    The sampled value may be a TimeVaryingFunction (has .transform) or a
    plain callable.
    """

    def __init__(
        self,
        source: Event,
        behaviour: Behaviour[Any, TimeVaryingFunction],
    ) -> None:
        self.source = source
        self.behaviour = behaviour

    def occurrences(self) -> List[Occurrence]:
        out = []
        for t, v in self.source.occurrences():
            fn = self.behaviour.at(t)
            transform = fn.transform if isinstance(fn, TimeVaryingFunction) else fn
            out.append(Occurrence(t, transform(v)))
        return out
