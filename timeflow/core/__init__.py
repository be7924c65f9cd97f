"""
Functional-reactive core

Two dual abstractions:
- Event:     ordered log of (time, value) occurrences, read on demand
- Behaviour: pure function time -> value, sampled from an Event's history

Invariants:
- Source is the only component that owns and mutates state.
- Derived Events / Behaviours recompute on every read; nothing is cached.
- Time advancement is always external (host clock / host ticks).

Core explicitly does NOT:
- Schedule, push or notify
- Lock (single-threaded; the host serializes Source mutation)
- Perform IO
"""
from .behaviours import Accumulator, Behaviour, Constant, Stepper
from .derived import AppliedEvent, CollectEvent, FilteredEvent, MappedEvent, UnionEvent
from .events import Event, Never, Source, TimestampedSource, collect, union
from .time import (
    US_PER_MILLISECOND,
    US_PER_SECOND,
    FixedClock,
    ReplayClock,
    SteppedClock,
    wall_clock_us,
)
from .types import Function, Occurrence, TimeVaryingFunction

__all__ = [
    "Event", "Never", "Source", "TimestampedSource", "union", "collect",
    "MappedEvent", "FilteredEvent", "UnionEvent", "CollectEvent", "AppliedEvent",
    "Behaviour", "Constant", "Stepper", "Accumulator",
    "Occurrence", "Function", "TimeVaryingFunction",
    "US_PER_SECOND", "US_PER_MILLISECOND",
    "wall_clock_us", "FixedClock", "SteppedClock", "ReplayClock",
]
