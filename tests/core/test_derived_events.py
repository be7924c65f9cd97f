# tests/core/test_derived_events.py
from timeflow.core import Function, Never, Stepper, TimeVaryingFunction, collect, union


# -----------------------------------------------------------------------------
# map / filter
# -----------------------------------------------------------------------------
def test_map_replaces_values_keeps_times(make_source):
    s = make_source([(1, 2), (1, 3), (4, 5)])
    doubled = s.map(lambda v: v * 2)

    assert doubled.occurrences() == [(1, 4), (1, 6), (4, 10)]


def test_filter_keeps_matching_subsequence(make_source):
    s = make_source([(1, 1), (2, 2), (3, 3), (4, 4)])
    evens = s.filter(lambda v: v % 2 == 0)

    assert evens.occurrences() == [(2, 2), (4, 4)]


def test_map_then_filter_chain(make_source):
    s = make_source([(1, "a"), (2, "bb"), (3, "ccc")])
    long_lengths = s.map(len).filter(lambda n: n > 1)

    assert long_lengths.occurrences() == [(2, 2), (3, 3)]


# -----------------------------------------------------------------------------
# union
# -----------------------------------------------------------------------------
def test_union_sorts_and_breaks_ties_by_source_order(make_source):
    a = make_source([(1, "a")])
    b = make_source([(2, "b"), (1, "c")])

    assert a.union(b).occurrences() == [(1, "a"), (1, "c"), (2, "b")]
    assert b.union(a).occurrences() == [(1, "c"), (1, "a"), (2, "b")]


def test_union_of_many(make_source):
    a = make_source([(3, "a3")])
    b = make_source([(1, "b1"), (3, "b3")])
    c = make_source([(2, "c2"), (3, "c3")])

    assert union(a, b, c).occurrences() == [
        (1, "b1"),
        (2, "c2"),
        (3, "a3"),
        (3, "b3"),
        (3, "c3"),
    ]


def test_never_is_union_identity(make_source):
    a = make_source([(1, "a"), (2, "b")])

    assert a.union(Never()).occurrences() == a.occurrences()
    assert Never().union(a).occurrences() == a.occurrences()
    assert union().occurrences() == []


# -----------------------------------------------------------------------------
# collect
# -----------------------------------------------------------------------------
def test_collect_groups_by_exact_time(make_source):
    a = make_source([(1, "x")])
    b = make_source([(1, "y"), (2, "z")])

    assert collect(a, b).occurrences() == [(1, ["x", "y"]), (2, ["z"])]
    assert a.collect(b).occurrences() == [(1, ["x", "y"]), (2, ["z"])]


def test_collect_keeps_per_source_order_within_a_time(make_source):
    a = make_source([(1, "a1"), (1, "a2")])
    b = make_source([(1, "b1")])

    assert collect(b, a).occurrences() == [(1, ["b1", "a1", "a2"])]


def test_collect_never_merges_close_times(make_source):
    a = make_source([(1.0, "a")])
    b = make_source([(1.0000001, "b")])

    assert collect(a, b).occurrences() == [(1.0, ["a"]), (1.0000001, ["b"])]


def test_collect_of_nothing_is_empty():
    assert collect().occurrences() == []


# -----------------------------------------------------------------------------
# apply
# -----------------------------------------------------------------------------
def test_apply_samples_function_at_occurrence_time(make_source):
    functions = make_source([(0, Function(lambda x: x * 2)), (5, Function(lambda x: -x))])
    behaviour = Stepper(functions, Function(lambda x: x))
    inputs = make_source([(4, 3), (6, 3)])

    assert inputs.apply(behaviour).occurrences() == [(4, 6), (6, -3)]


def test_apply_is_inclusive_at_switch_time(make_source):
    functions = make_source([(5, Function(lambda x: -x))])
    behaviour = Stepper(functions, Function(lambda x: x))
    inputs = make_source([(4, 1), (5, 1)])

    assert inputs.apply(behaviour).occurrences() == [(4, 1), (5, -1)]


def test_function_wrapper_is_time_varying_function():
    double = Function(lambda x: x * 2)

    assert isinstance(double, TimeVaryingFunction)
    assert not isinstance(abs, TimeVaryingFunction)
    assert double(4) == double.transform(4) == 8


def test_apply_accepts_plain_callables(make_source):
    behaviour = make_source([(0, str.upper)]).stepper(str.lower)
    inputs = make_source([(1, "Hi")])

    assert inputs.apply(behaviour).occurrences() == [(1, "HI")]


# -----------------------------------------------------------------------------
# live derivation
# -----------------------------------------------------------------------------
def test_derived_events_see_upstream_mutations(make_source):
    a = make_source([(1, 1)])
    b = make_source([(1, 10)])
    doubled = a.map(lambda v: v * 2)
    merged = doubled.union(b)
    grouped = collect(a, b)

    assert doubled.occurrences() == [(1, 2)]
    assert merged.occurrences() == [(1, 2), (1, 10)]

    a.add(2, 2)
    a.add(0, 0)

    assert doubled.occurrences() == [(0, 0), (1, 2), (2, 4)]
    assert merged.occurrences() == [(0, 0), (1, 2), (1, 10), (2, 4)]
    assert grouped.occurrences() == [(0, [0]), (1, [1, 10]), (2, [2])]

    a.prune_to(2)
    assert doubled.occurrences() == [(2, 4)]


def test_derived_over_empty_upstream_is_empty(make_source):
    empty = make_source()

    assert empty.map(str).occurrences() == []
    assert empty.filter(bool).occurrences() == []
    assert empty.union(empty).occurrences() == []
    assert collect(empty, empty).occurrences() == []
