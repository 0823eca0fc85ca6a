"""Tests for jsontree_core.navigator."""

import threading

import pytest

from jsontree_core import (
    DepthExceeded,
    JArray,
    JObject,
    JPrimitive,
    Null,
    RecordingVisitor,
    TypeMismatch,
    VisitorAbort,
    navigate,
)


def _record(tree, **kwargs):
    rec = RecordingVisitor()
    navigate(tree, rec, **kwargs)
    return rec


def _firsts(rec):
    return [e[-1] for e in rec.events if e[0] in (
        "visit_object_member", "visit_array_member", "visit_null_array_member",
    )]


# ---------------------------------------------------------------------------
# Callback order
# ---------------------------------------------------------------------------

def test_mixed_tree_order(sample_tree):
    rec = _record(sample_tree)
    c = sample_tree["c"]
    assert rec.events == [
        ("start_object", sample_tree),
        ("visit_object_member", "a", JPrimitive(1), True),
        ("visit_primitive", JPrimitive(1)),
        ("visit_object_member", "c", c, False),
        ("start_array", c),
        ("visit_array_member", JPrimitive(2), True),
        ("visit_primitive", JPrimitive(2)),
        ("visit_null_array_member", False),
        ("visit_null",),
        ("end_array", c),
        ("end_object", sample_tree),
    ]


def test_root_null():
    assert _record(Null).events == [("visit_null",)]


def test_root_none_is_null():
    assert _record(None).events == [("visit_null",)]


def test_root_primitive():
    assert _record(JPrimitive("x")).events == [("visit_primitive", JPrimitive("x"))]


def test_empty_array():
    arr = JArray()
    assert _record(arr).events == [("start_array", arr), ("end_array", arr)]


def test_empty_object():
    obj = JObject()
    assert _record(obj).events == [("start_object", obj), ("end_object", obj)]


def test_object_members_in_insertion_order():
    obj = JObject()
    for key in ("z", "m", "a"):
        obj.add(key, JPrimitive(key))
    rec = _record(obj)
    keys = [e[1] for e in rec.events if e[0] == "visit_object_member"]
    assert keys == ["z", "m", "a"]


def test_array_elements_in_sequence_order():
    arr = JArray([JPrimitive(i) for i in range(5)])
    rec = _record(arr)
    values = [e[1].value for e in rec.events if e[0] == "visit_primitive"]
    assert values == [0, 1, 2, 3, 4]


# ---------------------------------------------------------------------------
# Null policy
# ---------------------------------------------------------------------------

def test_null_object_member_is_invisible():
    obj = JObject({"gone": Null})
    assert _record(obj).names() == ["start_object", "end_object"]


def test_leading_null_member_does_not_take_first():
    obj = JObject({"x": Null, "y": JPrimitive(1), "z": JPrimitive(2)})
    rec = _record(obj)
    members = [e for e in rec.events if e[0] == "visit_object_member"]
    assert [(m[1], m[3]) for m in members] == [("y", True), ("z", False)]


def test_null_array_element_fires_two_callbacks():
    arr = JArray([Null])
    assert _record(arr).names() == [
        "start_array", "visit_null_array_member", "visit_null", "end_array",
    ]


def test_leading_null_element_takes_first():
    arr = JArray([Null, JPrimitive(1), Null])
    assert _firsts(_record(arr)) == [True, False, False]


def test_none_element_treated_as_null():
    arr = JArray()
    arr.items.append(None)
    assert _record(arr).names() == [
        "start_array", "visit_null_array_member", "visit_null", "end_array",
    ]


def test_is_first_once_per_container():
    tree = JArray([
        JObject({"a": JPrimitive(1), "b": JPrimitive(2)}),
        JArray([JPrimitive(3), JPrimitive(4)]),
    ])
    assert _firsts(_record(tree)) == [True, True, False, False, True, False]


# ---------------------------------------------------------------------------
# Depth guard
# ---------------------------------------------------------------------------

def _nested_arrays(depth):
    tree = JPrimitive("leaf")
    for _ in range(depth):
        tree = JArray([tree])
    return tree


def test_deep_nesting_keeps_order():
    depth = 300
    names = _record(_nested_arrays(depth)).names()
    assert names[: 2 * depth] == ["start_array", "visit_array_member"] * depth
    assert names[2 * depth] == "visit_primitive"
    assert names[2 * depth + 1:] == ["end_array"] * depth


def test_depth_limit_is_inclusive():
    # the leaf sits at depth 3
    _record(_nested_arrays(3), max_depth=3)
    with pytest.raises(DepthExceeded) as exc:
        _record(_nested_arrays(3), max_depth=2)
    assert exc.value.max_depth == 2


def test_null_reentry_counts_as_a_level():
    with pytest.raises(DepthExceeded):
        _record(JArray([Null]), max_depth=0)
    _record(JArray([Null]), max_depth=1)


def test_cyclic_tree_raises_depth_exceeded():
    arr = JArray()
    arr.add(arr)
    with pytest.raises(DepthExceeded):
        navigate(arr, RecordingVisitor())


def test_guard_disabled():
    rec = _record(_nested_arrays(50), max_depth=None)
    assert rec.names().count("start_array") == 50


# ---------------------------------------------------------------------------
# Visitor errors and re-entrancy
# ---------------------------------------------------------------------------

class _AbortOn(RecordingVisitor):
    def __init__(self, key):
        super().__init__()
        self.key = key

    def visit_object_member(self, parent, key, child, is_first):
        super().visit_object_member(parent, key, child, is_first)
        if key == self.key:
            raise VisitorAbort(key)


def test_visitor_abort_stops_traversal():
    obj = JObject({
        "a": JPrimitive(1),
        "b": JArray([JPrimitive(2)]),
        "c": JPrimitive(3),
    })
    rec = _AbortOn("b")
    with pytest.raises(VisitorAbort):
        navigate(obj, rec)
    assert rec.names() == [
        "start_object",
        "visit_object_member", "visit_primitive",
        "visit_object_member",
    ]


def test_other_visitor_errors_propagate_unchanged():
    class Boom(RecordingVisitor):
        def visit_primitive(self, value):
            raise KeyError("boom")

    with pytest.raises(KeyError):
        navigate(JArray([JPrimitive(1), JPrimitive(2)]), Boom())


def test_non_value_root_rejected():
    with pytest.raises(TypeMismatch):
        navigate({"a": 1}, RecordingVisitor())


def test_reentrant_navigation():
    inner = JArray([JPrimitive(1)])

    class Nested(RecordingVisitor):
        def __init__(self):
            super().__init__()
            self.inner_events = None

        def start_object(self, obj):
            super().start_object(obj)
            self.inner_events = _record(inner).names()

    rec = Nested()
    navigate(JObject({"k": JPrimitive(2)}), rec)
    assert rec.names() == [
        "start_object", "visit_object_member", "visit_primitive", "end_object",
    ]
    assert rec.inner_events == [
        "start_array", "visit_array_member", "visit_primitive", "end_array",
    ]


def test_concurrent_navigation(sample_tree):
    expected = _record(sample_tree).events
    results = []

    def worker():
        results.append(_record(sample_tree).events)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert results == [expected] * 8
