"""Tests for jsontree_core.errors."""

from jsontree_core.errors import DepthExceeded, JsonTreeError, TypeMismatch, VisitorAbort


def test_type_mismatch_is_type_error():
    err = TypeMismatch("array", "object")
    assert isinstance(err, JsonTreeError)
    assert isinstance(err, TypeError)
    assert err.expected == "array"
    assert err.actual == "object"
    assert str(err) == "expected array, got object"


def test_depth_exceeded_carries_limit():
    err = DepthExceeded(8)
    assert err.max_depth == 8
    assert "max_depth=8" in str(err)


def test_visitor_abort_is_tree_error():
    assert issubclass(VisitorAbort, JsonTreeError)
