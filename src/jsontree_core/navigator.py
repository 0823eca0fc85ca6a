"""Navigator: depth-first traversal of a value tree driving a Visitor."""

from __future__ import annotations

import logging

from .errors import DepthExceeded, TypeMismatch
from .model import JArray, JObject, JPrimitive, Null, Value, is_null_value
from .visitor import Visitor

logger = logging.getLogger(__name__)

# One Python frame per nesting level; keeps clear of the default
# recursion limit (1000) with room for visitor frames.
DEFAULT_MAX_DEPTH = 512


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def navigate(
    root: Value | None,
    visitor: Visitor,
    *,
    max_depth: int | None = DEFAULT_MAX_DEPTH,
) -> None:
    """Walk *root* depth-first, reporting every step to *visitor*.

    Object members are walked in insertion order and array elements in
    sequence order.  Null object members are skipped without consuming
    the ``is_first`` flag; a null array element fires
    ``visit_null_array_member`` and then ``visit_null`` from a nested walk.

    Raises :class:`DepthExceeded` when a value sits deeper than
    *max_depth* (``None`` disables the check).  Exceptions raised by the
    visitor propagate immediately.
    """
    _walk(root, visitor, 0, max_depth)


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------

def _walk(value: Value | None, visitor: Visitor, depth: int, max_depth: int | None) -> None:
    if max_depth is not None and depth > max_depth:
        logger.debug("depth guard tripped at depth %d on %s", depth, type(value).__name__)
        raise DepthExceeded(max_depth)

    if is_null_value(value):
        visitor.visit_null()
        return

    if isinstance(value, JArray):
        visitor.start_array(value)
        is_first = True
        for child in value.items:
            if is_null_value(child):
                visitor.visit_null_array_member(value, is_first)
                _walk(Null, visitor, depth + 1, max_depth)
            else:
                visitor.visit_array_member(value, child, is_first)
                _walk(child, visitor, depth + 1, max_depth)
            is_first = False
        visitor.end_array(value)
        return

    if isinstance(value, JObject):
        visitor.start_object(value)
        is_first = True
        for key, child in value.members.items():
            # Null members are not written out, so they must not take the first slot
            if is_null_value(child):
                continue
            visitor.visit_object_member(value, key, child, is_first)
            _walk(child, visitor, depth + 1, max_depth)
            is_first = False
        visitor.end_object(value)
        return

    if isinstance(value, JPrimitive):
        visitor.visit_primitive(value)
        return

    raise TypeMismatch("JSON value", type(value).__name__)
