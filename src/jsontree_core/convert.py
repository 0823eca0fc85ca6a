"""Conversion between plain Python data and value trees."""

from __future__ import annotations

from typing import Any

from .errors import DepthExceeded
from .model import JArray, JObject, JPrimitive, Null, Value, _NullType
from .navigator import DEFAULT_MAX_DEPTH, navigate
from .visitor import Visitor

_VALUE_TYPES = (JPrimitive, JArray, JObject, _NullType)


def from_python(data: Any, *, max_depth: int | None = DEFAULT_MAX_DEPTH) -> Value:
    """Build a value tree from JSON-shaped Python data.

    - ``None`` → Null
    - ``str`` / ``int`` / ``float`` / ``bool`` → JPrimitive
    - ``list`` / ``tuple`` → JArray
    - ``dict`` → JObject (keys must be ``str``)
    - an existing value is returned unchanged

    Containers are filled from an explicit work stack, so nesting is
    bounded by *max_depth* (:class:`DepthExceeded`) rather than by the
    interpreter's recursion limit.  Depth counts as in :func:`navigate`.
    """
    root, needs_fill = _shallow(data)
    stack = [(root, data, 0)] if needs_fill else []
    while stack:
        target, source, depth = stack.pop()
        entries = source.items() if isinstance(source, dict) else enumerate(source)
        for key, item in entries:
            if max_depth is not None and depth + 1 > max_depth:
                raise DepthExceeded(max_depth)
            child, child_needs_fill = _shallow(item)
            # children are attached in source order; filling order does not matter
            if isinstance(target, JObject):
                target.add(key, child)
            else:
                target.add(child)
            if child_needs_fill:
                stack.append((child, item, depth + 1))
    return root


def _shallow(data: Any) -> tuple[Value, bool]:
    """Convert *data* without its contents; the flag says whether to fill it."""
    if data is None:
        return Null, False
    if isinstance(data, _VALUE_TYPES):
        return data, False
    if isinstance(data, (str, int, float, bool)):
        return JPrimitive(data), False
    if isinstance(data, (list, tuple)):
        return JArray(), True
    if isinstance(data, dict):
        return JObject(), True
    raise TypeError(f"cannot convert {type(data).__name__} to a JSON value")


def to_python(value: Value, *, max_depth: int | None = DEFAULT_MAX_DEPTH) -> Any:
    """Convert a value tree back to plain data.

    Null object members are dropped; null array elements become ``None``.
    """
    builder = _Builder()
    navigate(value, builder, max_depth=max_depth)
    return builder.result


class _Builder(Visitor):
    """Rebuilds dicts and lists from the callback stream."""

    def __init__(self) -> None:
        self.result: Any = None
        self._stack: list[dict | list] = []
        self._keys: list[str | None] = []

    def _emit(self, item: Any) -> None:
        if not self._stack:
            self.result = item
            return
        top = self._stack[-1]
        if isinstance(top, dict):
            top[self._keys[-1]] = item
        else:
            top.append(item)

    def visit_null(self) -> None:
        self._emit(None)

    def visit_primitive(self, value: JPrimitive) -> None:
        self._emit(value.value)

    def start_object(self, obj: JObject) -> None:
        container: dict = {}
        self._emit(container)
        self._stack.append(container)
        self._keys.append(None)

    def visit_object_member(self, parent, key, child, is_first) -> None:
        self._keys[-1] = key

    def end_object(self, obj: JObject) -> None:
        self._stack.pop()
        self._keys.pop()

    def start_array(self, arr: JArray) -> None:
        container: list = []
        self._emit(container)
        self._stack.append(container)
        self._keys.append(None)

    def visit_array_member(self, parent, child, is_first) -> None:
        pass

    def visit_null_array_member(self, parent, is_first) -> None:
        # the nested visit_null appends the None
        pass

    def end_array(self, arr: JArray) -> None:
        self._stack.pop()
        self._keys.pop()
