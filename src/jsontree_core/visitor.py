"""Visitor capability set consumed by the navigator."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .model import JArray, JObject, JPrimitive, Value


class Visitor(ABC):
    """Callbacks invoked by :func:`jsontree_core.navigate`.

    ``is_first`` tells a renderer whether a separator is due before the
    member: it is true for the first member traversed in its container and
    false afterwards.  Null object members are never reported; null array
    elements are reported through :meth:`visit_null_array_member` followed
    by a nested :meth:`visit_null`.

    Raise :class:`~jsontree_core.errors.VisitorAbort` (or any exception)
    from a callback to stop the traversal.
    """

    @abstractmethod
    def visit_null(self) -> None: ...

    @abstractmethod
    def visit_primitive(self, value: JPrimitive) -> None: ...

    @abstractmethod
    def start_object(self, obj: JObject) -> None: ...

    @abstractmethod
    def visit_object_member(
        self, parent: JObject, key: str, child: Value, is_first: bool
    ) -> None: ...

    @abstractmethod
    def end_object(self, obj: JObject) -> None: ...

    @abstractmethod
    def start_array(self, arr: JArray) -> None: ...

    @abstractmethod
    def visit_array_member(
        self, parent: JArray, child: Value, is_first: bool
    ) -> None: ...

    @abstractmethod
    def visit_null_array_member(self, parent: JArray, is_first: bool) -> None: ...

    @abstractmethod
    def end_array(self, arr: JArray) -> None: ...


class RecordingVisitor(Visitor):
    """Records every callback as a tuple in :attr:`events`.

    Usage::

        rec = RecordingVisitor()
        navigate(tree, rec)
        rec.names()   # ["start_object", "visit_object_member", ...]
    """

    def __init__(self) -> None:
        self.events: list[tuple] = []

    def names(self) -> list[str]:
        return [event[0] for event in self.events]

    def visit_null(self) -> None:
        self.events.append(("visit_null",))

    def visit_primitive(self, value: JPrimitive) -> None:
        self.events.append(("visit_primitive", value))

    def start_object(self, obj: JObject) -> None:
        self.events.append(("start_object", obj))

    def visit_object_member(
        self, parent: JObject, key: str, child: Value, is_first: bool
    ) -> None:
        self.events.append(("visit_object_member", key, child, is_first))

    def end_object(self, obj: JObject) -> None:
        self.events.append(("end_object", obj))

    def start_array(self, arr: JArray) -> None:
        self.events.append(("start_array", arr))

    def visit_array_member(
        self, parent: JArray, child: Value, is_first: bool
    ) -> None:
        self.events.append(("visit_array_member", child, is_first))

    def visit_null_array_member(self, parent: JArray, is_first: bool) -> None:
        self.events.append(("visit_null_array_member", is_first))

    def end_array(self, arr: JArray) -> None:
        self.events.append(("end_array", arr))
