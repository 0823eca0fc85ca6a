"""Error taxonomy for jsontree-core."""

from __future__ import annotations


class JsonTreeError(Exception):
    """Base class for all errors raised by jsontree-core."""


class TypeMismatch(JsonTreeError, TypeError):
    """A value was narrowed to a variant it does not hold."""

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(f"expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class VisitorAbort(JsonTreeError):
    """Raised by a visitor callback to stop the traversal."""


class DepthExceeded(JsonTreeError):
    """The tree is nested deeper than the navigator allows (or is cyclic)."""

    def __init__(self, max_depth: int) -> None:
        super().__init__(f"tree nesting exceeds max_depth={max_depth}")
        self.max_depth = max_depth
