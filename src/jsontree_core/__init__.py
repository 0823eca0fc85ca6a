"""jsontree-core — depth-first traversal engine for JSON value trees."""

from .model import (
    JArray,
    JObject,
    JPrimitive,
    Null,
    Value,
    _NullType,
)
from .errors import DepthExceeded, JsonTreeError, TypeMismatch, VisitorAbort
from .visitor import RecordingVisitor, Visitor
from .navigator import DEFAULT_MAX_DEPTH, navigate
from .convert import from_python, to_python
from .formatter import (
    CompactFormatter,
    FormatOptions,
    JsonFormatter,
    PrettyFormatter,
    make_formatter,
    to_json,
)

__all__ = [
    "navigate",
    "DEFAULT_MAX_DEPTH",
    "Null",
    "JPrimitive",
    "JArray",
    "JObject",
    "Value",
    "_NullType",
    "Visitor",
    "RecordingVisitor",
    "JsonTreeError",
    "TypeMismatch",
    "VisitorAbort",
    "DepthExceeded",
    "from_python",
    "to_python",
    "JsonFormatter",
    "CompactFormatter",
    "PrettyFormatter",
    "FormatOptions",
    "make_formatter",
    "to_json",
]
