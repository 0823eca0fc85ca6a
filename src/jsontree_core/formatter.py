"""Compact and pretty JSON formatters, written as Visitors."""

from __future__ import annotations

import io
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import IO

from .model import JArray, JObject, JPrimitive, Scalar, Value
from .navigator import DEFAULT_MAX_DEPTH, navigate
from .visitor import Visitor


def _encode_scalar(value: Scalar) -> str:
    # ValueError for NaN / Infinity: not representable in JSON
    return json.dumps(value, ensure_ascii=False, allow_nan=False)


# ---------------------------------------------------------------------------
# Writer visitors
# ---------------------------------------------------------------------------

class _JsonWriter(Visitor):
    """Writes the callback stream as compact JSON text to *out*.

    Each open container keeps a flag on ``_open`` that records whether a
    member was written, so an object whose members are all null still
    closes as ``{}``.
    """

    key_separator = ":"

    def __init__(self, out: IO[str]) -> None:
        self.out = out
        self._open: list[bool] = []

    def _line_break(self) -> None:
        pass

    def _member_prefix(self, is_first: bool) -> None:
        if not is_first:
            self.out.write(",")
        self._open[-1] = True
        self._line_break()

    def _close(self, bracket: str) -> None:
        if self._open.pop():
            self._line_break()
        self.out.write(bracket)

    def visit_null(self) -> None:
        self.out.write("null")

    def visit_primitive(self, value: JPrimitive) -> None:
        self.out.write(_encode_scalar(value.value))

    def start_object(self, obj: JObject) -> None:
        self.out.write("{")
        self._open.append(False)

    def visit_object_member(self, parent, key, child, is_first) -> None:
        self._member_prefix(is_first)
        self.out.write(_encode_scalar(key))
        self.out.write(self.key_separator)

    def end_object(self, obj: JObject) -> None:
        self._close("}")

    def start_array(self, arr: JArray) -> None:
        self.out.write("[")
        self._open.append(False)

    def visit_array_member(self, parent, child, is_first) -> None:
        self._member_prefix(is_first)

    def visit_null_array_member(self, parent, is_first) -> None:
        # "null" itself comes from the nested visit_null
        self._member_prefix(is_first)

    def end_array(self, arr: JArray) -> None:
        self._close("]")


class _PrettyWriter(_JsonWriter):
    key_separator = ": "

    def __init__(self, out: IO[str], indent: int) -> None:
        super().__init__(out)
        self.indent = indent

    def _line_break(self) -> None:
        self.out.write("\n" + " " * (self.indent * len(self._open)))


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------

class JsonFormatter(ABC):
    """Renders a value tree as JSON text."""

    def __init__(self, max_depth: int | None = DEFAULT_MAX_DEPTH) -> None:
        self.max_depth = max_depth

    @abstractmethod
    def _writer(self, out: IO[str]) -> _JsonWriter: ...

    def format(self, value: Value, out: IO[str]) -> None:
        navigate(value, self._writer(out), max_depth=self.max_depth)

    def format_to_string(self, value: Value) -> str:
        buf = io.StringIO()
        self.format(value, buf)
        return buf.getvalue()


class CompactFormatter(JsonFormatter):
    """No whitespace: ``{"a":1,"c":[2,null]}``."""

    def _writer(self, out: IO[str]) -> _JsonWriter:
        return _JsonWriter(out)


class PrettyFormatter(JsonFormatter):
    """One member per line, laid out like ``json.dumps(..., indent=n)``."""

    def __init__(self, indent: int = 2, max_depth: int | None = DEFAULT_MAX_DEPTH) -> None:
        if indent < 0:
            raise ValueError(f"indent must be >= 0, got {indent}")
        super().__init__(max_depth)
        self.indent = indent

    def _writer(self, out: IO[str]) -> _JsonWriter:
        return _PrettyWriter(out, self.indent)


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

@dataclass
class FormatOptions:
    """Formatter selection: ``indent=None`` means compact output."""

    indent: int | None = None
    max_depth: int | None = DEFAULT_MAX_DEPTH


def make_formatter(options: FormatOptions | None = None) -> JsonFormatter:
    options = options or FormatOptions()
    if options.indent is None:
        return CompactFormatter(max_depth=options.max_depth)
    return PrettyFormatter(indent=options.indent, max_depth=options.max_depth)


def to_json(value: Value, options: FormatOptions | None = None) -> str:
    """Render *value* as JSON text (compact unless ``options.indent`` is set)."""
    return make_formatter(options).format_to_string(value)
