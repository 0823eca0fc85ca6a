"""``jsontree`` command: reformat a JSON document or trace its traversal.

Also runnable as ``python -m jsontree_core.cli``.
"""

from __future__ import annotations

import argparse
import io
import json
import logging
import sys
from typing import IO

from .convert import from_python
from .errors import JsonTreeError
from .formatter import FormatOptions, make_formatter
from .model import JArray, JObject, JPrimitive, Value
from .navigator import DEFAULT_MAX_DEPTH, navigate
from .visitor import Visitor

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Trace output
# ---------------------------------------------------------------------------

def _fmt_inline(value: Value) -> str:
    """Short one-line description of a value for trace lines."""
    if isinstance(value, JPrimitive):
        return json.dumps(value.value, ensure_ascii=False)
    if isinstance(value, JArray):
        return f"[{len(value)} items]"
    if isinstance(value, JObject):
        return f"{{{len(value)} members}}"
    return "null"


class _TraceVisitor(Visitor):
    """Prints one line per callback, indented by container depth."""

    def __init__(self, dest: IO[str]) -> None:
        self.dest = dest
        self.depth = 0

    def _line(self, text: str) -> None:
        print("  " * self.depth + text, file=self.dest)

    def visit_null(self) -> None:
        self._line("visit_null")

    def visit_primitive(self, value: JPrimitive) -> None:
        self._line(f"visit_primitive {_fmt_inline(value)}")

    def start_object(self, obj: JObject) -> None:
        self._line(f"start_object {_fmt_inline(obj)}")
        self.depth += 1

    def visit_object_member(self, parent, key, child, is_first) -> None:
        self._line(
            f"visit_object_member {json.dumps(key, ensure_ascii=False)} "
            f"{_fmt_inline(child)} first={is_first}"
        )

    def end_object(self, obj: JObject) -> None:
        self.depth -= 1
        self._line("end_object")

    def start_array(self, arr: JArray) -> None:
        self._line(f"start_array {_fmt_inline(arr)}")
        self.depth += 1

    def visit_array_member(self, parent, child, is_first) -> None:
        self._line(f"visit_array_member {_fmt_inline(child)} first={is_first}")

    def visit_null_array_member(self, parent, is_first) -> None:
        self._line(f"visit_null_array_member first={is_first}")

    def end_array(self, arr: JArray) -> None:
        self.depth -= 1
        self._line("end_array")


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsontree",
        description="Reformat a JSON document by walking its value tree.",
    )
    parser.add_argument("file", nargs="?", help="input file (default: stdin)")
    layout = parser.add_mutually_exclusive_group()
    layout.add_argument("--indent", type=int, default=2, help="spaces per level (default: 2)")
    layout.add_argument("--compact", action="store_true", help="no whitespace")
    parser.add_argument("--trace", action="store_true", help="print visitor callbacks instead")
    parser.add_argument(
        "--max-depth", type=int, default=DEFAULT_MAX_DEPTH,
        help=f"maximum nesting depth (default: {DEFAULT_MAX_DEPTH})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def _load(path: str | None, stdin: IO[str], max_depth: int | None) -> Value:
    """Read JSON text from *path* (or *stdin*) and convert it to a tree."""
    if path is None:
        data = json.load(stdin)
    else:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    return from_python(data, max_depth=max_depth)


def _options(args: argparse.Namespace) -> FormatOptions:
    return FormatOptions(
        indent=None if args.compact else args.indent,
        max_depth=args.max_depth,
    )


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
) -> int:
    """Run the ``jsontree`` command; returns the process exit code."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        tree = _load(args.file, stdin, args.max_depth)
    except OSError as exc:
        print(f"Error reading '{args.file}': {exc}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as exc:
        print(f"Invalid JSON: {exc}", file=sys.stderr)
        return 1
    except RecursionError:
        # raised by the json decoder itself on very deep documents
        print("Invalid JSON: nesting too deep to decode", file=sys.stderr)
        return 1
    except JsonTreeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    logger.debug("loaded %s from %s", tree.kind, args.file or "<stdin>")

    # Render into a buffer so a failure leaves no partial output behind
    buf = io.StringIO()
    try:
        if args.trace:
            navigate(tree, _TraceVisitor(buf), max_depth=args.max_depth)
        else:
            make_formatter(_options(args)).format(tree, buf)
            buf.write("\n")
    except (JsonTreeError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except RecursionError:
        print("Error: nesting exceeds the interpreter recursion limit; lower --max-depth", file=sys.stderr)
        return 1

    stdout.write(buf.getvalue())
    return 0


if __name__ == "__main__":
    sys.exit(main())
