"""Document model for jsontree-core: Null, primitives, arrays and objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, ItemsView, Iterator, Union

from .errors import TypeMismatch


# ---------------------------------------------------------------------------
# Common base — discriminators and narrowing accessors
# ---------------------------------------------------------------------------

class _Node:
    """Behaviour shared by all four value variants."""

    __slots__ = ()

    kind: ClassVar[str] = "value"

    def is_null(self) -> bool:
        return False

    def is_primitive(self) -> bool:
        return False

    def is_array(self) -> bool:
        return False

    def is_object(self) -> bool:
        return False

    def as_primitive(self) -> JPrimitive:
        raise TypeMismatch("primitive", self.kind)

    def as_array(self) -> JArray:
        raise TypeMismatch("array", self.kind)

    def as_object(self) -> JObject:
        raise TypeMismatch("object", self.kind)


# ---------------------------------------------------------------------------
# Null — singleton
# ---------------------------------------------------------------------------

class _NullType(_Node):
    """Sentinel for a JSON null."""

    __slots__ = ()

    kind = "null"
    _instance: ClassVar[_NullType | None] = None

    def __new__(cls) -> _NullType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Null"

    def __bool__(self) -> bool:
        return False

    def is_null(self) -> bool:
        return True


Null = _NullType()


# ---------------------------------------------------------------------------
# Primitive
# ---------------------------------------------------------------------------

Scalar = Union[str, int, float, bool]


def _scalar_kind(value: Scalar) -> str:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, str):
        return "string"
    return "number"


@dataclass(frozen=True, slots=True, eq=False)
class JPrimitive(_Node):
    """Holds exactly one string, number or boolean."""

    value: Scalar

    kind: ClassVar[str] = "primitive"

    def __post_init__(self) -> None:
        if not isinstance(self.value, (str, int, float, bool)):
            raise TypeError(
                f"JPrimitive cannot hold {type(self.value).__name__}"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JPrimitive):
            return NotImplemented
        # True == 1 in Python, but not in JSON
        return (_scalar_kind(self.value), self.value) == (
            _scalar_kind(other.value),
            other.value,
        )

    def __hash__(self) -> int:
        return hash((_scalar_kind(self.value), self.value))

    def is_primitive(self) -> bool:
        return True

    def as_primitive(self) -> JPrimitive:
        return self

    # -- Scalar discriminators / accessors ------------------------------

    def is_string(self) -> bool:
        return _scalar_kind(self.value) == "string"

    def is_number(self) -> bool:
        return _scalar_kind(self.value) == "number"

    def is_boolean(self) -> bool:
        return _scalar_kind(self.value) == "boolean"

    def as_string(self) -> str:
        if not self.is_string():
            raise TypeMismatch("string", _scalar_kind(self.value))
        return self.value

    def as_number(self) -> int | float:
        if not self.is_number():
            raise TypeMismatch("number", _scalar_kind(self.value))
        return self.value

    def as_bool(self) -> bool:
        if not self.is_boolean():
            raise TypeMismatch("boolean", _scalar_kind(self.value))
        return self.value


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class JArray(_Node):
    """Ordered sequence of values. Null elements keep their slot."""

    items: list[Value] = field(default_factory=list)

    kind: ClassVar[str] = "array"

    def __post_init__(self) -> None:
        self.items = [Null if v is None else v for v in self.items]

    def add(self, value: Value | None) -> JArray:
        self.items.append(Null if value is None else value)
        return self

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Value:
        return self.items[index]

    def is_array(self) -> bool:
        return True

    def as_array(self) -> JArray:
        return self


@dataclass(slots=True)
class JObject(_Node):
    """Ordered mapping of member names to values, in insertion order.

    A member explicitly set to ``Null`` is distinct from an absent member.
    """

    members: dict[str, Value] = field(default_factory=dict)

    kind: ClassVar[str] = "object"

    def __post_init__(self) -> None:
        members = self.members
        self.members = {}
        for key, value in members.items():
            self.add(key, value)

    def add(self, key: str, value: Value | None) -> JObject:
        """Set member *key*; an existing key is overwritten in place."""
        if not isinstance(key, str):
            raise TypeError(f"member name must be str, not {type(key).__name__}")
        self.members[key] = Null if value is None else value
        return self

    def get(self, key: str, default: Value | None = None) -> Value | None:
        return self.members.get(key, default)

    def items(self) -> ItemsView[str, Value]:
        return self.members.items()

    def __len__(self) -> int:
        return len(self.members)

    def __contains__(self, key: object) -> bool:
        return key in self.members

    def __getitem__(self, key: str) -> Value:
        return self.members[key]

    def is_object(self) -> bool:
        return True

    def as_object(self) -> JObject:
        return self


Value = Union[JPrimitive, JArray, JObject, _NullType]


def is_null_value(value: object) -> bool:
    """True for ``Null`` and for a bare Python ``None``."""
    return value is None or value is Null
