"""AST node dataclasses and the NodeType StrEnum.

Six frozen node classes make up the closed ``Node`` union. Every node is
generic over its span type ``S`` and carries exactly one span; ``Field`` pairs
an object key with its value and has no span of its own.

Numbers keep their literal text rather than a Python number: JSON allows
arbitrary precision and range, so no conversion happens until ``to_python``.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Generic, TypeVar

__all__ = [
    "Array",
    "Boolean",
    "Field",
    "Node",
    "NodeType",
    "Null",
    "Number",
    "Object",
    "String",
]

S = TypeVar("S")
_D = TypeVar("_D")


class NodeType(StrEnum):
    """The six JSON value types.

    StrEnum values are the lowercased member names, which are also the type
    names JSON Schema uses: "null", "boolean", "number", "string", "array",
    "object".
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()


@dataclass(frozen=True, slots=True)
class Null(Generic[S]):
    span: S

    @property
    def type(self) -> NodeType:
        return NodeType.NULL


@dataclass(frozen=True, slots=True)
class Boolean(Generic[S]):
    value: bool
    span: S

    @property
    def type(self) -> NodeType:
        return NodeType.BOOLEAN


@dataclass(frozen=True, slots=True)
class Number(Generic[S]):
    """A number literal.

    Attributes:
        text: Normalised literal: no leading ``+``, exponent marker ``e``.
              Always matches ``-?(0|[1-9][0-9]*)(\\.[0-9]+)?([eE][+-]?[0-9]+)?``.
        span: Covers the original source range, ``+`` and ``E`` included.
    """

    text: str
    span: S

    @property
    def type(self) -> NodeType:
        return NodeType.NUMBER

    @property
    def value(self) -> str:
        """Same as ``text``; lets callers read Number and String alike."""
        return self.text

    @property
    def is_integer(self) -> bool:
        """True when the literal has neither a fraction nor an exponent."""
        return "." not in self.text and "e" not in self.text


@dataclass(frozen=True, slots=True)
class String(Generic[S]):
    """A string literal; ``value`` is decoded (escapes resolved, quotes removed)."""

    value: str
    span: S

    @property
    def type(self) -> NodeType:
        return NodeType.STRING


@dataclass(frozen=True, slots=True)
class Field(Generic[S]):
    key: String[S]
    value: Node[S]


@dataclass(frozen=True, slots=True)
class Object(Generic[S]):
    """A JSON object.

    ``fields`` keeps source order and every duplicate key. Lookups by key
    resolve to the first matching field.
    """

    fields: tuple[Field[S], ...]
    span: S

    def __post_init__(self) -> None:
        if not isinstance(self.fields, tuple):
            object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def type(self) -> NodeType:
        return NodeType.OBJECT

    def get(self, key: str, default: _D | None = None) -> Node[S] | _D | None:
        """Return the value of the first field named ``key``, else ``default``."""
        for field in self.fields:
            if field.key.value == key:
                return field.value
        return default

    def keys(self) -> Iterator[str]:
        """Decoded keys in source order, duplicates included."""
        return (field.key.value for field in self.fields)


@dataclass(frozen=True, slots=True)
class Array(Generic[S]):
    elements: tuple[Node[S], ...]
    span: S

    def __post_init__(self) -> None:
        if not isinstance(self.elements, tuple):
            object.__setattr__(self, "elements", tuple(self.elements))

    @property
    def type(self) -> NodeType:
        return NodeType.ARRAY

    def get(self, index: int) -> Node[S] | None:
        """Return the element at ``index``, or None when out of range.

        Negative indexes are out of range; they do not count from the end.
        """
        if 0 <= index < len(self.elements):
            return self.elements[index]
        return None


Node = Null[S] | Boolean[S] | Number[S] | String[S] | Object[S] | Array[S]
