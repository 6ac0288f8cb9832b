"""Structural conversion between AST nodes and plain Python values.

- ``to_python`` maps a tree onto the value shapes ``json.loads`` produces
  (None, bool, number, str, dict, list). Spans are dropped. Numbers become
  ``Decimal`` unless other hooks are given, so the conversion is total and
  exact for any number text the parser accepts.
- ``from_python`` builds a tree from such values, every node carrying the
  same span (EMPTY_SPAN by default).
- ``dumps`` renders a tree as strict JSON text. Number text is written
  verbatim, so no precision is lost on the way out either.

Dispatch over nodes is exhaustive: an object that is not one of the six node
classes raises TypeError rather than being silently skipped.
"""

from __future__ import annotations

import json
import math
import re
from collections.abc import Callable, Mapping
from decimal import Decimal
from typing import Any

from lenient_json.input.spans import EMPTY_SPAN
from lenient_json.tree.nodes import (
    Array,
    Boolean,
    Field,
    Node,
    Null,
    Number,
    Object,
    String,
)

__all__ = ["JsonValue", "dumps", "from_python", "to_python"]

# Type alias for plain JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | Decimal | bool | None

_NUMBER = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")


def to_python(
    node: Node[Any],
    *,
    parse_int: Callable[[str], Any] = Decimal,
    parse_float: Callable[[str], Any] = Decimal,
) -> Any:
    """Convert a tree to plain Python values.

    Both number hooks default to ``decimal.Decimal``, which keeps every digit
    and any exponent. Passing ``int`` and ``float`` gives the ``json.loads``
    result instead: exponents beyond the float range become ``inf``, long
    fractions are rounded, and integers longer than the interpreter's int
    conversion limit raise ValueError.

    Args:
        node:        Root of the tree.
        parse_int:   Applied to number text without fraction or exponent.
        parse_float: Applied to all other number text.

    Returns:
        The equivalent value. Objects become dicts; when keys repeat, the last
        occurrence wins, as with ``json.loads``.

    Raises:
        TypeError: If the tree contains something other than a node.
    """
    match node:
        case Null():
            return None
        case Boolean(value=value):
            return value
        case Number(text=text):
            if "." in text or "e" in text or "E" in text:
                return parse_float(text)
            return parse_int(text)
        case String(value=value):
            return value
        case Object(fields=fields):
            return {
                field.key.value: to_python(
                    field.value, parse_int=parse_int, parse_float=parse_float
                )
                for field in fields
            }
        case Array(elements=elements):
            return [
                to_python(element, parse_int=parse_int, parse_float=parse_float)
                for element in elements
            ]
        case _:
            raise TypeError(f"Unsupported node type: {type(node)!r}")


def from_python(value: Any, span: Any = EMPTY_SPAN) -> Node[Any]:
    """Build a tree from a plain Python value.

    The dispatch order matters: bool MUST be checked before int because bool
    is a subclass of int in Python.

    Args:
        value: None, bool, int, float, Decimal, str, a Mapping with str keys,
               or a list/tuple of such values.
        span:  Span attached to every node built. Defaults to EMPTY_SPAN.

    Raises:
        TypeError:  For unsupported types, including non-str mapping keys.
        ValueError: For NaN and infinite numbers, which JSON cannot express.
    """
    if value is None:
        return Null(span)

    if isinstance(value, bool):
        return Boolean(value, span)

    if isinstance(value, int):
        return Number(str(int(value)), span)

    if isinstance(value, (float, Decimal)):
        return Number(_number_text(value), span)

    if isinstance(value, str):
        return String(value, span)

    if isinstance(value, Mapping):
        fields = []
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"Object keys must be str, got {type(key)!r}")
            fields.append(Field(String(key, span), from_python(item, span)))
        return Object(tuple(fields), span)

    if isinstance(value, (list, tuple)):
        return Array(tuple(from_python(item, span) for item in value), span)

    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def _number_text(value: float | Decimal) -> str:
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"{value!r} is not representable as a JSON number")
        text = repr(value)
    else:
        if not value.is_finite():
            raise ValueError(f"{value!r} is not representable as a JSON number")
        text = str(value).lower()
    # Number.text must stay within the JSON number grammar.
    if _NUMBER.fullmatch(text) is None:
        raise ValueError(f"Cannot render {value!r} as a JSON number (got {text!r})")
    return text


def dumps(
    node: Node[Any], *, indent: int | str | None = None, ensure_ascii: bool = False
) -> str:
    """Render a tree as strict JSON text.

    Args:
        node:         Root of the tree.
        indent:       None for compact output, or the per-level indent (a
                      count of spaces or a literal string) for pretty output.
        ensure_ascii: Escape non-ASCII characters in strings.

    Returns:
        JSON text. Duplicate object keys are written out as they appear.
    """
    if isinstance(indent, int):
        indent = " " * indent
    parts: list[str] = []
    _dump(node, parts, indent, ensure_ascii, 0)
    return "".join(parts)


def _dump(
    node: Node[Any],
    parts: list[str],
    indent: str | None,
    ensure_ascii: bool,
    level: int,
) -> None:
    match node:
        case Null():
            parts.append("null")
        case Boolean(value=value):
            parts.append("true" if value else "false")
        case Number(text=text):
            parts.append(text)
        case String(value=value):
            parts.append(json.dumps(value, ensure_ascii=ensure_ascii))
        case Object(fields=fields):
            if not fields:
                parts.append("{}")
                return
            parts.append("{")
            for i, field in enumerate(fields):
                if i:
                    parts.append(",")
                _newline(parts, indent, level + 1)
                parts.append(json.dumps(field.key.value, ensure_ascii=ensure_ascii))
                parts.append(": " if indent is not None else ":")
                _dump(field.value, parts, indent, ensure_ascii, level + 1)
            _newline(parts, indent, level)
            parts.append("}")
        case Array(elements=elements):
            if not elements:
                parts.append("[]")
                return
            parts.append("[")
            for i, element in enumerate(elements):
                if i:
                    parts.append(",")
                _newline(parts, indent, level + 1)
                _dump(element, parts, indent, ensure_ascii, level + 1)
            _newline(parts, indent, level)
            parts.append("]")
        case _:
            raise TypeError(f"Unsupported node type: {type(node)!r}")


def _newline(parts: list[str], indent: str | None, level: int) -> None:
    if indent is not None:
        parts.append("\n" + indent * level)
