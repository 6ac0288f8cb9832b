"""Public API functions for lenient-json.

Every call builds a fresh cursor and JsonParser, so no state is shared between
calls and independent inputs may be parsed concurrently.

- ``parse_input``: the generic algorithm over any CharInput.
- ``parse_with_*_spans``: the four span-policy instantiations over a string.
- ``parse``: pick the span policy with a SpanMode value.
- ``loads`` / ``load``: parse straight to plain Python values.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, TypeVar

from lenient_json.config import ParserConfig, SpanMode
from lenient_json.errors import JsonSyntaxError
from lenient_json.input.cursor import StringInput
from lenient_json.parser import JsonParser
from lenient_json.tree.convert import to_python

if TYPE_CHECKING:
    from lenient_json.input.spans import (
        EmptySpan,
        PosOnlySpan,
        TextAndPosSpan,
        TextOnlySpan,
    )
    from lenient_json.protocols import CharInput
    from lenient_json.tree.nodes import Node

__all__ = [
    "load",
    "loads",
    "parse",
    "parse_input",
    "parse_with_empty_spans",
    "parse_with_pos_spans",
    "parse_with_text_and_pos_spans",
    "parse_with_text_spans",
]

logger = logging.getLogger(__name__)

S = TypeVar("S")


class _SupportsRead(Protocol):
    def read(self) -> str: ...


_CURSOR_FACTORIES: dict[SpanMode, Callable[[str], StringInput[Any]]] = {
    SpanMode.FULL: StringInput.with_text_and_pos_spans,
    SpanMode.POSITION: StringInput.with_pos_only_spans,
    SpanMode.TEXT: StringInput.with_text_only_spans,
    SpanMode.NONE: StringInput.with_empty_spans,
}


def parse_input(cursor: CharInput[S], config: ParserConfig | None = None) -> Node[S]:
    """Parse one JSON document from any CharInput-conformant cursor.

    Args:
        cursor: Cursor positioned at the start of the document. It must not be
                shared with another parse running at the same time.
        config: Parser limits. Defaults to ``ParserConfig()`` when None.

    Returns:
        The root node; spans are whatever ``cursor.capture()`` produces.

    Raises:
        JsonSyntaxError: On the first syntax violation.
    """
    try:
        return JsonParser(cursor, config).parse()
    except JsonSyntaxError as exc:
        logger.debug("lenient-json parse failed: %s", exc)
        raise


def parse(
    text: str,
    span_mode: SpanMode | str = SpanMode.FULL,
    config: ParserConfig | None = None,
) -> Node[Any]:
    """Parse ``text`` recording the spans selected by ``span_mode``.

    Args:
        text:      The complete document.
        span_mode: A SpanMode member or its string value ("full", "position",
                   "text", "none"). Defaults to full text+position spans.
        config:    Parser limits. Defaults to ``ParserConfig()`` when None.

    Raises:
        JsonSyntaxError: On the first syntax violation.
        ValueError:      If ``span_mode`` is not a known mode.
    """
    mode = SpanMode(span_mode)
    logger.debug("Parsing %d characters with %s spans", len(text), mode)
    return parse_input(_CURSOR_FACTORIES[mode](text), config)


def parse_with_text_and_pos_spans(text: str) -> Node[TextAndPosSpan]:
    return parse_input(StringInput.with_text_and_pos_spans(text))


def parse_with_pos_spans(text: str) -> Node[PosOnlySpan]:
    return parse_input(StringInput.with_pos_only_spans(text))


def parse_with_text_spans(text: str) -> Node[TextOnlySpan]:
    return parse_input(StringInput.with_text_only_spans(text))


def parse_with_empty_spans(text: str) -> Node[EmptySpan]:
    """Parse without recording spans; equal documents give equal trees."""
    return parse_input(StringInput.with_empty_spans(text))


def loads(
    text: str,
    *,
    parse_int: Callable[[str], Any] = int,
    parse_float: Callable[[str], Any] = float,
    config: ParserConfig | None = None,
) -> Any:
    """Parse lenient JSON text straight to plain Python values.

    Mirrors ``json.loads``: objects become dicts (last duplicate key wins),
    arrays lists, integers go through ``parse_int`` and other numbers through
    ``parse_float``. With the default ``int`` and ``float`` hooks the result
    matches ``json.loads``, including its losses: ``1e400`` becomes ``inf``
    and integers past the interpreter's digit limit raise ValueError. Pass
    ``decimal.Decimal`` for both hooks (or call ``to_python`` on the tree,
    which does so by default) to keep every number exactly.

    Raises:
        JsonSyntaxError: On the first syntax violation.
        ValueError:      If a number hook rejects the number text.
    """
    tree = parse(text, SpanMode.NONE, config)
    return to_python(tree, parse_int=parse_int, parse_float=parse_float)


def load(fp: _SupportsRead, **kwargs: Any) -> Any:
    """``loads(fp.read(), **kwargs)``; the whole stream is read first."""
    return loads(fp.read(), **kwargs)
