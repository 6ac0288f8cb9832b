"""lenient-json - a forgiving JSON parser producing a span-annotated AST."""

from __future__ import annotations

from lenient_json.api import (
    load,
    loads,
    parse,
    parse_input,
    parse_with_empty_spans,
    parse_with_pos_spans,
    parse_with_text_and_pos_spans,
    parse_with_text_spans,
)
from lenient_json.config import ParserConfig, SpanMode
from lenient_json.errors import JsonSyntaxError
from lenient_json.input import (
    EMPTY_SPAN,
    EmptySpan,
    PosOnlySpan,
    Position,
    StringInput,
    TextAndPosSpan,
    TextOnlySpan,
)
from lenient_json.parser import JsonParser
from lenient_json.protocols import EOB, CharInput
from lenient_json.tree import (
    Array,
    Boolean,
    Field,
    Node,
    NodeType,
    Null,
    Number,
    Object,
    String,
    dumps,
    from_python,
    to_python,
)

__version__: str = "0.1.0"
__all__: list[str] = [
    "EMPTY_SPAN",
    "EOB",
    "Array",
    "Boolean",
    "CharInput",
    "EmptySpan",
    "Field",
    "JsonParser",
    "JsonSyntaxError",
    "Node",
    "NodeType",
    "Null",
    "Number",
    "Object",
    "ParserConfig",
    "PosOnlySpan",
    "Position",
    "SpanMode",
    "String",
    "StringInput",
    "TextAndPosSpan",
    "TextOnlySpan",
    "dumps",
    "from_python",
    "load",
    "loads",
    "parse",
    "parse_input",
    "parse_with_empty_spans",
    "parse_with_pos_spans",
    "parse_with_text_and_pos_spans",
    "parse_with_text_spans",
    "to_python",
]
