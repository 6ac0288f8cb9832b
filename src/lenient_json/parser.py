"""JsonParser: recursive-descent parser from a CharInput to an AST.

Loosely follows RFC 4627 / RFC 8259 and accepts a superset of it:

- Python-style literals ``True``, ``False`` and ``None``
- single-quoted strings
- trailing commas and missing commas between array elements / object fields
- a leading ``+`` on numbers
- ``\\xHH`` escapes in strings
- any Unicode whitespace between tokens

Every ``_parse_*`` method fully consumes its construct, captures the span from
its first to its last character, and then skips trailing whitespace itself
before returning. Whitespace handling is therefore repeated after each
construct rather than centralised; callers rely on the cursor already sitting
on the next significant character.

Parsing is all-or-nothing: the first violation raises JsonSyntaxError and no
partial tree is returned.

Example::

    from lenient_json.input import StringInput
    from lenient_json.parser import JsonParser

    parser = JsonParser(StringInput.with_empty_spans("{'a': [1, 2 3,], 'b': None}"))
    tree = parser.parse()
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, NoReturn, TypeVar

from lenient_json.config import ParserConfig
from lenient_json.errors import JsonSyntaxError
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

if TYPE_CHECKING:
    from lenient_json.protocols import CharInput

__all__ = ["JsonParser", "QuoteStyle"]

S = TypeVar("S")

_DIGITS = frozenset("0123456789")
_NONZERO_DIGITS = frozenset("123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_NUMBER_START = frozenset("0123456789-+")

# Escapes that map one character to one character. The quote escape depends
# on the string's quote style and is handled separately.
_SIMPLE_ESCAPES = {
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_NULL_KEYWORDS = {"n": "null", "N": "None"}
_BOOLEAN_KEYWORDS = {
    "t": ("true", True),
    "f": ("false", False),
    "T": ("True", True),
    "F": ("False", False),
}


class QuoteStyle(Enum):
    SINGLE = "'"
    DOUBLE = '"'


def _describe(char: str | None) -> str:
    return "end of input" if char is None else repr(char)


class JsonParser(Generic[S]):
    """Parses one JSON value from a CharInput.

    The span type ``S`` is whatever the cursor's ``capture()`` returns; the
    parser passes it through to the nodes untouched.

    A parser is bound to one cursor and is meant to be used for a single
    ``parse()`` call. It holds no state beyond the cursor itself.

    Args:
        cursor: The cursor to read from, positioned at the start of the text.
        config: Parser limits. Defaults to ``ParserConfig()`` when None.
    """

    def __init__(
        self, cursor: CharInput[S], config: ParserConfig | None = None
    ) -> None:
        self._cursor = cursor
        self._config = config if config is not None else ParserConfig()

    def parse(self) -> Node[S]:
        """Parse a complete document: one value surrounded by optional whitespace.

        Raises:
            JsonSyntaxError: On the first syntax violation, including any
                non-whitespace character after the value.
        """
        self.skip_spaces()
        node = self.parse_value()
        self.skip_spaces()
        if self._cursor.current is not None:
            self._fail(f"Unexpected character: {_describe(self._cursor.current)}")
        return node

    def parse_value(self, depth: int = 0) -> Node[S]:
        """Parse the value at the cursor, dispatching on its first character."""
        self.skip_spaces()
        char = self._cursor.current
        if char == "[":
            return self._parse_array(depth + 1)
        if char == "{":
            return self._parse_object(depth + 1)
        if char == '"':
            return self._parse_string(QuoteStyle.DOUBLE)
        if char == "'":
            return self._parse_string(QuoteStyle.SINGLE)
        if char in _BOOLEAN_KEYWORDS:
            return self._parse_boolean()
        if char in _NULL_KEYWORDS:
            return self._parse_null()
        if char in _NUMBER_START:
            return self._parse_number()
        self._fail(f"Unexpected character: {_describe(char)}")

    def skip_spaces(self) -> S:
        """Skip any Unicode whitespace and return the span of what was skipped.

        More lenient than JSON, which only allows space, tab, CR and LF.
        """
        cursor = self._cursor
        start = cursor.mark()
        while True:
            char = cursor.current
            if char is None or not char.isspace():
                return cursor.capture(start)
            cursor.advance()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _fail(self, message: str) -> NoReturn:
        raise JsonSyntaxError(message, self._cursor.mark(), str(self._cursor))

    def _expect(self, expected: str) -> None:
        for char in expected:
            current = self._cursor.current
            if current != char:
                self._fail(f"Expected {char!r}, got {_describe(current)}")
            self._cursor.advance()

    def _digits(self, out: list[str]) -> None:
        """Append one or more decimal digits to ``out``."""
        cursor = self._cursor
        if cursor.current not in _DIGITS:
            got = _describe(cursor.current)
            self._fail(f"Invalid number: expected a digit, got {got}")
        while (char := cursor.current) in _DIGITS:
            out.append(char)  # type: ignore[arg-type]
            cursor.advance()

    def _check_depth(self, depth: int) -> None:
        if depth > self._config.max_depth:
            self._fail(f"Maximum nesting depth of {self._config.max_depth} exceeded")

    # ------------------------------------------------------------------
    # Literals
    # ------------------------------------------------------------------

    def _parse_null(self) -> Null[S]:
        start = self._cursor.mark()
        keyword = _NULL_KEYWORDS.get(self._cursor.current)  # type: ignore[arg-type]
        if keyword is None:
            self._fail(f"Expected 'n' or 'N', got {_describe(self._cursor.current)}")
        self._expect(keyword)
        span = self._cursor.capture(start)
        self.skip_spaces()
        return Null(span)

    def _parse_boolean(self) -> Boolean[S]:
        start = self._cursor.mark()
        entry = _BOOLEAN_KEYWORDS.get(self._cursor.current)  # type: ignore[arg-type]
        if entry is None:
            self._fail(f"Expected 't' or 'f', got {_describe(self._cursor.current)}")
        keyword, value = entry
        self._expect(keyword)
        span = self._cursor.capture(start)
        self.skip_spaces()
        return Boolean(value, span)

    # ------------------------------------------------------------------
    # Strings
    # ------------------------------------------------------------------

    def _parse_string(self, style: QuoteStyle) -> String[S]:
        cursor = self._cursor
        quote = style.value
        start = cursor.mark()
        self._expect(quote)

        chars: list[str] = []
        has_surrogates = False
        while True:
            char = cursor.current
            if char is None:
                self._fail("Unterminated string")
            if char == quote:
                break
            if char != "\\":
                chars.append(char)
                cursor.advance()
                continue

            cursor.advance()
            escaped = cursor.current
            if escaped == quote:
                chars.append(quote)
                cursor.advance()
            elif escaped in _SIMPLE_ESCAPES:
                chars.append(_SIMPLE_ESCAPES[escaped])  # type: ignore[index]
                cursor.advance()
            elif escaped == "u":
                cursor.advance()
                code = self._hex_escape("u", 4)
                has_surrogates = has_surrogates or 0xD800 <= code <= 0xDFFF
                chars.append(chr(code))
            elif escaped == "x":
                cursor.advance()
                chars.append(chr(self._hex_escape("x", 2)))
            else:
                self._fail(f"Invalid escape: {_describe(escaped)}")

        self._expect(quote)
        span = cursor.capture(start)
        self.skip_spaces()
        value = "".join(chars)
        if has_surrogates:
            value = _combine_surrogates(value)
        return String(value, span)

    def _hex_escape(self, kind: str, width: int) -> int:
        digits = self._cursor.take(width)
        if digits is None or not all(c in _HEX_DIGITS for c in digits):
            self._fail(f"Invalid escape: '\\{kind}' needs exactly {width} hex digits")
        return int(digits, 16)

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------

    def _parse_number(self) -> Number[S]:
        cursor = self._cursor
        start = cursor.mark()
        parts: list[str] = []

        if cursor.current in ("-", "+"):
            if cursor.current == "-":
                parts.append("-")
            cursor.advance()

        # Integer part: a lone 0, or a non-zero digit followed by digits.
        if cursor.current == "0":
            parts.append("0")
            cursor.advance()
            if cursor.current in _DIGITS:
                self._fail("Leading zeros are not allowed")
        elif cursor.current in _NONZERO_DIGITS:
            self._digits(parts)
        else:
            self._fail(f"Invalid number: {_describe(cursor.current)}")

        if cursor.current == ".":
            parts.append(".")
            cursor.advance()
            self._digits(parts)

        if cursor.current in ("e", "E"):
            parts.append("e")
            cursor.advance()
            if cursor.current in ("+", "-"):
                parts.append(cursor.current)  # type: ignore[arg-type]
                cursor.advance()
            self._digits(parts)

        span = cursor.capture(start)
        self.skip_spaces()
        return Number("".join(parts), span)

    # ------------------------------------------------------------------
    # Containers
    # ------------------------------------------------------------------

    def _parse_array(self, depth: int) -> Array[S]:
        cursor = self._cursor
        start = cursor.mark()
        self._expect("[")
        self._check_depth(depth)

        elements: list[Node[S]] = []
        while cursor.current != "]":
            self.skip_spaces()
            if cursor.current == "]":
                break
            elements.append(self.parse_value(depth))
            # Commas are optional, and one may trail the last element.
            if cursor.current == ",":
                cursor.advance()

        self._expect("]")
        span = cursor.capture(start)
        self.skip_spaces()
        return Array(tuple(elements), span)

    def _parse_object(self, depth: int) -> Object[S]:
        cursor = self._cursor
        start = cursor.mark()
        self._expect("{")
        self._check_depth(depth)

        fields: list[Field[S]] = []
        while cursor.current != "}":
            self.skip_spaces()
            if cursor.current == "}":
                break

            if cursor.current == '"':
                key = self._parse_string(QuoteStyle.DOUBLE)
            elif cursor.current == "'":
                key = self._parse_string(QuoteStyle.SINGLE)
            else:
                self._fail(f"Expected '\"' or \"'\", got {_describe(cursor.current)}")

            self._expect(":")
            fields.append(Field(key, self.parse_value(depth)))
            # Commas are optional, and one may trail the last field.
            if cursor.current == ",":
                cursor.advance()

        self._expect("}")
        span = cursor.capture(start)
        self.skip_spaces()
        return Object(tuple(fields), span)


def _combine_surrogates(text: str) -> str:
    """Join UTF-16 surrogate pairs produced by consecutive ``\\u`` escapes.

    Lone surrogates are left as they are.
    """
    out: list[str] = []
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if (
            "\ud800" <= char <= "\udbff"
            and i + 1 < length
            and "\udc00" <= text[i + 1] <= "\udfff"
        ):
            high = ord(char) - 0xD800
            low = ord(text[i + 1]) - 0xDC00
            out.append(chr(0x10000 + (high << 10) + low))
            i += 2
        else:
            out.append(char)
            i += 1
    return "".join(out)
