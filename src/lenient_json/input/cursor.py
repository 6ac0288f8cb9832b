"""StringInput: in-memory CharInput over a ``str``.

The span policy is fixed at construction by a capture function, so the parser
running over the cursor never branches on it. The class-method constructors
cover the four shipped policies:

    StringInput.with_text_and_pos_spans(text)
    StringInput.with_pos_only_spans(text)
    StringInput.with_text_only_spans(text)
    StringInput.with_empty_spans(text)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from lenient_json.input.spans import (
    EmptySpan,
    PosOnlySpan,
    Position,
    TextAndPosSpan,
    TextOnlySpan,
    empty_span,
    pos_only_span,
    text_and_pos_span,
    text_only_span,
)

if TYPE_CHECKING:
    from lenient_json.input.spans import SpanCapture

__all__ = ["StringInput"]

S = TypeVar("S")

# Characters of context shown on each side of the cursor in error messages.
_CONTEXT_RADIUS = 10


class StringInput(Generic[S]):
    """Character cursor over an immutable string.

    Offsets are 0-based, lines and columns 1-based. Satisfies the
    ``CharInput`` Protocol structurally.

    Args:
        source:  The complete input text.
        capture: Span capture function ``(source, start, end) -> S``.
    """

    __slots__ = ("_capture", "_column", "_length", "_line", "_offset", "_source")

    def __init__(self, source: str, capture: SpanCapture[S]) -> None:
        self._source = source
        self._capture = capture
        self._length = len(source)
        self._offset = 0
        self._line = 1
        self._column = 1

    @classmethod
    def with_text_and_pos_spans(cls, source: str) -> StringInput[TextAndPosSpan]:
        return StringInput(source, text_and_pos_span)

    @classmethod
    def with_pos_only_spans(cls, source: str) -> StringInput[PosOnlySpan]:
        return StringInput(source, pos_only_span)

    @classmethod
    def with_text_only_spans(cls, source: str) -> StringInput[TextOnlySpan]:
        return StringInput(source, text_only_span)

    @classmethod
    def with_empty_spans(cls, source: str) -> StringInput[EmptySpan]:
        return StringInput(source, empty_span)

    # ------------------------------------------------------------------
    # CharInput Protocol surface
    # ------------------------------------------------------------------

    @property
    def current(self) -> str | None:
        """The character under the cursor, or ``None`` at end of input."""
        if self._offset >= self._length:
            return None
        return self._source[self._offset]

    def advance(self) -> None:
        if self._offset >= self._length:
            return
        if self._source[self._offset] == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        self._offset += 1

    def mark(self) -> Position:
        return Position(self._offset, self._line, self._column)

    def reset(self, mark: Position) -> None:
        """Resume from a position previously returned by ``mark()``."""
        if not 0 <= mark.offset <= self._length:
            msg = f"mark offset {mark.offset} is outside the input"
            raise ValueError(msg)
        self._offset = mark.offset
        self._line = mark.line
        self._column = mark.column

    def capture(self, mark: Position) -> S:
        return self._capture(self._source, mark, self.mark())

    def take(self, n: int) -> str | None:
        """Consume and return exactly ``n`` characters.

        Returns ``None`` (consuming nothing) when fewer than ``n`` remain.
        """
        end = self._offset + n
        if n < 0 or end > self._length:
            return None
        chunk = self._source[self._offset : end]
        for _ in range(n):
            self.advance()
        return chunk

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def source(self) -> str:
        return self._source

    @property
    def at_end(self) -> bool:
        return self._offset >= self._length

    def __str__(self) -> str:
        before = self._source[max(0, self._offset - _CONTEXT_RADIUS) : self._offset]
        after = self._source[self._offset : self._offset + _CONTEXT_RADIUS]
        return f"line {self._line}, column {self._column}: {before!r} ^ {after!r}"

    def __repr__(self) -> str:
        return (
            f"StringInput(offset={self._offset}, "
            f"line={self._line}, column={self._column})"
        )
