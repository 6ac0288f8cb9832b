"""Span value types and the capture functions that produce them.

A span records where a node's literal text came from. The parser never looks
inside a span; it only threads whatever the cursor's capture function returns
into the nodes it builds. Four policies are provided:

- ``text_and_pos_span``  -> TextAndPosSpan (source slice + start/end positions)
- ``pos_only_span``      -> PosOnlySpan    (start/end positions only)
- ``text_only_span``     -> TextOnlySpan   (source slice only)
- ``empty_span``         -> EmptySpan      (unit value; no work done at all)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

__all__ = [
    "EMPTY_SPAN",
    "EmptySpan",
    "PosOnlySpan",
    "Position",
    "SpanCapture",
    "TextAndPosSpan",
    "TextOnlySpan",
    "empty_span",
    "pos_only_span",
    "text_and_pos_span",
    "text_only_span",
]

S = TypeVar("S")


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A point in the source text.

    Attributes:
        offset: 0-based character index into the source.
        line:   1-based line number; every ``\\n`` starts a new line.
        column: 1-based column within the line.
    """

    offset: int
    line: int = 1
    column: int = 1

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class TextAndPosSpan:
    """Full span: the covered source text and its start/end positions."""

    text: str
    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class PosOnlySpan:
    """Position-only span; ``end`` is exclusive."""

    start: Position
    end: Position

    @property
    def length(self) -> int:
        return self.end.offset - self.start.offset


@dataclass(frozen=True, slots=True)
class TextOnlySpan:
    text: str


@dataclass(frozen=True, slots=True)
class EmptySpan:
    """Unit span. All instances compare equal, so span-free trees compare by shape."""

    def __repr__(self) -> str:
        return "EMPTY_SPAN"


EMPTY_SPAN = EmptySpan()

# (source, start, end) -> span value
SpanCapture = Callable[[str, Position, Position], S]


def text_and_pos_span(source: str, start: Position, end: Position) -> TextAndPosSpan:
    return TextAndPosSpan(source[start.offset : end.offset], start, end)


def pos_only_span(source: str, start: Position, end: Position) -> PosOnlySpan:
    return PosOnlySpan(start, end)


def text_only_span(source: str, start: Position, end: Position) -> TextOnlySpan:
    return TextOnlySpan(source[start.offset : end.offset])


def empty_span(source: str, start: Position, end: Position) -> EmptySpan:
    return EMPTY_SPAN
