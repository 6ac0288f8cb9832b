"""Input subpackage: the string cursor and span value types.

Re-exports the public API for the input module:
- StringInput: CharInput implementation over an in-memory string
- Position: (offset, line, column) mark
- TextAndPosSpan, PosOnlySpan, TextOnlySpan, EmptySpan: the four span policies
"""

from lenient_json.input.cursor import StringInput
from lenient_json.input.spans import (
    EMPTY_SPAN,
    EmptySpan,
    PosOnlySpan,
    Position,
    TextAndPosSpan,
    TextOnlySpan,
)

__all__ = [
    "EMPTY_SPAN",
    "EmptySpan",
    "PosOnlySpan",
    "Position",
    "StringInput",
    "TextAndPosSpan",
    "TextOnlySpan",
]
