"""ParserConfig and SpanMode for parser configuration.

ParserConfig is a frozen (immutable) dataclass holding the parser limits.
SpanMode selects which span policy the text-level ``parse()`` entry point
records on every node: full, position-only, text-only, or none.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["DEFAULT_MAX_DEPTH", "ParserConfig", "SpanMode"]

# Each nesting level costs two interpreter frames (value dispatch + container),
# so this stays well below the default recursion limit of 1000.
DEFAULT_MAX_DEPTH = 256


class SpanMode(StrEnum):
    """Which span policy to record on parsed nodes.

    - FULL:     TextAndPosSpan, source text plus start/end positions.
    - POSITION: PosOnlySpan, start/end positions only.
    - TEXT:     TextOnlySpan, source text only.
    - NONE:     EmptySpan, nothing recorded; trees compare structurally.
    """

    FULL = auto()
    POSITION = auto()
    TEXT = auto()
    NONE = auto()


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Immutable configuration for JsonParser.

    Attributes:
        max_depth: Maximum number of simultaneously open arrays/objects.
            Deeper input raises JsonSyntaxError instead of RecursionError.
    """

    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            msg = f"max_depth must be an int, got {type(self.max_depth).__name__}"
            raise TypeError(msg)
        if self.max_depth < 1:
            msg = f"max_depth must be >= 1, got {self.max_depth}"
            raise ValueError(msg)
