"""JsonSyntaxError: the single failure type raised while parsing."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lenient_json.input.spans import Position

__all__ = ["JsonSyntaxError"]


class JsonSyntaxError(ValueError):
    """The input is not valid (lenient) JSON.

    Subclasses ``ValueError`` the way ``json.JSONDecodeError`` does, so code
    already catching ``ValueError`` around ``json.loads`` keeps working.

    Attributes:
        msg:      Human-readable description of the first violation.
        position: Where the cursor stood when the violation was detected, as
                  returned by its ``mark()``.
        context:  Rendering of the cursor state (line, column, nearby text).
    """

    def __init__(self, msg: str, position: Position, context: str) -> None:
        super().__init__(f"{msg} at {context}")
        self.msg = msg
        self.position = position
        self.context = context

    @property
    def lineno(self) -> int:
        return self.position.line

    @property
    def colno(self) -> int:
        return self.position.column

    @property
    def pos(self) -> int:
        return self.position.offset

    def __reduce__(self) -> tuple[type[JsonSyntaxError], tuple[str, Position, str]]:
        return self.__class__, (self.msg, self.position, self.context)
