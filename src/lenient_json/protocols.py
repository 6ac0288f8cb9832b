"""CharInput Protocol: the character cursor the parser reads from.

Defines the structural interface any character source must satisfy to be
parsed. Users can plug in their own cursor without inheriting from any base
class; ``StringInput`` is the in-memory implementation shipped with the
package.

Example::

    from lenient_json.input import StringInput
    from lenient_json.protocols import CharInput

    cursor = StringInput.with_empty_spans("[1, 2]")
    assert isinstance(cursor, CharInput)  # True, structural conformance
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from lenient_json.input.spans import Position

__all__ = ["EOB", "CharInput"]

S_co = TypeVar("S_co", covariant=True)

# Value of ``CharInput.current`` once the input is exhausted.
EOB: Final = None


@runtime_checkable
class CharInput(Protocol[S_co]):
    """Structural protocol for character cursors.

    A conforming cursor must:
    - Report the current character through ``current``, or ``EOB`` (``None``)
      at end of input.
    - Move one character forward on ``advance()``; a no-op at end of input.
    - Return a ``Position`` instance from ``mark()`` that ``reset()`` can resume
      from. Marks are not opaque: JsonSyntaxError reads ``line``, ``column``
      and ``offset`` from the mark taken where parsing failed.
    - Build a span value covering ``mark`` to the current position in
      ``capture()``.
    - Consume exactly ``n`` characters in ``take(n)``, or return ``None`` and
      consume nothing when fewer remain.
    - Describe its current location in ``str(cursor)`` for error messages.
    """

    @property
    def current(self) -> str | None: ...

    def advance(self) -> None: ...

    def mark(self) -> Position: ...

    def reset(self, mark: Position) -> None: ...

    def capture(self, mark: Position) -> S_co: ...

    def take(self, n: int) -> str | None: ...
