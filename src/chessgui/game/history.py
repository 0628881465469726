"""MoveRecorder — append-only, numbered move transcript."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessgui.core.enums import Color

if TYPE_CHECKING:
    from chessgui.core.types import Coordinate
    from chessgui.game.interfaces import IPiece, IRulesEngine

SEPARATOR = " "


class MoveRecorder:
    """Builds the game transcript, e.g. ``"1. e4 e5 2. Nf3 Nc6 "``.

    Every White move bumps the move counter and is prefixed with
    ``"<n>. "``; Black moves carry no prefix.  Each token is followed by
    a single space.  Recorded text is never rewritten.
    """

    __slots__ = ("_move_number", "_parts", "_tokens")

    def __init__(self) -> None:
        self._move_number = 0
        self._parts: list[str] = []
        self._tokens: list[str] = []

    @property
    def move_number(self) -> int:
        """Number of White moves recorded so far."""
        return self._move_number

    @property
    def tokens(self) -> tuple[str, ...]:
        """Notated tokens without numbering, in play order."""
        return tuple(self._tokens)

    def record(
        self,
        coordinate: Coordinate,
        piece: IPiece,
        board_context: IRulesEngine,
        turn_color: Color,
    ) -> str:
        """Append the move of *piece* to *coordinate* and return its token.

        Notation comes from *board_context*, which must already reflect
        the move.
        """
        token = board_context.move_string(coordinate, piece)
        if turn_color == Color.WHITE:
            self._move_number += 1
            self._parts.append(f"{self._move_number}. {token}{SEPARATOR}")
        else:
            self._parts.append(f"{token}{SEPARATOR}")
        self._tokens.append(token)
        return token

    def get_full_history(self) -> str:
        return "".join(self._parts)

    def __len__(self) -> int:
        return len(self._tokens)
