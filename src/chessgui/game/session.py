"""Per-game session state: side to move, selection, activity."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, auto
from typing import TYPE_CHECKING, TypeAlias

from chessgui.core.enums import Color, GameEndReason, GameResult
from chessgui.core.types import Coordinate

if TYPE_CHECKING:
    from chessgui.game.interfaces import IPiece


class SelectionPhase(IntEnum):
    """States of the two-click gesture."""

    AWAITING_SELECTION = auto()
    PIECE_SELECTED = auto()


@dataclass(frozen=True, slots=True)
class Empty:
    """No piece is selected."""


@dataclass(frozen=True, slots=True)
class Holding:
    """A piece is selected; *legal_targets* is the snapshot taken on selection."""

    piece: IPiece
    legal_targets: frozenset[Coordinate]


Selection: TypeAlias = Empty | Holding

EMPTY = Empty()


@dataclass
class SessionState:
    """Mutable state of one game, owned by its controller."""

    turn_to_move: Color = Color.WHITE
    selection: Selection = EMPTY
    active: bool = True
    result: GameResult = field(default=GameResult.IN_PROGRESS)
    end_reason: GameEndReason = field(default=GameEndReason.NONE)

    @property
    def phase(self) -> SelectionPhase:
        if isinstance(self.selection, Holding):
            return SelectionPhase.PIECE_SELECTED
        return SelectionPhase.AWAITING_SELECTION
