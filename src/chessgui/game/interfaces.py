"""Collaborator interfaces for the game layer.

Follows Dependency Inversion: :class:`SessionController` depends on these
protocols, not on the python-chess adapter or on Qt widgets.
"""

from __future__ import annotations

from collections.abc import Set
from typing import Protocol, runtime_checkable

from chessgui.core.enums import Color, PieceType
from chessgui.core.types import Coordinate


class IPiece(Protocol):
    """A piece as seen by the interaction layer."""

    @property
    def color(self) -> Color: ...

    @property
    def piece_type(self) -> PieceType: ...

    @property
    def coordinate(self) -> Coordinate: ...

    def legal_targets(self) -> Set[Coordinate]: ...

    def is_valid_move(self, coordinate: Coordinate, color: Color) -> bool: ...

    def can_promote(self, coordinate: Coordinate) -> bool:
        """Whether *coordinate* is on this piece's promotion rank (pawns only)."""
        ...

    def set_promoted_piece(self, piece_type: PieceType) -> None: ...


class IRulesEngine(Protocol):
    """Board authority: occupancy, mutation, notation, terminal predicates."""

    @property
    def side_to_move(self) -> Color: ...

    def piece_at(self, coordinate: Coordinate) -> IPiece | None: ...

    def make_move(self, coordinate: Coordinate, piece: IPiece) -> None: ...

    def move_string(self, coordinate: Coordinate, piece: IPiece) -> str:
        """Notated token for the move just applied."""
        ...

    def is_checkmate(self, color: Color) -> bool: ...

    def is_stalemate(self, color: Color) -> bool: ...

    def is_draw(self) -> bool: ...


@runtime_checkable
class IBoardView(Protocol):
    """Visual board driven by the controller."""

    def highlight_squares(self, coordinates: Set[Coordinate]) -> None: ...

    def reset_highlights(self) -> None: ...

    def refresh(self, engine: IRulesEngine) -> None:
        """Redraw every square from *engine*'s current board."""
        ...

    def disable_input(self) -> None:
        """Permanently stop dispatching clicks. Idempotent."""
        ...
