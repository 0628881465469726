"""PromotionResolver — decides what a pawn on its last rank becomes."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeAlias

from chessgui.core.enums import PROMOTION_TYPES, PieceType
from chessgui.core.types import Coordinate
from chessgui.game.interfaces import IPiece

_LOGGER = logging.getLogger(__name__)

PromotionChooser: TypeAlias = Callable[[IPiece, Coordinate], PieceType]


def always_queen(pawn: IPiece, coordinate: Coordinate) -> PieceType:
    return PieceType.QUEEN


class PromotionResolver:
    """Resolves a pawn's promoted kind synchronously, before the move is applied.

    The choice is delegated to a pluggable *chooser* (``always_queen`` by
    default); the resolver validates it and mutates the pawn in place.
    """

    __slots__ = ("_chooser",)

    def __init__(self, chooser: PromotionChooser | None = None) -> None:
        self._chooser = chooser or always_queen

    def set_chooser(self, chooser: PromotionChooser | None) -> None:
        self._chooser = chooser or always_queen

    def resolve(self, pawn: IPiece, coordinate: Coordinate) -> PieceType:
        piece_type = self._chooser(pawn, coordinate)
        if piece_type not in PROMOTION_TYPES:
            raise ValueError(f"Invalid promotion piece: {piece_type!r}")
        pawn.set_promoted_piece(piece_type)
        _LOGGER.debug("Pawn promoted to %s on %s", piece_type.name, coordinate)
        return piece_type
