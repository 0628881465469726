"""Tests for PromotionResolver and its strategies."""

import pytest

from chessgui.core.enums import PieceType
from chessgui.core.types import Coordinate
from chessgui.engine import RulesEngine
from chessgui.game.promotion import PromotionResolver, always_queen

A7 = Coordinate.parse("a7")
A8 = Coordinate.parse("a8")


def _pawn():
    engine = RulesEngine("8/P6k/8/8/8/8/8/4K3 w - - 0 1")
    pawn = engine.piece_at(A7)
    assert pawn is not None
    return pawn


def test_default_is_queen() -> None:
    pawn = _pawn()
    assert PromotionResolver().resolve(pawn, A8) == PieceType.QUEEN
    assert pawn.piece_type == PieceType.QUEEN
    assert pawn.promotion == PieceType.QUEEN


def test_always_queen() -> None:
    assert always_queen(_pawn(), A8) == PieceType.QUEEN


def test_custom_chooser_receives_pawn_and_square() -> None:
    seen: list[tuple[object, Coordinate]] = []

    def knight(pawn, coordinate):
        seen.append((pawn, coordinate))
        return PieceType.KNIGHT

    pawn = _pawn()
    PromotionResolver(knight).resolve(pawn, A8)
    assert seen == [(pawn, A8)]
    assert pawn.piece_type == PieceType.KNIGHT


def test_set_chooser_none_restores_queen() -> None:
    resolver = PromotionResolver(lambda p, c: PieceType.ROOK)
    resolver.set_chooser(None)
    assert resolver.resolve(_pawn(), A8) == PieceType.QUEEN


@pytest.mark.parametrize("bad", [PieceType.KING, PieceType.PAWN])
def test_invalid_choice_leaves_pawn_untouched(bad: PieceType) -> None:
    pawn = _pawn()
    with pytest.raises(ValueError):
        PromotionResolver(lambda p, c: bad).resolve(pawn, A8)
    assert pawn.piece_type == PieceType.PAWN
    assert pawn.promotion is None
