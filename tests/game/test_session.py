"""Tests for SessionState and the Selection variants."""

from chessgui.core.enums import Color, GameEndReason, GameResult
from chessgui.core.types import Coordinate
from chessgui.game.session import EMPTY, Empty, Holding, SelectionPhase, SessionState


def test_initial_state() -> None:
    state = SessionState()
    assert state.turn_to_move == Color.WHITE
    assert state.selection is EMPTY
    assert isinstance(state.selection, Empty)
    assert state.active
    assert state.result == GameResult.IN_PROGRESS
    assert state.end_reason == GameEndReason.NONE
    assert state.phase == SelectionPhase.AWAITING_SELECTION


def test_holding_phase() -> None:
    state = SessionState()
    state.selection = Holding(object(), frozenset({Coordinate.parse("e4")}))
    assert state.phase == SelectionPhase.PIECE_SELECTED


def test_sessions_are_independent() -> None:
    a = SessionState()
    b = SessionState()
    a.turn_to_move = Color.BLACK
    a.active = False
    assert b.turn_to_move == Color.WHITE
    assert b.active
