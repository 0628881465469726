"""Tests for the clickable board widget."""

from __future__ import annotations

from chessgui.core.types import Coordinate
from chessgui.engine import RulesEngine
from chessgui.game.interfaces import IBoardView
from chessgui.ui.board.board_panel import BoardPanel
from chessgui.ui.styles.theme import BoardTheme


def C(name: str) -> Coordinate:
    return Coordinate.parse(name)


def test_implements_board_view_protocol() -> None:
    assert isinstance(BoardPanel(), IBoardView)


def test_refresh_draws_pieces() -> None:
    panel = BoardPanel()
    panel.refresh(RulesEngine())
    assert panel.symbol_at(C("e1")) == "♔"
    assert panel.symbol_at(C("e8")) == "♚"
    assert panel.symbol_at(C("e4")) == ""
    assert panel.tile(C("d1")).text() == "♕"


def test_click_emits_coordinate() -> None:
    panel = BoardPanel()
    clicked: list[Coordinate] = []
    panel.tile_clicked.connect(clicked.append)
    panel.tile(C("g1")).click()
    assert clicked == [C("g1")]


def test_highlight_and_reset() -> None:
    panel = BoardPanel()
    theme = BoardTheme.default()
    panel.highlight_squares({C("e3"), C("e4")})
    assert panel.highlighted == {C("e3"), C("e4")}
    assert theme.highlight_to.name() in panel.tile(C("e4")).styleSheet()
    assert theme.highlight_to.name() not in panel.tile(C("e5")).styleSheet()

    panel.reset_highlights()
    assert panel.highlighted == frozenset()
    assert theme.highlight_to.name() not in panel.tile(C("e4")).styleSheet()


def test_square_colors_alternate() -> None:
    panel = BoardPanel()
    theme = BoardTheme.default()
    assert theme.dark_square.name() in panel.tile(C("a1")).styleSheet()
    assert theme.light_square.name() in panel.tile(C("b1")).styleSheet()
    assert theme.light_square.name() in panel.tile(C("h1")).styleSheet()


def test_disable_input_stops_clicks_and_keeps_pieces() -> None:
    panel = BoardPanel()
    panel.refresh(RulesEngine())
    clicked: list[Coordinate] = []
    panel.tile_clicked.connect(clicked.append)

    panel.disable_input()
    panel.disable_input()
    panel.tile(C("e2")).click()

    assert clicked == []
    assert not panel.is_input_enabled
    assert panel.tile(C("e2")).isEnabled()
    assert panel.tile(C("e2")).text() == "♙"


def test_hidden_legal_moves_are_not_painted() -> None:
    panel = BoardPanel()
    panel.set_show_legal_moves(False)
    panel.highlight_squares({C("e4")})
    assert BoardTheme.default().highlight_to.name() not in panel.tile(C("e4")).styleSheet()
