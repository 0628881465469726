"""End-to-end tests for MainWindow wiring board clicks to the session."""

from __future__ import annotations

from pathlib import Path

import pytest

from chessgui.core.enums import Color, GameEndReason, GameResult
from chessgui.core.types import Coordinate
from chessgui.ui.main_window import MainWindow
from chessgui.ui.settings import AppSettings


def _click(window: MainWindow, *squares: str) -> None:
    for square in squares:
        window.board_panel.tile(Coordinate.parse(square)).click()


class TestMainWindow:
    def test_starts_with_white_to_move(self) -> None:
        window = MainWindow()
        assert window.controller.session.turn_to_move == Color.WHITE
        assert window.board_panel.symbol_at(Coordinate.parse("e2")) == "♙"
        assert window.info_panel.history_text() == ""
        assert window._status_label.text() == "White to move"

    def test_two_clicks_make_a_move(self) -> None:
        window = MainWindow()
        _click(window, "e2")
        assert window.board_panel.highlighted == {
            Coordinate.parse("e3"),
            Coordinate.parse("e4"),
        }
        _click(window, "e4")

        assert window.info_panel.history_text() == "1. e4 "
        assert window.board_panel.symbol_at(Coordinate.parse("e4")) == "♙"
        assert window.board_panel.symbol_at(Coordinate.parse("e2")) == ""
        assert window.board_panel.highlighted == frozenset()
        assert window._status_label.text() == "Black to move"

    def test_checkmate_freezes_board(self) -> None:
        window = MainWindow()
        _click(window, "f2", "f3", "e7", "e5", "g2", "g4", "d8", "h4")

        assert window.info_panel.history_text() == "1. f3 e5 2. g4 Qh4# "
        assert window.info_panel.result_text() == "Black wins by checkmate."
        assert not window.board_panel.is_input_enabled
        session = window.controller.session
        assert session.result == GameResult.BLACK_WINS
        assert session.end_reason == GameEndReason.CHECKMATE

        _click(window, "e1", "e2")
        assert window.info_panel.history_text() == "1. f3 e5 2. g4 Qh4# "
        assert window.board_panel.highlighted == frozenset()

    def test_russian_ui(self) -> None:
        window = MainWindow(AppSettings(language="Russian"))
        assert window.windowTitle() == "Шахматы"
        assert window._status_label.text() == "Ход: Белые"

    def test_save_uses_transcript(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        window = MainWindow(AppSettings(save_directory=tmp_path))
        _click(window, "g1", "f3")

        monkeypatch.setattr(
            "chessgui.ui.dialogs.save_dialog.QInputDialog.getText",
            lambda *args, **kwargs: ("opening", True),
        )
        monkeypatch.setattr(
            "chessgui.ui.dialogs.save_dialog.QMessageBox.information",
            lambda *args, **kwargs: None,
        )

        saved = window._on_save_game()
        assert saved == tmp_path / "opening.txt"
        assert saved.read_text(encoding="utf-8") == "1. Nf3 "

    def test_ask_promotion_setting_uses_dialog(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        from chessgui.core.enums import PieceType
        from chessgui.ui.dialogs.promotion_dialog import PromotionDialog

        monkeypatch.setattr(
            PromotionDialog, "ask", staticmethod(lambda *a: PieceType.KNIGHT)
        )
        window = MainWindow(AppSettings(promotion_choice="ask"))
        pawn = window.controller.engine.piece_at(Coordinate.parse("e2"))
        assert pawn is not None
        chosen = window.controller.promotion.resolve(pawn, Coordinate.parse("e8"))
        assert chosen == PieceType.KNIGHT
