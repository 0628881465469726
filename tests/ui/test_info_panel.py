"""Tests for the transcript/result side panel."""

from __future__ import annotations

from chessgui.ui.i18n import set_language
from chessgui.ui.panels.info_panel import InfoPanel


def test_history_and_result() -> None:
    panel = InfoPanel()
    panel.set_history("1. e4 e5 ")
    panel.set_game_result("Draw.")
    assert panel.history_text() == "1. e4 e5 "
    assert panel.result_text() == "Draw."


def test_save_button_emits() -> None:
    panel = InfoPanel()
    fired: list[bool] = []
    panel.save_clicked.connect(lambda: fired.append(True))
    panel._btn_save.click()
    assert fired == [True]


def test_retranslate() -> None:
    panel = InfoPanel()
    assert panel._btn_save.text() == "Save game"
    set_language("Russian")
    panel.retranslate_ui()
    assert panel._btn_save.text() == "Сохранить игру"
