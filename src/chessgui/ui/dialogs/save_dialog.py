"""Save-game flow: ask for a file name, write the transcript, report back."""

from __future__ import annotations

from pathlib import Path

from PyQt6.QtWidgets import QInputDialog, QLineEdit, QMessageBox, QWidget

from chessgui.game.persistence import sanitize_filename, save_game
from chessgui.ui.i18n import t


class SaveGameDialog:
    """Modal save prompt. Every step blocks until the user answers."""

    def __init__(self, directory: Path | None = None) -> None:
        self._directory = directory

    def run(self, history: str, parent: QWidget | None = None) -> Path | None:
        """Prompt, save and report. Returns the written path, or ``None``."""
        s = t()
        name, ok = QInputDialog.getText(
            parent, s.save_title, s.save_prompt, QLineEdit.EchoMode.Normal, ""
        )
        if not ok:
            return None

        path = sanitize_filename(name, self._directory)
        if path is None:
            QMessageBox.critical(
                parent, s.save_error_title, s.save_invalid_name.format(name=name)
            )
            return None

        if not save_game(history, path):
            QMessageBox.critical(
                parent, s.save_error_title, s.save_failed.format(path=path)
            )
            return None

        QMessageBox.information(
            parent, s.save_success_title, s.save_success.format(path=path)
        )
        return path
