"""InfoPanel — move transcript, save button and game result."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QPlainTextEdit, QPushButton, QVBoxLayout, QWidget

from chessgui.ui.i18n import t
from chessgui.ui.styles.theme import INFO_BACKGROUND


class InfoPanel(QWidget):
    """Shows the transcript as recorded and the final result, if any."""

    save_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        self.setAutoFillBackground(True)
        self.setStyleSheet(f"InfoPanel {{ background: {INFO_BACKGROUND}; }}")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(12)

        self._header = QLabel()
        self._header.setFont(QFont("Arial", 12, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._header)

        self._moves = QPlainTextEdit()
        self._moves.setReadOnly(True)
        self._moves.setFont(QFont("Arial", 14, QFont.Weight.Bold))
        layout.addWidget(self._moves, stretch=1)

        self._btn_save = QPushButton()
        self._btn_save.setObjectName("saveButton")
        self._btn_save.setMinimumHeight(36)
        self._btn_save.clicked.connect(self.save_clicked)
        layout.addWidget(self._btn_save, alignment=Qt.AlignmentFlag.AlignHCenter)

        self._result = QLabel()
        self._result.setFont(QFont("Arial", 20, QFont.Weight.Bold))
        self._result.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._result.setWordWrap(True)
        layout.addWidget(self._result)

    def retranslate_ui(self) -> None:
        s = t()
        self._header.setText(s.moves_header)
        self._btn_save.setText(s.btn_save_game)

    def set_history(self, history: str) -> None:
        self._moves.setPlainText(history)

    def history_text(self) -> str:
        return self._moves.toPlainText()

    def set_game_result(self, message: str) -> None:
        self._result.setText(message)

    def result_text(self) -> str:
        return self._result.text()
