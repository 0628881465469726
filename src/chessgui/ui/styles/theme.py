"""Visual theme constants and QSS styles for Chessgui."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_to: QColor  # legal move targets
    label: QColor  # file/rank label text
    label_background: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(255, 222, 173),  # pastel
            dark_square=QColor(150, 75, 0),  # brown
            highlight_to=QColor(255, 255, 153),
            label=QColor(150, 75, 0),
            label_background=QColor(255, 222, 173),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_to=QColor(246, 246, 130),
            label=QColor(140, 162, 173),
            label_background=QColor(222, 227, 230),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            highlight_to=QColor(246, 246, 130),
            label=QColor(112, 149, 120),
            label_background=QColor(236, 238, 220),
        )

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Theme by settings name; unknown names give the default."""
        themes = {
            "Classic": cls.default,
            "Blue": cls.blue,
            "Green": cls.green,
        }
        return themes.get(name, cls.default)()


INFO_BACKGROUND = "#333333"

# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
}

QPlainTextEdit {
    background: #333333;
    color: #ffffff;
    border: 1px solid #3c3c3c;
    font-size: 14px;
    font-weight: bold;
}

QPushButton#saveButton {
    background: #808080;
    color: #ffffff;
    border: none;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton#saveButton:hover {
    background: #909090;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
