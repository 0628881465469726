"""Promotion dialog — lets user pick the promotion piece."""

from __future__ import annotations

import chess
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from chessgui.core.enums import PROMOTION_TYPES, Color, PieceType
from chessgui.core.types import Coordinate
from chessgui.game.interfaces import IPiece
from chessgui.game.promotion import PromotionChooser
from chessgui.ui.i18n import t


def _figure(color: Color, piece_type: PieceType) -> str:
    return chess.Piece(int(piece_type), color == Color.WHITE).unicode_symbol()


class PromotionDialog(QDialog):
    """Modal dialog to select promotion piece type."""

    def __init__(self, color: Color, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setFixedSize(340, 130)
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )

        self._selected: PieceType = PieceType.QUEEN

        layout = QVBoxLayout(self)
        self._label = QLabel()
        self._label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._label.setFont(QFont("Arial", 11))
        layout.addWidget(self._label)

        btn_row = QHBoxLayout()
        self._buttons: dict[PieceType, QPushButton] = {}
        for pt in PROMOTION_TYPES:
            btn = QPushButton(_figure(color, pt))
            btn.setFont(QFont("Arial", 32))
            btn.setFixedSize(68, 68)
            btn.setToolTip(pt.name.capitalize())
            btn.clicked.connect(lambda checked, p=pt: self._choose(p))
            self._buttons[pt] = btn
            btn_row.addWidget(btn)

        layout.addLayout(btn_row)
        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.promote_title)
        self._label.setText(s.promote_label)

    def _choose(self, piece_type: PieceType) -> None:
        self._selected = piece_type
        self.accept()

    @property
    def selected(self) -> PieceType:
        return self._selected

    @staticmethod
    def ask(color: Color, parent: QWidget | None = None) -> PieceType | None:
        """Show the dialog and return the chosen piece type, or ``None`` on cancel."""
        dlg = PromotionDialog(color, parent)
        if dlg.exec() == QDialog.DialogCode.Accepted:
            return dlg.selected
        return None


def dialog_chooser(parent: QWidget | None = None) -> PromotionChooser:
    """Promotion strategy that asks the user; cancelling keeps the Queen."""

    def choose(pawn: IPiece, coordinate: Coordinate) -> PieceType:
        return PromotionDialog.ask(pawn.color, parent) or PieceType.QUEEN

    return choose
