"""BoardPanel — clickable 8×8 grid of tiles with file/rank labels."""

from __future__ import annotations

from collections.abc import Set
from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QColor, QFont
from PyQt6.QtWidgets import QGridLayout, QLabel, QPushButton, QSizePolicy, QWidget

from chessgui.core.types import ALL_COORDINATES, FILES, Coordinate
from chessgui.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from chessgui.game.interfaces import IRulesEngine


class BoardPanel(QWidget):
    """Renders the board and forwards clicks as coordinates.

    Implements :class:`~chessgui.game.interfaces.IBoardView`.

    Signals:
        tile_clicked(Coordinate): Emitted for every click while input is enabled.
    """

    tile_clicked = pyqtSignal(object)

    TILE = 80  # px per square

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._tiles: dict[Coordinate, QPushButton] = {}
        self._labels: list[QLabel] = []
        self._symbols: dict[Coordinate, str] = {}
        self._highlighted: frozenset[Coordinate] = frozenset()
        self._show_legal_moves = True
        self._input_enabled = True
        self._setup_ui()

    def _setup_ui(self) -> None:
        grid = QGridLayout(self)
        grid.setSpacing(0)
        grid.setContentsMargins(0, 0, 0, 0)

        # Row 0 and 9 hold file labels, column 0 and 9 rank labels.
        for col, file in enumerate(FILES, start=1):
            grid.addWidget(self._make_label(file), 0, col)
            grid.addWidget(self._make_label(file), 9, col)
        for rank in range(1, 9):
            row = 9 - rank
            grid.addWidget(self._make_label(str(rank)), row, 0)
            grid.addWidget(self._make_label(str(rank)), row, 9)

        for coordinate in ALL_COORDINATES:
            btn = QPushButton()
            btn.setMinimumSize(self.TILE // 2, self.TILE // 2)
            btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
            btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            btn.setToolTip(str(coordinate))
            btn.clicked.connect(lambda checked, c=coordinate: self._on_tile_clicked(c))
            self._tiles[coordinate] = btn
            grid.addWidget(btn, 9 - coordinate.rank, coordinate.file_index + 1)

        self._restyle_all()

    def _make_label(self, text: str) -> QLabel:
        label = QLabel(text)
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        label.setFont(QFont("Times New Roman", 16, QFont.Weight.Bold))
        self._labels.append(label)
        return label

    # ── IBoardView ───────────────────────────────────────────────────────

    def highlight_squares(self, coordinates: Set[Coordinate]) -> None:
        if not self._input_enabled:
            return
        self._highlighted = frozenset(coordinates)
        self._restyle_all()

    def reset_highlights(self) -> None:
        self._highlighted = frozenset()
        self._restyle_all()

    def refresh(self, engine: IRulesEngine) -> None:
        self._highlighted = frozenset()
        for coordinate in ALL_COORDINATES:
            piece = engine.piece_at(coordinate)
            symbol = piece.symbol if piece is not None else ""
            self._symbols[coordinate] = symbol
            self._tiles[coordinate].setText(symbol)
        self._restyle_all()

    def disable_input(self) -> None:
        # Buttons stay enabled so the figures are not greyed out.
        self._input_enabled = False

    # ── Settings ─────────────────────────────────────────────────────────

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._restyle_all()

    def set_show_legal_moves(self, visible: bool) -> None:
        self._show_legal_moves = visible
        self._restyle_all()

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def highlighted(self) -> frozenset[Coordinate]:
        return self._highlighted

    @property
    def is_input_enabled(self) -> bool:
        return self._input_enabled

    def tile(self, coordinate: Coordinate) -> QPushButton:
        return self._tiles[coordinate]

    def symbol_at(self, coordinate: Coordinate) -> str:
        return self._symbols.get(coordinate, "")

    # ── Internal ─────────────────────────────────────────────────────────

    def _on_tile_clicked(self, coordinate: Coordinate) -> None:
        if self._input_enabled:
            self.tile_clicked.emit(coordinate)

    def _square_color(self, coordinate: Coordinate) -> QColor:
        if self._show_legal_moves and coordinate in self._highlighted:
            return self._theme.highlight_to
        # a1 is a dark square
        if (coordinate.file_index + coordinate.rank) % 2 == 1:
            return self._theme.dark_square
        return self._theme.light_square

    def _restyle_all(self) -> None:
        for coordinate, btn in self._tiles.items():
            btn.setStyleSheet(
                "QPushButton {"
                f" background-color: {self._square_color(coordinate).name()};"
                " color: #000000; border: none; font-size: 40px; }"
            )
        label_style = (
            f"color: {self._theme.label.name()};"
            f" background-color: {self._theme.label_background.name()};"
        )
        for label in self._labels:
            label.setStyleSheet(label_style)
