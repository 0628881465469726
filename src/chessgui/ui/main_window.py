"""MainWindow — top-level window running one game session."""

from __future__ import annotations

from pathlib import Path

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QMainWindow, QStatusBar, QWidget

from chessgui.core.enums import GameEndReason, GameResult
from chessgui.engine import RulesEngine
from chessgui.game.controller import SessionController
from chessgui.game.promotion import PromotionResolver
from chessgui.game.session import SessionState
from chessgui.ui.board.board_panel import BoardPanel
from chessgui.ui.dialogs.promotion_dialog import dialog_chooser
from chessgui.ui.dialogs.save_dialog import SaveGameDialog
from chessgui.ui.i18n import color_name, game_over_message, set_language, t
from chessgui.ui.panels.info_panel import InfoPanel
from chessgui.ui.settings import PROMOTION_ASK, AppSettings
from chessgui.ui.styles.theme import BoardTheme


class MainWindow(QMainWindow):
    """Main application window: board on the left, transcript on the right."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self._settings = settings or AppSettings()
        set_language(self._settings.language)

        self.setMinimumSize(900, 640)
        self.resize(1100, 750)

        self._engine = RulesEngine()
        self._session = SessionState(turn_to_move=self._engine.side_to_move)
        self._save_dialog = SaveGameDialog(self._settings.save_directory)

        self._setup_ui()
        self._setup_menu()

        chooser = None
        if self._settings.promotion_choice == PROMOTION_ASK:
            chooser = dialog_chooser(self)
        self._controller = SessionController(
            self._engine,
            self._board_panel,
            session=self._session,
            promotion=PromotionResolver(chooser),
        )
        self._connect_signals()

        self._board_panel.refresh(self._engine)
        self.retranslate_ui()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._board_panel = BoardPanel()
        self._board_panel.set_theme(BoardTheme.named(self._settings.board_theme))
        self._board_panel.set_show_legal_moves(self._settings.show_legal_moves)
        root.addWidget(self._board_panel, stretch=3)

        self._info_panel = InfoPanel()
        self._info_panel.setFixedWidth(300)
        root.addWidget(self._info_panel)

        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)
        self._status_label = QLabel()
        self._status_bar.addWidget(self._status_label, 1)

    def _setup_menu(self) -> None:
        menu = self.menuBar()
        assert menu is not None
        self._game_menu = menu.addMenu("")
        assert self._game_menu is not None

        self._save_action = QAction(self)
        self._save_action.setShortcut("Ctrl+S")
        self._save_action.triggered.connect(self._on_save_game)
        self._game_menu.addAction(self._save_action)

        self._game_menu.addSeparator()

        self._quit_action = QAction(self)
        self._quit_action.setShortcut("Ctrl+Q")
        self._quit_action.triggered.connect(self.close)
        self._game_menu.addAction(self._quit_action)

    def _connect_signals(self) -> None:
        self._board_panel.tile_clicked.connect(self._controller.handle_tile_click)
        self._info_panel.save_clicked.connect(self._on_save_game)
        self._controller.events.on_move.append(self._on_move)
        self._controller.events.on_game_over.append(self._on_game_over)

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.window_title)
        if self._game_menu is not None:
            self._game_menu.setTitle(s.menu_game)
        self._save_action.setText(s.menu_save_game)
        self._quit_action.setText(s.menu_quit)
        self._info_panel.retranslate_ui()
        self._update_status()

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def controller(self) -> SessionController:
        return self._controller

    @property
    def board_panel(self) -> BoardPanel:
        return self._board_panel

    @property
    def info_panel(self) -> InfoPanel:
        return self._info_panel

    # ── Game events ──────────────────────────────────────────────────────

    def _on_move(self, token: str, history: str, state: SessionState) -> None:
        self._info_panel.set_history(history)
        self._update_status()

    def _on_game_over(self, result: GameResult, reason: GameEndReason) -> None:
        self._info_panel.set_game_result(game_over_message(result, reason))
        self._update_status()

    def _update_status(self) -> None:
        s = t()
        session = self._session
        if session.active:
            text = s.status_to_move.format(color=color_name(session.turn_to_move))
        else:
            text = s.status_game_over + game_over_message(
                session.result, session.end_reason
            )
        self._status_label.setText(text)

    # ── Actions ──────────────────────────────────────────────────────────

    def _on_save_game(self) -> Path | None:
        return self._save_dialog.run(self._controller.history, self)
