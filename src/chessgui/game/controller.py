"""SessionController — turns board clicks into moves for one game session.

Coordinates: RulesEngine, PromotionResolver, MoveRecorder, BoardView.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessgui.core.enums import Color, GameEndReason, GameResult
from chessgui.core.types import Coordinate
from chessgui.game.history import MoveRecorder
from chessgui.game.interfaces import IBoardView, IPiece, IRulesEngine
from chessgui.game.promotion import PromotionResolver
from chessgui.game.session import EMPTY, Holding, Selection, SessionState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[str, str, SessionState], None]  # token, history, state
GameOverCallback = Callable[[GameResult, GameEndReason], None]
SelectionCallback = Callable[[Selection], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class SessionController:
    """Owns the turn and the select-then-move gesture for a single game.

    Clicks are processed one at a time to completion.  Once a terminal
    condition is found the session is frozen and every further click is
    ignored.
    """

    __slots__ = (
        "_engine",
        "_view",
        "_session",
        "_recorder",
        "_promotion",
        "events",
        "__weakref__",
    )

    def __init__(
        self,
        engine: IRulesEngine,
        view: IBoardView,
        session: SessionState | None = None,
        recorder: MoveRecorder | None = None,
        promotion: PromotionResolver | None = None,
    ) -> None:
        self._engine = engine
        self._view = view
        if session is None:
            session = SessionState(turn_to_move=engine.side_to_move)
        elif session.turn_to_move != engine.side_to_move:
            raise ValueError(
                f"Session expects {session.turn_to_move.name} to move, "
                f"engine has {engine.side_to_move.name}"
            )
        self._session = session
        self._recorder = recorder if recorder is not None else MoveRecorder()
        self._promotion = promotion if promotion is not None else PromotionResolver()
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def session(self) -> SessionState:
        return self._session

    @property
    def recorder(self) -> MoveRecorder:
        return self._recorder

    @property
    def promotion(self) -> PromotionResolver:
        return self._promotion

    @property
    def engine(self) -> IRulesEngine:
        return self._engine

    @property
    def is_active(self) -> bool:
        return self._session.active

    @property
    def history(self) -> str:
        return self._recorder.get_full_history()

    # ── Input ────────────────────────────────────────────────────────────

    def handle_tile_click(self, coordinate: Coordinate) -> None:
        session = self._session
        if not session.active:
            return

        clicked = self._engine.piece_at(coordinate)
        own_piece = clicked is not None and clicked.color == session.turn_to_move
        selection = session.selection

        if not isinstance(selection, Holding):
            if own_piece:
                self._select(clicked)
            return

        if coordinate in selection.legal_targets:
            self._execute_move(selection.piece, coordinate)
        elif own_piece:
            self._select(clicked)
        else:
            self._clear_selection()

    # ── Selection ────────────────────────────────────────────────────────

    def _select(self, piece: IPiece) -> None:
        targets = frozenset(piece.legal_targets())
        self._set_selection(Holding(piece, targets))
        self._view.highlight_squares(targets)

    def _clear_selection(self) -> None:
        self._set_selection(EMPTY)
        self._view.reset_highlights()

    def _set_selection(self, selection: Selection) -> None:
        self._session.selection = selection
        for cb in self.events.on_selection_changed:
            cb(selection)

    # ── Move execution ───────────────────────────────────────────────────

    def _execute_move(self, piece: IPiece, target: Coordinate) -> None:
        session = self._session
        mover = session.turn_to_move

        # Promotion must be resolved before the board or the transcript see the move
        if piece.can_promote(target):
            self._promotion.resolve(piece, target)

        self._engine.make_move(target, piece)
        token = self._recorder.record(target, piece, self._engine, mover)
        self._view.refresh(self._engine)
        _LOGGER.debug("%s played %s", mover, token)

        session.turn_to_move = mover.opposite
        self._emit_move(token)
        self._check_game_state()
        self._clear_selection()

    def _check_game_state(self) -> None:
        to_move = self._session.turn_to_move
        if self._engine.is_checkmate(to_move):
            winner = to_move.opposite
            result = (
                GameResult.WHITE_WINS if winner == Color.WHITE else GameResult.BLACK_WINS
            )
            self._end_game(result, GameEndReason.CHECKMATE)
        elif self._engine.is_stalemate(to_move):
            self._end_game(GameResult.DRAW, GameEndReason.STALEMATE)
        elif self._engine.is_draw():
            self._end_game(GameResult.DRAW, GameEndReason.DRAW)

    def _end_game(self, result: GameResult, reason: GameEndReason) -> None:
        session = self._session
        if not session.active:
            return
        session.active = False
        session.result = result
        session.end_reason = reason
        self._view.disable_input()
        _LOGGER.info("Game over: %s (%s)", result.name, reason.name)
        for cb in self.events.on_game_over:
            cb(result, reason)

    def _emit_move(self, token: str) -> None:
        history = self._recorder.get_full_history()
        for cb in self.events.on_move:
            cb(token, history, self._session)
