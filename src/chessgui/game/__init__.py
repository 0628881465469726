"""Game interaction layer — session state, click controller, transcript.

Quick start::

    from chessgui.engine import RulesEngine
    from chessgui.game import SessionController

    ctrl = SessionController(RulesEngine(), board_view)
    ctrl.handle_tile_click(Coordinate.parse("e2"))
    ctrl.handle_tile_click(Coordinate.parse("e4"))
    ctrl.history  # "1. e4 "
"""

from chessgui.game.controller import SessionController, SessionEvents
from chessgui.game.history import MoveRecorder
from chessgui.game.interfaces import IBoardView, IPiece, IRulesEngine
from chessgui.game.persistence import sanitize_filename, save_game
from chessgui.game.promotion import PromotionChooser, PromotionResolver, always_queen
from chessgui.game.session import (
    EMPTY,
    Empty,
    Holding,
    Selection,
    SelectionPhase,
    SessionState,
)

__all__ = [
    # Interfaces
    "IBoardView",
    "IPiece",
    "IRulesEngine",
    # Session
    "EMPTY",
    "Empty",
    "Holding",
    "Selection",
    "SelectionPhase",
    "SessionState",
    # Concrete
    "MoveRecorder",
    "PromotionChooser",
    "PromotionResolver",
    "SessionController",
    "SessionEvents",
    "always_queen",
    # Persistence
    "sanitize_filename",
    "save_game",
]
