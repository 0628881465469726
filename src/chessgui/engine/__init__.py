"""Rules-engine adapter (python-chess backed)."""

from chessgui.engine.pieces import IllegalMoveError, Piece, RulesEngine

__all__ = ["IllegalMoveError", "Piece", "RulesEngine"]
