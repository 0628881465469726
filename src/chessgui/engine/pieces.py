"""Rules-engine adapter over python-chess.

The interaction layer only ever talks to :class:`RulesEngine` and
:class:`Piece`; legality, board mutation and terminal detection all stay
inside ``chess.Board``.
"""

from __future__ import annotations

import chess

from chessgui.core.enums import PROMOTION_TYPES, Color, PieceType
from chessgui.core.types import Coordinate

_TO_CHESS_COLOR: dict[Color, chess.Color] = {
    Color.WHITE: chess.WHITE,
    Color.BLACK: chess.BLACK,
}


def _from_chess_color(color: chess.Color) -> Color:
    return Color.WHITE if color == chess.WHITE else Color.BLACK


class IllegalMoveError(ValueError):
    """Raised when the engine is asked to apply a move that is not legal."""


class Piece:
    """A piece standing on the engine's board.

    Instances are owned by :class:`RulesEngine`; callers keep references
    but never build their own.  ``piece_type`` reports the resolved kind,
    so a pawn whose promotion has been resolved already reads as the
    promoted piece.
    """

    __slots__ = ("_engine", "_color", "_base_type", "_coordinate", "_promotion")

    def __init__(
        self,
        engine: RulesEngine,
        color: Color,
        piece_type: PieceType,
        coordinate: Coordinate,
    ) -> None:
        self._engine = engine
        self._color = color
        self._base_type = piece_type
        self._coordinate = coordinate
        self._promotion: PieceType | None = None

    # ── Identity ─────────────────────────────────────────────────────────

    @property
    def color(self) -> Color:
        return self._color

    @property
    def piece_type(self) -> PieceType:
        if self._promotion is not None:
            return self._promotion
        return self._base_type

    @property
    def coordinate(self) -> Coordinate:
        return self._coordinate

    @property
    def promotion(self) -> PieceType | None:
        return self._promotion

    @property
    def is_pawn(self) -> bool:
        return self._base_type == PieceType.PAWN

    @property
    def symbol(self) -> str:
        """Unicode chess figure, e.g. ♞."""
        piece = chess.Piece(int(self.piece_type), _TO_CHESS_COLOR[self._color])
        return piece.unicode_symbol()

    # ── Movement ─────────────────────────────────────────────────────────

    def legal_targets(self) -> frozenset[Coordinate]:
        """Squares this piece may legally move to right now.

        Empty when it is not this piece's side to move or the piece has
        left the board.
        """
        board = self._engine._board
        if board.turn != _TO_CHESS_COLOR[self._color]:
            return frozenset()
        if self._engine._pieces.get(self._coordinate) is not self:
            return frozenset()
        from_mask = chess.BB_SQUARES[self._coordinate.square]
        return frozenset(
            Coordinate.from_square(move.to_square)
            for move in board.generate_legal_moves(from_mask=from_mask)
        )

    def is_valid_move(self, coordinate: Coordinate, color: Color) -> bool:
        if color != self._color:
            return False
        return coordinate in self.legal_targets()

    def can_promote(self, coordinate: Coordinate) -> bool:
        """Whether moving this piece to *coordinate* reaches its promotion rank."""
        if not self.is_pawn:
            return False
        last_rank = 8 if self._color == Color.WHITE else 1
        return coordinate.rank == last_rank

    def set_promoted_piece(self, piece_type: PieceType) -> None:
        """Resolve the kind this pawn turns into on its promotion move."""
        if not self.is_pawn:
            raise ValueError(f"Only pawns promote, got {self._base_type.name}")
        if piece_type not in PROMOTION_TYPES:
            raise ValueError(f"Invalid promotion piece: {piece_type!r}")
        self._promotion = piece_type

    def __repr__(self) -> str:
        return (
            f"Piece({self._color.name}, {self.piece_type.name}, {self._coordinate})"
        )


class RulesEngine:
    """Authoritative board state for one game."""

    __slots__ = ("_board", "_pieces")

    def __init__(self, fen: str | None = None) -> None:
        self._board = chess.Board(fen) if fen else chess.Board()
        self._pieces: dict[Coordinate, Piece] = {}
        self._sync_pieces()

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return _from_chess_color(self._board.turn)

    def piece_at(self, coordinate: Coordinate) -> Piece | None:
        return self._pieces.get(coordinate)

    def pieces(self) -> dict[Coordinate, Piece]:
        return dict(self._pieces)

    # ── Mutation ─────────────────────────────────────────────────────────

    def make_move(self, coordinate: Coordinate, piece: Piece) -> None:
        """Move *piece* to *coordinate*, promoting to ``piece.promotion`` if set."""
        if self._pieces.get(piece.coordinate) is not piece:
            raise IllegalMoveError(f"{piece!r} is not on the board")

        promotion = int(piece.promotion) if piece.promotion is not None else None
        move = chess.Move(
            piece.coordinate.square, coordinate.square, promotion=promotion
        )
        if not self._board.is_legal(move):
            raise IllegalMoveError(f"Illegal move: {move.uci()}")

        self._board.push(move)
        piece._coordinate = coordinate
        self._sync_pieces()

    def move_string(self, coordinate: Coordinate, piece: Piece) -> str:
        """SAN of the last applied move, which must have landed on *coordinate*."""
        if not self._board.move_stack:
            raise ValueError("No move has been played yet")
        before = self._board.copy()
        move = before.pop()
        if move.to_square != coordinate.square:
            raise ValueError(
                f"Last move {move.uci()} did not land on {coordinate} ({piece!r})"
            )
        return before.san(move)

    # ── Terminal conditions ──────────────────────────────────────────────

    def is_checkmate(self, color: Color) -> bool:
        return self.side_to_move == color and self._board.is_checkmate()

    def is_stalemate(self, color: Color) -> bool:
        return self.side_to_move == color and self._board.is_stalemate()

    def is_draw(self) -> bool:
        """Automatic draws that need no claim."""
        board = self._board
        return (
            board.is_insufficient_material()
            or board.is_seventyfive_moves()
            or board.is_fivefold_repetition()
        )

    # ── Internal ─────────────────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        previous = self._pieces
        current: dict[Coordinate, Piece] = {}
        for sq, placed in self._board.piece_map().items():
            coordinate = Coordinate.from_square(sq)
            color = _from_chess_color(placed.color)
            piece_type = PieceType(placed.piece_type)
            old = previous.get(coordinate)
            if (
                old is not None
                and old.coordinate == coordinate
                and old.color == color
                and old.piece_type == piece_type
                and old.promotion is None
            ):
                current[coordinate] = old
            else:
                current[coordinate] = Piece(self, color, piece_type, coordinate)
        self._pieces = current
