"""Core domain values shared by the engine adapter, game layer and UI."""

from chessgui.core.enums import (
    PROMOTION_TYPES,
    Color,
    GameEndReason,
    GameResult,
    PieceType,
)
from chessgui.core.types import ALL_COORDINATES, Coordinate

__all__ = [
    "ALL_COORDINATES",
    "PROMOTION_TYPES",
    "Color",
    "Coordinate",
    "GameEndReason",
    "GameResult",
    "PieceType",
]
