"""Coordinate value object and board geometry helpers.

Square indices follow the little-endian rank-file mapping::

    a1=0, b1=1, ..., h1=7
    a2=8, ...
    a8=56, ..., h8=63
"""

from __future__ import annotations

from dataclasses import dataclass

FILES = "abcdefgh"
FIRST_RANK = 1
LAST_RANK = 8


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Immutable (file, rank) pair identifying a square, e.g. ``('e', 4)``."""

    file: str
    rank: int

    def __post_init__(self) -> None:
        if not self.in_board():
            raise ValueError(f"Coordinate off the board: {self.file!r}{self.rank!r}")

    def in_board(self) -> bool:
        return (
            isinstance(self.file, str)
            and len(self.file) == 1
            and self.file in FILES
            and FIRST_RANK <= self.rank <= LAST_RANK
        )

    @property
    def file_index(self) -> int:
        """File index 0–7 (a–h)."""
        return FILES.index(self.file)

    @property
    def square(self) -> int:
        """Square index 0–63."""
        return (self.rank - 1) * 8 + self.file_index

    @classmethod
    def from_square(cls, sq: int) -> Coordinate:
        if not 0 <= sq < 64:
            raise ValueError(f"Invalid square index: {sq!r}")
        return cls(FILES[sq & 7], (sq >> 3) + 1)

    @classmethod
    def parse(cls, name: str) -> Coordinate:
        """Parse square name, e.g. 'e4' → Coordinate('e', 4)."""
        if len(name) != 2 or name[0] not in FILES or name[1] not in "12345678":
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(name[0], int(name[1]))

    def __str__(self) -> str:
        return f"{self.file}{self.rank}"


ALL_COORDINATES: tuple[Coordinate, ...] = tuple(
    Coordinate.from_square(sq) for sq in range(64)
)
