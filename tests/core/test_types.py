"""Tests for Coordinate and the core enums."""

import pytest

from chessgui.core.enums import Color
from chessgui.core.types import ALL_COORDINATES, Coordinate


class TestCoordinate:
    def test_parse_and_str_round_trip(self) -> None:
        c = Coordinate.parse("e4")
        assert c == Coordinate("e", 4)
        assert str(c) == "e4"

    def test_square_index_mapping(self) -> None:
        assert Coordinate("a", 1).square == 0
        assert Coordinate("h", 1).square == 7
        assert Coordinate("a", 8).square == 56
        assert Coordinate.from_square(28) == Coordinate("e", 4)

    def test_equality_is_by_value(self) -> None:
        assert Coordinate("d", 5) == Coordinate.parse("d5")
        assert len({Coordinate("d", 5), Coordinate.parse("d5")}) == 1

    def test_immutable(self) -> None:
        c = Coordinate("b", 2)
        with pytest.raises(AttributeError):
            c.rank = 3  # type: ignore[misc]

    @pytest.mark.parametrize("name", ["", "e", "e9", "i1", "e44", "E4"])
    def test_parse_rejects_bad_names(self, name: str) -> None:
        with pytest.raises(ValueError):
            Coordinate.parse(name)

    def test_off_board_construction_rejected(self) -> None:
        with pytest.raises(ValueError):
            Coordinate("z", 1)
        with pytest.raises(ValueError):
            Coordinate("a", 0)

    def test_all_coordinates(self) -> None:
        assert len(ALL_COORDINATES) == 64
        assert ALL_COORDINATES[0] == Coordinate("a", 1)
        assert ALL_COORDINATES[-1] == Coordinate("h", 8)


def test_color_opposite() -> None:
    assert Color.WHITE.opposite == Color.BLACK
    assert Color.BLACK.opposite == Color.WHITE
    assert str(Color.WHITE) == "white"
