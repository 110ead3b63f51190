"""Tests for Position and Move value types."""

import pytest

from checkmate.core.move import Move
from checkmate.core.position import (
    A1,
    A8,
    ALL_POSITIONS,
    E2,
    E4,
    H1,
    H8,
    Position,
    parse_position,
)


class TestPositionConstruction:
    def test_components(self) -> None:
        pos = Position(6, 4)
        assert pos.rank == 6
        assert pos.file == 4

    @pytest.mark.parametrize(("rank", "file"), [(-1, 0), (0, -1), (8, 0), (0, 8)])
    def test_out_of_range_rejected(self, rank: int, file: int) -> None:
        with pytest.raises(ValueError, match="out of range"):
            Position(rank, file)

    def test_equality_is_componentwise(self) -> None:
        assert Position(3, 5) == Position(3, 5)
        assert Position(3, 5) != Position(5, 3)
        assert len({Position(3, 5), Position(3, 5)}) == 1

    def test_immutable(self) -> None:
        pos = Position(0, 0)
        with pytest.raises(AttributeError):
            pos.rank = 1  # type: ignore[misc]


class TestSquareNames:
    def test_corners(self) -> None:
        assert A8 == Position(0, 0)
        assert H8 == Position(0, 7)
        assert A1 == Position(7, 0)
        assert H1 == Position(7, 7)

    def test_parse_upper_and_lower_case(self) -> None:
        assert Position.from_name("E2") == E2
        assert parse_position("e4") == E4

    def test_name_round_trip(self) -> None:
        for pos in ALL_POSITIONS:
            assert Position.from_name(pos.name) == pos

    def test_str(self) -> None:
        assert str(E2) == "E2"

    @pytest.mark.parametrize("name", ["", "E", "E9", "I1", "E22", "11", "e0"])
    def test_invalid_names(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            Position.from_name(name)

    def test_index_matches_arrangement_order(self) -> None:
        assert A8.index == 0
        assert H1.index == 63
        assert [pos.index for pos in ALL_POSITIONS] == list(range(64))


class TestOffset:
    def test_inside_board(self) -> None:
        assert E2.offset(-2, 0) == E4

    def test_off_board_returns_none(self) -> None:
        assert A1.offset(1, 0) is None
        assert A1.offset(0, -1) is None
        assert H8.offset(-1, 0) is None


class TestMove:
    def test_from_names(self) -> None:
        move = Move.from_names("E2", "E4")
        assert move == Move(E2, E4)

    def test_str(self) -> None:
        assert str(Move(E2, E4)) == "E2 E4"

    def test_invalid_square_rejected(self) -> None:
        with pytest.raises(ValueError):
            Move.from_names("E2", "E9")
