"""Tests for arrangement parsing, validation and serialisation."""

import pytest

from checkmate.core.arrangement import (
    STANDARD_ARRANGEMENT,
    board_from_arrangement,
    board_to_arrangement,
    verify_arrangement,
)
from checkmate.core.board import Board
from checkmate.core.enums import Color, PieceType
from checkmate.core.exceptions import ArrangementError, InvalidKingCountError
from checkmate.core.piece import Piece
from checkmate.core.position import A1, E1, E8, H1

_EMPTY = "--------"


class TestVerifyArrangement:
    def test_standard_is_valid(self) -> None:
        verify_arrangement(STANDARD_ARRANGEMENT)

    @pytest.mark.parametrize("length", [0, 63, 65])
    def test_wrong_length(self, length: int) -> None:
        text = ("kK" + "-" * 64)[:length]
        with pytest.raises(ArrangementError, match="length"):
            verify_arrangement(text)

    def test_missing_white_king(self) -> None:
        text = "----k---" + _EMPTY * 7
        with pytest.raises(InvalidKingCountError) as exc_info:
            verify_arrangement(text)
        assert exc_info.value.white == 0
        assert exc_info.value.black == 1

    def test_two_black_kings(self) -> None:
        text = "k---l---" + _EMPTY * 6 + "----K---"
        with pytest.raises(InvalidKingCountError):
            verify_arrangement(text)

    def test_moved_and_unmoved_white_kings_both_count(self) -> None:
        text = "----k---" + _EMPTY * 6 + "K---L---"
        with pytest.raises(InvalidKingCountError):
            verify_arrangement(text)

    def test_king_count_error_is_arrangement_error(self) -> None:
        assert issubclass(InvalidKingCountError, ArrangementError)
        assert issubclass(ArrangementError, ValueError)

    def test_impossible_but_king_consistent_is_accepted(self) -> None:
        # White pawns on the eighth rank are not checked.
        text = "PPPPkPPP" + _EMPTY * 6 + "----K---"
        verify_arrangement(text)


class TestBoardFromArrangement:
    def test_standard(self) -> None:
        assert board_from_arrangement(STANDARD_ARRANGEMENT) == Board.initial()

    def test_moved_flags(self) -> None:
        text = "----l---" + _EMPTY * 6 + "S---K--R"
        board = board_from_arrangement(text)
        assert board[A1] == Piece(Color.WHITE, PieceType.ROOK, has_moved=True)
        assert board[H1] == Piece(Color.WHITE, PieceType.ROOK)
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert board[E8] == Piece(Color.BLACK, PieceType.KING, has_moved=True)

    def test_unknown_characters_are_empty(self) -> None:
        text = "----k--x" + _EMPTY * 6 + "----K---"
        board = board_from_arrangement(text)
        assert len(list(board.pieces())) == 2

    def test_invalid_raises(self) -> None:
        with pytest.raises(ArrangementError):
            board_from_arrangement("-" * 64)


class TestBoardToArrangement:
    def test_round_trip_standard(self) -> None:
        board = board_from_arrangement(STANDARD_ARRANGEMENT)
        assert board_to_arrangement(board) == STANDARD_ARRANGEMENT

    def test_round_trip_preserves_moved_symbols(self) -> None:
        text = (
            "s---l--r"
            "pp---ppp"
            "--n-----"
            "---Pp---"
            "--------"
            "-----N--"
            "PPP--PPP"
            "R--Q-SL-"
        )
        assert board_to_arrangement(board_from_arrangement(text)) == text
