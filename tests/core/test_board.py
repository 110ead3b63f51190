"""Tests for Board."""

import pytest

from checkmate.core.board import Board
from checkmate.core.enums import Color, PieceType
from checkmate.core.piece import Piece
from checkmate.core.position import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    E2, E4,
    A8, B8, C8, D8, E8, F8, G8, H8,
    Position,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for pos, pt in expected:
            assert board[pos] == Piece(Color.WHITE, pt), f"Mismatch at {pos}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for pos, pt in expected:
            assert board[pos] == Piece(Color.BLACK, pt), f"Mismatch at {pos}"

    def test_pawn_ranks(self) -> None:
        board = Board.initial()
        white = [
            pos for pos, p in board.pieces(Color.WHITE) if p.piece_type == PieceType.PAWN
        ]
        black = [
            pos for pos, p in board.pieces(Color.BLACK) if p.piece_type == PieceType.PAWN
        ]
        assert len(white) == len(black) == 8
        assert all(pos.rank == 6 for pos in white)  # second rank
        assert all(pos.rank == 1 for pos in black)  # seventh rank

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for rank in range(2, 6):
            for file in range(8):
                assert board.is_empty(Position(rank, file))

    def test_matches_standard_arrangement(self, standard_board: Board) -> None:
        assert Board.initial() == standard_board


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[E4] = piece
        assert board[E4] == piece
        assert board.is_empty(E2)

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[E1] = None
        assert board != copy
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert board.king_position(Color.WHITE) == E1

    def test_king_position(self) -> None:
        board = Board.initial()
        assert board.king_position(Color.WHITE) == E1
        assert board.king_position(Color.BLACK) == E8

    def test_king_position_follows_moves(self) -> None:
        board = Board.initial()
        king = board[E1]
        board[E1] = None
        board[E4] = king
        assert board.king_position(Color.WHITE) == E4

    def test_king_position_missing_raises(self) -> None:
        board = Board()
        with pytest.raises(ValueError, match="No WHITE king"):
            board.king_position(Color.WHITE)

    def test_king_captured_clears_cache(self) -> None:
        board = Board.initial()
        board[E8] = Piece(Color.WHITE, PieceType.QUEEN)
        with pytest.raises(ValueError, match="No BLACK king"):
            board.king_position(Color.BLACK)

    def test_pieces_count(self) -> None:
        board = Board.initial()
        assert len(list(board.pieces(Color.WHITE))) == 16
        assert len(list(board.pieces(Color.BLACK))) == 16
        assert len(list(board.pieces())) == 32

    def test_rows_snapshot_is_immutable_copy(self) -> None:
        board = Board.initial()
        rows = board.rows()
        assert len(rows) == 8 and all(len(row) == 8 for row in rows)
        assert rows[7][4] == Piece(Color.WHITE, PieceType.KING)
        board[E1] = None
        assert rows[7][4] is not None
        with pytest.raises(TypeError):
            rows[7][4] = None  # type: ignore[index]

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert list(board.pieces()) == []

    def test_repr_not_empty(self) -> None:
        board = Board.initial()
        text = repr(board)
        assert text.splitlines()[0] == "8 r n b q k b n r"
        assert "a b c d e f g h" in text
