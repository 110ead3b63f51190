"""Arrangement strings: 64 symbols, one per square, in row-major order.

The first character is A8, the ninth is A7 and the last is H1. Piece
symbols follow :mod:`checkmate.core.piece` and ``-`` marks an empty square.
"""

from __future__ import annotations

from checkmate.core.board import Board
from checkmate.core.exceptions import ArrangementError, InvalidKingCountError
from checkmate.core.piece import PIECE_SYMBOLS, Piece
from checkmate.core.position import ALL_POSITIONS

ARRANGEMENT_LENGTH = len(ALL_POSITIONS)
EMPTY_SQUARE = "-"

STANDARD_ARRANGEMENT = (
    "rnbqkbnr"
    "pppppppp"
    "--------"
    "--------"
    "--------"
    "--------"
    "PPPPPPPP"
    "RNBQKBNR"
)

_WHITE_KINGS = frozenset("KL")
_BLACK_KINGS = frozenset("kl")


def verify_arrangement(text: str) -> None:
    """Check length and king count; raise :class:`ArrangementError` otherwise.

    Nothing else is validated: pawns on a back rank or missing queens are
    accepted as-is.
    """
    if len(text) != ARRANGEMENT_LENGTH:
        raise ArrangementError(
            f"The length of the arrangement must be {ARRANGEMENT_LENGTH}, "
            f"got {len(text)}: {text!r}"
        )
    white = sum(1 for ch in text if ch in _WHITE_KINGS)
    black = sum(1 for ch in text if ch in _BLACK_KINGS)
    if white != 1 or black != 1:
        raise InvalidKingCountError(white, black)


def board_from_arrangement(text: str) -> Board:
    """Parse a validated arrangement into a :class:`Board`.

    Characters that are not piece symbols leave their square empty.
    """
    verify_arrangement(text)
    board = Board()
    for pos, ch in zip(ALL_POSITIONS, text):
        if ch in PIECE_SYMBOLS:
            board[pos] = Piece.from_char(ch)
    return board


def board_to_arrangement(board: Board) -> str:
    """Serialise a :class:`Board` back to its 64-character arrangement."""
    symbols: list[str] = []
    for pos in ALL_POSITIONS:
        piece = board[pos]
        symbols.append(EMPTY_SQUARE if piece is None else str(piece))
    return "".join(symbols)
