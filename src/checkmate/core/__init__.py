"""Core rules layer — board, pieces and move legality, no external dependencies.

Quick start::

    from checkmate.core import MoveGenerator, board_from_arrangement
    from checkmate.core.arrangement import STANDARD_ARRANGEMENT
    from checkmate.core.position import E2

    board = board_from_arrangement(STANDARD_ARRANGEMENT)
    gen = MoveGenerator(board)
    print(sorted(gen.legal_destinations(E2)))
"""

from checkmate.core.arrangement import (
    STANDARD_ARRANGEMENT,
    board_from_arrangement,
    board_to_arrangement,
    verify_arrangement,
)
from checkmate.core.board import Board, BoardRows
from checkmate.core.enums import Color, GameStatus, PieceType
from checkmate.core.exceptions import (
    ArrangementError,
    InvalidKingCountError,
    MalformedPuzzleError,
)
from checkmate.core.move import Move
from checkmate.core.move_generator import MoveGenerator, apply_move
from checkmate.core.piece import Piece
from checkmate.core.position import ALL_POSITIONS, Position, parse_position
from checkmate.core.rules import Rules

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "PieceType",
    # Errors
    "ArrangementError",
    "InvalidKingCountError",
    "MalformedPuzzleError",
    # Types / helpers
    "ALL_POSITIONS",
    "Position",
    "parse_position",
    # Domain objects
    "Board",
    "BoardRows",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    "apply_move",
    # Arrangements
    "STANDARD_ARRANGEMENT",
    "board_from_arrangement",
    "board_to_arrangement",
    "verify_arrangement",
]
