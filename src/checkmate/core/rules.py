"""High-level chess rules: check, checkmate, stalemate and game status."""

from __future__ import annotations

from typing import TYPE_CHECKING

from checkmate.core.enums import Color, GameStatus
from checkmate.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from checkmate.core.board import Board


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_king_under_attack(color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        gen = MoveGenerator(board)
        return gen.is_king_under_attack(color) and not gen.has_legal_move(color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        gen = MoveGenerator(board)
        return not gen.is_king_under_attack(color) and not gen.has_legal_move(color)

    @staticmethod
    def status_for(board: Board, side_to_move: Color) -> GameStatus:
        """Status of the game with *side_to_move* about to play."""
        gen = MoveGenerator(board)
        if gen.has_legal_move(side_to_move):
            return GameStatus.ONGOING
        if gen.is_king_under_attack(side_to_move):
            return GameStatus.won_by(side_to_move.opposite)
        return GameStatus.DRAW  # stalemate
