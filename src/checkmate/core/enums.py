"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color. White moves first, so ``Color(move_count % 2)`` is the turn."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class GameStatus(IntEnum):
    """Outcome of a game. Every status except ONGOING is terminal."""

    ONGOING = 0
    DRAW = 1
    WHITE_WON = 2
    BLACK_WON = 3

    @property
    def is_terminal(self) -> bool:
        return self != GameStatus.ONGOING

    @classmethod
    def won_by(cls, color: Color) -> GameStatus:
        return cls.WHITE_WON if color == Color.WHITE else cls.BLACK_WON
