"""Rules engine for classical chess."""

from checkmate.core import Color, GameStatus, Move, Position
from checkmate.game import Game, new_game

__all__ = ["Color", "Game", "GameStatus", "Move", "Position", "new_game"]
