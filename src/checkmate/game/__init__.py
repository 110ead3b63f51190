"""Game management layer — state machine and puzzles.

Quick start::

    from checkmate.core import Move
    from checkmate.game import new_game

    game = new_game()
    game.attempt_move(Move.from_names("E2", "E4"))
"""

from checkmate.game.puzzle import Difficulty, Puzzle, PuzzleCollection
from checkmate.game.state import Game, game_from_puzzle, new_game

__all__ = [
    "Difficulty",
    "Game",
    "Puzzle",
    "PuzzleCollection",
    "game_from_puzzle",
    "new_game",
]
