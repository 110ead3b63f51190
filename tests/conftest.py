"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from checkmate.core.arrangement import STANDARD_ARRANGEMENT, board_from_arrangement
from checkmate.core.board import Board
from checkmate.game.state import Game, new_game


@pytest.fixture
def standard_board() -> Board:
    return board_from_arrangement(STANDARD_ARRANGEMENT)


@pytest.fixture
def game() -> Game:
    """A fresh game from the standard arrangement, White to move."""
    return new_game()
