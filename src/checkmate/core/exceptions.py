"""Exceptions raised while building games and puzzles."""

from __future__ import annotations


class ArrangementError(ValueError):
    """The string does not represent a valid arrangement of pieces on a board."""


class InvalidKingCountError(ArrangementError):
    """An arrangement without exactly one king of each color."""

    def __init__(self, white: int, black: int) -> None:
        super().__init__(
            "There has to be exactly one king of each color "
            f"(found {white} white, {black} black)"
        )
        self.white = white
        self.black = black


class MalformedPuzzleError(ValueError):
    """A puzzle record that cannot be parsed."""
