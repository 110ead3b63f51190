"""Puzzle value objects consumed by the game layer."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import IntEnum

from checkmate.core.arrangement import verify_arrangement
from checkmate.core.enums import Color
from checkmate.core.exceptions import ArrangementError, MalformedPuzzleError


class Difficulty(IntEnum):
    """Puzzle difficulty, in listing order."""

    EASY = 0
    MEDIUM = 1
    HARD = 2
    UNSPECIFIED = 3


@dataclass(frozen=True, slots=True, order=True)
class Puzzle:
    """A start position with a side to move and a free-form description.

    Puzzles sort by difficulty, then side to move, then arrangement.  The
    description is neither compared nor ordered on.
    """

    difficulty: Difficulty
    turn: Color
    arrangement: str
    description: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        verify_arrangement(self.arrangement)
        if "\n" in self.description:
            raise MalformedPuzzleError("Puzzle description must be a single line")

    @classmethod
    def parse(cls, details: str, description: str = "") -> Puzzle:
        """Parse ``"<arrangement>,<WHITE|BLACK>,<DIFFICULTY>"`` plus a description."""
        parts = details.strip().split(",")
        if len(parts) < 3:
            raise MalformedPuzzleError(f"Malformed puzzle record: {details!r}")
        # Trailing fields are ignored.
        arrangement, turn_name, difficulty_name = parts[:3]
        try:
            turn = Color[turn_name]
            difficulty = Difficulty[difficulty_name]
        except KeyError:
            msg = f"Malformed puzzle record: {details!r}"
            raise MalformedPuzzleError(msg) from None
        try:
            return cls(difficulty, turn, arrangement, description.rstrip("\n"))
        except ArrangementError as exc:
            raise MalformedPuzzleError(f"Malformed puzzle record: {exc}") from exc

    def __str__(self) -> str:
        return (
            f"{self.arrangement},{self.turn.name},{self.difficulty.name}\n"
            f"{self.description}"
        )


class PuzzleCollection:
    """Sorted, duplicate-free set of puzzles addressed by listing index."""

    __slots__ = ("_puzzles",)

    def __init__(self, puzzles: Iterable[Puzzle] = ()) -> None:
        self._puzzles: list[Puzzle] = []
        self.extend(puzzles)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> PuzzleCollection:
        """Build from alternating detail and description lines."""
        collection = cls()
        it = iter(lines)
        for details in it:
            if not details.strip():
                continue
            description = next(it, "")
            collection.add(Puzzle.parse(details, description))
        return collection

    def add(self, puzzle: Puzzle) -> bool:
        """Insert *puzzle* in order; returns ``False`` for a duplicate."""
        idx = bisect.bisect_left(self._puzzles, puzzle)
        if idx < len(self._puzzles) and self._puzzles[idx] == puzzle:
            return False
        self._puzzles.insert(idx, puzzle)
        return True

    def extend(self, puzzles: Iterable[Puzzle]) -> int:
        """Add every puzzle; returns how many were new."""
        return sum(1 for puzzle in puzzles if self.add(puzzle))

    def get(self, index: int) -> Puzzle | None:
        if 0 <= index < len(self._puzzles):
            return self._puzzles[index]
        return None

    def __getitem__(self, index: int) -> Puzzle:
        return self._puzzles[index]

    def __len__(self) -> int:
        return len(self._puzzles)

    def __iter__(self) -> Iterator[Puzzle]:
        return iter(self._puzzles)

    def __contains__(self, puzzle: object) -> bool:
        return puzzle in self._puzzles
