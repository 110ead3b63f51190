"""Position value type and square-name helpers.

Board layout (row-major, as in arrangement strings):
    rank 0 is the eighth rank (Black's back rank), rank 7 is the first rank;
    file 0 is the a-file, file 7 is the h-file.

    A8=(0, 0), B8=(0, 1), ..., H8=(0, 7)
    ...
    A1=(7, 0), B1=(7, 1), ..., H1=(7, 7)
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_RANKS = 8
BOARD_FILES = 8

_FILE_NAMES = "ABCDEFGH"


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Immutable board coordinate."""

    rank: int
    file: int

    def __post_init__(self) -> None:
        if not (0 <= self.rank < BOARD_RANKS and 0 <= self.file < BOARD_FILES):
            raise ValueError(f"Position out of range: ({self.rank}, {self.file})")

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def from_name(cls, name: str) -> Position:
        """Parse a square name, e.g. ``'E2'`` or ``'e2'``."""
        text = name.upper()
        if len(text) != 2 or text[0] not in _FILE_NAMES or text[1] not in "12345678":
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(BOARD_RANKS - int(text[1]), _FILE_NAMES.index(text[0]))

    def offset(self, d_rank: int, d_file: int) -> Position | None:
        """Neighbouring square, or ``None`` when it falls off the board."""
        rank = self.rank + d_rank
        file = self.file + d_file
        if 0 <= rank < BOARD_RANKS and 0 <= file < BOARD_FILES:
            return Position(rank, file)
        return None

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def name(self) -> str:
        return f"{_FILE_NAMES[self.file]}{BOARD_RANKS - self.rank}"

    @property
    def index(self) -> int:
        """Row-major index 0–63 into an arrangement string."""
        return self.rank * BOARD_FILES + self.file

    def __str__(self) -> str:
        return self.name


def parse_position(name: str) -> Position:
    """Parse square name, e.g. 'e4' → Position(4, 4)."""
    return Position.from_name(name)


ALL_POSITIONS: tuple[Position, ...] = tuple(
    Position(rank, file) for rank in range(BOARD_RANKS) for file in range(BOARD_FILES)
)


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ALL_POSITIONS[0:8]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_POSITIONS[8:16]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_POSITIONS[16:24]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_POSITIONS[24:32]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_POSITIONS[32:40]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_POSITIONS[40:48]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_POSITIONS[48:56]
A1, B1, C1, D1, E1, F1, G1, H1 = ALL_POSITIONS[56:64]
