"""Move value object (square-pair addressing)."""

from __future__ import annotations

from dataclasses import dataclass

from checkmate.core.position import Position


@dataclass(frozen=True, slots=True)
class Move:
    """A requested move: origin and destination, nothing else.

    A move carries no capture or castling data; the board decides what
    the request means when it is applied.
    """

    origin: Position
    destination: Position

    @classmethod
    def from_names(cls, origin: str, destination: str) -> Move:
        """Build a move from two square names, e.g. ``('E2', 'E4')``."""
        return cls(Position.from_name(origin), Position.from_name(destination))

    def __str__(self) -> str:
        return f"{self.origin} {self.destination}"
