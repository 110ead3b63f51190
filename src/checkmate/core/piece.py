"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from checkmate.core.enums import Color, PieceType

# Arrangement character ↔ (Color, PieceType, has_moved)
_CHAR_MAP: dict[str, tuple[Color, PieceType, bool]] = {
    "P": (Color.WHITE, PieceType.PAWN, False),
    "N": (Color.WHITE, PieceType.KNIGHT, False),
    "B": (Color.WHITE, PieceType.BISHOP, False),
    "R": (Color.WHITE, PieceType.ROOK, False),
    "S": (Color.WHITE, PieceType.ROOK, True),
    "Q": (Color.WHITE, PieceType.QUEEN, False),
    "K": (Color.WHITE, PieceType.KING, False),
    "L": (Color.WHITE, PieceType.KING, True),
    "p": (Color.BLACK, PieceType.PAWN, False),
    "n": (Color.BLACK, PieceType.KNIGHT, False),
    "b": (Color.BLACK, PieceType.BISHOP, False),
    "r": (Color.BLACK, PieceType.ROOK, False),
    "s": (Color.BLACK, PieceType.ROOK, True),
    "q": (Color.BLACK, PieceType.QUEEN, False),
    "k": (Color.BLACK, PieceType.KING, False),
    "l": (Color.BLACK, PieceType.KING, True),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_SYMBOLS: dict[tuple[Color, PieceType, bool], str] = {
    v: k for k, v in _CHAR_MAP.items()
}

PIECE_SYMBOLS: frozenset[str] = frozenset(_CHAR_MAP)

_MOVE_TRACKING_TYPES = frozenset({PieceType.ROOK, PieceType.KING})


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece.

    Rooks and kings remember whether they have moved; castling depends on
    it and the arrangement symbol differs (``R``/``S``, ``K``/``L``).
    """

    color: Color
    piece_type: PieceType
    has_moved: bool = False

    def __post_init__(self) -> None:
        if self.has_moved and self.piece_type not in _MOVE_TRACKING_TYPES:
            raise ValueError(f"{self.piece_type.name} does not track moves")

    @property
    def tracks_moves(self) -> bool:
        return self.piece_type in _MOVE_TRACKING_TYPES

    def moved(self) -> Piece:
        """Copy of this piece flagged as having moved."""
        if not self.tracks_moves or self.has_moved:
            return self
        return replace(self, has_moved=True)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Arrangement symbol (uppercase = white, lowercase = black)."""
        return _SYMBOLS[(self.color, self.piece_type, self.has_moved)]

    @property
    def symbol(self) -> str:
        return str(self)

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from arrangement character, e.g. 'S' → moved white rook."""
        try:
            color, ptype, has_moved = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype, has_moved)

    @property
    def glyph(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]
