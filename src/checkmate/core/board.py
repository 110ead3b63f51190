"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from checkmate.core.enums import Color, PieceType
from checkmate.core.piece import Piece
from checkmate.core.position import BOARD_FILES, BOARD_RANKS, Position

_COLOR_COUNT = 2

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

BoardRows = tuple[tuple[Piece | None, ...], ...]


class Board:
    """Mutable 8x8 grid of optional pieces, indexed by :class:`Position`."""

    __slots__ = ("_grid", "_king_positions")

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_FILES for _ in range(BOARD_RANKS)
        ]
        # [color] -> king location cache (None if king missing).
        self._king_positions: list[Position | None] = [None] * _COLOR_COUNT

    # -- Element access -----------------------------------------------------

    def __getitem__(self, pos: Position) -> Piece | None:
        return self._grid[pos.rank][pos.file]

    def __setitem__(self, pos: Position, piece: Piece | None) -> None:
        old_piece = self._grid[pos.rank][pos.file]
        if (
            old_piece is not None
            and old_piece.piece_type == PieceType.KING
            and self._king_positions[int(old_piece.color)] == pos
        ):
            self._king_positions[int(old_piece.color)] = None

        self._grid[pos.rank][pos.file] = piece

        if piece is not None and piece.piece_type == PieceType.KING:
            self._king_positions[int(piece.color)] = pos

    def is_empty(self, pos: Position) -> bool:
        return self._grid[pos.rank][pos.file] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> Iterator[tuple[Position, Piece]]:
        """Occupied squares in row-major order, optionally for one *color*."""
        for rank, row in enumerate(self._grid):
            for file, piece in enumerate(row):
                if piece is not None and (color is None or piece.color == color):
                    yield Position(rank, file), piece

    def king_position(self, color: Color) -> Position:
        """Return the single king square for *color*."""
        pos = self._king_positions[int(color)]
        if pos is None:
            raise ValueError(f"No {color.name} king on board")
        return pos

    def rows(self) -> BoardRows:
        """Immutable snapshot of the grid, rank 0 first."""
        return tuple(tuple(row) for row in self._grid)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        # Pieces are frozen, so copying the rows is a full deep copy.
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        b._king_positions = self._king_positions.copy()
        return b

    def clear(self) -> None:
        self._grid = [[None] * BOARD_FILES for _ in range(BOARD_RANKS)]
        self._king_positions = [None] * _COLOR_COUNT

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for file in range(BOARD_FILES):
            b[Position(1, file)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Position(6, file)] = Piece(Color.WHITE, PieceType.PAWN)

        for file, pt in enumerate(_BACK_RANK):
            b[Position(0, file)] = Piece(Color.BLACK, pt)
            b[Position(7, file)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank, row in enumerate(self._grid):
            cells = [str(p) if p else "." for p in row]
            rows.append(f"{BOARD_RANKS - rank} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
