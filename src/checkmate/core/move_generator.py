"""Per-piece destination rules, attack detection and move legality."""

from __future__ import annotations

from dataclasses import dataclass

from checkmate.core.board import Board
from checkmate.core.enums import Color, PieceType
from checkmate.core.move import Move
from checkmate.core.piece import Piece
from checkmate.core.position import ALL_POSITIONS, Position

# Offsets are (d_rank, d_file); rank grows towards White's side.
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (-1, 1), (1, -1), (-1, -1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

WHITE_PAWN_STARTING_RANK = 6
BLACK_PAWN_STARTING_RANK = 1

_PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
_PAWN_STARTING_RANK: dict[Color, int] = {
    Color.WHITE: WHITE_PAWN_STARTING_RANK,
    Color.BLACK: BLACK_PAWN_STARTING_RANK,
}

# -- Castling geometry ------------------------------------------------------

_HOME_RANK: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}
KING_HOME_FILE = 4


@dataclass(frozen=True, slots=True)
class _CastlingSide:
    rook_file: int
    king_to_file: int
    rook_to_file: int
    # Squares the king and rook land on; they must be empty.
    empty_files: tuple[int, ...]
    # Squares the king crosses, destination included.
    safe_files: tuple[int, ...]


_QUEENSIDE = _CastlingSide(
    rook_file=0,
    king_to_file=2,
    rook_to_file=3,
    empty_files=(2, 3),
    safe_files=(3, 2),
)
_KINGSIDE = _CastlingSide(
    rook_file=7,
    king_to_file=6,
    rook_to_file=5,
    empty_files=(5, 6),
    safe_files=(5, 6),
)
_CASTLING_SIDES: tuple[_CastlingSide, ...] = (_QUEENSIDE, _KINGSIDE)


def king_home(color: Color) -> Position:
    return Position(_HOME_RANK[color], KING_HOME_FILE)


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Position, tuple[Position, ...]]:
    targets: dict[Position, tuple[Position, ...]] = {}
    for pos in ALL_POSITIONS:
        moves: list[Position] = []
        for dr, df in offsets:
            target = pos.offset(dr, df)
            if target is not None:
                moves.append(target)
        targets[pos] = tuple(moves)
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Position, tuple[tuple[Position, ...], ...]]:
    rays_per_square: dict[Position, tuple[tuple[Position, ...], ...]] = {}
    for pos in ALL_POSITIONS:
        square_rays: list[tuple[Position, ...]] = []
        for dr, df in directions:
            ray: list[Position] = []
            target = pos.offset(dr, df)
            while target is not None:
                ray.append(target)
                target = target.offset(dr, df)
            square_rays.append(tuple(ray))
        rays_per_square[pos] = tuple(square_rays)
    return rays_per_square


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


# -- Move application --------------------------------------------------------


def castling_rook_move(piece: Piece, move: Move) -> tuple[Position, Position] | None:
    """Rook relocation implied by *move*, or ``None`` if it is not a castle."""
    if piece.piece_type != PieceType.KING or piece.has_moved:
        return None
    home = king_home(piece.color)
    if move.origin != home or move.destination.rank != home.rank:
        return None
    for side in _CASTLING_SIDES:
        if move.destination.file == side.king_to_file:
            return (
                Position(home.rank, side.rook_file),
                Position(home.rank, side.rook_to_file),
            )
    return None


def apply_move(board: Board, move: Move) -> None:
    """Apply *move* to *board* without any legality check.

    Relocates the rook of a castle, flags moved kings and rooks and
    discards whatever stood on the destination.
    """
    piece = board[move.origin]
    if piece is None:
        raise ValueError(f"No piece on {move.origin}")

    rook_move = castling_rook_move(piece, move)
    if rook_move is not None:
        rook_from, rook_to = rook_move
        rook = board[rook_from]
        if rook is not None:
            board[rook_from] = None
            board[rook_to] = rook.moved()

    board[move.origin] = None
    board[move.destination] = piece.moved()


class MoveGenerator:
    """Computes destinations and legality for the pieces of a :class:`Board`.

    Two layers keep king legality from recursing: ``destinations`` with
    ``include_defended=True`` (the attack footprint, where a king only
    contributes its raw adjacency pattern) and the filtered king rules
    built on top of that footprint.  Legality checks never touch the
    board itself; each candidate move is played on a scratch copy.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def destinations(
        self, origin: Position, include_defended: bool = False
    ) -> set[Position]:
        """Squares the piece on *origin* may move to, ignoring self-check.

        With *include_defended* the result is the piece's attack footprint:
        squares held by friendly pieces count as well.
        """
        piece = self._board[origin]
        if piece is None:
            return set()

        match piece.piece_type:
            case PieceType.PAWN:
                return self._pawn(origin, piece.color, include_defended)
            case PieceType.KNIGHT:
                return self._stepping(
                    piece.color, _KNIGHT_TARGETS[origin], include_defended
                )
            case PieceType.BISHOP:
                return self._sliding(
                    piece.color, _BISHOP_RAYS[origin], include_defended
                )
            case PieceType.ROOK:
                return self._sliding(piece.color, _ROOK_RAYS[origin], include_defended)
            case PieceType.QUEEN:
                return self._sliding(piece.color, _QUEEN_RAYS[origin], include_defended)
            case PieceType.KING:
                if include_defended:
                    return self.king_pattern(origin, include_defended=True)
                return self._king(origin, piece)
        raise ValueError(f"Unknown piece type: {piece.piece_type!r}")

    def king_pattern(
        self, origin: Position, include_defended: bool = False
    ) -> set[Position]:
        """The eight adjacent squares under the occupancy rule, unfiltered."""
        piece = self._board[origin]
        if piece is None:
            return set()
        return self._stepping(piece.color, _KING_TARGETS[origin], include_defended)

    def legal_destinations(self, origin: Position) -> set[Position]:
        """Destinations that neither capture a king nor leave own king attacked."""
        return {
            destination
            for destination in self.destinations(origin)
            if self.is_legal(Move(origin, destination))
        }

    def generate_legal_moves(self, color: Color) -> list[Move]:
        """All strictly legal moves for *color*, in board order."""
        legal: list[Move] = []
        for origin, _ in list(self._board.pieces(color)):
            for destination in sorted(self.destinations(origin)):
                move = Move(origin, destination)
                if self.is_legal(move):
                    legal.append(move)
        return legal

    def has_legal_move(self, color: Color) -> bool:
        """Whether *color* has at least one legal move."""
        for origin, _ in list(self._board.pieces(color)):
            for destination in self.destinations(origin):
                if self.is_legal(Move(origin, destination)):
                    return True
        return False

    def is_legal(self, move: Move) -> bool:
        """Play *move* on a scratch board and check the mover's king.

        The destination must already be one the piece can reach.
        """
        piece = self._board[move.origin]
        if piece is None:
            return False
        target = self._board[move.destination]
        if target is not None and target.piece_type == PieceType.KING:
            return False
        scratch = self._board.copy()
        apply_move(scratch, move)
        return not MoveGenerator(scratch).is_king_under_attack(piece.color)

    # -- Attack detection (public) -----------------------------------------

    def attacked_squares(self, by_color: Color) -> set[Position]:
        """Union of the attack footprints of every piece of *by_color*."""
        attacked: set[Position] = set()
        for origin, _ in self._board.pieces(by_color):
            attacked |= self.destinations(origin, include_defended=True)
        return attacked

    def is_king_under_attack(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        king_pos = self._board.king_position(color)
        return any(
            king_pos in self.destinations(origin, include_defended=True)
            for origin, _ in self._board.pieces(color.opposite)
        )

    def castling_destinations(self, origin: Position) -> set[Position]:
        """King destinations produced by castling from *origin*."""
        piece = self._board[origin]
        if piece is None or piece.piece_type != PieceType.KING:
            return set()
        attacked = self.attacked_squares(piece.color.opposite)
        return self._castling(origin, piece, attacked)

    # -- Piece-specific rules (private) ------------------------------------

    def _pawn(
        self, origin: Position, color: Color, include_defended: bool
    ) -> set[Position]:
        board = self._board
        direction = _PAWN_DIRECTION[color]
        result: set[Position] = set()

        one_step = origin.offset(direction, 0)
        if one_step is not None and board.is_empty(one_step):
            result.add(one_step)
            if origin.rank == _PAWN_STARTING_RANK[color]:
                two_step = origin.offset(2 * direction, 0)
                if two_step is not None and board.is_empty(two_step):
                    result.add(two_step)

        for d_file in (-1, 1):
            cap = origin.offset(direction, d_file)
            if cap is None:
                continue
            target = board[cap]
            if target is not None and (include_defended or target.color != color):
                result.add(cap)
        return result

    def _stepping(
        self,
        color: Color,
        targets: tuple[Position, ...],
        include_defended: bool,
    ) -> set[Position]:
        board = self._board
        result: set[Position] = set()
        for to_pos in targets:
            target = board[to_pos]
            if target is None or include_defended or target.color != color:
                result.add(to_pos)
        return result

    def _sliding(
        self,
        color: Color,
        rays: tuple[tuple[Position, ...], ...],
        include_defended: bool,
    ) -> set[Position]:
        board = self._board
        result: set[Position] = set()
        for ray in rays:
            for to_pos in ray:
                target = board[to_pos]
                if target is None:
                    result.add(to_pos)
                    continue
                if include_defended or target.color != color:
                    result.add(to_pos)
                break
        return result

    def _king(self, origin: Position, piece: Piece) -> set[Position]:
        attacked = self.attacked_squares(piece.color.opposite)
        result = {
            to_pos
            for to_pos in self.king_pattern(origin)
            if to_pos not in attacked
        }
        result |= self._castling(origin, piece, attacked)
        return result

    def _castling(
        self, origin: Position, piece: Piece, attacked: set[Position]
    ) -> set[Position]:
        if piece.has_moved or origin != king_home(piece.color):
            return set()
        if origin in attacked:
            return set()

        board = self._board
        rank = origin.rank
        result: set[Position] = set()
        for side in _CASTLING_SIDES:
            rook = board[Position(rank, side.rook_file)]
            if (
                rook is None
                or rook.piece_type != PieceType.ROOK
                or rook.color != piece.color
                or rook.has_moved
            ):
                continue
            if not all(board.is_empty(Position(rank, f)) for f in side.empty_files):
                continue
            if any(Position(rank, f) in attacked for f in side.safe_files):
                continue
            result.add(Position(rank, side.king_to_file))
        return result
