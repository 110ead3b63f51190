"""Game state machine: turn tracking, move application and status."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from checkmate.core.arrangement import (
    STANDARD_ARRANGEMENT,
    board_from_arrangement,
    board_to_arrangement,
)
from checkmate.core.board import Board, BoardRows
from checkmate.core.enums import Color, GameStatus, PieceType
from checkmate.core.move_generator import MoveGenerator, apply_move
from checkmate.core.rules import Rules

if TYPE_CHECKING:
    from checkmate.core.move import Move
    from checkmate.core.piece import Piece
    from checkmate.core.position import Position
    from checkmate.game.puzzle import Puzzle

_LOGGER = logging.getLogger(__name__)


class Game:
    """A game of chess in progress.

    The board is only ever changed by :meth:`attempt_move`, which either
    commits a whole move (rook relocation and status update included) or
    leaves everything untouched.  Once :attr:`status` is terminal it stays
    that way; there is no undo.

    Instances are not thread-safe.  Callers sharing a game must serialise
    access themselves or work on independent :meth:`copy` snapshots.

    Raises:
        ArrangementError: if *arrangement* is not 64 characters long or
            does not hold exactly one king of each color.
    """

    __slots__ = ("_board", "_move_count", "_status")

    def __init__(
        self,
        arrangement: str = STANDARD_ARRANGEMENT,
        turn: Color = Color.WHITE,
    ) -> None:
        self._board: Board = board_from_arrangement(arrangement)
        self._move_count: int = int(turn)
        self._status: GameStatus = GameStatus.ONGOING

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def turn(self) -> Color:
        return Color(self._move_count % 2)

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status.is_terminal

    @property
    def move_count(self) -> int:
        """Half-moves counted from White's first move of the game."""
        return self._move_count

    def board_snapshot(self) -> BoardRows:
        """Immutable copy of the grid; rank 0 (the eighth rank) first."""
        return self._board.rows()

    def piece_at(self, position: Position) -> Piece | None:
        return self._board[position]

    def arrangement(self) -> str:
        """Current layout as a 64-character arrangement string."""
        return board_to_arrangement(self._board)

    def reachable_from(self, origin: Position) -> set[Position]:
        """Legal destinations for the piece on *origin* (empty if none)."""
        return MoveGenerator(self._board).legal_destinations(origin)

    def is_king_under_attack(self, color: Color) -> bool:
        return Rules.is_in_check(self._board, color)

    # ── Move application ─────────────────────────────────────────────────

    def attempt_move(self, move: Move) -> bool:
        """Make *move* if it is legal for the side to move.

        Returns ``True`` when the move was committed and ``False`` when it
        was rejected, in which case the game is unchanged.
        """
        if self.is_over:
            _LOGGER.debug("Rejected %s: game is over (%s)", move, self._status.name)
            return False

        piece = self._board[move.origin]
        if piece is None:
            _LOGGER.debug("Rejected %s: no piece on origin", move)
            return False
        if piece.color != self.turn:
            _LOGGER.debug("Rejected %s: it is %s's turn", move, self.turn)
            return False

        reachable = MoveGenerator(self._board).destinations(move.origin)
        if move.destination not in reachable:
            _LOGGER.debug("Rejected %s: destination not reachable", move)
            return False
        target = self._board[move.destination]
        if target is not None and target.piece_type == PieceType.KING:
            _LOGGER.debug("Rejected %s: kings cannot be captured", move)
            return False

        scratch = self._board.copy()
        apply_move(scratch, move)
        if MoveGenerator(scratch).is_king_under_attack(piece.color):
            _LOGGER.debug("Rejected %s: leaves the %s king attacked", move, piece.color)
            return False

        self._board = scratch
        self._move_count += 1
        self._update_status()
        return True

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Game:
        """Independent deep copy sharing no mutable state."""
        clone = Game.__new__(Game)
        clone._board = self._board.copy()
        clone._move_count = self._move_count
        clone._status = self._status
        return clone

    def __copy__(self) -> Game:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, object]) -> Game:
        return self.copy()

    def __repr__(self) -> str:
        return (
            f"Game(turn={self.turn}, status={self._status.name}, "
            f"moves={self._move_count})\n{self._board!r}"
        )

    # ── Internal ─────────────────────────────────────────────────────────

    def _update_status(self) -> None:
        status = Rules.status_for(self._board, self.turn)
        if status.is_terminal:
            _LOGGER.info(
                "Game over after %d half-moves: %s", self._move_count, status.name
            )
        self._status = status


def new_game(
    arrangement: str = STANDARD_ARRANGEMENT, turn: Color = Color.WHITE
) -> Game:
    """Start a game from *arrangement* with *turn* to move."""
    return Game(arrangement, turn)


def game_from_puzzle(puzzle: Puzzle) -> Game:
    """Start a game from a puzzle's arrangement and side to move."""
    return Game(puzzle.arrangement, puzzle.turn)
