"""Pseudo-legal and legal move generation + check detection."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from kingside.core.config import DEFAULT_CONFIG, RulesConfig
from kingside.core.enums import Color, GenerationMode, PieceType
from kingside.core.piece import Piece
from kingside.core.types import Square, is_on_board

if TYPE_CHECKING:
    from kingside.core.position import Position


# (row, col) deltas
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

_SLIDER_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}

# rook column -> king destination column
_CASTLING_SIDES: tuple[tuple[int, int], ...] = ((7, 6), (0, 2))
_KING_HOME_COL = 4

MovePair = tuple[Square, Square]


class MoveGenerator:
    """Generates moves for a given :class:`Position`.

    Legality is tested by temporarily placing the mover on the destination
    square of the live board (see :meth:`simulate`); the board is always
    restored before any public method returns.
    """

    __slots__ = ("_pos", "_board", "_config")

    def __init__(self, position: Position, config: RulesConfig | None = None) -> None:
        self._pos = position
        self._board = position.board
        self._config = config if config is not None else DEFAULT_CONFIG

    # -- Public API ---------------------------------------------------------

    def legal_destinations(self, sq: tuple[int, int]) -> list[Square]:
        """Legal destinations of the side-to-move piece on *sq*.

        Empty for off-board or empty squares and for the opponent's pieces.
        """
        if not is_on_board(sq):
            return []
        origin = Square(*sq)
        piece = self._board[origin]
        if piece is None or piece.color != self._pos.side_to_move:
            return []
        return [
            to_sq
            for to_sq in self.pseudo_legal_destinations(origin)
            if not self.leaves_king_in_check(origin, to_sq)
        ]

    def generate_legal_moves(self) -> list[MovePair]:
        """All legal ``(from, to)`` pairs for the side to move."""
        moves: list[MovePair] = []
        for sq in self._board.all_pieces(self._pos.side_to_move):
            moves.extend((sq, to_sq) for to_sq in self.legal_destinations(sq))
        return moves

    def has_legal_moves(self) -> bool:
        """Whether the side to move has at least one legal move."""
        return any(
            self.legal_destinations(sq)
            for sq in self._board.all_pieces(self._pos.side_to_move)
        )

    def pseudo_legal_destinations(
        self,
        sq: Square,
        mode: GenerationMode = GenerationMode.FULL,
    ) -> list[Square]:
        """Destinations allowed by the piece's movement pattern alone."""
        piece = self._board[sq]
        if piece is None:
            return []

        piece_type = piece.piece_type
        if piece_type == PieceType.PAWN:
            return self._gen_pawn(sq, piece.color)
        if piece_type == PieceType.KNIGHT:
            return self._gen_steps(sq, piece.color, KNIGHT_OFFSETS)
        if piece_type == PieceType.KING:
            moves = self._gen_steps(sq, piece.color, KING_OFFSETS)
            if mode == GenerationMode.FULL:
                self._gen_castling(sq, piece, moves)
            return moves
        return self._gen_sliding(sq, piece.color, _SLIDER_DIRS[piece_type])

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king among the opponent's attack-only destinations?

        A side without a king is never in check.
        """
        king_sq = self._board.find_king(color)
        if king_sq is None:
            return False
        opponent = color.opposite
        for sq, piece in self._board.occupied():
            if piece.color != opponent:
                continue
            attacked = self.pseudo_legal_destinations(sq, GenerationMode.ATTACK_ONLY)
            if king_sq in attacked:
                return True
        return False

    def is_square_attacked(self, target: Square, by_color: Color) -> bool:
        """Could a piece of *by_color* capture on *target* if it were occupied?

        Pawns count their diagonals only; a forward push never attacks.
        """
        for sq, piece in self._board.occupied():
            if piece.color != by_color:
                continue
            if piece.piece_type == PieceType.PAWN:
                attacked = self._pawn_attacks(sq, by_color)
            else:
                attacked = self.pseudo_legal_destinations(
                    sq, GenerationMode.ATTACK_ONLY
                )
            if target in attacked:
                return True
        return False

    # -- Simulation ---------------------------------------------------------

    @contextmanager
    def simulate(self, from_sq: Square, to_sq: Square) -> Iterator[None]:
        """Temporarily move the piece on *from_sq* to *to_sq*.

        Only the two squares are touched; the board is restored on exit,
        whether or not the body raises.
        """
        board = self._board
        mover = board[from_sq]
        displaced = board[to_sq]
        board[to_sq] = mover
        board[from_sq] = None
        try:
            yield
        finally:
            board[from_sq] = mover
            board[to_sq] = displaced

    def leaves_king_in_check(self, from_sq: Square, to_sq: Square) -> bool:
        mover = self._board[from_sq]
        if mover is None:
            return False
        with self.simulate(from_sq, to_sq):
            return self.is_in_check(mover.color)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color) -> list[Square]:
        board = self._board
        moves: list[Square] = []
        step = color.pawn_direction

        one_step = Square(sq.row + step, sq.col)
        if is_on_board(one_step) and board.is_empty(one_step):
            moves.append(one_step)
            if sq.row == color.pawn_start_row:
                two_step = Square(sq.row + 2 * step, sq.col)
                if board.is_empty(two_step):
                    moves.append(two_step)

        for cap_sq in self._pawn_attacks(sq, color):
            target = board[cap_sq]
            if target is not None and target.color != color:
                moves.append(cap_sq)
            elif cap_sq == self._pos.en_passant:
                moves.append(cap_sq)
        return moves

    @staticmethod
    def _pawn_attacks(sq: Square, color: Color) -> list[Square]:
        row = sq.row + color.pawn_direction
        return [
            Square(row, col)
            for col in (sq.col - 1, sq.col + 1)
            if is_on_board((row, col))
        ]

    def _gen_steps(
        self,
        sq: Square,
        color: Color,
        offsets: tuple[tuple[int, int], ...],
    ) -> list[Square]:
        board = self._board
        moves: list[Square] = []
        for dr, dc in offsets:
            to_sq = Square(sq.row + dr, sq.col + dc)
            if not is_on_board(to_sq):
                continue
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(to_sq)
        return moves

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        directions: tuple[tuple[int, int], ...],
    ) -> list[Square]:
        board = self._board
        moves: list[Square] = []
        for dr, dc in directions:
            for dist in range(1, 8):
                to_sq = Square(sq.row + dr * dist, sq.col + dc * dist)
                if not is_on_board(to_sq):
                    break
                target = board[to_sq]
                if target is None:
                    moves.append(to_sq)
                    continue
                if target.color != color:
                    moves.append(to_sq)
                break
        return moves

    def _gen_castling(self, king_sq: Square, king: Piece, moves: list[Square]) -> None:
        color = king.color
        if king.has_moved or king_sq != Square(color.back_row, _KING_HOME_COL):
            return
        if self.is_in_check(color):
            return

        board = self._board
        row = king_sq.row
        for rook_col, king_to_col in _CASTLING_SIDES:
            rook = board[Square(row, rook_col)]
            if (
                rook is None
                or rook.piece_type != PieceType.ROOK
                or rook.color != color
                or rook.has_moved
            ):
                continue

            lo, hi = sorted((king_sq.col, rook_col))
            if any(not board.is_empty(Square(row, col)) for col in range(lo + 1, hi)):
                continue

            king_to = Square(row, king_to_col)
            if self._config.castling_requires_safe_path:
                step = 1 if king_to_col > king_sq.col else -1
                path = (Square(row, king_sq.col + step), king_to)
                if any(self.is_square_attacked(p, color.opposite) for p in path):
                    continue

            moves.append(king_to)
