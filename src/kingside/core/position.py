"""Position — board plus the state needed to move on it."""

from __future__ import annotations

from kingside.core.board import Board
from kingside.core.config import DEFAULT_CONFIG, RulesConfig
from kingside.core.enums import Color, PieceType
from kingside.core.move import Move
from kingside.core.types import Square


class Position:
    """Board + side to move + en passant target.

    :meth:`make_move` applies a move without checking legality; callers run
    destinations through :class:`~kingside.core.move_generator.MoveGenerator`
    first.
    """

    __slots__ = ("board", "side_to_move", "en_passant")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        en_passant: Square | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.en_passant = en_passant

    # ── Core move operation ──────────────────────────────────────────────

    def make_move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None = None,
        config: RulesConfig | None = None,
    ) -> Move:
        """Apply the move and return its history record."""
        config = config if config is not None else DEFAULT_CONFIG
        board = self.board
        piece = board[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {from_sq}")

        captured = board[to_sq]
        placed = piece.moved()
        promotion_type: PieceType | None = None
        is_castling = False
        is_en_passant = False

        # Side effects are worked out against the board as it was before
        # the mover is lifted.
        if piece.piece_type == PieceType.PAWN and to_sq.row in (0, 7):
            promotion_type = promotion or config.default_promotion
            placed = placed.promoted(promotion_type)

        if piece.piece_type == PieceType.KING and abs(to_sq.col - from_sq.col) == 2:
            is_castling = True
            kingside = to_sq.col > from_sq.col
            rook_from = Square(from_sq.row, 7 if kingside else 0)
            rook_to = Square(from_sq.row, 5 if kingside else 3)
            rook = board[rook_from]
            if rook is not None and config.mark_castled_rook_moved:
                rook = rook.moved()
            board[rook_to] = rook
            board[rook_from] = None

        if piece.piece_type == PieceType.PAWN and to_sq == self.en_passant:
            is_en_passant = True
            # The passed pawn sits one row behind the target, seen from the mover.
            ep_capture_sq = Square(to_sq.row - piece.color.pawn_direction, to_sq.col)
            captured = board[ep_capture_sq]
            board[ep_capture_sq] = None

        board[to_sq] = placed
        board[from_sq] = None

        # En passant target for the opponent
        next_en_passant: Square | None = None
        if piece.piece_type == PieceType.PAWN and abs(to_sq.row - from_sq.row) == 2:
            next_en_passant = Square((from_sq.row + to_sq.row) // 2, from_sq.col)
        self.en_passant = next_en_passant

        self.side_to_move = self.side_to_move.opposite

        return Move(
            from_sq=from_sq,
            to_sq=to_sq,
            piece=piece,
            captured=captured,
            is_en_passant=is_en_passant,
            is_castling=is_castling,
            promotion=promotion_type,
        )

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Independent copy; moves on it never touch this position."""
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            en_passant=self.en_passant,
        )

    def __repr__(self) -> str:
        ep = self.en_passant if self.en_passant is not None else "-"
        return f"{self.board!r}\n{self.side_to_move!s} to move, en passant {ep}"
