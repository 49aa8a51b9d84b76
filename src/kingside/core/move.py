"""Move history record."""

from __future__ import annotations

from dataclasses import dataclass

from kingside.core.enums import PieceType
from kingside.core.piece import Piece
from kingside.core.types import Square

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
    PieceType.PAWN: "p",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable record of one executed move.

    ``piece`` is the mover as it stood before the move (a pawn stays a pawn
    here even when ``promotion`` is set).  For en passant ``captured`` is the
    pawn removed from beside the destination, not the destination occupant.
    """

    from_sq: Square
    to_sq: Square
    piece: Piece
    captured: Piece | None = None
    is_en_passant: bool = False
    is_castling: bool = False
    promotion: PieceType | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{self.from_sq}{self.to_sq}"
        if self.promotion is not None:
            base += _PROMO_CHARS[self.promotion]
        return base
