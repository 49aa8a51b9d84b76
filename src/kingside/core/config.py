"""Rules configuration."""

from __future__ import annotations

from dataclasses import dataclass

from kingside.core.enums import PieceType


@dataclass(slots=True, frozen=True)
class RulesConfig:
    """Rule variations a game is played under.

    Attributes:
        castling_requires_safe_path: When false, castling only requires the
            king's current square to be unattacked. When true, the square the
            king crosses and the square it lands on must be unattacked too.
        mark_castled_rook_moved: Whether the rook relocated by castling gets
            ``has_moved`` set like the king does.
        default_promotion: Piece a pawn becomes on the far rank when the
            caller does not name one.
    """

    castling_requires_safe_path: bool = False
    mark_castled_rook_moved: bool = True
    default_promotion: PieceType = PieceType.QUEEN

    @classmethod
    def standard(cls) -> RulesConfig:
        """FIDE castling: no passing through or landing on attacked squares."""
        return cls(castling_requires_safe_path=True)


DEFAULT_CONFIG = RulesConfig()
