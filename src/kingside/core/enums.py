"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color. White moves first and starts on row 7."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def pawn_direction(self) -> int:
        """Row delta of a single pawn step."""
        return -1 if self == Color.WHITE else 1

    @property
    def pawn_start_row(self) -> int:
        return 6 if self == Color.WHITE else 1

    @property
    def back_row(self) -> int:
        return 7 if self == Color.WHITE else 0

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()


class GenerationMode(IntEnum):
    """How much of a piece's movement to generate.

    ``ATTACK_ONLY`` is what check detection scans with: it never produces
    castling candidates, since castling eligibility itself asks whether the
    king is in check.
    """

    FULL = auto()
    ATTACK_ONLY = auto()


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3

    @property
    def winner(self) -> Color | None:
        if self == GameResult.WHITE_WINS:
            return Color.WHITE
        if self == GameResult.BLACK_WINS:
            return Color.BLACK
        return None

    @classmethod
    def win_for(cls, color: Color) -> GameResult:
        return cls.WHITE_WINS if color == Color.WHITE else cls.BLACK_WINS
