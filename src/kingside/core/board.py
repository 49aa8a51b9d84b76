"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from kingside.core.enums import Color, PieceType
from kingside.core.piece import Piece
from kingside.core.types import Square, is_on_board

BoardSnapshot = list[list[Piece | None]]

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


class Board:
    """Mutable 8x8 grid of optional pieces, indexed by :class:`Square`."""

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: tuple[int, int]) -> Piece | None:
        row, col = sq
        return self._grid[row][col]

    def __setitem__(self, sq: tuple[int, int], piece: Piece | None) -> None:
        row, col = sq
        self._grid[row][col] = piece

    def piece_at(self, sq: tuple[int, int]) -> Piece | None:
        """Occupant of *sq*, or ``None`` if empty or off the board."""
        if not is_on_board(sq):
            return None
        return self[sq]

    def is_empty(self, sq: tuple[int, int]) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Every occupied square in row-major order."""
        for row, cells in enumerate(self._grid):
            for col, piece in enumerate(cells):
                if piece is not None:
                    yield Square(row, col), piece

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            sq
            for sq, piece in self.occupied()
            if piece.color == color and piece.piece_type == piece_type
        ]

    def find_king(self, color: Color) -> Square | None:
        """First square holding *color*'s king, or ``None`` if it is absent."""
        for sq, piece in self.occupied():
            if piece.piece_type == PieceType.KING and piece.color == color:
                return sq
        return None

    def piece_count(self) -> int:
        return sum(1 for _ in self.occupied())

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    def snapshot(self) -> BoardSnapshot:
        """Independent grid copy; pieces are immutable so rows suffice."""
        return [row.copy() for row in self._grid]

    def clear(self) -> None:
        self._grid = [[None] * 8 for _ in range(8)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[Square(0, col)] = Piece(Color.BLACK, pt)
            b[Square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(7, col)] = Piece(Color.WHITE, pt)
        return b

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> Board:
        """Build a placement from eight diagram rows, row 0 (rank 8) first.

        ``.`` marks an empty square; letters follow :meth:`Piece.from_char`.
        All pieces start with ``has_moved=False``.
        """
        if len(rows) != 8 or any(len(row) != 8 for row in rows):
            raise ValueError("Board diagram must be 8 rows of 8 characters")
        b = cls()
        for row, line in enumerate(rows):
            for col, char in enumerate(line):
                if char != ".":
                    b[Square(row, col)] = Piece.from_char(char)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row, cells in enumerate(self._grid):
            line = " ".join(str(p) if p else "." for p in cells)
            rows.append(f"{8 - row} {line}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
