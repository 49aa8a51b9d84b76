"""Square type and coordinate helpers.

Board layout (row-major, row 0 at the top):
    row 0 = rank 8 (black home rank), row 7 = rank 1 (white home rank)
    col 0 = file a, col 7 = file h

So ``Square(7, 4)`` is e1 and ``Square(0, 4)`` is e8.
"""

from __future__ import annotations

from typing import NamedTuple


class Square(NamedTuple):
    """Board coordinate; both fields are in ``[0, 7]`` when on the board."""

    row: int
    col: int

    def __str__(self) -> str:
        if not is_on_board(self):
            return f"({self.row}, {self.col})"
        return square_name(self)


def is_on_board(sq: tuple[int, int]) -> bool:
    """Bounds check for a ``(row, col)`` pair.

    Anything that is not a pair of ints counts as off the board.
    """
    try:
        row, col = sq
    except (TypeError, ValueError):
        return False
    if not isinstance(row, int) or not isinstance(col, int):
        return False
    return 0 <= row < 8 and 0 <= col < 8


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return sq.col


def rank_of(sq: Square) -> int:
    """Rank index 0–7 (1–8)."""
    return 7 - sq.row


def make_square(file: int, rank: int) -> Square:
    """Create square from file (0–7) and rank (0–7)."""
    return Square(7 - rank, file)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. ``Square(7, 0)`` → 'a1'."""
    return chr(ord("a") + file_of(sq)) + str(rank_of(sq) + 1)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → ``Square(4, 4)``."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(ord(name[0]) - ord("a"), int(name[1]) - 1)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (make_square(f, 0) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (make_square(f, 1) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (make_square(f, 2) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (make_square(f, 3) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (make_square(f, 4) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (make_square(f, 5) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (make_square(f, 6) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (make_square(f, 7) for f in range(8))
