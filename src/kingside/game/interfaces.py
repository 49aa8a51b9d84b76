"""Abstract interfaces and shared enums for the game layer.

Rendering, input handling and animation live outside this package; they
talk to a game only through :class:`IGameController`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING, Literal, Union

from kingside.core.enums import Color

if TYPE_CHECKING:
    from kingside.core.board import BoardSnapshot
    from kingside.core.enums import PieceType
    from kingside.core.move import Move
    from kingside.core.piece import Piece
    from kingside.core.types import Square

DRAW: Literal["draw"] = "draw"
Winner = Union[Color, Literal["draw"]]


# ── Game status ──────────────────────────────────────────────────────────────


class GameStatus(IntEnum):
    """``PLAYING`` → ``FINISHED`` is one-way; only a reset starts over."""

    PLAYING = auto()
    FINISHED = auto()


class MoveRejection(IntEnum):
    """Why a move attempt was turned down."""

    GAME_FINISHED = auto()
    OFF_BOARD = auto()
    NO_PIECE = auto()
    WRONG_COLOR = auto()
    ILLEGAL_DESTINATION = auto()
    INVALID_PROMOTION = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game surface consumed by UI collaborators.

    Every query returns data the caller owns; nothing returned aliases the
    game's internal board or history.
    """

    @abstractmethod
    def board_snapshot(self) -> BoardSnapshot:
        """Copy of the 8x8 grid, row 0 first."""

    @property
    @abstractmethod
    def current_player(self) -> Color:
        """Color to move."""

    @abstractmethod
    def piece_at(self, sq: tuple[int, int]) -> Piece | None:
        """Occupant of *sq*; ``None`` if empty or off the board."""

    @abstractmethod
    def legal_moves(self, sq: tuple[int, int]) -> list[Square]:
        """Legal destinations for the side-to-move piece on *sq*."""

    @abstractmethod
    def attempt_move(
        self,
        from_sq: tuple[int, int],
        to_sq: tuple[int, int],
        promotion: PieceType | None = None,
    ) -> bool:
        """Play a move. Returns True if legal and applied."""

    @abstractmethod
    def is_finished(self) -> bool:
        """Has the game ended?"""

    @abstractmethod
    def winner(self) -> Winner | None:
        """Winning color, ``"draw"``, or ``None`` while playing."""

    @abstractmethod
    def history(self) -> list[Move]:
        """Moves played so far, oldest first."""

    @abstractmethod
    def reset(self) -> None:
        """Start a fresh game from the standard position."""
