"""Game state machine — tracks status, result and move history."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from kingside.core.config import DEFAULT_CONFIG, RulesConfig
from kingside.core.enums import Color, GameResult
from kingside.core.move_generator import MoveGenerator
from kingside.core.position import Position
from kingside.core.rules import Rules
from kingside.game.interfaces import GameStatus

if TYPE_CHECKING:
    from kingside.core.enums import PieceType
    from kingside.core.move import Move
    from kingside.core.types import Square


@dataclass
class GameState:
    """Manages game lifecycle: status, result, move history.

    This is a pure data/logic class — no locking, no UI. The position is the
    single authoritative copy; callers outside the game layer only ever see
    snapshots of it.
    """

    config: RulesConfig = DEFAULT_CONFIG
    position: Position = field(default_factory=Position, init=False)
    status: GameStatus = field(default=GameStatus.PLAYING, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    move_history: list[Move] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, position: Position | None = None) -> None:
        """Initialise (or reset) the game.

        A supplied *position* is copied, and evaluated right away so a
        position with no legal moves starts out finished.
        """
        self.position = position.copy() if position is not None else Position()
        self.status = GameStatus.PLAYING
        self.result = GameResult.IN_PROGRESS
        self.move_history.clear()
        if position is not None:
            self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None = None,
    ) -> Move:
        """Apply a validated move and return the history record.

        Caller is responsible for legality check.
        """
        record = self.position.make_move(from_sq, to_sq, promotion, self.config)
        self.move_history.append(record)
        self._check_game_over()
        return record

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def is_finished(self) -> bool:
        return self.status == GameStatus.FINISHED

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    def legal_destinations(self, sq: tuple[int, int]) -> list[Square]:
        gen = MoveGenerator(self.position, self.config)
        return gen.legal_destinations(sq)

    def is_in_check(self, color: Color) -> bool:
        gen = MoveGenerator(self.position, self.config)
        return gen.is_in_check(color)

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        result = Rules.game_result(self.position, self.config)
        if result != GameResult.IN_PROGRESS:
            self.result = result
            self.status = GameStatus.FINISHED
