"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kingside.core.enums import GameResult
from kingside.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from kingside.core.config import RulesConfig
    from kingside.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    # Product policy: a game only ends when the side to move has no legal
    # move. Repetition, the fifty-move rule and material draws are not
    # evaluated.

    @staticmethod
    def is_in_check(position: Position, config: RulesConfig | None = None) -> bool:
        gen = MoveGenerator(position, config)
        return gen.is_in_check(position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position, config: RulesConfig | None = None) -> bool:
        gen = MoveGenerator(position, config)
        return gen.is_in_check(position.side_to_move) and not gen.has_legal_moves()

    @staticmethod
    def is_stalemate(position: Position, config: RulesConfig | None = None) -> bool:
        gen = MoveGenerator(position, config)
        return not gen.is_in_check(position.side_to_move) and not gen.has_legal_moves()

    @staticmethod
    def game_result(
        position: Position,
        config: RulesConfig | None = None,
    ) -> GameResult:
        """Determine the current game result for the side to move."""
        gen = MoveGenerator(position, config)
        if gen.has_legal_moves():
            return GameResult.IN_PROGRESS

        if gen.is_in_check(position.side_to_move):
            return GameResult.win_for(position.side_to_move.opposite)
        return GameResult.DRAW  # stalemate
