"""GameController — the public face of a chess game.

Validates and applies moves supplied by a caller (UI, tests, scripts) and
answers queries with copies of the game state. It holds no callbacks and no
timers: hosts poll it after each :meth:`GameController.attempt_move`.

Thread-safety: none. A multi-threaded host must serialise all calls.
"""

from __future__ import annotations

import logging

from kingside.core.board import BoardSnapshot
from kingside.core.config import DEFAULT_CONFIG, RulesConfig
from kingside.core.enums import Color, GameResult, PieceType
from kingside.core.move import Move
from kingside.core.piece import Piece
from kingside.core.position import Position
from kingside.core.types import Square, is_on_board
from kingside.game.interfaces import (
    DRAW,
    GameStatus,
    IGameController,
    MoveRejection,
    Winner,
)
from kingside.game.state import GameState

_LOGGER = logging.getLogger(__name__)


class GameController(IGameController):
    """Owns one :class:`GameState` and guards every mutation of it."""

    __slots__ = ("_state",)

    def __init__(self, config: RulesConfig | None = None) -> None:
        self._state = GameState(config if config is not None else DEFAULT_CONFIG)

    @classmethod
    def from_position(
        cls,
        position: Position,
        config: RulesConfig | None = None,
    ) -> GameController:
        """Start a game from a custom placement (the position is copied)."""
        ctrl = cls(config)
        ctrl._state.setup(position)
        return ctrl

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def config(self) -> RulesConfig:
        return self._state.config

    @property
    def current_player(self) -> Color:
        return self._state.side_to_move

    @property
    def status(self) -> GameStatus:
        return self._state.status

    @property
    def result(self) -> GameResult:
        return self._state.result

    @property
    def en_passant_target(self) -> Square | None:
        return self._state.position.en_passant

    @property
    def ply_count(self) -> int:
        return self._state.ply_count

    # ── Queries ──────────────────────────────────────────────────────────

    def board_snapshot(self) -> BoardSnapshot:
        return self._state.position.board.snapshot()

    def piece_at(self, sq: tuple[int, int]) -> Piece | None:
        return self._state.position.board.piece_at(sq)

    def legal_moves(self, sq: tuple[int, int]) -> list[Square]:
        return self._state.legal_destinations(sq)

    def is_in_check(self, color: Color | None = None) -> bool:
        """Whether *color* (default: the side to move) is in check."""
        if color is None:
            color = self.current_player
        return self._state.is_in_check(color)

    def is_finished(self) -> bool:
        return self._state.is_finished

    def winner(self) -> Winner | None:
        result = self._state.result
        if result == GameResult.IN_PROGRESS:
            return None
        if result == GameResult.DRAW:
            return DRAW
        return result.winner

    def history(self) -> list[Move]:
        return list(self._state.move_history)

    # ── Moves ────────────────────────────────────────────────────────────

    def validate_move(
        self,
        from_sq: tuple[int, int],
        to_sq: tuple[int, int],
        promotion: PieceType | None = None,
    ) -> MoveRejection | None:
        """Reason the move would be rejected, or ``None`` if it is legal."""
        state = self._state
        if state.is_finished:
            return MoveRejection.GAME_FINISHED
        if not is_on_board(from_sq) or not is_on_board(to_sq):
            return MoveRejection.OFF_BOARD

        piece = state.position.board[from_sq]
        if piece is None:
            return MoveRejection.NO_PIECE
        if piece.color != state.side_to_move:
            return MoveRejection.WRONG_COLOR
        if Square(*to_sq) not in state.legal_destinations(from_sq):
            return MoveRejection.ILLEGAL_DESTINATION
        if promotion is not None and _coerce_promotion(promotion) is None:
            return MoveRejection.INVALID_PROMOTION
        return None

    def attempt_move(
        self,
        from_sq: tuple[int, int],
        to_sq: tuple[int, int],
        promotion: PieceType | None = None,
    ) -> bool:
        rejection = self.validate_move(from_sq, to_sq, promotion)
        if rejection is not None:
            _LOGGER.debug("Rejected %s -> %s: %s", from_sq, to_sq, rejection.name)
            return False

        if promotion is not None:
            promotion = _coerce_promotion(promotion)
        record = self._state.apply_move(Square(*from_sq), Square(*to_sq), promotion)
        _LOGGER.debug("Played %s (%s)", record, record.piece.color)

        if self._state.is_finished:
            winner = self.winner()
            if winner == DRAW:
                _LOGGER.info("Game over: stalemate after %d plies", self.ply_count)
            else:
                _LOGGER.info("Game over: %s wins by checkmate", winner)
        return True

    def reset(self) -> None:
        self._state.setup()
        _LOGGER.info("Game reset")


def _coerce_promotion(value: object) -> PieceType | None:
    """``PieceType`` for *value*, or ``None`` if it names no piece type."""
    try:
        return PieceType(value)
    except (TypeError, ValueError):
        return None
