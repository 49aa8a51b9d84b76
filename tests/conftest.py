"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from kingside.core.enums import PieceType
from kingside.core.types import parse_square
from kingside.game.controller import GameController

_PROMO_PIECES: dict[str, PieceType] = {
    "q": PieceType.QUEEN,
    "r": PieceType.ROOK,
    "b": PieceType.BISHOP,
    "n": PieceType.KNIGHT,
}

Play = Callable[..., None]


@pytest.fixture
def game() -> GameController:
    """A fresh game in the standard starting position."""
    return GameController()


@pytest.fixture
def play() -> Play:
    """Play coordinate moves (``"e2e4"``, ``"e7e8n"``) and assert each succeeds."""

    def _play(ctrl: GameController, *moves: str) -> None:
        for uci in moves:
            promotion = _PROMO_PIECES.get(uci[4:]) if len(uci) > 4 else None
            ok = ctrl.attempt_move(
                parse_square(uci[:2]), parse_square(uci[2:4]), promotion
            )
            assert ok, f"move {uci} was rejected"

    return _play
