"""Game management layer — state machine and controller.

Quick start::

    from kingside.core.types import E2, E4
    from kingside.game import GameController

    ctrl = GameController()
    ctrl.attempt_move(E2, E4)
"""

from kingside.game.controller import GameController
from kingside.game.interfaces import (
    DRAW,
    GameStatus,
    IGameController,
    MoveRejection,
    Winner,
)
from kingside.game.state import GameState

__all__ = [
    # Interfaces
    "DRAW",
    "GameStatus",
    "IGameController",
    "MoveRejection",
    "Winner",
    # Concrete
    "GameController",
    "GameState",
]
