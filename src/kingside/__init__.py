"""kingside — a chess rules engine.

The engine owns board state, lists legal moves, executes them (castling,
en passant and promotion included) and detects checkmate and stalemate.
Rendering and input belong to the host application.
"""

from kingside.core import Color, PieceType, RulesConfig, Square
from kingside.game import DRAW, GameController, GameStatus, MoveRejection

__all__ = [
    "DRAW",
    "Color",
    "GameController",
    "GameStatus",
    "MoveRejection",
    "PieceType",
    "RulesConfig",
    "Square",
]
