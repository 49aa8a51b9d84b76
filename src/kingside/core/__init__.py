"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from kingside.core import MoveGenerator, Position
    from kingside.core.types import E2

    pos = Position()
    gen = MoveGenerator(pos)
    print(gen.legal_destinations(E2))
"""

from kingside.core.board import Board, BoardSnapshot
from kingside.core.config import DEFAULT_CONFIG, RulesConfig
from kingside.core.enums import Color, GameResult, GenerationMode, PieceType
from kingside.core.move import Move
from kingside.core.move_generator import MoveGenerator
from kingside.core.piece import Piece
from kingside.core.position import Position
from kingside.core.rules import Rules
from kingside.core.types import (
    Square,
    file_of,
    is_on_board,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "GenerationMode",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "is_on_board",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Configuration
    "DEFAULT_CONFIG",
    "RulesConfig",
    # Domain objects
    "Board",
    "BoardSnapshot",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
]
