"""Tests for GameState."""

from kingside.core.board import Board
from kingside.core.config import RulesConfig
from kingside.core.enums import Color, GameResult
from kingside.core.position import Position
from kingside.core.types import E2, E3, E4, E7, E5
from kingside.game.interfaces import GameStatus
from kingside.game.state import GameState

EMPTY = "........"
_STALEMATE_ROWS = [".......k", EMPTY, ".....KQ.", EMPTY, EMPTY, EMPTY, EMPTY, EMPTY]


class TestGameStateSetup:
    def test_fresh_state_is_playable(self) -> None:
        gs = GameState()
        assert gs.status == GameStatus.PLAYING
        assert gs.result == GameResult.IN_PROGRESS
        assert gs.side_to_move == Color.WHITE
        assert gs.ply_count == 0
        assert gs.config == RulesConfig()

    def test_setup_resets(self) -> None:
        gs = GameState()
        gs.apply_move(E2, E4)
        assert gs.ply_count == 1
        gs.setup()  # reset
        assert gs.ply_count == 0
        assert gs.side_to_move == Color.WHITE
        assert gs.position.en_passant is None

    def test_setup_copies_custom_position(self) -> None:
        pos = Position(Board.from_rows(_STALEMATE_ROWS), Color.WHITE)
        gs = GameState()
        gs.setup(pos)
        pos.board.clear()
        assert gs.position.board.piece_count() == 3

    def test_setup_evaluates_custom_position(self) -> None:
        pos = Position(Board.from_rows(_STALEMATE_ROWS), Color.BLACK)
        gs = GameState()
        gs.setup(pos)
        assert gs.is_finished
        assert gs.result == GameResult.DRAW

    def test_config_is_kept_across_setup(self) -> None:
        config = RulesConfig.standard()
        gs = GameState(config)
        gs.setup()
        assert gs.config is config


class TestGameStateMoves:
    def test_apply_move_records(self) -> None:
        gs = GameState()
        record = gs.apply_move(E2, E4)
        assert record.from_sq == E2
        assert record.to_sq == E4
        assert gs.move_history == [record]
        assert gs.side_to_move == Color.BLACK
        assert gs.ply_count == 1

    def test_history_is_chronological(self) -> None:
        gs = GameState()
        first = gs.apply_move(E2, E3)
        second = gs.apply_move(E7, E5)
        assert gs.move_history == [first, second]

    def test_legal_destinations_follow_side_to_move(self) -> None:
        gs = GameState()
        assert gs.legal_destinations(E7) == []
        gs.apply_move(E2, E4)
        assert gs.legal_destinations(E2) == []
        assert E5 in gs.legal_destinations(E7)

    def test_is_in_check(self) -> None:
        gs = GameState()
        assert not gs.is_in_check(Color.WHITE)
