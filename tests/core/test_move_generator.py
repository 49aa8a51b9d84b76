"""Tests for MoveGenerator: per-piece movement, check detection, legality."""

from collections.abc import Sequence

import pytest

from kingside.core.board import Board
from kingside.core.config import RulesConfig
from kingside.core.enums import Color, GenerationMode, PieceType
from kingside.core.move_generator import MoveGenerator
from kingside.core.piece import Piece
from kingside.core.position import Position
from kingside.core.types import (
    A3, A5, A8, B1, C1, C3, D1, D2, D4, D6,
    E1, E2, E3, E4, E5, E6, E7, E8, F1, F2, G1, H1,
    Square,
    parse_square,
)


def _position(
    rows: Sequence[str],
    side_to_move: Color = Color.WHITE,
    en_passant: Square | None = None,
) -> Position:
    return Position(Board.from_rows(rows), side_to_move, en_passant)


def _place(
    pieces: dict[str, str],
    side_to_move: Color = Color.WHITE,
    en_passant: Square | None = None,
) -> Position:
    """Position from a square-name -> piece-character map, e.g. {"e1": "K"}."""
    board = Board()
    for name, char in pieces.items():
        board[parse_square(name)] = Piece.from_char(char)
    return Position(board, side_to_move, en_passant)


def perft(position: Position, depth: int, config: RulesConfig | None = None) -> int:
    """Count leaf nodes at *depth*, expanding copies of the position."""
    if depth == 0:
        return 1
    gen = MoveGenerator(position, config)
    nodes = 0
    for from_sq, to_sq in gen.generate_legal_moves():
        child = position.copy()
        child.make_move(from_sq, to_sq, config=config)
        nodes += perft(child, depth - 1, config)
    return nodes


# ── Starting position ────────────────────────────────────────────────────────


class TestStartingPosition:
    def test_king_is_boxed_in(self) -> None:
        gen = MoveGenerator(Position())
        assert gen.legal_destinations(E1) == []

    def test_king_pawn_single_and_double_step(self) -> None:
        gen = MoveGenerator(Position())
        assert gen.legal_destinations(E2) == [E3, E4]

    def test_knight(self) -> None:
        gen = MoveGenerator(Position())
        assert gen.legal_destinations(B1) == [A3, C3]

    def test_opponent_piece_has_no_moves(self) -> None:
        gen = MoveGenerator(Position())
        assert gen.legal_destinations(E7) == []

    def test_empty_and_off_board(self) -> None:
        gen = MoveGenerator(Position())
        assert gen.legal_destinations(E4) == []
        assert gen.legal_destinations((8, 4)) == []
        assert gen.legal_destinations((-1, 0)) == []

    def test_twenty_legal_moves(self) -> None:
        gen = MoveGenerator(Position())
        assert len(gen.generate_legal_moves()) == 20
        assert gen.has_legal_moves()


# ── Piece movement ───────────────────────────────────────────────────────────


class TestPawn:
    def test_blocked_double_step(self) -> None:
        pos = _place({"e8": "k", "e4": "n", "e2": "P", "e1": "K"})
        assert MoveGenerator(pos).legal_destinations(E2) == [E3]

    def test_fully_blocked(self) -> None:
        pos = _place({"e8": "k", "e3": "n", "e2": "P", "a1": "K"})
        assert MoveGenerator(pos).legal_destinations(E2) == []

    def test_no_double_step_off_start_row(self) -> None:
        pos = _place({"e8": "k", "e3": "P", "a1": "K"})
        assert MoveGenerator(pos).legal_destinations(E3) == [E4]

    def test_diagonal_capture_needs_enemy(self) -> None:
        pos = _place({"e8": "k", "d4": "p", "f4": "N", "e3": "P", "a1": "K"})
        assert MoveGenerator(pos).legal_destinations(E3) == [E4, D4]

    def test_black_pawn_moves_down(self) -> None:
        pos = Position(side_to_move=Color.BLACK)
        assert MoveGenerator(pos).legal_destinations(E7) == [Square(2, 4), Square(3, 4)]

    def test_en_passant_target_is_capturable(self) -> None:
        pos = _place(
            {"e8": "k", "d5": "p", "e5": "P", "e1": "K"},
            en_passant=D6,
        )
        assert MoveGenerator(pos).legal_destinations(E5) == [E6, D6]


class TestSliders:
    def test_rook_rays_stop_at_own_piece(self) -> None:
        pos = _place({"e8": "k", "a1": "R", "e1": "K"})
        dests = MoveGenerator(pos).legal_destinations((7, 0))
        assert len(dests) == 10
        assert E1 not in dests
        assert D1 in dests and A8 in dests

    def test_rook_ray_includes_enemy_then_stops(self) -> None:
        pos = _place({"e8": "k", "a5": "p", "a1": "R", "e1": "K"})
        dests = MoveGenerator(pos).legal_destinations((7, 0))
        assert A5 in dests
        assert parse_square("a6") not in dests

    def test_queen_in_the_open(self) -> None:
        pos = _place({"a8": "k", "d4": "Q", "h1": "K"})
        assert len(MoveGenerator(pos).legal_destinations(D4)) == 27

    def test_bishop_pseudo_moves(self) -> None:
        pos = _place({"a8": "k", "d4": "B", "h1": "K"})
        dests = MoveGenerator(pos).pseudo_legal_destinations(D4)
        assert len(dests) == 13
        assert all(abs(sq.row - D4.row) == abs(sq.col - D4.col) for sq in dests)

    def test_empty_square_has_no_pseudo_moves(self) -> None:
        assert MoveGenerator(Position()).pseudo_legal_destinations(E4) == []


# ── Check detection and legality ─────────────────────────────────────────────


class TestCheckDetection:
    def test_not_in_check_at_start(self) -> None:
        gen = MoveGenerator(Position())
        assert not gen.is_in_check(Color.WHITE)
        assert not gen.is_in_check(Color.BLACK)

    def test_rook_gives_check(self) -> None:
        pos = _place({"a8": "k", "e8": "r", "e1": "K"})
        assert MoveGenerator(pos).is_in_check(Color.WHITE)

    def test_pawn_gives_check_diagonally_only(self) -> None:
        pos = _place({"a8": "k", "d2": "p", "e1": "K"})
        assert MoveGenerator(pos).is_in_check(Color.WHITE)

        pos = _place({"a8": "k", "e2": "p", "e1": "K"})
        assert not MoveGenerator(pos).is_in_check(Color.WHITE)

    def test_missing_king_is_never_in_check(self) -> None:
        pos = _place({"e8": "q"})
        assert not MoveGenerator(pos).is_in_check(Color.WHITE)

    def test_square_attacked_ignores_pawn_pushes(self) -> None:
        pos = _place({"a8": "k", "e3": "p", "a1": "K"})
        gen = MoveGenerator(pos)
        assert not gen.is_square_attacked(E2, Color.BLACK)
        assert gen.is_square_attacked(D2, Color.BLACK)
        assert gen.is_square_attacked(F2, Color.BLACK)


class TestLegality:
    def test_pinned_piece_cannot_leave_the_line(self) -> None:
        pos = _place({"a8": "k", "e8": "r", "e2": "B", "e1": "K"})
        assert MoveGenerator(pos).legal_destinations(E2) == []

    def test_king_cannot_step_into_attack(self) -> None:
        pos = _place({"a8": "k", "d8": "r", "e1": "K"})
        assert set(MoveGenerator(pos).legal_destinations(E1)) == {E2, F2, F1}

    def test_every_legal_move_is_check_free(self) -> None:
        pos = _position(
            [
                "r...k..r",
                "pppq.ppp",
                "..n..n..",
                "...pp...",
                ".b..P...",
                "..NP.N..",
                "PPPB.PPP",
                "R..QKB.R",
            ]
        )
        gen = MoveGenerator(pos)
        moves = gen.generate_legal_moves()
        assert moves
        for from_sq, to_sq in moves:
            with gen.simulate(from_sq, to_sq):
                assert not gen.is_in_check(Color.WHITE)

    def test_simulate_restores_board_on_error(self) -> None:
        pos = Position()
        before = pos.board.copy()
        gen = MoveGenerator(pos)
        with pytest.raises(RuntimeError):
            with gen.simulate(E2, E4):
                assert pos.board[E2] is None
                assert pos.board[E4] == Piece(Color.WHITE, PieceType.PAWN)
                raise RuntimeError("boom")
        assert pos.board == before

    def test_legal_destinations_leave_board_untouched(self) -> None:
        pos = _place({"a8": "k", "e8": "r", "e2": "B", "e1": "K", "d4": "p"})
        before = pos.board.copy()
        MoveGenerator(pos).generate_legal_moves()
        assert pos.board == before


# ── Castling ─────────────────────────────────────────────────────────────────

_CASTLE = {"a8": "k", "a1": "R", "e1": "K", "h1": "R"}


class TestCastling:
    def test_both_sides_when_path_clear(self) -> None:
        dests = MoveGenerator(_place(_CASTLE)).legal_destinations(E1)
        assert G1 in dests
        assert C1 in dests

    def test_blocked_path(self) -> None:
        pos = _place({**_CASTLE, "b1": "N", "g1": "N"})
        dests = MoveGenerator(pos).legal_destinations(E1)
        assert G1 not in dests
        assert C1 not in dests

    def test_not_out_of_check(self) -> None:
        pos = _place({**_CASTLE, "e8": "r"})
        dests = MoveGenerator(pos).legal_destinations(E1)
        assert G1 not in dests
        assert C1 not in dests

    def test_moved_rook_forfeits_its_side(self) -> None:
        pos = _place(_CASTLE)
        pos.board[H1] = Piece(Color.WHITE, PieceType.ROOK, has_moved=True)
        dests = MoveGenerator(pos).legal_destinations(E1)
        assert G1 not in dests
        assert C1 in dests

    def test_moved_king_forfeits_both(self) -> None:
        pos = _place(_CASTLE)
        pos.board[E1] = Piece(Color.WHITE, PieceType.KING, has_moved=True)
        dests = MoveGenerator(pos).legal_destinations(E1)
        assert G1 not in dests
        assert C1 not in dests

    def test_corner_piece_must_be_own_rook(self) -> None:
        pos = _place({**_CASTLE, "h1": "N"})
        dests = MoveGenerator(pos).legal_destinations(E1)
        assert G1 not in dests
        assert C1 in dests

    def test_attacked_transit_square_allowed_by_default(self) -> None:
        pos = _place({**_CASTLE, "f8": "r"})
        dests = MoveGenerator(pos).legal_destinations(E1)
        assert F1 not in dests
        assert G1 in dests

    def test_attacked_transit_square_refused_under_standard_rules(self) -> None:
        pos = _place({**_CASTLE, "f8": "r"})
        dests = MoveGenerator(pos, RulesConfig.standard()).legal_destinations(E1)
        assert G1 not in dests
        assert C1 in dests

    def test_attack_only_mode_skips_castling(self) -> None:
        gen = MoveGenerator(_place(_CASTLE))
        assert G1 in gen.pseudo_legal_destinations(E1, GenerationMode.FULL)
        attack = gen.pseudo_legal_destinations(E1, GenerationMode.ATTACK_ONLY)
        assert G1 not in attack
        assert C1 not in attack

    def test_black_castling(self) -> None:
        pos = _place({"a8": "r", "e8": "k", "h8": "r", "e1": "K"}, Color.BLACK)
        dests = MoveGenerator(pos).legal_destinations(E8)
        assert parse_square("g8") in dests
        assert parse_square("c8") in dests


# ── Perft ────────────────────────────────────────────────────────────────────

KIWIPETE_ROWS = [
    "r...k..r",
    "p.ppqpb.",
    "bn..pnp.",
    "...PN...",
    ".p..P...",
    "..N..Q.p",
    "PPPBBPPP",
    "R...K..R",
]


class TestPerft:
    def test_start_depth_1(self) -> None:
        assert perft(Position(), 1) == 20

    def test_start_depth_2(self) -> None:
        assert perft(Position(), 2) == 400

    @pytest.mark.slow
    def test_start_depth_3(self) -> None:
        assert perft(Position(), 3) == 8_902

    def test_kiwipete_depth_1(self) -> None:
        pos = _position(KIWIPETE_ROWS)
        assert perft(pos, 1, RulesConfig.standard()) == 48

    @pytest.mark.slow
    def test_kiwipete_depth_2(self) -> None:
        pos = _position(KIWIPETE_ROWS)
        assert perft(pos, 2, RulesConfig.standard()) == 2_039
