"""Move-generator tests on hand-placed positions.

The current player is always the first player of the roster.
"""

import pytest

from fortchess.core.board import quadrant_of
from fortchess.core.enums import PieceType, Quadrant, Team
from fortchess.core.errors import PositionNotInQuadrantError
from fortchess.core.move_generator import (
    KNIGHT_OFFSETS,
    MINISTER_MAX_STEPS,
    MoveGenerator,
    legal_destinations,
)
from fortchess.game.state import Game

R = PieceType.ROOK
M = PieceType.MINISTER
Q = PieceType.QUEEN
P = PieceType.PAWN
N = PieceType.KNIGHT


@pytest.fixture
def position(make_player):
    """Build a two-player game from ``(x, y, type)`` placements."""

    def _build(own, others=(), *, is_defender=False, quadrant=Quadrant.Q1) -> Game:
        mover = make_player("Mover", is_defender=is_defender, quadrant=quadrant, pieces=own)
        rival = make_player(
            "Rival",
            team=Team.BLUE,
            is_defender=not is_defender,
            quadrant=Quadrant.Q2,
            pieces=others,
        )
        return Game([mover, rival])

    return _build


# ── Rook ─────────────────────────────────────────────────────────────────────


class TestRookPaths:
    def test_open_arm_left(self, position) -> None:
        game = position([(-5, 0, R)])
        assert legal_destinations(-5, 0, R, game) == {
            (-4, 0), (-3, 0),
            (-6, 0), (-7, 0), (-8, 0),
            (-5, 1),
            (-5, -1), (-5, -2),
        }

    def test_open_arm_top(self, position) -> None:
        game = position([(-1, 4, R)], quadrant=Quadrant.Q2)
        assert legal_destinations(-1, 4, R, game) == {
            (0, 4), (1, 4),
            (-2, 4),
            (-1, 5), (-1, 6), (-1, 7),
            (-1, 3), (-1, 2),
        }

    def test_own_piece_truncates_ray(self, position) -> None:
        game = position([(-1, 2, R), (-1, 5, P)], quadrant=Quadrant.Q2)
        up = {cell for cell in legal_destinations(-1, 2, R, game) if cell[0] == -1}
        assert up == {(-1, 3), (-1, 4)}

    def test_enemy_piece_is_captured_and_stops_ray(self, position) -> None:
        game = position([(-1, 2, R)], [(-1, 5, P)], quadrant=Quadrant.Q2)
        up = {cell for cell in legal_destinations(-1, 2, R, game) if cell[0] == -1}
        assert up == {(-1, 3), (-1, 4), (-1, 5)}

    def test_never_enters_fort(self, position) -> None:
        game = position([(-3, 0, R)])
        paths = legal_destinations(-3, 0, R, game)
        assert (-2, 0) not in paths
        assert all(x <= -3 for x, _ in paths)


# ── Minister ─────────────────────────────────────────────────────────────────


class TestMinisterPaths:
    def test_diagonals_in_arm(self, position) -> None:
        game = position([(-5, -1, M)])
        assert legal_destinations(-5, -1, M, game) == {
            (-4, 0), (-3, 1),
            (-4, -2),
            (-6, 0), (-7, 1),
            (-6, -2),
        }

    def test_diagonal_into_other_arm_filtered(self, position) -> None:
        game = position([(-3, 1, M)])
        assert (-2, 2) not in legal_destinations(-3, 1, M, game)

    def test_blocked_by_own_piece(self, position) -> None:
        game = position([(-5, -1, M), (-4, 0, P)])
        paths = legal_destinations(-5, -1, M, game)
        assert (-4, 0) not in paths
        assert (-3, 1) not in paths

    def test_step_cap(self) -> None:
        assert MINISTER_MAX_STEPS == 3

    def test_longest_diagonal_in_top_arm(self, position) -> None:
        game = position([(-2, 2, M)], quadrant=Quadrant.Q2)
        assert legal_destinations(-2, 2, M, game) == {(-1, 3), (0, 4), (1, 5)}


# ── Queen ────────────────────────────────────────────────────────────────────


class TestQueenPaths:
    def test_union_of_rook_and_minister(self, position) -> None:
        game = position([(-5, 0, Q)])
        queen = legal_destinations(-5, 0, Q, game)
        rook = legal_destinations(-5, 0, R, game)
        minister = legal_destinations(-5, 0, M, game)
        assert queen == rook | minister
        assert len(queen) == 14


# ── Knight ───────────────────────────────────────────────────────────────────


class TestKnightPaths:
    def test_offsets_are_knight_jumps(self) -> None:
        assert len(KNIGHT_OFFSETS) == 8
        assert set(KNIGHT_OFFSETS) == {
            (1, 2), (2, 1), (2, -1), (1, -2),
            (-1, -2), (-2, -1), (-2, 1), (-1, 2),
        }

    def test_jumps_inside_arm(self, position) -> None:
        game = position([(-5, 0, N)])
        assert legal_destinations(-5, 0, N, game) == {
            (-3, 1), (-3, -1), (-4, -2),
            (-6, -2), (-7, -1), (-7, 1),
        }

    def test_own_piece_excluded(self, position) -> None:
        game = position([(-5, 0, N), (-3, 1, P)])
        assert (-3, 1) not in legal_destinations(-5, 0, N, game)

    def test_jumps_over_and_captures(self, position) -> None:
        game = position([(-5, 0, N), (-4, 0, P)], [(-3, 1, P)])
        assert (-3, 1) in legal_destinations(-5, 0, N, game)


# ── Pawn ─────────────────────────────────────────────────────────────────────


class TestPawnPaths:
    @pytest.mark.parametrize(
        ("is_defender", "quadrant", "origin", "forward"),
        [
            (False, Quadrant.Q1, (-7, 0), (-6, 0)),
            (False, Quadrant.Q2, (0, 6), (0, 5)),
            (False, Quadrant.Q3, (6, 0), (5, 0)),
            (True, Quadrant.Q1, (-4, 0), (-5, 0)),
            (True, Quadrant.Q2, (0, 3), (0, 4)),
            (True, Quadrant.Q3, (3, 0), (4, 0)),
        ],
    )
    def test_forward_step(self, position, is_defender, quadrant, origin, forward) -> None:
        game = position([(*origin, P)], is_defender=is_defender, quadrant=quadrant)
        assert legal_destinations(*origin, P, game) == {forward}

    def test_blocked_forward(self, position) -> None:
        game = position([(-7, 0, P)], [(-6, 0, P)])
        assert legal_destinations(-7, 0, P, game) == set()

    def test_blocked_forward_by_own_piece(self, position) -> None:
        game = position([(-7, 0, P), (-6, 0, N)])
        assert legal_destinations(-7, 0, P, game) == set()

    def test_diagonal_capture(self, position) -> None:
        game = position([(-7, 0, P)], [(-6, 1, P)])
        assert legal_destinations(-7, 0, P, game) == {(-6, 0), (-6, 1)}

    def test_no_diagonal_onto_own_piece(self, position) -> None:
        game = position([(-7, 0, P), (-6, -1, P)])
        assert legal_destinations(-7, 0, P, game) == {(-6, 0)}

    def test_defender_capture(self, position) -> None:
        game = position([(-4, 0, P)], [(-5, 1, N)], is_defender=True)
        assert (-5, 1) in legal_destinations(-4, 0, P, game)

    def test_defender_empty_diagonal_not_a_move(self, position) -> None:
        game = position([(-4, 0, P)], is_defender=True)
        assert (-5, 1) not in legal_destinations(-4, 0, P, game)

    def test_top_arm_captures_sideways_in_x(self, position) -> None:
        game = position([(0, 3, P)], [(1, 4, P), (-1, 4, P)], is_defender=True)
        assert legal_destinations(0, 3, P, game) == {(0, 4), (1, 4), (-1, 4)}

    def test_cannot_step_into_fort(self, position) -> None:
        game = position([(-3, 0, P)])
        assert legal_destinations(-3, 0, P, game) == set()


# ── General ──────────────────────────────────────────────────────────────────


class TestGeneral:
    @pytest.mark.parametrize("piece_type", list(PieceType))
    def test_origin_outside_quadrants(self, position, piece_type: PieceType) -> None:
        game = position([(-5, 0, R)])
        with pytest.raises(PositionNotInQuadrantError):
            legal_destinations(0, 0, piece_type, game)

    @pytest.mark.parametrize("piece_type", list(PieceType))
    def test_results_stay_in_origin_arm(self, make_player, piece_type: PieceType) -> None:
        defender = make_player("Fort", is_defender=True)
        game = Game([defender, make_player("Left", team=Team.BLUE)])
        gen = MoveGenerator(game)
        for piece in defender.pieces:
            home = quadrant_of(piece.x, piece.y)
            for x, y in gen.legal_destinations(piece.x, piece.y, piece_type):
                assert quadrant_of(x, y) == home
                assert not defender.has_piece_at(x, y)

    def test_does_not_mutate_game(self, position) -> None:
        game = position([(-5, 0, Q), (-7, 0, P)], [(-5, -2, P)])
        before = [[pc.position for pc in p.pieces] for p in game.players]
        MoveGenerator(game).legal_destinations(-5, 0, Q)
        assert [[pc.position for pc in p.pieces] for p in game.players] == before

    def test_chosen_piece(self, position) -> None:
        game = position([(-5, 0, R), (-7, 0, P)])
        mover = game.current_player
        mover.set_chosen_piece(mover.piece_index_at(-7, 0))
        assert MoveGenerator(game).legal_destinations_for_chosen() == {(-6, 0)}
