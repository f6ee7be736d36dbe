"""Legal destination generation for every piece type."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from fortchess.core.board import BREADTH, in_board_bounds, in_quadrant_bounds, quadrant_of
from fortchess.core.enums import PieceType, Quadrant

if TYPE_CHECKING:
    from fortchess.game.state import Game


Cell = tuple[int, int]

ROOK_DIRS: tuple[Cell, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
MINISTER_DIRS: tuple[Cell, ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))

#: No diagonal run inside one arm is longer than this.
MINISTER_MAX_STEPS = 2 * BREADTH - 1

# Knight cells sit on a circle of radius 2 sampled every 30 degrees.
KNIGHT_RADIUS = 2.0
KNIGHT_ANGLE_STEP = 30

# (is_defender, quadrant) -> forward step.
PAWN_FORWARD: dict[tuple[bool, Quadrant], Cell] = {
    (True, Quadrant.Q1): (-1, 0),
    (True, Quadrant.Q2): (0, 1),
    (True, Quadrant.Q3): (1, 0),
    (False, Quadrant.Q1): (1, 0),
    (False, Quadrant.Q2): (0, -1),
    (False, Quadrant.Q3): (-1, 0),
}


# -- Precomputed lookup tables ---------------------------------------------


def _build_circle_offsets(radius: float, angle_step: int) -> tuple[Cell, ...]:
    offsets: list[Cell] = []
    for theta in range(0, 360, angle_step):
        rad = math.radians(theta)
        offsets.append((round(math.sin(rad) * radius), round(math.cos(rad) * radius)))
    return tuple(offsets)


def _build_knight_offsets() -> tuple[Cell, ...]:
    # Points on either axis are rook-like steps, not knight jumps.
    return tuple(
        (dx, dy)
        for dx, dy in _build_circle_offsets(KNIGHT_RADIUS, KNIGHT_ANGLE_STEP)
        if dx != 0 and dy != 0
    )


KNIGHT_OFFSETS = _build_knight_offsets()


class MoveGenerator:
    """Generates legal destinations over a :class:`Game`.

    The generator never mutates the game. "Own" pieces are those of the
    game's current player; destinations holding any other piece are captures.
    """

    __slots__ = ("_game",)

    def __init__(self, game: Game) -> None:
        self._game = game

    # -- Public API ---------------------------------------------------------

    def legal_destinations(self, x: int, y: int, piece_type: PieceType) -> set[Cell]:
        """Every cell a *piece_type* standing on ``(x, y)`` may move to.

        Raises :class:`PositionNotInQuadrantError` when ``(x, y)`` is not in
        a quadrant.
        """
        quadrant = quadrant_of(x, y)

        if piece_type == PieceType.ROOK:
            candidates = self._gen_sliding(x, y, ROOK_DIRS)
        elif piece_type == PieceType.MINISTER:
            candidates = self._gen_sliding(x, y, MINISTER_DIRS, MINISTER_MAX_STEPS)
        elif piece_type == PieceType.QUEEN:
            candidates = self._gen_sliding(x, y, ROOK_DIRS)
            candidates |= self._gen_sliding(x, y, MINISTER_DIRS, MINISTER_MAX_STEPS)
        elif piece_type == PieceType.KNIGHT:
            candidates = self._gen_knight(x, y)
        else:
            candidates = self._gen_pawn(x, y, quadrant)

        # Pieces never leave their arm through the fort.
        return {cell for cell in candidates if in_quadrant_bounds(quadrant, *cell)}

    def legal_destinations_for_chosen(self) -> set[Cell]:
        """Destinations of the current player's chosen piece."""
        piece = self._game.current_player.chosen_piece
        return self.legal_destinations(piece.x, piece.y, piece.piece_type)

    # -- Piece-specific generators (private) -------------------------------

    def _is_own(self, x: int, y: int) -> bool:
        return self._game.current_player.has_piece_at(x, y)

    def _gen_sliding(
        self,
        x: int,
        y: int,
        directions: tuple[Cell, ...],
        max_steps: int | None = None,
    ) -> set[Cell]:
        paths: set[Cell] = set()
        for dx, dy in directions:
            self._trace_ray(x, y, dx, dy, max_steps, paths)
        return paths

    def _trace_ray(
        self,
        x: int,
        y: int,
        dx: int,
        dy: int,
        max_steps: int | None,
        paths: set[Cell],
    ) -> None:
        game = self._game
        steps = 0
        while max_steps is None or steps < max_steps:
            steps += 1
            x += dx
            y += dy
            if not in_board_bounds(x, y) or self._is_own(x, y):
                return
            paths.add((x, y))
            if game.piece_at(x, y):
                return

    def _gen_knight(self, x: int, y: int) -> set[Cell]:
        return {
            (x + dx, y + dy)
            for dx, dy in KNIGHT_OFFSETS
            if not self._is_own(x + dx, y + dy)
        }

    def _gen_pawn(self, x: int, y: int, quadrant: Quadrant) -> set[Cell]:
        game = self._game
        dx, dy = PAWN_FORWARD[(game.current_player.is_defender, quadrant)]
        fx, fy = x + dx, y + dy
        paths: set[Cell] = set()

        if quadrant == Quadrant.Q2:
            sides = ((fx + 1, fy), (fx - 1, fy))
        else:
            sides = ((fx, fy + 1), (fx, fy - 1))

        # Diagonal cells are captures only.
        for sx, sy in sides:
            if game.piece_at(sx, sy) and not self._is_own(sx, sy):
                paths.add((sx, sy))

        if not game.piece_at(fx, fy):
            paths.add((fx, fy))
        return paths


def legal_destinations(x: int, y: int, piece_type: PieceType, game: Game) -> set[Cell]:
    """Shortcut for ``MoveGenerator(game).legal_destinations(x, y, piece_type)``."""
    return MoveGenerator(game).legal_destinations(x, y, piece_type)
