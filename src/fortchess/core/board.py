"""Board geometry - quadrant classification, view mapping and win thresholds.

The board is three rectangular arms around a forbidden central fort::

                 Q2 (top)
                 x -2..1, y 2..7
    Q1 (left)    [ fort ]     Q3 (right)
    x -8..-3     x -2..1      x 2..7
    y -2..1      y -2..1      y -2..1

Cells are integer ``(x, y)`` pairs in logical board space. Screen (cursor)
space is mapped onto a wider camera view before rounding to a cell.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from fortchess.core.enums import Quadrant
from fortchess.core.errors import InvalidQuadrantIndexError, PositionNotInQuadrantError

# -- Logical bounds ---------------------------------------------------------

X_MIN = -8
X_MAX = 8
Y_MIN = -2
Y_MAX = 8

#: Half width of the central fort.
BREADTH = 2
#: Width cut away from each side to form the cross shape.
EMPTY = 6

# -- Camera view (wider than the logical bounds) ----------------------------

VIEW_LEFT = -13
VIEW_RIGHT = 12
VIEW_BOTTOM = -4
VIEW_TOP = 10


@dataclass(frozen=True, slots=True)
class BoardLayout:
    """Immutable board dimensions from which the quadrant predicates derive."""

    x_min: int = X_MIN
    x_max: int = X_MAX
    y_min: int = Y_MIN
    y_max: int = Y_MAX
    empty: int = EMPTY
    breadth: int = BREADTH

    def __post_init__(self) -> None:
        # Q1 and Q3 share rows; they only stay apart while the cut is >= 2.
        if self.empty < 2:
            raise ValueError(f"Board cut-out must be at least 2, got {self.empty}")
        if self.x_min >= self.x_max or self.y_min >= self.y_max:
            raise ValueError("Board minimum bounds must be below maximum bounds")

    @property
    def _arm_edge(self) -> int:
        # First column of the top arm (and of the fort).
        return self.x_max - 2 * (self.empty - 1)

    def in_q1(self, x: float, y: float) -> bool:
        return (self.x_min <= x < self._arm_edge) and (
            self.y_min <= y <= (self.y_max - 1) - self.empty
        )

    def in_q2(self, x: float, y: float) -> bool:
        return (self._arm_edge <= x <= (self.x_max - 1) - self.empty) and (
            self.y_min + 2 * self.breadth <= y < self.y_max
        )

    def in_q3(self, x: float, y: float) -> bool:
        return (self.x_max - self.empty <= x < self.x_max) and (
            self.y_min <= y <= (self.y_max - 1) - self.empty
        )

    def quadrant_or_none(self, x: float, y: float) -> Quadrant | None:
        if self.in_q1(x, y):
            return Quadrant.Q1
        if self.in_q2(x, y):
            return Quadrant.Q2
        if self.in_q3(x, y):
            return Quadrant.Q3
        return None

    def in_board_bounds(self, x: float, y: float) -> bool:
        return self.in_q1(x, y) or self.in_q2(x, y) or self.in_q3(x, y)


DEFAULT_LAYOUT = BoardLayout()


# -- Quadrants ----------------------------------------------------------------


def position_in_q1_bounds(x: float, y: float) -> bool:
    return DEFAULT_LAYOUT.in_q1(x, y)


def position_in_q2_bounds(x: float, y: float) -> bool:
    return DEFAULT_LAYOUT.in_q2(x, y)


def position_in_q3_bounds(x: float, y: float) -> bool:
    return DEFAULT_LAYOUT.in_q3(x, y)


def in_board_bounds(x: float, y: float) -> bool:
    """Whether ``(x, y)`` lies in Q1, Q2 or Q3."""
    return DEFAULT_LAYOUT.in_board_bounds(x, y)


def quadrant_or_none(x: float, y: float) -> Quadrant | None:
    """Quadrant holding ``(x, y)``, or ``None`` for the fort and the border."""
    return DEFAULT_LAYOUT.quadrant_or_none(x, y)


def quadrant_of(x: float, y: float) -> Quadrant:
    """Quadrant holding ``(x, y)``.

    Raises :class:`PositionNotInQuadrantError` for cells outside the arms; hit
    testing treats that as an ordinary miss.
    """
    quadrant = DEFAULT_LAYOUT.quadrant_or_none(x, y)
    if quadrant is None:
        raise PositionNotInQuadrantError(x, y)
    return quadrant


def in_quadrant_bounds(quadrant: Quadrant, x: float, y: float) -> bool:
    """Bounds predicate of a single quadrant."""
    if quadrant == Quadrant.Q1:
        return DEFAULT_LAYOUT.in_q1(x, y)
    if quadrant == Quadrant.Q2:
        return DEFAULT_LAYOUT.in_q2(x, y)
    if quadrant == Quadrant.Q3:
        return DEFAULT_LAYOUT.in_q3(x, y)
    raise InvalidQuadrantIndexError(int(quadrant))


def in_logical_range(x: float, y: float) -> bool:
    """Strict range a piece may occupy (includes the fort and the border)."""
    return X_MIN <= x <= X_MAX and Y_MIN <= y <= Y_MAX


def label_anchor(quadrant: Quadrant) -> tuple[int, int]:
    """Cell next to which the owner's name is shown."""
    if quadrant == Quadrant.Q1:
        return (X_MIN - 4, 0)
    if quadrant == Quadrant.Q2:
        return (-1, Y_MAX + 1)
    if quadrant == Quadrant.Q3:
        return (X_MAX + 1, 0)
    return (-1, 0)


# -- Screen mapping ---------------------------------------------------------


def _full_width() -> int:
    return abs(VIEW_LEFT) + VIEW_RIGHT


def _full_height() -> int:
    return abs(VIEW_BOTTOM) + VIEW_TOP


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def screen_to_board(
    cursor_x: float,
    cursor_y: float,
    viewport_height: float,
    viewport_width: float,
) -> tuple[int, int]:
    """Map a cursor position in window pixels to the nearest board cell."""
    x = (cursor_x / viewport_width) * _full_width() + VIEW_LEFT
    y = (cursor_y / viewport_height) * _full_height() + VIEW_BOTTOM
    return _round_half_away(x), _round_half_away(y)


def board_to_screen(
    x: float,
    y: float,
    viewport_height: float,
    viewport_width: float,
) -> tuple[float, float]:
    """Inverse of :func:`screen_to_board` (cell centre, unrounded)."""
    return (
        (x - VIEW_LEFT) / _full_width() * viewport_width,
        (y - VIEW_BOTTOM) / _full_height() * viewport_height,
    )


# -- Opposite side ------------------------------------------------------------


def in_opposite_side_defender(x: int, y: int) -> bool:
    """Defender reached the outer edge of an arm."""
    return x <= X_MIN or x >= X_MAX - 1 or y >= Y_MAX - 1


def in_opposite_side_attacker(x: int, y: int) -> bool:
    """Attacker reached the ring around the fort."""
    return (-BREADTH - 1 <= x < BREADTH + 1) and abs(y) <= BREADTH


def in_opposite_side(x: int, y: int, is_defender: bool) -> bool:
    if is_defender:
        return in_opposite_side_defender(x, y)
    return in_opposite_side_attacker(x, y)
