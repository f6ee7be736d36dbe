"""Starting layouts for attackers and the defender.

Layouts are tables rather than generated shapes: each arm is hand tuned,
which keeps setup concerns out of the geometry and move-generation modules.
"""

from __future__ import annotations

from fortchess.core.enums import PieceType, Quadrant
from fortchess.core.errors import InvalidQuadrantIndexError, TooManyPlayersError
from fortchess.core.piece import Piece

#: Most pieces a defender can hold (three blocks of eight).
DEFENDER_PIECE_CAP = 24
#: Most pieces an attacker can hold.
ATTACKER_PIECE_CAP = 8
MAX_PLAYERS = 4

_P = PieceType.PAWN
_N = PieceType.KNIGHT

# ── Attackers ───────────────────────────────────────────────────────────────

_ATTACKER_CELLS: dict[Quadrant, tuple[tuple[int, int], ...]] = {
    Quadrant.Q1: (
        (-7, -2), (-7, -1), (-7, 0), (-7, 1),
        (-8, -2), (-8, -1), (-8, 0), (-8, 1),
    ),
    Quadrant.Q2: (
        (-2, 6), (-1, 6), (0, 6), (1, 6),
        (-2, 7), (-1, 7), (0, 7), (1, 7),
    ),
    Quadrant.Q3: (
        (6, 1), (6, 0), (6, -1), (6, -2),
        (7, 1), (7, 0), (7, -1), (7, -2),
    ),
}

_ATTACKER_TYPES: tuple[PieceType, ...] = (_P, _P, _P, _P, _N, _P, _P, _N)

# ── Defender ────────────────────────────────────────────────────────────────

# Block i faces the attacker of quadrant i - 1.
_DEFENDER_BLOCKS: dict[int, tuple[tuple[int, int], ...]] = {
    1: (
        (-3, -2), (-3, -1), (-3, 0), (-3, 1),
        (-4, -2), (-4, -1), (-4, 0), (-4, 1),
    ),
    2: (
        (-2, 2), (-1, 2), (0, 2), (1, 2),
        (-2, 3), (-1, 3), (0, 3), (1, 3),
    ),
    3: (
        (2, 1), (2, 0), (2, -1), (2, -2),
        (3, 1), (3, 0), (3, -1), (3, -2),
    ),
}

_DEFENDER_TYPES: tuple[PieceType, ...] = (
    PieceType.KNIGHT,
    PieceType.MINISTER,
    PieceType.QUEEN,
    PieceType.ROOK,
    _P,
    _P,
    _P,
    _P,
)


def attacker_layout(quadrant: Quadrant) -> list[tuple[tuple[int, int], PieceType]]:
    """``(cell, type)`` pairs of an attacker starting in *quadrant*."""
    try:
        cells = _ATTACKER_CELLS[quadrant]
    except KeyError:
        raise InvalidQuadrantIndexError(int(quadrant)) from None
    return list(zip(cells, _ATTACKER_TYPES))


def defender_layout(active_player_count: int) -> list[tuple[tuple[int, int], PieceType]]:
    """``(cell, type)`` pairs of the defender: one block per opposing player."""
    if active_player_count > MAX_PLAYERS:
        raise TooManyPlayersError(active_player_count, MAX_PLAYERS)
    layout: list[tuple[tuple[int, int], PieceType]] = []
    for block in range(1, active_player_count):
        layout.extend(zip(_DEFENDER_BLOCKS[block], _DEFENDER_TYPES))
    return layout


def initial_pieces(
    is_defender: bool,
    quadrant: Quadrant,
    active_player_count: int,
) -> list[Piece]:
    """Starting pieces, sorted by position.

    Attackers get the eight-cell layout of *quadrant*; the defender (placed
    with :attr:`Quadrant.NO_QUAD`) gets 8, 16 or 24 pieces depending on how
    many opponents are playing.
    """
    if active_player_count > MAX_PLAYERS:
        raise TooManyPlayersError(active_player_count, MAX_PLAYERS)
    if is_defender:
        layout = defender_layout(active_player_count)
    else:
        layout = attacker_layout(quadrant)
    return sorted(Piece.at(x, y, piece_type) for (x, y), piece_type in layout)


def piece_capacity(is_defender: bool) -> int:
    return DEFENDER_PIECE_CAP if is_defender else ATTACKER_PIECE_CAP
