"""Core enumerations for the Fort Chess domain."""

from __future__ import annotations

from enum import IntEnum

from fortchess.core.errors import (
    InvalidPieceTypeIndexError,
    InvalidQuadrantIndexError,
    InvalidTeamIndexError,
)


class PieceType(IntEnum):
    """Piece types used in Fort Chess. There is no king in this variant."""

    ROOK = 0
    MINISTER = 1
    QUEEN = 2
    PAWN = 3
    KNIGHT = 4

    @classmethod
    def from_index(cls, index: int) -> PieceType:
        try:
            return cls(index)
        except ValueError:
            raise InvalidPieceTypeIndexError(index) from None

    def __str__(self) -> str:
        return self.name.capitalize()


class Quadrant(IntEnum):
    """Playable arms of the board.

    ``NO_QUAD`` is only a placement marker for the defender, whose pieces are
    spread over several blocks; it never classifies a board cell.
    """

    Q1 = 0  # left
    Q2 = 1  # top
    Q3 = 2  # right
    NO_QUAD = 3

    @classmethod
    def from_index(cls, index: int) -> Quadrant:
        """Map 0, 1, 2 to Q1, Q2, Q3."""
        if index in (0, 1, 2):
            return cls(index)
        raise InvalidQuadrantIndexError(index)


class Team(IntEnum):
    """Player colour. Unique per player, carries no rule weight."""

    RED = 0
    BLUE = 1
    GREEN = 2
    YELLOW = 3

    @classmethod
    def from_index(cls, index: int) -> Team:
        try:
            return cls(index)
        except ValueError:
            raise InvalidTeamIndexError(index) from None

    def __str__(self) -> str:
        return self.name.capitalize()
