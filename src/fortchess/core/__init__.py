"""Core domain layer - pure Fort Chess rules with zero external dependencies.

Quick start::

    from fortchess.core import PieceType, quadrant_of, legal_destinations

    quadrant_of(-5, 0)          # Quadrant.Q1
    legal_destinations(-5, 0, PieceType.ROOK, game)
"""

from fortchess.core.board import (
    BREADTH,
    DEFAULT_LAYOUT,
    BoardLayout,
    board_to_screen,
    in_board_bounds,
    in_opposite_side,
    in_quadrant_bounds,
    quadrant_of,
    quadrant_or_none,
    screen_to_board,
)
from fortchess.core.catalog import initial_pieces
from fortchess.core.dice import DiceRoll, wall_clock_roll
from fortchess.core.enums import PieceType, Quadrant, Team
from fortchess.core.errors import (
    FortChessError,
    IllegalPieceIndexError,
    IllegalPositionError,
    InvalidNameLengthError,
    InvalidPieceTypeIndexError,
    InvalidQuadrantIndexError,
    InvalidTeamIndexError,
    MoreThanOneWinnerError,
    PieceIndexOutOfBoundsError,
    PositionNotInQuadrantError,
    TooManyPlayersError,
)
from fortchess.core.move_generator import MoveGenerator, legal_destinations
from fortchess.core.piece import Piece, Position

__all__ = [
    # Enums
    "PieceType",
    "Quadrant",
    "Team",
    # Geometry
    "BREADTH",
    "DEFAULT_LAYOUT",
    "BoardLayout",
    "board_to_screen",
    "in_board_bounds",
    "in_opposite_side",
    "in_quadrant_bounds",
    "quadrant_of",
    "quadrant_or_none",
    "screen_to_board",
    # Domain objects
    "MoveGenerator",
    "Piece",
    "Position",
    "initial_pieces",
    "legal_destinations",
    # Dice
    "DiceRoll",
    "wall_clock_roll",
    # Errors
    "FortChessError",
    "IllegalPieceIndexError",
    "IllegalPositionError",
    "InvalidNameLengthError",
    "InvalidPieceTypeIndexError",
    "InvalidQuadrantIndexError",
    "InvalidTeamIndexError",
    "MoreThanOneWinnerError",
    "PieceIndexOutOfBoundsError",
    "PositionNotInQuadrantError",
    "TooManyPlayersError",
]
