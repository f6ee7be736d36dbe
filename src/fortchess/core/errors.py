"""
Exception hierarchy shared by the core and game layers.

Hierarchy:
- FortChessError (base for every rules-engine error)
  - IllegalPositionError, PositionNotInQuadrantError, ... (also ValueError)
  - PieceIndexOutOfBoundsError, IllegalPieceIndexError (also IndexError)
  - MoreThanOneWinnerError (also RuntimeError)

Each error mixes in the builtin it refines, so callers may catch either the
Fort Chess type or the plain builtin.
"""

from __future__ import annotations


class FortChessError(Exception):
    """Base exception for all rules-engine errors."""


# =========================
# Positions and quadrants
# =========================


class IllegalPositionError(FortChessError, ValueError):
    """A coordinate outside the logical board range was used for a piece."""

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        super().__init__(f"The position ({x}, {y}) is invalid")


class PositionNotInQuadrantError(FortChessError, ValueError):
    """A cell lies in the fort or outside the playable arms."""

    def __init__(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        super().__init__(
            f"The provided position ({x}, {y}) does not exist inside a quadrant"
        )


class InvalidQuadrantIndexError(FortChessError, ValueError):
    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(
            f"The provided index {index} does not have a quadrant corresponding to it"
        )


# =========================
# Pieces
# =========================


class InvalidPieceTypeIndexError(FortChessError, ValueError):
    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(
            f"The provided index {index} does not have a piece type corresponding to it"
        )


class PieceIndexOutOfBoundsError(FortChessError, IndexError):
    """Index is valid for the role but not for the live piece collection."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(
            f"The given index of the piece {index} does not exist in a collection "
            f"of length {length}"
        )


class IllegalPieceIndexError(FortChessError, IndexError):
    """Index exceeds what the player's role could ever hold."""

    def __init__(self, index: int, capacity: int) -> None:
        self.index = index
        self.capacity = capacity
        super().__init__(
            f"The given index {index} cannot exist, a piece collection holds at most "
            f"{capacity} pieces"
        )


# =========================
# Players and games
# =========================


class InvalidNameLengthError(FortChessError, ValueError):
    def __init__(self, length: int, minimum: int, maximum: int) -> None:
        self.length = length
        super().__init__(
            f"The name is either too long or too short. Ideal length is "
            f"({minimum} < name < {maximum}). Your name length: {length}"
        )


class InvalidTeamIndexError(FortChessError, ValueError):
    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(
            f"The provided index {index} does not have a team corresponding to it"
        )


class TooManyPlayersError(FortChessError, ValueError):
    def __init__(self, count: int, maximum: int) -> None:
        self.count = count
        super().__init__(
            f"There can't be more than {maximum} players, got {count}"
        )


class MoreThanOneWinnerError(FortChessError, RuntimeError):
    """Win flags were assigned to several players; this is a rules bug."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"There seems to be more than one winner ({count})")
