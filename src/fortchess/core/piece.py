"""Position and Piece value types."""

from __future__ import annotations

from dataclasses import dataclass

from fortchess.core.board import in_logical_range
from fortchess.core.enums import PieceType
from fortchess.core.errors import IllegalPositionError


def check_position(x: int, y: int) -> None:
    """Raise :class:`IllegalPositionError` unless ``(x, y)`` may hold a piece."""
    if not in_logical_range(x, y):
        raise IllegalPositionError(x, y)


@dataclass(frozen=True, order=True, slots=True)
class Position:
    """A board cell. Orders by ``x`` then ``y``."""

    x: int
    y: int

    @classmethod
    def at(cls, x: int, y: int) -> Position:
        check_position(x, y)
        return cls(x, y)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def __repr__(self) -> str:
        return f"({self.x:2}, {self.y:2})"


@dataclass(slots=True)
class Piece:
    """A typed piece standing on a cell.

    Pieces compare by position so a player's collection can be kept sorted
    and binary searched.
    """

    piece_type: PieceType
    position: Position

    @classmethod
    def at(cls, x: int, y: int, piece_type: PieceType) -> Piece:
        """Create a piece, rejecting cells outside the logical board range."""
        return cls(piece_type, Position.at(x, y))

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    def update_position(self, x: int, y: int) -> None:
        """Move the piece in place; the old position is kept on error."""
        self.position = Position.at(x, y)

    def __lt__(self, other: Piece) -> bool:
        return self.position < other.position

    def __repr__(self) -> str:
        return f"[{self.piece_type!s:<8} {self.position!r}]"
