"""Player - owns a piece collection, team, role and win flag."""

from __future__ import annotations

from bisect import bisect_left
from operator import attrgetter

from fortchess.core.board import in_opposite_side
from fortchess.core.catalog import initial_pieces, piece_capacity
from fortchess.core.enums import Quadrant, Team
from fortchess.core.errors import (
    IllegalPieceIndexError,
    InvalidNameLengthError,
    PieceIndexOutOfBoundsError,
)
from fortchess.core.piece import Piece, Position

#: Name length must be strictly between these two values.
NAME_LENGTH_MIN = 2
NAME_LENGTH_MAX = 15

_by_position = attrgetter("position")


def validate_name(name: str) -> str:
    if not NAME_LENGTH_MIN < len(name) < NAME_LENGTH_MAX:
        raise InvalidNameLengthError(len(name), NAME_LENGTH_MIN, NAME_LENGTH_MAX)
    return name


class Player:
    """A game participant.

    ``pieces`` is always sorted by position, which lets lookups binary search
    it. The collection changes every turn (moves) and on capture (removal);
    captured pieces are dropped, never handed to the capturer.

    Args:
        name: Display name, validated against the length bounds.
        team: Colour of the player.
        is_defender: Whether the player holds the fort.
        active_player_count: Number of players in the game, which sizes the
            defender's layout.
        quadrant: Starting arm; :attr:`Quadrant.NO_QUAD` for the defender.
    """

    __slots__ = (
        "_name",
        "_team",
        "_is_defender",
        "_quadrant",
        "_pieces",
        "is_winner",
        "is_playing",
        "chosen_piece_index",
    )

    def __init__(
        self,
        name: str,
        team: Team,
        is_defender: bool,
        active_player_count: int,
        quadrant: Quadrant,
    ) -> None:
        self._name = validate_name(name)
        self._team = team
        self._is_defender = is_defender
        self._quadrant = quadrant
        self._pieces: list[Piece] = initial_pieces(
            is_defender, quadrant, active_player_count
        )
        self.is_winner = False
        self.is_playing = True
        self.chosen_piece_index = 0

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def name(self) -> str:
        return self._name

    @property
    def team(self) -> Team:
        return self._team

    @property
    def is_defender(self) -> bool:
        return self._is_defender

    @property
    def quadrant(self) -> Quadrant:
        return self._quadrant

    @property
    def pieces(self) -> tuple[Piece, ...]:
        return tuple(self._pieces)

    @property
    def chosen_piece(self) -> Piece:
        return self._pieces[self.chosen_piece_index]

    # ── Lookup ───────────────────────────────────────────────────────────

    def piece_index_at(self, x: int, y: int) -> int | None:
        """Index of the piece standing on ``(x, y)``, ``None`` if empty."""
        target = Position(x, y)
        index = bisect_left(self._pieces, target, key=_by_position)
        if index < len(self._pieces) and self._pieces[index].position == target:
            return index
        return None

    def has_piece_at(self, x: int, y: int) -> bool:
        return self.piece_index_at(x, y) is not None

    # ── Mutation ─────────────────────────────────────────────────────────

    def _check_index(self, index: int) -> None:
        capacity = piece_capacity(self._is_defender)
        if not 0 <= index < capacity:
            raise IllegalPieceIndexError(index, capacity)
        if index >= len(self._pieces):
            raise PieceIndexOutOfBoundsError(index, len(self._pieces))

    def set_chosen_piece(self, index: int) -> None:
        self._check_index(index)
        self.chosen_piece_index = index

    def capture_piece(self, index: int) -> Piece:
        """Remove and return the piece at *index*."""
        self._check_index(index)
        piece = self._pieces.pop(index)
        if self.chosen_piece_index >= len(self._pieces):
            self.chosen_piece_index = 0
        return piece

    def move_chosen_piece(self, x: int, y: int) -> bool:
        """Move the chosen piece to ``(x, y)``.

        Returns ``False`` for a null move (destination is the current cell),
        ``True`` once the piece was moved. Raises
        :class:`IllegalPositionError` for cells outside the logical range.
        """
        self._check_index(self.chosen_piece_index)
        piece = self._pieces[self.chosen_piece_index]
        if piece.x == x and piece.y == y:
            return False
        piece.update_position(x, y)
        self._pieces.sort(key=_by_position)
        # Keep pointing at the same piece after re-sorting.
        self.chosen_piece_index = next(
            i for i, other in enumerate(self._pieces) if other is piece
        )
        return True

    def set_winner(self) -> None:
        self.is_winner = True

    def forfeit(self) -> None:
        """Leave the game; the next hunt removes the player."""
        self.is_playing = False
        self.is_winner = False

    # ── Rules ────────────────────────────────────────────────────────────

    def in_opposite_side(self) -> bool:
        """Whether the chosen piece passes this player's opposite-side test."""
        if not self._pieces:
            return False
        piece = self.chosen_piece
        return in_opposite_side(piece.x, piece.y, self._is_defender)

    def __repr__(self) -> str:
        role = "defender" if self._is_defender else "attacker"
        return (
            f"Player({self._name!r}, {self._team!s}, {role}, "
            f"pieces={len(self._pieces)}, winner={self.is_winner})"
        )
