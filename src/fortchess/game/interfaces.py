"""Abstract interfaces for the game layer.

The controller and presentation code depend on these, not on the concrete
:class:`~fortchess.game.state.Game`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fortchess.core.piece import Piece
    from fortchess.game.player import Player


# ── Screen FSM states ────────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states of an application session."""

    START_SCREEN = auto()
    GAME_BUILD = auto()
    BOARD_SCREEN = auto()
    RESULT_SCREEN = auto()


class ClickResult(IntEnum):
    """What a board click did."""

    IGNORED = auto()
    SELECTED = auto()
    MOVED = auto()
    DESELECTED = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameAction(ABC):
    """Turn and board operations over a running game."""

    @abstractmethod
    def hunt(self) -> list[Player]:
        """Remove and return players that are out of the game."""

    @abstractmethod
    def next_player(self) -> None:
        """Advance the turn, wrapping after the last player."""

    @abstractmethod
    def update_position(self, x: int, y: int) -> bool:
        """Move the current player's chosen piece to ``(x, y)``."""

    @abstractmethod
    def piece_at(self, x: int, y: int) -> bool:
        """Whether any player has a piece on ``(x, y)``."""

    @abstractmethod
    def remove_piece_at(self, x: int, y: int) -> Piece | None:
        """Capture whichever piece stands on ``(x, y)``."""
