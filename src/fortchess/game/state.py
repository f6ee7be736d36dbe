"""Game state machine - roster, turn cursor, eliminations and the final result."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from fortchess.core.errors import MoreThanOneWinnerError
from fortchess.core.piece import check_position
from fortchess.game.interfaces import IGameAction

if TYPE_CHECKING:
    from fortchess.core.piece import Piece
    from fortchess.game.player import Player

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GameOutcome:
    """Result of a finished game. ``winner`` is ``None`` for a draw."""

    winner: Player | None

    @property
    def is_draw(self) -> bool:
        return self.winner is None


class Game(IGameAction):
    """Owns the player roster and the turn cursor.

    Turn order is roster order. ``turn`` always indexes the current roster;
    it is re-derived whenever players are removed.

    This is a pure data/logic class - no threading, no UI. ``update`` is the
    render-dirty latch the presentation layer clears after drawing.
    """

    __slots__ = ("players", "turn", "update", "picked", "play")

    def __init__(self, players: list[Player]) -> None:
        self.players = players
        self.turn = 0
        self.update = True
        self.picked = False
        self.play = True

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def current_player(self) -> Player:
        return self.players[self.turn]

    @property
    def winners(self) -> list[Player]:
        return [player for player in self.players if player.is_winner]

    @property
    def is_decided(self) -> bool:
        """Someone has won, or too few players are left to continue."""
        return bool(self.winners) or len(self.players) <= 1

    # ── IGameAction impl ─────────────────────────────────────────────────

    def hunt(self) -> list[Player]:
        """Hunt for losers and remove them.

        A player is out when they have no pieces left and have not won, or
        when they stopped playing. Must run after every completed turn and
        before :meth:`next_player`, so a player who lost their last piece does
        not move again.
        """
        survivors: list[Player] = []
        dead: list[Player] = []
        survivors_before_turn = 0
        current_survives = False
        for index, player in enumerate(self.players):
            if (not player.pieces and not player.is_winner) or not player.is_playing:
                dead.append(player)
                continue
            survivors.append(player)
            if index < self.turn:
                survivors_before_turn += 1
            elif index == self.turn:
                current_survives = True

        if not dead:
            return dead

        for player in dead:
            _LOGGER.info("Player %s (%s) eliminated", player.name, player.team)

        self.players = survivors
        if not survivors:
            self.turn = 0
            self.play = False
        elif current_survives:
            self.turn = survivors_before_turn
        else:
            # Rest on the preceding survivor so next_player() reaches the
            # player who would have followed the removed one.
            self.turn = (survivors_before_turn - 1) % len(survivors)
        self.update = True
        return dead

    def next_player(self) -> None:
        if self.turn < len(self.players) - 1:
            self.turn += 1
        else:
            self.turn = 0

    def update_position(self, x: int, y: int) -> bool:
        """Move the current player's chosen piece and mark the board dirty."""
        moved = self.current_player.move_chosen_piece(x, y)
        self.update = True
        return moved

    def piece_at(self, x: int, y: int) -> bool:
        return any(player.has_piece_at(x, y) for player in self.players)

    def remove_piece_at(self, x: int, y: int) -> Piece | None:
        """Capture the first piece found on ``(x, y)`` in turn order."""
        check_position(x, y)
        for player in self.players:
            index = player.piece_index_at(x, y)
            if index is not None:
                return player.capture_piece(index)
        return None

    # ── Latches ──────────────────────────────────────────────────────────

    def set_update_true(self) -> None:
        self.update = True

    def set_update_false(self) -> None:
        self.update = False

    def set_picked_true(self) -> None:
        self.picked = True

    def set_picked_false(self) -> None:
        self.picked = False

    def __repr__(self) -> str:
        return f"Game(turn={self.turn}, players={self.players!r})"


def exit_game(game: Game) -> GameOutcome:
    """Consume *game* and return its outcome.

    Zero winners is a draw, one winner wins. Several winners means win flags
    were assigned wrongly; that raises :class:`MoreThanOneWinnerError`.
    """
    winners = game.winners
    game.players = []
    game.turn = 0
    game.play = False

    if len(winners) > 1:
        _LOGGER.error("Game ended with %d winners: %r", len(winners), winners)
        raise MoreThanOneWinnerError(len(winners))
    outcome = GameOutcome(winners[0] if winners else None)
    if outcome.is_draw:
        _LOGGER.info("Game ended in a draw")
    else:
        _LOGGER.info("Game won by %s", outcome.winner.name)
    return outcome
