"""GameController - the central orchestrator of a Fort Chess session.

Coordinates: Players, Game, MoveGenerator, the die.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from fortchess.core.board import in_board_bounds, screen_to_board
from fortchess.core.catalog import MAX_PLAYERS
from fortchess.core.dice import DiceRoll, is_win_roll, wall_clock_roll
from fortchess.core.enums import Quadrant, Team
from fortchess.core.errors import TooManyPlayersError
from fortchess.core.move_generator import Cell, MoveGenerator
from fortchess.game.interfaces import ClickResult, GamePhase
from fortchess.game.player import Player
from fortchess.game.state import Game, GameOutcome, exit_game

_LOGGER = logging.getLogger(__name__)

MIN_PLAYERS = 2

# ── Event definitions ────────────────────────────────────────────────────────

PlayerCallback = Callable[[Player], None]
GameOverCallback = Callable[[GameOutcome], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_turn_changed: list[PlayerCallback] = field(default_factory=list)
    on_player_eliminated: list[PlayerCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


def build_players(names: Sequence[str], defender_index: int) -> list[Player]:
    """Create the roster; attackers take Q1, Q2 and Q3 in order."""
    count = len(names)
    if count > MAX_PLAYERS:
        raise TooManyPlayersError(count, MAX_PLAYERS)
    if count < MIN_PLAYERS:
        raise ValueError(f"A game needs at least {MIN_PLAYERS} players, got {count}")

    quadrants = iter((Quadrant.Q1, Quadrant.Q2, Quadrant.Q3))
    players: list[Player] = []
    for index, name in enumerate(names):
        is_defender = index == defender_index
        players.append(
            Player(
                name,
                Team.from_index(index),
                is_defender,
                count,
                Quadrant.NO_QUAD if is_defender else next(quadrants),
            )
        )
    return players


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Owns one game from build to result and turns clicks into moves.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).

    Args:
        roll: Die used to pick the defender and for the win roll.
        require_win_roll: When ``False`` a piece reaching the opposite side
            wins at once. When ``True`` it only unlocks :meth:`roll_win_die`,
            and the player wins on a six.
    """

    __slots__ = (
        "_game",
        "_phase",
        "_roll",
        "_require_win_roll",
        "_paths",
        "_outcome",
        "events",
    )

    def __init__(
        self,
        roll: DiceRoll = wall_clock_roll,
        require_win_roll: bool = False,
    ) -> None:
        self._game: Game | None = None
        self._phase = GamePhase.START_SCREEN
        self._roll = roll
        self._require_win_roll = require_win_roll
        self._paths: frozenset[Cell] = frozenset()
        self._outcome: GameOutcome | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def game(self) -> Game | None:
        return self._game

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def outcome(self) -> GameOutcome | None:
        return self._outcome

    @property
    def current_player(self) -> Player | None:
        if self._game is None or not self._game.players:
            return None
        return self._game.current_player

    @property
    def legal_destinations(self) -> frozenset[Cell]:
        """Destinations of the selected piece, for highlighting."""
        return self._paths

    @property
    def can_roll_win_die(self) -> bool:
        game = self._game
        return (
            game is not None
            and self._phase == GamePhase.BOARD_SCREEN
            and game.picked
            and game.current_player.in_opposite_side()
        )

    # ── Session lifecycle ────────────────────────────────────────────────

    def new_game(self, names: Sequence[str]) -> Game:
        """Build a game for *names* (2 to 4 players) and show the board."""
        self._outcome = None
        self._emit_phase(GamePhase.GAME_BUILD)

        defender_index = (self._roll() % 3) % len(names) if names else 0
        try:
            players = build_players(names, defender_index)
        except ValueError:
            self._emit_phase(GamePhase.START_SCREEN)
            raise
        self._game = Game(players)
        self._paths = frozenset()
        _LOGGER.info(
            "New game with %d players, defender: %s",
            len(names),
            names[defender_index],
        )

        self._emit_phase(GamePhase.BOARD_SCREEN)
        self._emit_turn_changed()
        return self._game

    def finish(self) -> GameOutcome:
        """Consume the game and move to the result screen.

        Raises :class:`MoreThanOneWinnerError` when the win flags are
        inconsistent; the game is consumed either way.
        """
        if self._game is None:
            raise RuntimeError("No game in progress")
        game, self._game = self._game, None
        self._paths = frozenset()

        outcome = exit_game(game)
        self._outcome = outcome
        self._emit_phase(GamePhase.RESULT_SCREEN)
        for cb in self.events.on_game_over:
            cb(outcome)
        return outcome

    def return_to_start(self) -> None:
        if self._game is not None:
            raise RuntimeError("Finish the current game first")
        self._outcome = None
        self._emit_phase(GamePhase.START_SCREEN)

    # ── Input ────────────────────────────────────────────────────────────

    def click_screen(
        self,
        cursor_x: float,
        cursor_y: float,
        viewport_height: float,
        viewport_width: float,
    ) -> ClickResult:
        x, y = screen_to_board(cursor_x, cursor_y, viewport_height, viewport_width)
        return self.click(x, y)

    def click(self, x: int, y: int) -> ClickResult:
        """Select a piece, or move the selected piece to ``(x, y)``."""
        game = self._game
        if game is None or self._phase != GamePhase.BOARD_SCREEN:
            return ClickResult.IGNORED
        if not in_board_bounds(x, y):
            return ClickResult.IGNORED

        if game.picked:
            is_move = (x, y) in self._paths
            if is_move:
                captured = game.remove_piece_at(x, y)
                if captured is not None:
                    _LOGGER.debug("%s captured %r", game.current_player.name, captured)
                game.update_position(x, y)
                self._check_opposite_side()
            self._clear_selection()
            if is_move:
                self._end_turn()
                return ClickResult.MOVED
            return ClickResult.DESELECTED

        player = game.current_player
        index = player.piece_index_at(x, y)
        if index is None:
            return ClickResult.IGNORED
        player.set_chosen_piece(index)
        game.set_picked_true()
        self._paths = frozenset(MoveGenerator(game).legal_destinations_for_chosen())
        game.set_update_true()
        _LOGGER.debug(
            "%s picked %r with %d destinations",
            player.name,
            player.chosen_piece,
            len(self._paths),
        )
        return ClickResult.SELECTED

    def skip_turn(self) -> None:
        if self._game is None or self._phase != GamePhase.BOARD_SCREEN:
            return
        self._clear_selection()
        self._end_turn()

    def roll_win_die(self) -> bool:
        """Roll for the win with a piece on the opposite side.

        Returns ``True`` when the roll is a six. Rolling ends the turn. When
        no eligible piece is selected nothing happens and ``False`` is
        returned.
        """
        if not self.can_roll_win_die:
            return False
        assert self._game is not None
        player = self._game.current_player
        won = is_win_roll(self._roll())
        if won:
            player.set_winner()
            _LOGGER.info("%s rolled a six and wins", player.name)
        self._clear_selection()
        self._end_turn()
        return won

    # ── Internal helpers ─────────────────────────────────────────────────

    def _check_opposite_side(self) -> None:
        assert self._game is not None
        player = self._game.current_player
        if self._require_win_roll or not player.in_opposite_side():
            return
        player.set_winner()
        _LOGGER.info("%s reached the opposite side and wins", player.name)

    def _clear_selection(self) -> None:
        assert self._game is not None
        self._game.set_picked_false()
        self._game.set_update_true()
        self._paths = frozenset()

    def _end_turn(self) -> None:
        game = self._game
        assert game is not None

        for player in game.hunt():
            for cb in self.events.on_player_eliminated:
                cb(player)

        if len(game.players) == 1 and not game.winners:
            survivor = game.players[0]
            survivor.set_winner()
            _LOGGER.info("%s is the last player standing", survivor.name)

        if game.is_decided:
            self.finish()
            return

        game.next_player()
        game.set_update_true()
        self._emit_turn_changed()

    def _emit_turn_changed(self) -> None:
        player = self.current_player
        if player is None:
            return
        for cb in self.events.on_turn_changed:
            cb(player)

    def _emit_phase(self, phase: GamePhase) -> None:
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)
