"""Qt bridge re-emitting controller callbacks as signals."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal

from fortchess.game.controller import GameController
from fortchess.game.interfaces import GamePhase
from fortchess.game.player import Player
from fortchess.game.state import GameOutcome


class GameSignals(QObject):
    """Signals a PyQt6 board view connects to.

    ``turn_changed`` carries the roster index and name of the player to move,
    ``game_over`` carries the :class:`GameOutcome`.
    """

    turn_changed = pyqtSignal(int, str)
    player_eliminated = pyqtSignal(str)
    game_over = pyqtSignal(object)
    phase_changed = pyqtSignal(int)

    __slots__ = ("_controller",)

    def __init__(self, controller: GameController) -> None:
        super().__init__()
        self._controller = controller
        events = controller.events
        events.on_turn_changed.append(self._on_turn_changed)
        events.on_player_eliminated.append(self._on_player_eliminated)
        events.on_game_over.append(self._on_game_over)
        events.on_phase_changed.append(self._on_phase_changed)

    def _on_turn_changed(self, player: Player) -> None:
        game = self._controller.game
        index = game.turn if game is not None else 0
        self.turn_changed.emit(index, player.name)

    def _on_player_eliminated(self, player: Player) -> None:
        self.player_eliminated.emit(player.name)

    def _on_game_over(self, outcome: GameOutcome) -> None:
        self.game_over.emit(outcome)

    def _on_phase_changed(self, phase: GamePhase) -> None:
        self.phase_changed.emit(int(phase))
