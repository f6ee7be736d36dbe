"""Game management layer - players, turn state machine, controller.

Quick start::

    from fortchess.game import GameController

    ctrl = GameController()
    ctrl.new_game(["Alice", "Bob", "Carol"])
    ctrl.click(-7, 0)      # select a piece
    ctrl.click(-6, 0)      # move it
"""

from fortchess.game.controller import GameController, GameEvents
from fortchess.game.interfaces import ClickResult, GamePhase, IGameAction
from fortchess.game.player import Player
from fortchess.game.state import Game, GameOutcome, exit_game

__all__ = [
    # Interfaces
    "ClickResult",
    "GamePhase",
    "IGameAction",
    # Concrete
    "Game",
    "GameController",
    "GameEvents",
    "GameOutcome",
    "Player",
    "exit_game",
]
