"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import itertools
import os
import sys
from collections.abc import Callable, Iterable, Iterator

import pytest

from fortchess.core.enums import PieceType, Quadrant, Team
from fortchess.core.piece import Piece
from fortchess.game.player import Player

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton Qt application for signal tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


Placement = tuple[int, int, PieceType]
PlayerFactory = Callable[..., Player]


def place(player: Player, pieces: Iterable[Placement]) -> Player:
    """Replace *player*'s starting pieces with hand-placed ones."""
    player._pieces = sorted(Piece.at(x, y, piece_type) for x, y, piece_type in pieces)
    player.chosen_piece_index = 0
    return player


@pytest.fixture
def make_player() -> PlayerFactory:
    """Build a player and optionally swap in a custom piece set."""

    def _make(
        name: str = "Alice",
        *,
        team: Team = Team.RED,
        is_defender: bool = False,
        quadrant: Quadrant = Quadrant.Q1,
        pieces: Iterable[Placement] | None = None,
    ) -> Player:
        player = Player(
            name,
            team,
            is_defender,
            4,
            Quadrant.NO_QUAD if is_defender else quadrant,
        )
        if pieces is not None:
            place(player, pieces)
        return player

    return _make


@pytest.fixture
def fixed_roll() -> Callable[..., Callable[[], int]]:
    """Deterministic die cycling through the given faces."""

    def _make(*faces: int) -> Callable[[], int]:
        source = itertools.cycle(faces)
        return lambda: next(source)

    return _make
