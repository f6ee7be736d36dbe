"""The die used for defender assignment and the win roll.

This is the only nondeterministic input of the rules engine. Everything that
rolls takes a :data:`DiceRoll` callable so tests can substitute a fixed one.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

_LOGGER = logging.getLogger(__name__)

DiceRoll = Callable[[], int]

#: Face value (0-based) that counts as rolling a six.
WIN_FACE = 5
FACES = 6


def wall_clock_roll(clock: Callable[[], float] = time.time) -> int:
    """Roll a value in ``0..5`` from the wall clock's whole seconds."""
    now = clock()
    if now < 0:
        _LOGGER.warning("System date set earlier than UNIX epoch: %s", now)
        return 1
    return int(now) % FACES


def is_win_roll(value: int) -> bool:
    return value == WIN_FACE
