"""Turn counter and wall-clock timer for the simulation."""

from __future__ import annotations

import time
from typing import Callable


class Clock:
    """Counts turns and measures elapsed real time in milliseconds."""

    def __init__(self, timer: Callable[[], float] | None = None) -> None:
        self._timer = timer or time.monotonic
        self.turn = 0
        self._started_at = self._timer()

    def start(self) -> None:
        """Reset the turn counter to zero."""
        self.turn = 0

    def new_turn(self) -> int:
        """Advance to the next turn and return its number."""
        self.turn += 1
        return self.turn

    def start_timing(self) -> None:
        """Begin measuring real time from now."""
        self._started_at = self._timer()

    def elapsed_ms(self) -> int:
        """Milliseconds elapsed since start_timing."""
        return int((self._timer() - self._started_at) * 1000)