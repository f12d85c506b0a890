"""Conditions that end a simulation and the choice of its winner."""

from __future__ import annotations

from collections.abc import Sequence

from .army import Army
from .board import Board
from .clock import Clock

DEFAULT_MAX_TURNS = 3000


class EndConditions:
    """Decides when a simulation is over and which army won it.

    A simulation ends either by military victory, when exactly one army
    still has soldiers, or when the turn limit is reached, in which case
    the army holding the most provinces wins.
    """

    def __init__(self, max_turns: int = DEFAULT_MAX_TURNS) -> None:
        self.max_turns = max_turns

    def ended_by_armies(self, armies: Sequence[Army]) -> bool:
        """True when exactly one army still has soldiers."""
        return sum(1 for army in armies if army.strength > 0) == 1

    def ended_by_turns(self, clock: Clock) -> bool:
        """True once the clock has reached the turn limit."""
        return self.max_turns <= clock.turn

    def province_counts(self, armies: Sequence[Army], board: Board) -> list[int]:
        """Number of provinces held by each army, in the order given."""
        return [board.count_owned(army.allegiance) for army in armies]

    def winner(self, armies: Sequence[Army], board: Board, clock: Clock) -> Army | None:
        """The winning army, or None when no army is left standing.

        At the turn limit the army with the most provinces wins; on a tie
        the earliest of them does. Otherwise the first army with soldiers
        left wins.
        """
        if self.ended_by_turns(clock):
            if not armies:
                raise ValueError("cannot choose a winner among no armies")
            counts = self.province_counts(armies, board)
            best = max(range(len(counts)), key=lambda i: (counts[i], -i))
            return armies[best]
        return next((army for army in armies if army.strength > 0), None)