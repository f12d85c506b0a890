"""Armies: the main actors that roam the board and fight."""

from __future__ import annotations

import random

from .board import Board
from .resources import ResourceKind
from .units import Artillery, General, HeavyCavalry, LightCavalry, Medic, Scout

_STRENGTH_BONUS = {
    ResourceKind.STRENGTH5: 1.05,
    ResourceKind.STRENGTH10: 1.1,
    ResourceKind.STRENGTH15: 1.15,
}

_DAMAGE_BONUS = {
    ResourceKind.DAMAGE5: 0.05,
    ResourceKind.DAMAGE10: 0.1,
    ResourceKind.DAMAGE15: 0.15,
}


class Army:
    """An army with a position, a strength and its detachments."""

    def __init__(
        self,
        army_id: int,
        row: int,
        col: int,
        symbol: str = "X",
        allegiance: int | None = None,
        name: str = "",
        strength: int = 0,
        rng: random.Random | None = None,
    ) -> None:
        self._rng = rng or random.Random()
        self.army_id = army_id
        self.row = row
        self.col = col
        self.symbol = symbol
        self.allegiance = army_id if allegiance is None else allegiance
        self.name = name
        self.strength = strength
        self.active = True
        self.damage_modifier = 1.0

        self.artillery = Artillery(self._rng)
        self.general = General(self._rng)
        self.medic = Medic(self._rng)
        self.scout = Scout(self.allegiance)
        self.heavy_cavalry = HeavyCavalry(self._rng)
        self.light_cavalry = LightCavalry(self._rng)

    def __repr__(self) -> str:
        return (
            f"Army(id={self.army_id}, name={self.name!r}, strength={self.strength}, "
            f"pos=({self.row}, {self.col}), active={self.active})"
        )

    def move(self, board: Board) -> int:
        """Step to a neighbouring province and claim it.

        Returns the id of an adjacent enemy army that must be fought,
        or 0 when there is none (or the army is inactive).
        """
        if not self.active:
            return 0

        board.province(self.row, self.col).army = 0
        options = board.neighbours(self.row, self.col)

        targets = []
        foreign = 0
        opponent = 0
        for prov in options:
            if prov.army not in (0, self.army_id):
                opponent = prov.army
                targets = [prov]
                break
            if prov.owner != self.allegiance:
                targets.append(prov)
                foreign += 1

        destination = self._rng.choice(targets if foreign else options)
        self.row, self.col = destination.row, destination.col
        destination.symbol = self.symbol
        destination.army = self.army_id
        destination.owner = self.allegiance
        return opponent

    def collect_resource(self, kind: ResourceKind) -> None:
        """Apply the bonus granted by a resource of the given kind."""
        if kind in _STRENGTH_BONUS:
            self.strength = int(self.strength * _STRENGTH_BONUS[kind])
        elif kind in _DAMAGE_BONUS:
            self.damage_modifier += _DAMAGE_BONUS[kind]