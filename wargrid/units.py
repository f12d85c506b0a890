"""Military detachments that modify an army's battle results."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Protocol


class _OwnershipCounter(Protocol):
    def count_owned(self, allegiance: int) -> int: ...


class Unit(ABC):
    """A detachment contributing a numeric modifier in battle."""

    @abstractmethod
    def modifier(self) -> int:
        """Return this detachment's battle modifier."""


class _RandomUnit(Unit):
    _low: int = 0
    _high: int = 0

    def __init__(self, rng: random.Random | None = None) -> None:
        rng = rng or random.Random()
        self._value = rng.randint(self._low, self._high)

    def modifier(self) -> int:
        return self._value


class Artillery(_RandomUnit):
    """Adds an offensive modifier drawn from 10..100."""

    _low, _high = 10, 100

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__(rng)

    def modifier(self) -> int:
        return self._value


class HeavyCavalry(_RandomUnit):
    """Adds a damage modifier drawn from 100..500."""

    _low, _high = 100, 500

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__(rng)

    def modifier(self) -> int:
        return self._value


class General(_RandomUnit):
    """Adds a damage modifier drawn from 10..100."""

    _low, _high = 10, 100

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__(rng)

    def modifier(self) -> int:
        return self._value


class Medic(_RandomUnit):
    """Adds a strength (loss reduction) modifier drawn from 10..100."""

    _low, _high = 10, 100

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__(rng)

    def modifier(self) -> int:
        return self._value


class LightCavalry(_RandomUnit):
    """Adds a defensive modifier drawn from 10..100."""

    _low, _high = 10, 100

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__(rng)

    def modifier(self) -> int:
        return self._value


class Scout(Unit):
    """Modifier equal to the number of provinces held by its army."""

    def __init__(self, allegiance: int) -> None:
        self.allegiance = allegiance
        self._count = 0

    def report(self, board: _OwnershipCounter) -> int:
        """Recount the provinces owned by this scout's army."""
        self._count = board.count_owned(self.allegiance)
        return self._count

    def modifier(self) -> int:
        return self._count