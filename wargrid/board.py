"""The grid of provinces the armies fight over."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .resources import Resource

_RESET = "\x1b[0m"


@dataclass
class Province:
    """One cell of the board."""

    row: int
    col: int
    resource: Resource = field(default_factory=Resource)
    owner: int = 0
    symbol: str = " "
    army: int = 0


def _console_attribute(owner: int) -> int:
    if owner == 0:
        return 128
    if owner == 7:
        return 191
    if owner == 8:
        return 207
    return 15 + 16 * owner


def _ansi_index(console_color: int) -> tuple[int, bool]:
    base = ((console_color & 1) << 2) | (console_color & 2) | ((console_color & 4) >> 2)
    return base, bool(console_color & 8)


def _ansi_for(owner: int) -> str:
    attr = _console_attribute(owner)
    fg, fg_bright = _ansi_index(attr & 0x0F)
    bg, bg_bright = _ansi_index((attr >> 4) & 0x0F)
    fg_code = (90 if fg_bright else 30) + fg
    bg_code = (100 if bg_bright else 40) + bg
    return f"\x1b[{fg_code};{bg_code}m"


class Board:
    """A height x width grid of provinces, each with a random resource."""

    def __init__(self, width: int, height: int, rng: random.Random | None = None) -> None:
        rng = rng or random.Random()
        self.width = width
        self.height = height
        self._grid = [
            [Province(row, col, Resource.random(rng)) for col in range(width)]
            for row in range(height)
        ]

    def __iter__(self):
        for line in self._grid:
            yield from line

    def province(self, row: int, col: int) -> Province:
        """Return the province at (row, col)."""
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"position ({row}, {col}) lies outside the board")
        return self._grid[row][col]

    def neighbours(self, row: int, col: int) -> list[Province]:
        """Orthogonal neighbours: up, left, down, right, within the board."""
        self.province(row, col)
        candidates = ((row - 1, col), (row, col - 1), (row + 1, col), (row, col + 1))
        return [
            self._grid[r][c]
            for r, c in candidates
            if 0 <= r < self.height and 0 <= c < self.width
        ]

    def count_owned(self, allegiance: int) -> int:
        """Number of provinces owned by the given allegiance."""
        return sum(1 for p in self if p.owner == allegiance)

    def count_owned_pair(self, first: int, second: int) -> tuple[int, int]:
        """Province counts for two allegiances."""
        return self.count_owned(first), self.count_owned(second)

    def release(self, allegiance: int) -> None:
        """Make every province owned by the allegiance neutral."""
        for p in self:
            if p.owner == allegiance:
                p.owner = 0

    def reset(self) -> None:
        """Make every province neutral and blank."""
        for p in self:
            p.owner = 0
            p.symbol = " "

    def clear_symbols(self) -> None:
        """Blank the symbol of every province."""
        for p in self:
            p.symbol = " "

    def render(self, color: bool = False) -> str:
        """Draw the board as text, then blank all symbols for the next turn."""
        border = "|" + "=" * self.width + "|"
        lines = [border]
        for line in self._grid:
            if color:
                cells = "".join(_ansi_for(p.owner) + p.symbol for p in line) + _RESET
            else:
                cells = "".join(p.symbol for p in line)
            lines.append("|" + cells + "|")
        lines.append(border)
        self.clear_symbols()
        return "\n".join(lines)