"""Running a whole simulation, and the interactive command that starts it."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TextIO

from .army import Army
from .battle import BattleOperator, BattleResult
from .board import Board
from .clock import Clock
from .ending import EndConditions
from .resources import ResourceKind

MIN_TURNS = 100
MAX_TURNS = 10000
MIN_SIZE = 10
MAX_WIDTH = 40
MAX_HEIGHT = 40
MIN_STRENGTH = 10000
MAX_STRENGTH = 100000
MIN_ARMIES = 2
MAX_ARMIES = 10
ARMY_SYMBOL = "X"


@dataclass(frozen=True)
class ArmySpec:
    """Starting data of one army: column x, row y, soldiers and name."""

    x: int
    y: int
    strength: int
    name: str = ""


@dataclass(frozen=True)
class SimulationSettings:
    """Validated parameters of a simulation."""

    max_turns: int
    width: int
    height: int
    armies: tuple[ArmySpec, ...] = field(default_factory=tuple)
    color: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "armies", tuple(self.armies))
        if not MIN_TURNS <= self.max_turns <= MAX_TURNS:
            raise ValueError(f"turn limit must lie in {MIN_TURNS}..{MAX_TURNS}")
        if not MIN_SIZE <= self.width <= MAX_WIDTH:
            raise ValueError(f"map width must lie in {MIN_SIZE}..{MAX_WIDTH}")
        if not MIN_SIZE <= self.height <= MAX_HEIGHT:
            raise ValueError(f"map height must lie in {MIN_SIZE}..{MAX_HEIGHT}")
        if not MIN_ARMIES <= len(self.armies) <= MAX_ARMIES:
            raise ValueError(f"there must be {MIN_ARMIES}..{MAX_ARMIES} armies")
        for number, spec in enumerate(self.armies, 1):
            if not (0 <= spec.x < self.width and 0 <= spec.y < self.height):
                raise ValueError(f"army {number} starts outside the map")
            if not MIN_STRENGTH <= spec.strength <= MAX_STRENGTH:
                raise ValueError(
                    f"army {number} strength must lie in {MIN_STRENGTH}..{MAX_STRENGTH}"
                )


@dataclass(frozen=True)
class SimulationOutcome:
    """How a finished simulation ended."""

    winner: Army | None
    turns: int
    ended_by_turns: bool
    elapsed_ms: int


class Simulation:
    """A board, its armies and the turn loop that moves them."""

    def __init__(self, settings: SimulationSettings, rng: random.Random | None = None) -> None:
        rng = rng or random.Random()
        self.settings = settings
        self.board = Board(settings.width, settings.height, rng)
        self.armies = [
            Army(number, spec.y, spec.x, ARMY_SYMBOL, number, spec.name, spec.strength, rng)
            for number, spec in enumerate(settings.armies, 1)
        ]
        self.end = EndConditions(settings.max_turns)
        self.clock = Clock()
        self.battle = BattleOperator(rng)
        self.battles: list[tuple[Army, Army, BattleResult]] = []
        self.collected: list[tuple[Army, ResourceKind]] = []
        self.frame = ""
        self.outcome: SimulationOutcome | None = None
        self.clock.start()
        self.clock.start_timing()

    def _finish(self, by_turns: bool) -> SimulationOutcome:
        self.outcome = SimulationOutcome(
            winner=self.end.winner(self.armies, self.board, self.clock),
            turns=self.clock.turn,
            ended_by_turns=by_turns,
            elapsed_ms=self.clock.elapsed_ms(),
        )
        return self.outcome

    def _eliminate(self, army: Army) -> None:
        army.active = False
        self.board.release(army.allegiance)

    def _collect(self, army: Army) -> None:
        resource = self.board.province(army.row, army.col).resource
        if resource.kind.is_valuable and resource.active:
            army.collect_resource(resource.kind)
            self.collected.append((army, resource.kind))
            resource.active = False

    def step(self) -> SimulationOutcome | None:
        """Play one turn; return the outcome once the simulation has ended."""
        if self.outcome is not None:
            return self.outcome
        if self.end.ended_by_armies(self.armies):
            return self._finish(by_turns=False)
        if self.end.ended_by_turns(self.clock):
            return self._finish(by_turns=True)

        self.clock.new_turn()
        self.frame = self.board.render(self.settings.color)
        for army in self.armies:
            opponent_id = army.move(self.board)
            if army.strength > 0:
                self._collect(army)
            if not opponent_id:
                continue
            opponent = self.armies[opponent_id - 1]
            if army.strength == 0:
                self._eliminate(army)
            if opponent.strength == 0:
                self._eliminate(opponent)
            if army.strength > 0 and opponent.strength > 0:
                result = self.battle.fight(army, opponent, self.board)
                self.battles.append((army, opponent, result))
        return None

    def run(self, render: Callable[[str], None] | None = None) -> SimulationOutcome:
        """Play turns until the simulation ends, passing each frame to render."""
        while (outcome := self.step()) is None:
            if render is not None:
                render(self.frame)
        return outcome


def _ask_int(input_fn: Callable[[str], str], prompt: str, low: int, high: int) -> int:
    answer = input_fn(prompt)
    while True:
        try:
            value = int(answer.strip())
        except ValueError:
            value = None
        if value is not None and low <= value <= high:
            return value
        answer = input_fn("Invalid input, enter it again: ")


def prompt_settings(
    input_fn: Callable[[str], str] = input, output: TextIO | None = None
) -> SimulationSettings:
    """Ask for the simulation parameters until every answer is valid."""
    output = output if output is not None else sys.stdout
    max_turns = _ask_int(
        input_fn, f"Maximum number of turns [{MIN_TURNS}..{MAX_TURNS}]: ", MIN_TURNS, MAX_TURNS
    )
    width = _ask_int(input_fn, f"Map size x [{MIN_SIZE}..{MAX_WIDTH}]: ", MIN_SIZE, MAX_WIDTH)
    height = _ask_int(input_fn, f"Map size y [{MIN_SIZE}..{MAX_HEIGHT}]: ", MIN_SIZE, MAX_HEIGHT)

    specs: list[ArmySpec] = []
    for number in range(1, MAX_ARMIES + 1):
        output.write(f"\n========\nArmy no. {number}\n")
        x = _ask_int(input_fn, "Starting position x: ", 0, width - 1)
        y = _ask_int(input_fn, "Starting position y: ", 0, height - 1)
        strength = _ask_int(
            input_fn,
            f"Number of soldiers [{MIN_STRENGTH}..{MAX_STRENGTH}]: ",
            MIN_STRENGTH,
            MAX_STRENGTH,
        )
        name = input_fn("Army name: ")
        specs.append(ArmySpec(x, y, strength, name))
        if MIN_ARMIES <= number < MAX_ARMIES:
            more = input_fn("\nAdd another army? [type anything for yes, Enter for no]: ")
            if not more:
                break
    return SimulationSettings(max_turns, width, height, tuple(specs))


def main(argv: list[str] | None = None) -> int:
    """Ask for parameters, then run and draw the simulation."""
    parser = argparse.ArgumentParser(prog="wargrid", description="Army territory simulation.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--color", action="store_true", help="draw owners in colour")
    parser.add_argument("--delay", type=float, default=0.0, help="seconds between turns")
    args = parser.parse_args(argv)

    try:
        settings = prompt_settings(input, sys.stdout)
    except (EOFError, KeyboardInterrupt):
        print("\nSimulation aborted")
        return 1
    if args.color:
        settings = SimulationSettings(
            settings.max_turns, settings.width, settings.height, settings.armies, True
        )

    simulation = Simulation(settings, random.Random(args.seed))
    sys.stdout.write("\x1b[2J")

    def draw(frame: str) -> None:
        sys.stdout.write("\x1b[H" + frame + "\n")
        sys.stdout.flush()
        if args.delay > 0:
            time.sleep(args.delay)

    try:
        outcome = simulation.run(draw)
    except KeyboardInterrupt:
        print("\nSimulation aborted")
        return 1

    sys.stdout.write("\x1b[2J\x1b[H")
    print("Simulation finished successfully")
    reason = "turn limit reached" if outcome.ended_by_turns else "military victory"
    print(f"Turns: {outcome.turns} ({reason}), battles: {len(simulation.battles)}")
    if outcome.winner is not None:
        print(f"Winner: {outcome.winner.name} (army {outcome.winner.army_id})")
    else:
        print("No army survived")
    print(f"Time: {outcome.elapsed_ms} ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())