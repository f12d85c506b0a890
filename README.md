# wargrid

wargrid is a small turn-based war simulation played on a rectangular grid of
provinces. It runs with two to ten armies. Each turn, every army steps to a
neighbouring province and claims it. An army prefers provinces it does not
yet own, and it always heads for an enemy army standing next to it. Some
provinces hold resources. A resource raises the strength or the damage of the
first army that collects it, and after that it is used up. When an army moves
next to another army, the two fight a battle.

## How a simulation ends

- **Military victory**: exactly one army still has soldiers. That army wins.
- **Turn limit**: the configured number of turns has been played. The army
  that holds the most provinces wins. If several armies tie, the one listed
  first wins.

## Installation

```
pip install .
```

## Running

```
wargrid [--seed N] [--color] [--delay SECONDS]
```

The command first asks for the simulation settings:

- the maximum number of turns (100–10000)
- the map size x and y (10–40 each)
- for each army:
  - its starting position x and y
  - its number of soldiers (10000–100000)
  - its name

If an answer is not a number, or is out of range, the command asks for it
again. From the second army onwards it asks whether to add another army.
Pressing Enter on an empty line stops adding armies. There can be at most ten.

Once the settings are in, the map is redrawn in the terminal every turn. Army
positions are marked with `X`.

Options:

- `--seed N`: seeds the random generator, so the same answers give the same
  game.
- `--color`: shows each province in the colour of the army that owns it,
  using ANSI escape codes.
- `--delay SECONDS`: pauses for that long between turns.

When the game is over, the command prints:

- the number of turns played and why the game ended
- the number of battles fought
- the winner
- the time the game took

Ctrl-C aborts the game.

## Using it from Python

The parts of the game can be used on their own:

| Module | Contents |
| --- | --- |
| `wargrid.resources` | `ResourceKind`, `Resource` and `random_kind` |
| `wargrid.units` | the detachments that make up an army: `Artillery`, `HeavyCavalry`, `General`, `Medic`, `LightCavalry` and `Scout`; each gives its modifier through `modifier()` |
| `wargrid.board` | `Board`, a grid of `Province` cells, with `neighbours`, `count_owned`, `release`, `reset` and `render(color)` |
| `wargrid.clock` | `Clock`, which counts turns and measures elapsed milliseconds |
| `wargrid.army` | `Army`, which has `move(board)` and `collect_resource(kind)` |
| `wargrid.battle` | `BattleOperator.fight(first, second, board)`, which returns a `BattleResult`, and `loss_percentages()` |
| `wargrid.ending` | `EndConditions`, which decides when the game is over and who won |
| `wargrid.simulation` | `Simulation`, `SimulationSettings`, `ArmySpec`, `SimulationOutcome` and `prompt_settings` |

Every random choice in these modules takes a `random.Random` instance, so a
game can be made reproducible:

```python
import random

from wargrid.simulation import ArmySpec, Simulation, SimulationSettings

settings = SimulationSettings(
    max_turns=200,
    width=15,
    height=10,
    armies=(ArmySpec(0, 0, 20000, "North"), ArmySpec(14, 9, 20000, "South")),
)
sim = Simulation(settings, random.Random(1))
outcome = sim.run()
print(outcome.winner, outcome.turns, outcome.ended_by_turns, len(sim.battles))
```

`SimulationSettings` raises `ValueError` if any setting is out of range.

`Simulation.step()` plays a single turn. It returns `None` while the game is
still going, and the `SimulationOutcome` once it has ended.

`Simulation.run(render)` plays turns until the game ends. After every turn it
passes the drawn map to `render`.

`sim.battles` records each battle that was fought, and `sim.collected` records
each resource that was picked up.

## What it does not do

- It writes no log file. Battles and collected resources are kept only in
  memory, on the `Simulation` object.
- The game cannot be paused or restarted from the keyboard while it runs.

## Tests

```
pip install .[test]
pytest
```