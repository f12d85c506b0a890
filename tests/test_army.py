import random

import pytest

from wargrid.army import Army
from wargrid.board import Board
from wargrid.resources import ResourceKind


def _setup(seed=0, row=5, col=5, strength=10000):
    rng = random.Random(seed)
    board = Board(10, 10, rng)
    army = Army(1, row, col, "X", 1, "North", strength, rng)
    return board, army


def test_constructor_stores_fields():
    _, army = _setup()
    assert (army.army_id, army.row, army.col, army.symbol) == (1, 5, 5, "X")
    assert army.allegiance == 1
    assert army.name == "North"
    assert army.strength == 10000
    assert army.active is True
    assert army.damage_modifier == 1.0
    assert army.scout.allegiance == army.allegiance


def test_unit_modifiers_in_ranges():
    _, army = _setup(seed=3)
    assert 10 <= army.artillery.modifier() <= 100
    assert 10 <= army.general.modifier() <= 100
    assert 10 <= army.medic.modifier() <= 100
    assert 10 <= army.light_cavalry.modifier() <= 100
    assert 100 <= army.heavy_cavalry.modifier() <= 500


def test_inactive_army_does_not_move():
    board, army = _setup()
    army.active = False
    assert army.move(board) == 0
    assert (army.row, army.col) == (5, 5)


@pytest.mark.parametrize("seed", range(10))
def test_move_goes_to_neighbour_and_claims_it(seed):
    board, army = _setup(seed)
    board.province(5, 5).army = 1
    result = army.move(board)
    assert result == 0
    assert abs(army.row - 5) + abs(army.col - 5) == 1
    dest = board.province(army.row, army.col)
    assert dest.army == 1
    assert dest.owner == 1
    assert dest.symbol == "X"
    assert board.province(5, 5).army == 0


@pytest.mark.parametrize("seed", range(10))
def test_move_prefers_foreign_province(seed):
    board, army = _setup(seed)
    for prov in board.neighbours(5, 5):
        prov.owner = 1
    board.province(6, 5).owner = 0
    army.move(board)
    assert (army.row, army.col) == (6, 5)


@pytest.mark.parametrize("seed", range(10))
def test_move_when_all_neighbours_owned(seed):
    board, army = _setup(seed)
    for prov in board.neighbours(5, 5):
        prov.owner = 1
    army.move(board)
    assert (army.row, army.col) in {(4, 5), (5, 4), (6, 5), (5, 6)}


@pytest.mark.parametrize("seed", range(10))
def test_move_onto_enemy_after_foreign_province(seed):
    board, army = _setup(seed)
    board.province(5, 4).army = 2
    assert army.move(board) == 2
    assert (army.row, army.col) == (5, 4)
    assert board.province(5, 4).army == 1


@pytest.mark.parametrize("seed", range(10))
def test_move_reports_enemy_found_first(seed):
    board, army = _setup(seed)
    board.province(4, 5).army = 7
    assert army.move(board) == 7
    assert abs(army.row - 5) + abs(army.col - 5) == 1


@pytest.mark.parametrize("seed", range(5))
def test_corner_army_stays_on_board(seed):
    board, army = _setup(seed, row=0, col=0)
    army.move(board)
    assert (army.row, army.col) in {(1, 0), (0, 1)}


def test_collect_strength_resources():
    _, army = _setup()
    army.collect_resource(ResourceKind.STRENGTH5)
    assert army.strength == 10500
    before = army.strength
    army.collect_resource(ResourceKind.STRENGTH10)
    assert army.strength > before
    assert army.damage_modifier == 1.0


def test_collect_damage_resource_orders():
    bonuses = []
    for kind in (ResourceKind.DAMAGE5, ResourceKind.DAMAGE10, ResourceKind.DAMAGE15):
        _, army = _setup()
        army.collect_resource(kind)
        assert army.strength == 10000
        bonuses.append(army.damage_modifier)
    assert 1.0 < bonuses[0] < bonuses[1] < bonuses[2]
    assert bonuses[0] == pytest.approx(1.05)


def test_collect_none_changes_nothing():
    _, army = _setup()
    army.collect_resource(ResourceKind.NONE)
    assert army.strength == 10000
    assert army.damage_modifier == 1.0