import random

import pytest

from wargrid.board import Board, Province
from wargrid.resources import ResourceKind


@pytest.fixture
def board():
    return Board(4, 3, random.Random(42))


def test_dimensions_and_coordinates(board):
    provinces = list(board)
    assert len(provinces) == 12
    for p in provinces:
        assert board.province(p.row, p.col) is p
    assert board.province(2, 3).row == 2
    assert board.province(2, 3).col == 3


def test_new_provinces_neutral(board):
    for p in board:
        assert p.owner == 0
        assert p.symbol == " "
        assert p.army == 0
        assert p.resource.active is True
        assert p.resource.kind in set(ResourceKind)


def test_province_out_of_range(board):
    with pytest.raises(IndexError):
        board.province(3, 0)
    with pytest.raises(IndexError):
        board.province(0, 4)
    with pytest.raises(IndexError):
        board.province(-1, 0)


def test_neighbours_corner_and_order(board):
    corner = [(p.row, p.col) for p in board.neighbours(0, 0)]
    assert corner == [(1, 0), (0, 1)]
    middle = [(p.row, p.col) for p in board.neighbours(1, 1)]
    assert middle == [(0, 1), (1, 0), (2, 1), (1, 2)]


def test_neighbours_far_corner(board):
    far = [(p.row, p.col) for p in board.neighbours(2, 3)]
    assert far == [(1, 3), (2, 2)]


def test_count_owned_and_pair(board):
    board.province(0, 0).owner = 1
    board.province(1, 2).owner = 1
    board.province(2, 2).owner = 2
    assert board.count_owned(1) == 2
    assert board.count_owned(2) == 1
    assert board.count_owned_pair(1, 2) == (2, 1)
    assert board.count_owned(0) == 12 - 3


def test_release(board):
    board.province(0, 0).owner = 3
    board.province(0, 1).owner = 4
    board.release(3)
    assert board.count_owned(3) == 0
    assert board.province(0, 1).owner == 4


def test_reset(board):
    p = board.province(1, 1)
    p.owner = 5
    p.symbol = "X"
    board.reset()
    assert p.owner == 0
    assert p.symbol == " "


def test_render_plain_and_clears_symbols():
    b = Board(3, 2, random.Random(0))
    b.province(1, 2).symbol = "X"
    text = b.render()
    assert text.split("\n") == ["|===|", "|   |", "|  X|", "|===|"]
    assert all(p.symbol == " " for p in b)


def test_render_color_contains_symbols():
    b = Board(2, 2, random.Random(0))
    b.province(0, 0).symbol = "X"
    b.province(0, 0).owner = 1
    text = b.render(color=True)
    lines = text.split("\n")
    assert len(lines) == 4
    assert "X" in lines[1]
    assert "\x1b[" in lines[1]
    assert lines[0] == lines[-1]


def test_province_defaults():
    p = Province(1, 2)
    assert (p.owner, p.symbol, p.army) == (0, " ", 0)