# tests/test_board_basics.py
import pytest
from trigo.goban_model import Board, OccupiedPoint, OutOfBounds, IllegalMove, new_board


def test_new_board_is_empty():
    b = new_board()
    assert b.size == 9
    assert b.count_stones() == 0
    assert all(b.is_empty(r, c) for r in range(9) for c in range(9))


def test_place_on_empty():
    b = Board(size=5)
    b.place(2, 2, 'X')
    assert b.get(2, 2) == 'X'
    assert not b.is_empty(2, 2)


def test_place_on_occupied_raises():
    b = Board(size=5)
    b.place(0, 0, 'X')
    with pytest.raises(OccupiedPoint):
        b.place(0, 0, 'O')
    assert b.get(0, 0) == 'X'


@pytest.mark.parametrize("r,c", [(-1, 0), (0, -1), (9, 0), (0, 9), (100, 100)])
def test_out_of_range_is_never_empty(r, c):
    b = Board()
    assert b.is_empty(r, c) is False


@pytest.mark.parametrize("op", ["get", "remove", "place"])
def test_out_of_range_access_raises(op):
    b = Board(size=3)
    args = (3, 0, 'X') if op == "place" else (3, 0)
    with pytest.raises(OutOfBounds):
        getattr(b, op)(*args)
    assert issubclass(OutOfBounds, IllegalMove)
    assert b.count_stones() == 0


def test_negative_index_does_not_wrap():
    b = Board(size=3)
    b.place(2, 2, 'X')
    with pytest.raises(OutOfBounds):
        b.get(-1, -1)


def test_remove_empty_cell_is_harmless():
    b = Board(size=3)
    b.remove(1, 1)
    b.place(0, 0, 'O')
    b.remove(0, 0)
    b.remove(0, 0)
    assert b.is_empty(0, 0)


def test_invalid_size():
    with pytest.raises(ValueError):
        Board(size=0)


def test_from_rows_and_pretty():
    rows = ["X..",
            ".O.",
            "..Y"]
    b = Board.from_rows(rows)
    assert b.pretty() == "\n".join(rows)
    assert b.get(1, 1) == 'O'
    assert b.get_board()[2] == [None, None, 'Y']


def test_neighbors_corner_and_center():
    b = Board(size=9)
    assert sorted(b.neighbors(0, 0)) == [(0, 1), (1, 0)]
    assert sorted(b.neighbors(4, 4)) == [(3, 4), (4, 3), (4, 5), (5, 4)]


def test_group_and_liberties_counts_each_empty_cell_once():
    # the empty (1,1) touches three X stones but is one liberty
    b = Board.from_rows(["XXX",
                         "X.O",
                         "OOO"])
    stones, libs = b.group_and_liberties(0, 0)
    assert stones == {(0, 0), (0, 1), (0, 2), (1, 0)}
    assert libs == {(1, 1)}


def test_group_and_liberties_same_from_any_stone():
    b = Board.from_rows([".XX..",
                         ".X.X.",
                         ".XXX.",
                         "O....",
                         "....."])
    results = {frozenset(b.group_and_liberties(r, c)[1]) for (r, c), v in b.stones() if v == 'X'}
    assert len(results) == 1


def test_group_and_liberties_of_empty_cell():
    b = Board(size=3)
    assert b.group_and_liberties(1, 1) == (set(), set())


def test_large_group_does_not_recurse():
    b = Board(size=19)
    for r in range(19):
        for c in range(19):
            if (r, c) != (18, 18):
                b.place(r, c, 'X')
    stones, libs = b.group_and_liberties(0, 0)
    assert len(stones) == 19 * 19 - 1
    assert libs == {(18, 18)}
