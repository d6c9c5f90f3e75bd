import pytest

from hexboggle.board import BoardShapeError, Cell, RectBoard


def test_cell_identity():
    a = Cell("a", (0, 0))
    assert a == Cell("b", (0, 0))
    assert a != Cell("a", (0, 1))
    assert hash(a) == hash(Cell("z", (0, 0)))
    assert len({a, Cell("b", (0, 0)), Cell("a", (1, 0))}) == 2
    assert sorted([Cell("x", (1, 0)), Cell("y", (0, 2)), Cell("z", (0, 1))]) == [
        Cell("y", (0, 1)),
        Cell("z", (0, 2)),
        Cell("x", (1, 0)),
    ]
    assert str(Cell("a", (0, 1))) == "'a' @ (0, 1)"


def test_get_cell():
    bd = RectBoard(["AB", "CD"])
    assert bd.size() == (2, 2)
    assert bd.get_cell((0, 0)).char == "A"
    assert bd.get_cell((1, 0)).char == "B"
    assert bd.get_cell((0, 1)).char == "C"
    assert bd.get_cell((1, 1)).char == "D"
    assert bd.get_cell((1, 1)).location == (1, 1)
    with pytest.raises(KeyError):
        bd.get_cell((2, 0))


def test_all_cells():
    bd = RectBoard(["abc", "def"])
    assert bd.size() == (3, 2)
    assert bd.num_cells() == 6
    assert "".join(c.char for c in bd.all_cells()) == "abcdef"
    assert len(set(bd.all_cells())) == 6
    assert str(bd) == "abc\ndef"


def test_one_by_one():
    bd = RectBoard(["q"])
    (cell,) = bd.all_cells()
    assert bd.neighbors(cell) == []


def test_two_by_two():
    bd = RectBoard(["AB", "CD"])
    for cell in bd.all_cells():
        ns = bd.neighbors(cell)
        assert len(ns) == 3
        assert cell not in ns
    a = bd.get_cell((0, 0))
    assert sorted(n.char for n in bd.neighbors(a)) == ["B", "C", "D"]


def test_neighbor_counts():
    bd = RectBoard(["abcd", "efgh", "ijkl"])
    counts = {c.char: len(bd.neighbors(c)) for c in bd.all_cells()}
    assert counts == {
        "a": 3, "b": 5, "c": 5, "d": 3,
        "e": 5, "f": 8, "g": 8, "h": 5,
        "i": 3, "j": 5, "k": 5, "l": 3,
    }  # fmt: skip


def test_ragged_rows():
    with pytest.raises(BoardShapeError, match="row 1: expected 2 letters, got 3") as e:
        RectBoard(["ab", "cde"])
    assert (e.value.index, e.value.expected, e.value.actual) == (1, 2, 3)
    assert isinstance(e.value, ValueError)


def test_empty_board():
    with pytest.raises(BoardShapeError):
        RectBoard([])
    with pytest.raises(BoardShapeError):
        RectBoard([""])
