import numpy as np
import pytest

from tictactoe_engine.board import Board, line_patterns
from tictactoe_engine.errors import BoardConfigurationError
from tictactoe_engine.symbols import Symbol


def test_new_board_is_empty():
    b = Board(3)
    assert b.size == 3
    assert len(b) == 9
    assert b.filled_count == 0
    assert not b.is_full()
    assert b.serialize() == "000000000"
    assert all(b.cell(r, c) is Symbol.EMPTY for r in range(3) for c in range(3))


def test_default_size_comes_from_config(monkeypatch):
    monkeypatch.delenv("TTT_BOARD_SIZE", raising=False)
    assert Board().size == 3
    monkeypatch.setenv("TTT_BOARD_SIZE", "5")
    assert Board().size == 5


@pytest.mark.parametrize("bad", [0, -1, 2.5, "3", True])
def test_malformed_size_rejected(bad):
    with pytest.raises(BoardConfigurationError):
        Board(bad)


def test_place_symbol_sets_cell():
    b = Board(3)
    assert b.place_symbol(1, 2, Symbol.X) is True
    assert b.cell(1, 2) is Symbol.X
    assert b.filled_count == 1
    assert not b.is_cell_empty(1, 2)


def test_place_symbol_never_overwrites():
    b = Board(3)
    assert b.place_symbol(0, 0, Symbol.X)
    before = b.serialize()
    assert b.place_symbol(0, 0, Symbol.O) is False
    assert b.place_symbol(0, 0, Symbol.X) is False
    assert b.serialize() == before
    assert b.cell(0, 0) is Symbol.X


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (3, 0), (0, 3), (10, 10)])
def test_place_symbol_out_of_bounds(row, col):
    b = Board(3)
    assert b.place_symbol(row, col, Symbol.X) is False
    assert b.serialize() == "000000000"
    assert not b.is_valid_cell(row, col)
    assert not b.is_cell_empty(row, col)


def test_place_empty_is_programming_error():
    with pytest.raises(ValueError):
        Board(3).place_symbol(0, 0, Symbol.EMPTY)


@pytest.mark.parametrize("bad", [3, -1, 0])
def test_place_non_player_value_leaves_grid_untouched(bad):
    b = Board(3)
    with pytest.raises(ValueError):
        b.place_symbol(0, 0, bad)
    assert b.serialize() == "000000000"
    assert b.render() == ". . .\n. . .\n. . ."


def test_place_plain_int_symbol():
    b = Board(3)
    assert b.place_symbol(0, 0, 2)
    assert b.cell(0, 0) is Symbol.O


def test_cell_outside_board_raises():
    with pytest.raises(IndexError):
        Board(3).cell(-1, 0)


def test_is_full_after_every_cell_filled():
    b = Board(2)
    cells = [(0, 0), (0, 1), (1, 0), (1, 1)]
    for i, (r, c) in enumerate(cells):
        assert not b.is_full()
        b.place_symbol(r, c, Symbol.X if i % 2 == 0 else Symbol.O)
    assert b.is_full()
    assert b.empty_cells() == []


def test_empty_cells_row_major():
    b = Board.from_string("120000201")
    assert b.empty_cells() == [(0, 2), (1, 0), (1, 1), (1, 2), (2, 1)]


@pytest.mark.parametrize("board,symbol,line", [
    ("111220000", Symbol.X, [(0, 0), (0, 1), (0, 2)]),
    ("120120100", Symbol.X, [(0, 0), (1, 0), (2, 0)]),
    ("012012000", Symbol.O, None),
    ("210120102", Symbol.O, [(0, 0), (1, 1), (2, 2)]),
    ("100010001", Symbol.X, [(0, 0), (1, 1), (2, 2)]),
    ("002020200", Symbol.O, [(0, 2), (1, 1), (2, 0)]),
])
def test_winning_lines(board, symbol, line):
    b = Board.from_string(board)
    assert b.winning_line(symbol) == line
    assert b.has_winning_line(symbol) is (line is not None)


def test_column_win():
    b = Board.from_string("021021000")
    assert b.has_winning_line(Symbol.O) is False
    assert b.has_winning_line(Symbol.X) is False
    b = Board.from_string("021021021")
    assert b.has_winning_line(Symbol.O)
    assert b.has_winning_line(Symbol.X)
    assert b.winning_line(Symbol.X) == [(0, 2), (1, 2), (2, 2)]


def test_no_line_with_no_symbols_placed():
    b = Board(4)
    assert b.has_winning_line(Symbol.X) is False
    assert b.has_winning_line(Symbol.O) is False
    assert b.has_winning_line(Symbol.EMPTY) is False


def test_empty_symbol_never_wins_on_empty_board():
    # every line of an empty board is uniformly EMPTY
    assert Board(3).winning_line(Symbol.EMPTY) is None


def test_one_by_one_board_wins_immediately():
    b = Board(1)
    assert b.place_symbol(0, 0, Symbol.O)
    assert b.has_winning_line(Symbol.O)
    assert b.is_full()


def test_two_in_a_row_is_not_a_win():
    b = Board.from_string("110000000")
    assert not b.has_winning_line(Symbol.X)


def test_larger_board_anti_diagonal():
    b = Board(4)
    for i in range(4):
        b.place_symbol(i, 3 - i, Symbol.X)
    assert b.has_winning_line(Symbol.X)
    assert b.winning_line(Symbol.X) == [(0, 3), (1, 2), (2, 1), (3, 0)]


def test_line_patterns_count():
    for n in range(1, 6):
        pats = line_patterns(n)
        assert len(pats['row']) == n
        assert len(pats['col']) == n
        assert len(pats['diag']) == 2
        assert all(len(line) == n for group in pats.values() for line in group)
    assert len(Board(3).lines()) == 8


@pytest.mark.parametrize("bad", ["", "12", "0123", "00000000x", "0000000000"])
def test_from_string_rejects_bad_input(bad):
    with pytest.raises(BoardConfigurationError):
        Board.from_string(bad)


def test_from_string_serialize_and_render():
    b = Board.from_string("100020000")
    assert b.serialize() == "100020000"
    assert b.render() == "X . .\n. O .\n. . ."
    assert "100020000" in repr(b)


def test_grid_is_numpy_backed():
    b = Board(3)
    assert isinstance(b._grid, np.ndarray)
    assert b._grid.shape == (3, 3)
