import numpy as np
import pytest

from blockfall.board import Board
from blockfall.piece import ActivePiece


def test_new_board_is_empty_with_requested_size():
    board = Board(4, 6)
    assert board.grid.shape == (6, 4)
    assert not board.grid.any()


def test_invalid_dimensions_rejected():
    with pytest.raises(ValueError):
        Board(0, 5)


def test_cell_access_out_of_bounds_raises():
    board = Board(4, 6)
    with pytest.raises(IndexError):
        board.set_cell(6, 0, 1)
    with pytest.raises(IndexError):
        board.set_cell(0, -1, 1)
    assert board.is_empty(-1, 0) is False
    assert board.is_empty(0, 0) is True


def test_is_row_complete():
    board = Board(4, 6)
    board.grid[5] = [1, 1, 1, 0]
    assert board.is_row_complete(5) is False
    board.set_cell(5, 3, 1)
    assert board.is_row_complete(5) is True
    with pytest.raises(IndexError):
        board.is_row_complete(6)


def test_single_row_removed_and_empty_row_inserted_on_top():
    board = Board(4, 6)
    board.grid[3] = [0, 1, 0, 0]
    board.grid[4] = [1, 0, 0, 1]
    board.grid[5] = [1, 1, 1, 1]

    assert board.remove_completed_rows() == 1

    assert board.grid.shape == (6, 4)
    assert board.rows() == [
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 1, 0, 0],
        [1, 0, 0, 1],
    ]


def test_non_adjacent_and_adjacent_rows_all_removed():
    board = Board(3, 6)
    board.grid[1] = [1, 1, 1]
    board.grid[2] = [1, 0, 0]
    board.grid[3] = [1, 1, 1]
    board.grid[4] = [1, 1, 1]
    board.grid[5] = [0, 0, 1]

    assert board.remove_completed_rows() == 3

    assert board.rows() == [
        [0, 0, 0],
        [0, 0, 0],
        [0, 0, 0],
        [0, 0, 0],
        [1, 0, 0],
        [0, 0, 1],
    ]


def test_remove_completed_rows_preserves_shape_for_random_boards():
    rng = np.random.default_rng(7)
    for _ in range(50):
        board = Board(5, 8)
        board.grid[:] = rng.integers(0, 2, size=(8, 5), dtype=np.uint8)
        full_rows = int(np.all(board.grid == 1, axis=1).sum())
        assert board.remove_completed_rows() == full_rows
        assert board.grid.shape == (8, 5)
        assert not np.all(board.grid == 1, axis=1).any()


def test_remove_completed_rows_keeps_grid_object():
    board = Board(2, 3)
    grid = board.grid
    board.grid[2] = [1, 1]
    board.remove_completed_rows()
    assert board.grid is grid


def test_lock_piece_writes_occupied_cells_only():
    board = Board(4, 6)
    piece = ActivePiece(((0, 1), (1, 1)), "red", position=(1, 4))
    board.lock_piece(piece)
    assert board.rows()[4] == [0, 0, 1, 0]
    assert board.rows()[5] == [0, 1, 1, 0]


def test_lock_piece_out_of_bounds_raises():
    board = Board(4, 6)
    piece = ActivePiece(((1,), (1,), (1,)), "red", position=(0, 4))
    with pytest.raises(IndexError):
        board.lock_piece(piece)


def test_clear_resets_every_cell():
    board = Board(4, 6)
    board.grid[:] = 1
    board.clear()
    assert not board.grid.any()


def test_row_removal_uses_row_predicate(monkeypatch):
    board = Board(3, 4)
    board.grid[3] = [1, 1, 1]
    checked = []
    original = Board.is_row_complete

    def spy(self, row):
        checked.append(row)
        return original(self, row)

    monkeypatch.setattr(Board, "is_row_complete", spy)
    assert board.remove_completed_rows() == 1
    assert checked == [0, 1, 2, 3]
