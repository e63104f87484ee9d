"""
board grid and the slide/merge primitives
"""

import numpy as np


SIZE = 4
WIN_TILE = 2048


class BoardSizeError(ValueError):
    """raised when a board is built with a size that can't hold a game"""


def rotate_grid(grid, turns):
    """
    return a copy of grid rotated clockwise by turns * 90 degrees

    cell (i, j) lands on (j, n-1-i) for one turn, so four single turns
    give back the original grid. turns is taken modulo 4.
    """
    return np.rot90(grid, k=-(turns % 4)).copy()


MAX_TILE = int(np.iinfo(np.int32).max)


def _is_tile_value(value):
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        return False
    value = int(value)
    return value == 0 or (2 <= value <= MAX_TILE and value & (value - 1) == 0)


class Board:
    def __init__(self, size=SIZE):
        """initialize an empty size x size board"""
        if isinstance(size, bool) or not isinstance(size, int) or size <= 1:
            raise BoardSizeError(f"board size must be an integer >= 2, got {size!r}")
        self.size = size
        self.grid = np.zeros((size, size), dtype=np.int32)
        self.won = False

    @classmethod
    def from_rows(cls, rows):
        """build a board from a square list of rows"""
        rows = [list(row) for row in rows]
        board = cls(len(rows))
        for row in rows:
            if len(row) != board.size:
                raise ValueError("rows must form a square matrix")
            for value in row:
                if not _is_tile_value(value):
                    raise ValueError(f"invalid tile value: {value!r}")
        board.grid = np.array(rows, dtype=np.int32)
        return board

    def copy(self):
        other = Board(self.size)
        other.grid = self.grid.copy()
        other.won = self.won
        return other

    def clear(self):
        """empty every cell and forget the win"""
        self.grid.fill(0)
        self.won = False

    def get_cell(self, row, col):
        return int(self.grid[row, col])

    def set_cell(self, row, col, value):
        self.grid[row, col] = value

    def to_rows(self):
        return self.grid.tolist()

    def empty_cells(self):
        """(row, col) of every empty cell, in row-major order"""
        return [(int(i), int(j)) for i, j in zip(*np.nonzero(self.grid == 0))]

    def max_tile(self):
        return int(self.grid.max())

    def rotate(self, turns):
        """rotate the board in place, clockwise by turns * 90 degrees"""
        self.grid = rotate_grid(self.grid, turns)

    def slide_columns_up(self):
        """
        slide every column up and merge equal neighbours

        each column is compacted upward, then scanned top to bottom once:
        a tile equal to the one below it doubles and the lower one is
        cleared, so a merged tile never merges again in the same pass.
        the column is compacted again afterwards.

        returns True if any cell changed. sets self.won when a merge
        produces WIN_TILE.
        """
        moved = False

        for j in range(self.size):
            column = [int(v) for v in self.grid[:, j] if v != 0]
            column += [0] * (self.size - len(column))

            for i in range(self.size - 1):
                if column[i] != 0 and column[i] == column[i + 1]:
                    column[i] *= 2
                    column[i + 1] = 0
                    moved = True
                    if column[i] == WIN_TILE:
                        self.won = True

            new_column = [v for v in column if v != 0]
            new_column += [0] * (self.size - len(new_column))

            if self.grid[:, j].tolist() != new_column:
                self.grid[:, j] = new_column
                moved = True

        return moved

    def slide(self, pre_turns, post_turns):
        """
        rotate by pre_turns, slide up, rotate by post_turns

        every direction is an upward slide seen through a rotation
        """
        self.rotate(pre_turns)
        moved = self.slide_columns_up()
        self.rotate(post_turns)
        return moved

    def has_adjacent_pair(self):
        """True if two horizontally or vertically adjacent cells are equal"""
        grid = self.grid
        return bool((grid[:, :-1] == grid[:, 1:]).any() or (grid[:-1, :] == grid[1:, :]).any())

    def is_game_over(self):
        """check if no move is possible: board full and no equal neighbours"""
        if (self.grid == 0).any():
            return False
        return not self.has_adjacent_pair()

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.grid, other.grid)

    def __repr__(self):
        return f"Board({self.to_rows()!r})"
