"""
board.py

4x4 tile-merging board stored as exponents (0 = empty, n = tile 2^n),
indexed 0..15 in row-major order. Slides run through numba kernels on a
NumPy grid; everything else is plain NumPy.
"""

import numpy as np
import numba
from typing import Any, Iterable, List, Tuple

BoardType = np.ndarray[Any, np.dtype[np.int64]]

# Reward returned by `Board.slide` when no cell moved
ILLEGAL: int = -1

UP: int = 0
RIGHT: int = 1
DOWN: int = 2
LEFT: int = 3
DIRECTIONS: List[int] = [UP, RIGHT, DOWN, LEFT]
DIRECTION_NAMES: List[str] = ["U", "R", "D", "L"]

FIBONACCI: List[int] = [0, 1, 2]
while len(FIBONACCI) < 32:
    FIBONACCI.append(FIBONACCI[-1] + FIBONACCI[-2])


@numba.njit(cache=True)
def _slide_line_numba(line: BoardType) -> Tuple[BoardType, np.int64]:
    new_line = np.zeros_like(line)
    reward: np.int64 = np.int64(0)
    target_idx: int = 0
    last_merged: bool = False

    for read_idx in range(len(line)):
        tile = line[read_idx]
        if tile == 0:
            continue

        if target_idx > 0 and new_line[target_idx - 1] == tile and not last_merged:
            new_line[target_idx - 1] = tile + 1
            reward += np.int64(1) << (tile + 1)
            last_merged = True
        else:
            new_line[target_idx] = tile
            target_idx += 1
            last_merged = False

    return new_line, reward


@numba.njit(cache=True)
def _slide_grid_numba(grid: BoardType, direction: int) -> Tuple[BoardType, np.int64]:
    size = grid.shape[0]
    new_grid = grid.copy()
    total_reward: np.int64 = np.int64(0)

    for k in range(size):
        if direction == 0:  # Up
            line = new_grid[:, k].copy()
        elif direction == 1:  # Right
            line = new_grid[k, ::-1].copy()
        elif direction == 2:  # Down
            line = new_grid[::-1, k].copy()
        else:  # Left
            line = new_grid[k, :].copy()

        processed, gain = _slide_line_numba(line)
        total_reward += gain

        if direction == 0:
            new_grid[:, k] = processed
        elif direction == 1:
            new_grid[k, :] = processed[::-1]
        elif direction == 2:
            new_grid[:, k] = processed[::-1]
        else:
            new_grid[k, :] = processed

    return new_grid, total_reward


class Board:
    """
    Game position for the player and environment agents.

    Slides and rotations mutate the board in place; callers that explore
    alternatives work on `copy()`.
    """

    SIZE: int = 4
    CELLS: int = SIZE * SIZE

    _grid: BoardType

    def __init__(self, cells: Iterable[int] = None):
        if cells is None:
            self._grid = np.zeros((self.SIZE, self.SIZE), dtype=np.int64)
        else:
            grid = np.array(cells, dtype=np.int64)
            assert grid.size == self.CELLS, "A board holds exactly 16 cells."
            assert np.all(grid >= 0), "Cells hold non-negative exponents."
            self._grid = grid.reshape(self.SIZE, self.SIZE).copy()

    # ------------------------------------------------------------------ #
    #                          CELL ACCESS                               #
    # ------------------------------------------------------------------ #
    def __getitem__(self, index: int) -> int:
        row, col = divmod(index, self.SIZE)
        return int(self._grid[row, col])

    def __setitem__(self, index: int, value: int) -> None:
        row, col = divmod(index, self.SIZE)
        self._grid[row, col] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._grid, other._grid))

    def __repr__(self) -> str:
        return f"Board({self.cells()})"

    def cells(self) -> List[int]:
        """Row-major list of the 16 exponents."""
        return [int(v) for v in self._grid.ravel()]

    def grid(self) -> BoardType:
        """Return a *copy* of the 4x4 exponent grid."""
        return self._grid.copy()

    def empty_cells(self) -> List[int]:
        return [int(i) for i in np.flatnonzero(self._grid == 0)]

    def max_tile(self) -> int:
        """Largest exponent on the board (0 for an empty board)."""
        return int(self._grid.max(initial=0))

    def copy(self) -> "Board":
        twin = Board.__new__(Board)
        twin._grid = self._grid.copy()
        return twin

    # ------------------------------------------------------------------ #
    #                            MOVES                                   #
    # ------------------------------------------------------------------ #
    def slide(self, direction: int) -> int:
        """
        Slide every tile toward `direction` (0 up, 1 right, 2 down, 3 left).
        Returns the merge reward, or ILLEGAL if nothing moved.
        """
        assert 0 <= direction <= 3, "Direction must be 0, 1, 2, or 3."
        new_grid, reward = _slide_grid_numba(self._grid, direction)
        if np.array_equal(new_grid, self._grid):
            return ILLEGAL
        self._grid = new_grid
        return int(reward)

    def rotate_left(self) -> None:
        """Rotate 90 degrees counter-clockwise in place."""
        self._grid = np.ascontiguousarray(np.rot90(self._grid, 1))

    @staticmethod
    def map_to_fibonacci(cell: int) -> int:
        return FIBONACCI[cell]

    def render_ascii(self, cell_width: int = 6) -> str:
        separator = "+" + ("-" * cell_width + "+") * self.SIZE
        output: List[str] = [separator]
        for r in range(self.SIZE):
            row_str: List[str] = ["|"]
            for c in range(self.SIZE):
                exp = int(self._grid[r, c])
                cell_str = str(1 << exp) if exp != 0 else "."
                row_str.append(cell_str.center(cell_width))
                row_str.append("|")
            output.append("".join(row_str))
            output.append(separator)
        return "\n".join(output)
