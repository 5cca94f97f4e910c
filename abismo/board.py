"""Game board: a grid of paths, abysses and an exit."""

from __future__ import annotations

import random
from enum import IntEnum
from os import PathLike
from pathlib import Path
from typing import Iterable, Sequence

DEFAULT_ROWS = 12
DEFAULT_COLS = 12

# Starting cells of the three avatars; generation keeps them walkable.
START_POSITIONS = ((1, 1), (1, 2), (2, 1))


class CellType(IntEnum):
    """Kind of a board cell, with its numeric code in board files."""

    EMPTY = 0
    PATH = 1
    ABYSS = 2
    EXIT = 3
    PLAYER = 4


class Board:
    """A rectangular board; cells outside it count as abysses."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.rows = DEFAULT_ROWS
        self.cols = DEFAULT_COLS
        self._grid: list[list[CellType]] = []
        self._generate()

    @classmethod
    def from_grid(cls, grid: Iterable[Sequence[int]]) -> "Board":
        """Build a board from rows of cell codes."""
        board = cls.__new__(cls)
        board._rng = random.Random()
        board._set_grid(grid)
        return board

    def _set_grid(self, grid: Iterable[Sequence[int]]) -> None:
        rows = [list(row) for row in grid]
        if not rows or not rows[0]:
            raise ValueError("board must have at least one row and one column")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("board rows must all have the same length")
        try:
            self._grid = [[CellType(value) for value in row] for row in rows]
        except ValueError as exc:
            raise ValueError(f"invalid cell code: {exc}") from None
        self.rows = len(rows)
        self.cols = width

    def _generate(self) -> None:
        self.rows = DEFAULT_ROWS
        self.cols = DEFAULT_COLS
        rows, cols = self.rows, self.cols

        def roll() -> int:
            return self._rng.randint(1, 100)

        grid = [[CellType.PATH] * cols for _ in range(rows)]
        for row in grid:
            row[0] = row[-1] = CellType.ABYSS
        for c in range(cols):
            grid[0][c] = grid[-1][c] = CellType.ABYSS

        for r in range(2, rows - 2):
            for c in range(2, cols - 2):
                if roll() <= 15:
                    grid[r][c] = CellType.ABYSS

        for _ in range(3 + roll() % 3):
            centre_row = 2 + roll() % (rows - 4)
            centre_col = 2 + roll() % (cols - 4)
            size = 2 + roll() % 2
            for r in range(centre_row, min(centre_row + size, rows - 1)):
                for c in range(centre_col, min(centre_col + size, cols - 1)):
                    if roll() <= 70:
                        grid[r][c] = CellType.ABYSS

        self._grid = grid
        for r, c in START_POSITIONS:
            grid[r][c] = CellType.PATH
        for r, c in START_POSITIONS:
            self._clear_safe_path(r, c)

        grid[rows - 2][cols - 2] = CellType.EXIT
        self._open_exit_area()

        print(f"Tablero generado automáticamente con {self.count_abysses()} abismos.")

    def _clear_safe_path(self, row: int, col: int) -> None:
        for offset in range(3):
            if row + offset < self.rows - 1:
                self._grid[row + offset][col] = CellType.PATH
            if col + offset < self.cols - 1:
                self._grid[row][col + offset] = CellType.PATH

    def _open_exit_area(self) -> None:
        exit_row, exit_col = self.rows - 2, self.cols - 2
        for r in range(exit_row - 2, exit_row + 1):
            for c in range(exit_col - 2, exit_col + 1):
                inside = 0 < r < self.rows - 1 and 0 < c < self.cols - 1
                if inside and self._grid[r][c] is CellType.ABYSS:
                    if self._rng.randint(1, 100) <= 50:
                        self._grid[r][c] = CellType.PATH

    def load(self, path: str | PathLike[str]) -> None:
        """Replace the board with one read from a file.

        The file holds the row count, the column count and then every cell
        code, separated by whitespace. If the file cannot be opened a new
        random board is generated instead.
        """
        try:
            text = Path(path).read_text()
        except OSError:
            print(
                f"No se pudo abrir el archivo {path}. "
                "Usando tablero generado automáticamente."
            )
            self._generate()
            return

        tokens = [int(token) for token in text.split()]
        if len(tokens) < 2:
            raise ValueError("board file must start with row and column counts")
        rows, cols, *cells = tokens
        if rows <= 0 or cols <= 0:
            raise ValueError("board dimensions must be positive")
        if len(cells) < rows * cols:
            raise ValueError(
                f"board file holds {len(cells)} cells, expected {rows * cols}"
            )
        self._set_grid(cells[r * cols:(r + 1) * cols] for r in range(rows))
        print(f"Tablero cargado desde archivo: {path}")

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_valid_position(self, row: int, col: int) -> bool:
        """True when the cell is on the board and not an abyss."""
        return self._in_bounds(row, col) and self._grid[row][col] is not CellType.ABYSS

    def cell_type(self, row: int, col: int) -> CellType:
        """Type of a cell; anything off the board is an abyss."""
        if not self._in_bounds(row, col):
            return CellType.ABYSS
        return self._grid[row][col]

    def is_exit(self, row: int, col: int) -> bool:
        return self.cell_type(row, col) is CellType.EXIT

    def count_abysses(self) -> int:
        return sum(cell is CellType.ABYSS for row in self._grid for cell in row)