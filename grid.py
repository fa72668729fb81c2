# -*- coding: utf-8 -*-
"""grid

Tablero 9x9 respaldado por un arreglo de numpy. Solo almacena y copia;
las reglas viven en ``constraints``.
"""

from typing import Iterator, List, Sequence
import numpy as np

GRID_SIZE = 9
BOX_SIZE = 3
MIN_VALUE = 1
MAX_VALUE = 9
EMPTY = 0
INVALID = -1   # centinela para entradas mal formadas


class Grid:
    """Instantánea 9x9 de enteros (0 = vacío).

    Se accede como ``grid[r][c]`` o ``grid[r, c]``. La igualdad es por valor.
    """

    def __init__(self, cells: np.ndarray):
        if cells.shape != (GRID_SIZE, GRID_SIZE):
            raise ValueError("El tablero debe ser 9x9.")
        self.cells = cells.astype(np.int64, copy=True)

    @classmethod
    def empty(cls) -> "Grid":
        return cls(np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int64))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        if len(rows) != GRID_SIZE or any(len(row) != GRID_SIZE for row in rows):
            raise ValueError("El tablero debe ser 9x9.")
        return cls(np.array([[int(v) for v in row] for row in rows], dtype=np.int64))

    def copy(self) -> "Grid":
        return Grid(self.cells)

    def to_rows(self) -> List[List[int]]:
        return [[int(v) for v in row] for row in self.cells]

    def set(self, row: int, col: int, value: int) -> None:
        self.cells[row, col] = value

    def is_complete(self) -> bool:
        return not np.any(self.cells == EMPTY)

    def __getitem__(self, key):
        item = self.cells[key]
        return int(item) if np.ndim(item) == 0 else item

    def __iter__(self) -> Iterator[List[int]]:
        return iter(self.to_rows())

    def __len__(self) -> int:
        return GRID_SIZE

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Grid({self.to_rows()!r})"

    def __str__(self) -> str:
        return "\n".join(" ".join(str(v) if v else "." for v in row) for row in self.to_rows())
