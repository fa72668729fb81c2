# -*- coding: utf-8 -*-
"""constraints

Predicados puros sobre un tablero: fila, columna y subcuadro 3x3.
Aceptan cualquier tablero indexable como ``board[r][c]`` (``Grid`` o lista de listas).
"""

from typing import List, Sequence, Tuple

from grid import BOX_SIZE, EMPTY, GRID_SIZE, INVALID, MAX_VALUE, MIN_VALUE

Board = Sequence[Sequence[int]]
Cell = Tuple[int, int]


def box_origin(row: int, col: int) -> Cell:
    """Esquina superior izquierda del subcuadro que contiene (row, col)."""
    return BOX_SIZE * (row // BOX_SIZE), BOX_SIZE * (col // BOX_SIZE)


def is_possible(board: Board, row: int, col: int, value: int) -> bool:
    """``value`` no aparece en otra celda de su fila, columna o subcuadro."""
    # fila / columna
    for k in range(GRID_SIZE):
        if k != col and board[row][k] == value:
            return False
        if k != row and board[k][col] == value:
            return False
    # subcuadro
    br, bc = box_origin(row, col)
    for i in range(br, br + BOX_SIZE):
        for j in range(bc, bc + BOX_SIZE):
            if (i != row or j != col) and board[i][j] == value:
                return False
    return True


def is_cell_valid(board: Board, row: int, col: int) -> bool:
    value = board[row][col]
    if value == EMPTY:
        return True
    if value == INVALID or not MIN_VALUE <= value <= MAX_VALUE:
        return False
    return is_possible(board, row, col, value)


def cell_validity(board: Board) -> List[List[bool]]:
    """Mapa 9x9 de validez por celda, para resaltar conflictos."""
    return [[is_cell_valid(board, r, c) for c in range(GRID_SIZE)] for r in range(GRID_SIZE)]


def conflicting_cells(board: Board) -> List[Cell]:
    return [
        (r, c)
        for r in range(GRID_SIZE)
        for c in range(GRID_SIZE)
        if not is_cell_valid(board, r, c)
    ]


def is_grid_valid(board: Board) -> bool:
    return all(
        is_cell_valid(board, r, c)
        for r in range(GRID_SIZE)
        for c in range(GRID_SIZE)
    )
