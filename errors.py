# -*- coding: utf-8 -*-
"""errors

Errores del núcleo del solucionador. Todos son recuperables: la capa de
presentación los captura y los muestra al usuario.
"""

from typing import List, Optional, Tuple


class SudokuError(Exception):
    """Base de todos los errores del solucionador."""


class InvalidCellValue(SudokuError):
    """Una entrada de celda no es un entero en [0, 9] ni está vacía."""

    def __init__(self, row: int, col: int, text: str):
        self.row = row
        self.col = col
        self.text = text
        super().__init__(f"Valor inválido {text!r} en fila {row} y columna {col}")


class InvalidGrid(SudokuError):
    """El tablero viola las restricciones de fila, columna o caja."""

    def __init__(self, cells: List[Tuple[int, int]]):
        self.cells = list(cells)
        listed = ", ".join(f"({r},{c})" for r, c in self.cells)
        super().__init__(f"Tablero inválido; celdas en conflicto: {listed}")


class FormatError(SudokuError):
    """El texto no tiene la forma de 9 filas x 9 enteros separados por comas."""

    def __init__(self, message: str, row: Optional[int] = None, col: Optional[int] = None):
        self.row = row
        self.col = col
        super().__init__(message)
