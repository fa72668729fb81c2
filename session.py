# -*- coding: utf-8 -*-
"""session

Fachada del núcleo para la capa de presentación (GUI, CLI, ...): recibe
valores crudos de las celdas, valida, resuelve y navega el historial.
Cada tablero que entra o sale es una copia.
"""

from typing import Dict, List, Optional, Sequence, Tuple, Union
from rich.console import Console

from constraints import cell_validity, conflicting_cells, is_grid_valid
from errors import InvalidCellValue, InvalidGrid
from grid import EMPTY, GRID_SIZE, INVALID, MAX_VALUE, Grid
from grid_codec import decode, encode
from history import SolutionHistory
from sudoku_solver import SolveResult, SolverConfig, SudokuSolver

RawValue = Union[str, int, None]


def parse_cell(text: RawValue, row: int, col: int) -> int:
    """Valor de una celda: vacío -> 0; entero en [0, 9] -> el entero.

    Cualquier otra cosa (texto no numérico o fuera de rango) lanza
    ``InvalidCellValue``.
    """
    if text is None:
        return EMPTY
    raw = str(text).strip()
    if raw == "":
        return EMPTY
    try:
        value = int(raw)
    except ValueError:
        raise InvalidCellValue(row, col, raw) from None
    if not EMPTY <= value <= MAX_VALUE:
        raise InvalidCellValue(row, col, raw)
    return value


class SudokuSession:
    def __init__(self, config: Optional[SolverConfig] = None):
        self.config = config or SolverConfig()
        self.console = Console()
        self.grid = Grid.empty()
        self.cell_errors: Dict[Tuple[int, int], InvalidCellValue] = {}
        self.history = SolutionHistory(self.config.max_solutions)

    def _log(self, msg: str) -> None:
        if self.config.verbose:
            self.console.print(msg, style="bold cyan")

    # --------------------------
    # Entrada y validación
    # --------------------------
    def set_grid(self, raw_values: Sequence[Sequence[RawValue]]) -> None:
        """Carga 9x9 valores crudos; las celdas mal formadas quedan como ``INVALID``."""
        if len(raw_values) != GRID_SIZE or any(len(row) != GRID_SIZE for row in raw_values):
            raise ValueError("El tablero debe ser 9x9.")
        self.cell_errors = {}
        grid = Grid.empty()
        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                try:
                    grid.set(r, c, parse_cell(raw_values[r][c], r, c))
                except InvalidCellValue as e:
                    self.cell_errors[(r, c)] = e
                    grid.set(r, c, INVALID)
        self.grid = grid
        if self.cell_errors:
            self._log(f"⚠️ {len(self.cell_errors)} celdas con valores inválidos.")

    def is_grid_valid(self) -> bool:
        return is_grid_valid(self.grid)

    def cell_validity(self) -> List[List[bool]]:
        return cell_validity(self.grid)

    # --------------------------
    # Resolución e historial
    # --------------------------
    def solve(self, max_solutions: Optional[int] = None) -> SolveResult:
        """Resuelve el tablero actual y deja el cursor en la primera solución (o en el original)."""
        conflicts = conflicting_cells(self.grid)
        if conflicts:
            raise InvalidGrid(conflicts)
        cap = self.config.max_solutions if max_solutions is None else max_solutions
        solver = SudokuSolver(self.grid, SolverConfig(max_solutions=cap, verbose=self.config.verbose))
        result = solver.solve()

        self.history = SolutionHistory(cap)
        self.history.record_original(self.grid)
        self.history.append_solutions(result.solutions)
        self.history.go_to_first_solution()
        return result

    def history_length(self) -> int:
        return len(self.history)

    @property
    def cursor(self) -> int:
        return self.history.cursor

    def current(self) -> Grid:
        return self.history.current()

    def step_back(self) -> None:
        self.history.step_back()

    def step_forward(self) -> None:
        self.history.step_forward()

    def clear(self) -> None:
        """Tablero vacío e historial reiniciado."""
        self.grid = Grid.empty()
        self.cell_errors = {}
        self.history.reset()

    def reset(self) -> None:
        """Vuelve al tablero ingresado para seguir editándolo."""
        if len(self.history):
            self.grid = self.history.original()
        self.history.reset()

    # --------------------------
    # Persistencia
    # --------------------------
    def encode(self) -> str:
        """Texto del tablero mostrado (la entrada del historial bajo el cursor, o el ingresado).

        Se niega si ese tablero no es válido.
        """
        shown = self.history.current() if len(self.history) else self.grid
        conflicts = conflicting_cells(shown)
        if conflicts:
            raise InvalidGrid(conflicts)
        return encode(shown)

    def decode(self, text: str) -> Grid:
        """Limpia la sesión y carga el tablero del texto. ``FormatError`` deja la sesión vacía."""
        self.clear()
        grid = decode(text)
        self.grid = grid
        if not is_grid_valid(grid):
            self._log("⚠️ El tablero cargado tiene conflictos.")
        return grid.copy()
