# sudoku_solver.py
import time
from dataclasses import dataclass, field
from typing import List
from rich.console import Console

from constraints import conflicting_cells, is_possible
from errors import InvalidGrid
from grid import EMPTY, GRID_SIZE, MAX_VALUE, MIN_VALUE, Grid


@dataclass
class SolverConfig:
    """Configuración de la búsqueda."""
    max_solutions: int = 10   # tope de soluciones a enumerar
    verbose: bool = False     # mostrar progreso con rich


@dataclass
class SolveResult:
    solutions: List[Grid]
    status: str                # "solved" | "no-solution" | "cap-reached"
    duration_ms: int
    message: str = ""

    @property
    def cap_reached(self) -> bool:
        return self.status == "cap-reached"


@dataclass
class SudokuSolver:
    """Enumera soluciones de un tablero de Sudoku por backtracking.

    Parámetros
    ----------
    grid: Grid
        Tablero 9x9 válido con ceros en las casillas vacías. Se trabaja sobre
        una copia privada; el original no se modifica.
    config: SolverConfig, opcional
        Tope de soluciones y verbosidad.

    Las celdas se recorren por filas y los valores se prueban en orden
    ascendente, así que las soluciones salen en orden lexicográfico.
    """
    grid: Grid
    config: SolverConfig = field(default_factory=SolverConfig)

    def __post_init__(self) -> None:
        if self.config.max_solutions < 1:
            raise ValueError("max_solutions debe ser al menos 1.")
        self.console = Console()

    # --------------------------
    # API pública
    # --------------------------
    def solve(self) -> SolveResult:
        """Devuelve hasta ``max_solutions`` soluciones o lanza ``InvalidGrid`` si el tablero no es válido."""
        conflicts = conflicting_cells(self.grid)
        if conflicts:
            raise InvalidGrid(conflicts)

        start = time.time()
        self._log(f"Buscando hasta {self.config.max_solutions} soluciones…")
        board = self.grid.to_rows()
        solutions: List[Grid] = []
        # un tablero ya completo no deja nada por buscar aunque el tope sea 1
        capped = self._backtrack(board, solutions) and not self.grid.is_complete()
        duration_ms = int((time.time() - start) * 1000)

        if capped:
            status, message = "cap-reached", f"Se alcanzó el tope de {self.config.max_solutions} soluciones."
        elif solutions:
            status, message = "solved", f"Encontradas {len(solutions)} soluciones."
        else:
            status, message = "no-solution", "Sudoku sin solución."
        self._log(f"✅ {message} ({duration_ms} ms)")
        return SolveResult(solutions=solutions, status=status, duration_ms=duration_ms, message=message)

    # --------------------------
    # Métodos internos
    # --------------------------
    def _backtrack(self, board: List[List[int]], solutions: List[Grid]) -> bool:
        """Devuelve ``True`` si la búsqueda debe detenerse por el tope."""
        if len(solutions) >= self.config.max_solutions:
            return True
        cell = self._first_empty(board)
        if cell is None:
            solutions.append(Grid.from_rows(board))
            self._log(f"Solución {len(solutions)} encontrada")
            return len(solutions) >= self.config.max_solutions
        r, c = cell
        for num in range(MIN_VALUE, MAX_VALUE + 1):
            if not is_possible(board, r, c, num):
                continue
            board[r][c] = num
            stop = self._backtrack(board, solutions)
            board[r][c] = EMPTY
            if stop:
                return True
        return False

    @staticmethod
    def _first_empty(board: List[List[int]]):
        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                if board[r][c] == EMPTY:
                    return r, c
        return None

    def _log(self, msg: str) -> None:
        if self.config.verbose:
            self.console.print(msg, style="bold cyan")


def solve(grid: Grid, max_solutions: int = 10) -> List[Grid]:
    """Atajo: lista de soluciones de ``grid`` con el tope indicado."""
    return SudokuSolver(grid, SolverConfig(max_solutions=max_solutions)).solve().solutions


if __name__ == "__main__":
    ejemplo = Grid.from_rows([
        [5, 3, 0, 0, 7, 0, 0, 0, 0],
        [6, 0, 0, 1, 9, 5, 0, 0, 0],
        [0, 9, 8, 0, 0, 0, 0, 6, 0],
        [8, 0, 0, 0, 6, 0, 0, 0, 3],
        [4, 0, 0, 8, 0, 3, 0, 0, 1],
        [7, 0, 0, 0, 2, 0, 0, 0, 6],
        [0, 6, 0, 0, 0, 0, 2, 8, 0],
        [0, 0, 0, 4, 1, 9, 0, 0, 5],
        [0, 0, 0, 0, 8, 0, 0, 7, 9],
    ])
    resultado = SudokuSolver(ejemplo, SolverConfig(verbose=True)).solve()
    for solucion in resultado.solutions:
        print(solucion, end="\n\n")
