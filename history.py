# -*- coding: utf-8 -*-
"""history

Historial de tableros: índice 0 = tablero ingresado, 1.. = soluciones en
orden de descubrimiento. Un cursor indica cuál se muestra.
"""

from typing import Iterable, List, Optional

from grid import Grid


class SolutionHistory:
    def __init__(self, max_solutions: Optional[int] = None):
        self.max_solutions = max_solutions
        self._grids: List[Grid] = []
        self.cursor = 0

    def reset(self) -> None:
        self._grids = []
        self.cursor = 0

    def record_original(self, grid: Grid) -> None:
        """Fija el índice 0, añadiéndolo o sobrescribiéndolo."""
        if self._grids:
            self._grids[0] = grid.copy()
        else:
            self._grids.append(grid.copy())

    def append_solutions(self, grids: Iterable[Grid]) -> None:
        if not self._grids:
            raise IndexError("Registre primero el tablero original.")
        new = [g.copy() for g in grids]
        if self.max_solutions is not None and self.solution_count + len(new) > self.max_solutions:
            raise ValueError(f"El historial admite como máximo {self.max_solutions} soluciones.")
        self._grids.extend(new)

    def original(self) -> Grid:
        if not self._grids:
            raise IndexError("Historial vacío.")
        return self._grids[0].copy()

    def current(self) -> Grid:
        if not self._grids:
            raise IndexError("Historial vacío.")
        return self._grids[self.cursor].copy()

    def step_back(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1

    def step_forward(self) -> None:
        if self.cursor < len(self._grids) - 1:
            self.cursor += 1

    def go_to_first_solution(self) -> None:
        # 1 si hay soluciones, 0 si solo está el original
        self.cursor = 1 if self.solution_count else 0

    @property
    def solution_count(self) -> int:
        return max(len(self._grids) - 1, 0)

    def __len__(self) -> int:
        return len(self._grids)
