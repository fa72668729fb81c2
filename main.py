# -*- coding: utf-8 -*-
"""main

Resolución de Sudokus desde archivos CSV:
  1) Carga del tablero (9 filas x 9 enteros separados por comas)
  2) Validación de filas, columnas y subcuadros
  3) Enumeración por backtracking hasta el tope de soluciones
  4) Impresión del original y de cada solución; opcionalmente se guardan

Uso:
  python main.py f1.csv f2.csv -n 5 -o soluciones -v
"""

import argparse
import os
import sys
from typing import List, Optional

from rich import print
from tqdm import tqdm

from errors import FormatError, InvalidGrid
from grid_codec import save_grid
from session import SudokuSession
from sudoku_solver import SolverConfig


def _print_grid(title: str, grid) -> None:
    print(f"\n[bold]{title}[/bold]")
    for row in grid:
        print(row)


def run_file(path: str, session: SudokuSession, out_dir: Optional[str] = None) -> bool:
    """Resuelve un archivo. Devuelve ``False`` si no se pudo cargar o es inválido."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            session.decode(f.read())
    except FileNotFoundError:
        print(f"[red]Archivo no encontrado: {path}[/red]")
        return False
    except FormatError as e:
        print(f"[red]{path}: {e}[/red]")
        return False

    _print_grid(f"Sudoku {path}:", session.grid)
    try:
        result = session.solve()
    except InvalidGrid as e:
        print(f"[red]{path}: {e}[/red]")
        return False

    print(f"[cyan]{result.message}[/cyan]")
    stem = os.path.splitext(os.path.basename(path))[0]
    # el cursor queda en la solución 1; se avanza hasta la última
    for _ in range(len(result.solutions)):
        _print_grid(f"Solución {session.cursor}:", session.current())
        if out_dir:
            target = save_grid(os.path.join(out_dir, f"{stem}_sol{session.cursor}"), session.current())
            print(f"[green]✅ Guardada en {target}[/green]")
        session.step_forward()
    return True


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Solucionador de Sudoku por backtracking")
    parser.add_argument("puzzles", nargs="+", help="archivos CSV con el tablero (0 = vacío)")
    parser.add_argument("-n", "--max-solutions", type=int, default=SolverConfig.max_solutions,
                        help="tope de soluciones por tablero")
    parser.add_argument("-o", "--out-dir", default=None, help="directorio donde guardar las soluciones")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.max_solutions < 1:
        parser.error("--max-solutions debe ser al menos 1")
    if args.out_dir:
        os.makedirs(args.out_dir, exist_ok=True)

    config = SolverConfig(max_solutions=args.max_solutions, verbose=args.verbose)
    session = SudokuSession(config)

    paths = args.puzzles
    if args.verbose:
        paths = tqdm(paths, desc="Tableros", ncols=80, colour="blue")

    ok = True
    for path in paths:
        ok = run_file(path, session, args.out_dir) and ok
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
