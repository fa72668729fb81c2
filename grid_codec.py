# -*- coding: utf-8 -*-
"""grid_codec

Formato de texto de un tablero: 9 líneas, cada una con 9 enteros separados
por comas y terminada en salto de línea. 0 = celda vacía.

La decodificación solo valida la forma; el rango de los valores lo juzga
``constraints``.
"""

import re
from pathlib import Path
from typing import List, Union

from errors import FormatError
from grid import GRID_SIZE, Grid

DELIMITER = ","
SUFFIX = ".csv"
INT_FIELD = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)
INT_MIN, INT_MAX = -2**31, 2**31 - 1   # rango de un entero de 32 bits


def encode(grid: Grid) -> str:
    return "".join(DELIMITER.join(str(v) for v in row) + "\n" for row in grid.to_rows())


def decode(text: str) -> Grid:
    """Convierte texto en ``Grid`` o lanza ``FormatError`` con la fila/columna culpable."""
    lines = text.splitlines()
    if len(lines) != GRID_SIZE:
        raise FormatError(
            f"Archivo inválido: se esperaban {GRID_SIZE} filas y hay {len(lines)}."
        )

    # 1) número de campos por fila
    fields: List[List[str]] = []
    for r, line in enumerate(lines):
        parts = line.split(DELIMITER)
        if len(parts) != GRID_SIZE:
            raise FormatError(
                f"Archivo inválido: la fila {r} tiene {len(parts)} entradas en lugar de {GRID_SIZE}.",
                row=r,
            )
        fields.append(parts)

    # 2) cada campo debe ser entero
    rows: List[List[int]] = []
    for r, parts in enumerate(fields):
        row: List[int] = []
        for c, part in enumerate(parts):
            value = int(part) if INT_FIELD.fullmatch(part) else None
            if value is None or not INT_MIN <= value <= INT_MAX:
                raise FormatError(
                    f"Archivo inválido: entrada no válida en la fila {r} y columna {c}.",
                    row=r,
                    col=c,
                )
            row.append(value)
        rows.append(row)
    return Grid.from_rows(rows)


def save_grid(path: Union[str, Path], grid: Grid) -> Path:
    """Escribe ``grid`` en ``path`` (añade ``.csv`` si falta) y devuelve la ruta final."""
    path = Path(path)
    if path.suffix != SUFFIX:
        path = path.with_name(path.name + SUFFIX)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(encode(grid))
    return path


def load_grid(path: Union[str, Path]) -> Grid:
    with open(path, "r", encoding="utf-8") as f:
        return decode(f.read())
