# annotator/utils.py

from typing import List, Tuple

import numpy as np

from .errors import FileReadError

NEIGHBOR_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),          (0, 1),
    (1, -1), (1, 0), (1, 1)
)


def get_neighbors(row: int, col: int, rows: int, cols: int) -> List[Tuple[int, int]]:
    """
    Return the in-bounds (row, col) coordinates around (row, col), 8-way.
    """
    neighbors = []
    for dr, dc in NEIGHBOR_OFFSETS:
        nr, nc = row + dr, col + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            neighbors.append((nr, nc))
    return neighbors


def to_grid(cells: List[int], rows: int, cols: int) -> np.ndarray:
    """
    Reshape row-major cells into a (rows, cols) integer array.
    """
    return np.array(cells, dtype=int).reshape(rows, cols)


def read_board_file(path: str) -> str:
    """
    Read a board file as UTF-8 text. Any failure is wrapped in FileReadError.
    """
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(path, e) from e
