"""Square matrix helpers shared by the process and thread summing tools."""

from __future__ import annotations

import numpy as np

ROWS_COUNT = 16384
COLUMN_COUNT = 16384


def initialize_matrix(rows: int = ROWS_COUNT, columns: int = COLUMN_COUNT) -> np.ndarray:
    """Return a rows x columns matrix whose element (i, j) is i + j."""
    if rows < 0 or columns < 0:
        raise ValueError(f"matrix dimensions must not be negative: {rows}x{columns}")
    matrix = np.empty((rows, columns), dtype=np.int32)
    np.add(
        np.arange(rows, dtype=np.int32)[:, None],
        np.arange(columns, dtype=np.int32),
        out=matrix,
    )
    return matrix


def sum_matrix(matrix, start_row: int, end_row: int) -> int:
    """Sum every element of the rows from start_row to end_row, both included."""
    data = np.asarray(matrix)
    if start_row < 0 or end_row >= len(data):
        raise IndexError(
            f"row range {start_row}..{end_row} outside a matrix of {len(data)} rows"
        )
    return int(data[start_row : end_row + 1].sum(dtype=np.int64))


def format_matrix(matrix) -> str:
    """Render a matrix with each element followed by a tab and each row by a newline."""
    return "".join(
        "".join(f"{value}\t" for value in row) + "\n" for row in np.asarray(matrix).tolist()
    )


def partition_rows(total_rows: int, parts: int) -> list[tuple[int, int]]:
    """Split rows into equal half-open (start, stop) ranges; leftover rows are dropped."""
    if parts <= 0:
        raise ValueError(f"number of parts must be positive: {parts}")
    if total_rows < 0:
        raise ValueError(f"number of rows must not be negative: {total_rows}")
    size = total_rows // parts
    return [(index * size, (index + 1) * size) for index in range(parts)]