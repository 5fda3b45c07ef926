"""Sum a matrix by splitting its rows across separate worker processes.

The matrix and the partial sums live in memory-mapped files that the parent
and its workers share; each worker writes its partial sum into its own slot.
"""

from __future__ import annotations

import os
import subprocess
import sys
import tempfile
import time
from pathlib import Path

import numpy as np
from numpy.lib.format import open_memmap

from rowsum_sched.matrix import COLUMN_COUNT, ROWS_COUNT, partition_rows, sum_matrix

PROG = "rowsum-processes"
CHILD_FLAG = "--child"
_MODULE = "rowsum_sched.processes"
_PACKAGE_ROOT = Path(__file__).resolve().parent.parent


def _parse_count(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def _child_environment() -> dict[str, str]:
    env = dict(os.environ)
    paths = [str(_PACKAGE_ROOT), env.get("PYTHONPATH", "")]
    env["PYTHONPATH"] = os.pathsep.join(path for path in paths if path)
    return env


def _child_command(
    start_row: int, end_row: int, matrix_path: Path, partial_path: Path, index: int
) -> list[str]:
    return [
        sys.executable,
        "-m",
        _MODULE,
        CHILD_FLAG,
        str(start_row),
        str(end_row),
        str(matrix_path),
        str(partial_path),
        str(index),
    ]


def sum_with_processes(
    num_processes: int, rows: int = ROWS_COUNT, columns: int = COLUMN_COUNT
) -> tuple[int, float]:
    """Sum an i + j matrix with worker processes; return (total, elapsed seconds)."""
    if num_processes <= 0:
        raise ValueError(f"Invalid number of processes: {num_processes}")

    with tempfile.TemporaryDirectory(prefix="rowsum-") as workdir:
        matrix_path = Path(workdir) / "matrix.npy"
        partial_path = Path(workdir) / "partial_sums.npy"

        matrix = open_memmap(matrix_path, mode="w+", dtype=np.int32, shape=(rows, columns))
        np.add(
            np.arange(rows, dtype=np.int32)[:, None],
            np.arange(columns, dtype=np.int32),
            out=matrix,
        )
        matrix.flush()
        del matrix

        partial = open_memmap(partial_path, mode="w+", dtype=np.int64, shape=(num_processes,))
        partial.flush()

        started = time.perf_counter()
        env = _child_environment()
        workers = [
            subprocess.Popen(
                _child_command(start, stop - 1, matrix_path, partial_path, index), env=env
            )
            for index, (start, stop) in enumerate(partition_rows(rows, num_processes))
        ]
        failures = [worker.args for worker in workers if worker.wait() != 0]
        total = int(np.asarray(partial).sum(dtype=np.int64))
        elapsed = time.perf_counter() - started
        del partial

    if failures:
        raise RuntimeError(f"{len(failures)} worker process(es) failed")
    return total, elapsed


def child_main(argv=None) -> int:
    """Worker entry: sum a row range of the shared matrix into one partial-sum slot."""
    args = list(sys.argv[1:] if argv is None else argv)
    usage = (
        f"Usage: {PROG} {CHILD_FLAG} <starting_row_number> <ending_row_number> "
        "matrix_file partial_sum_file partial_sum_index"
    )
    if len(args) != 5:
        print(usage)
        return 1
    try:
        start_row, end_row, index = int(args[0]), int(args[1]), int(args[4])
    except ValueError:
        print(usage)
        return 1

    matrix = np.load(args[2], mmap_mode="r")
    if not 0 <= start_row < matrix.shape[0]:
        print(f"Invalid starting row id: {start_row}")
        return 1

    partial = np.load(args[3], mmap_mode="r+")
    partial[index] = sum_matrix(matrix, start_row, end_row)
    partial.flush()
    return 0


def main(argv=None) -> int:
    """Sum the full matrix with the number of processes given on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(f"Usage: {PROG} <number_of_processes>")
        return 1

    num_processes = _parse_count(args[0])
    if num_processes <= 0:
        print(f"Invalid number of processes: {num_processes}")
        return 1

    total, elapsed = sum_with_processes(num_processes)
    print(f"Total Sum: {total}")
    print(f"Execution Time with {num_processes} process(es): {elapsed:f}")
    return 0


def _entry(args: list[str]) -> int:
    if args and args[0] == CHILD_FLAG:
        return child_main(args[1:])
    return main(args)


if __name__ == "__main__":
    sys.exit(_entry(sys.argv[1:]))