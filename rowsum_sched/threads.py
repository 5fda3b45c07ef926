"""Sum a matrix by splitting its rows across worker threads."""

from __future__ import annotations

import sys
import time
from concurrent.futures import ThreadPoolExecutor

from rowsum_sched.matrix import initialize_matrix, partition_rows, sum_matrix

PROG = "rowsum-threads"
MAX_THREADS = 256


def _parse_count(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def validate_thread_count(num_threads: int) -> int:
    """Return the count if it is 1 or an even number up to MAX_THREADS, else raise."""
    if (num_threads % 2 != 0 and num_threads != 1) or num_threads <= 0 or num_threads > MAX_THREADS:
        raise ValueError(f"Invalid number of threads: {num_threads}")
    return num_threads


def sum_with_threads(num_threads: int, matrix) -> tuple[int, float]:
    """Sum the matrix with the given number of threads; return (total, elapsed seconds)."""
    validate_thread_count(num_threads)
    ranges = partition_rows(len(matrix), num_threads)
    starts = [start for start, _ in ranges]
    ends = [stop - 1 for _, stop in ranges]

    started = time.perf_counter()
    with ThreadPoolExecutor(max_workers=num_threads) as pool:
        partial_sums = list(pool.map(sum_matrix, [matrix] * num_threads, starts, ends))
    total = sum(partial_sums)
    elapsed = time.perf_counter() - started
    return total, elapsed


def main(argv=None) -> int:
    """Sum the full matrix with the number of threads given on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(f"Usage: {PROG} <number_of_threads>")
        return 1

    num_threads = _parse_count(args[0])
    try:
        validate_thread_count(num_threads)
    except ValueError as error:
        print(error)
        return 1

    matrix = initialize_matrix()
    total, elapsed = sum_with_threads(num_threads, matrix)
    print(f"Total sum: {total}")
    print(f"Execution Time with {num_threads} thread(s): {elapsed:f} seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())