"""CPU scheduling simulations (FCFS, SJF and SRJF) over a set of summing jobs."""

from __future__ import annotations

import sys
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, TextIO


class SchedulerState:
    """Run flags shared by all jobs, one slot per job id: 0 ready, 1 running."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"scheduler size must not be negative: {size}")
        self._slots = [0] * size
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._slots)

    def __getitem__(self, index: int) -> int:
        with self._lock:
            return self._slots[index]

    def compare_and_swap(self, index: int, expected: int, new_value: int) -> bool:
        """Store new_value in the slot if it holds expected; report whether it did."""
        with self._lock:
            if self._slots[index] != expected:
                return False
            self._slots[index] = new_value
            return True

    def set(self, index: int, value: int) -> None:
        """Store value in the slot unconditionally."""
        with self._lock:
            self._slots[index] = value


@dataclass(eq=False)
class ThreadData:
    """One simulated job: its timing figures and the values it sums."""

    tid: int
    burst_time: int
    arrival_time: int
    array: list[int]
    scheduler: SchedulerState
    remaining_time: int = field(init=False)
    waiting_time: int = 0
    turnaround_time: int = 0
    completion_time: int = 0
    sum: int = 0

    def __post_init__(self) -> None:
        self.remaining_time = self.burst_time

    def calculate_sum(self) -> int:
        """Sum the first burst_time values of the array, store and return it."""
        if self.burst_time > len(self.array):
            raise IndexError(
                f"thread {self.tid} needs {self.burst_time} values, has {len(self.array)}"
            )
        self.sum = sum(self.array[: self.burst_time])
        return self.sum

    def reset(self) -> None:
        """Clear the results of a previous run so the job can be scheduled again."""
        self.waiting_time = 0
        self.turnaround_time = 0
        self.remaining_time = self.burst_time
        self.sum = 0


def calculate_times(threads: list[ThreadData]) -> None:
    """Derive turnaround and completion times from waiting, burst and arrival times."""
    for thread in threads:
        thread.turnaround_time = thread.waiting_time + thread.burst_time
        thread.completion_time = thread.turnaround_time + thread.arrival_time


def format_results(threads: list[ThreadData]) -> str:
    """Render the per-job results table."""
    lines = ["", "Scheduling Results"]
    lines.extend(
        f"Thread {thread.tid}: Waiting Time: {thread.waiting_time}, "
        f"Turnaround Time: {thread.turnaround_time}, "
        f"Completion Time: {thread.completion_time}, Sum: {thread.sum}"
        for thread in threads
    )
    return "\n".join(lines) + "\n"


def _execute(thread: ThreadData, emit: Callable[[str], None]) -> None:
    emit(f"Thread {thread.tid} is now running.\n")
    if thread.scheduler.compare_and_swap(thread.tid, 0, 1):
        thread.calculate_sum()
        time.sleep(thread.burst_time / 1000)
        thread.scheduler.set(thread.tid, 0)


def _run_concurrently(threads: list[ThreadData], out: TextIO) -> None:
    lock = threading.Lock()

    def emit(text: str) -> None:
        with lock:
            out.write(text)

    with ThreadPoolExecutor(max_workers=max(1, len(threads))) as pool:
        list(pool.map(_execute, threads, [emit] * len(threads)))


def fcfs(threads: list[ThreadData], out: TextIO | None = None) -> list[ThreadData]:
    """First-come, first-served in list order; results are written to out."""
    out = sys.stdout if out is None else out
    current_time = 0
    for thread in threads:
        thread.waiting_time = current_time - thread.arrival_time
        current_time += thread.burst_time

    _run_concurrently(threads, out)
    calculate_times(threads)
    out.write(format_results(threads))
    return threads


def sjf(threads: list[ThreadData], out: TextIO | None = None) -> list[ThreadData]:
    """Shortest job first; the list is reordered in place into running order.

    The earliest arrival runs first; the others follow by burst time, ties kept
    in arrival order.
    """
    out = sys.stdout if out is None else out
    if threads:
        by_arrival = sorted(threads, key=lambda thread: thread.arrival_time)
        threads[:] = by_arrival[:1] + sorted(
            by_arrival[1:], key=lambda thread: thread.burst_time
        )

    current_time = 0
    for thread in threads:
        current_time = max(current_time, thread.arrival_time)
        thread.waiting_time = current_time - thread.arrival_time
        current_time += thread.burst_time

    _run_concurrently(threads, out)
    calculate_times(threads)
    out.write(format_results(threads))
    return threads


def srjf(threads: list[ThreadData] | None, out: TextIO | None = None) -> list[ThreadData]:
    """Preemptive shortest remaining job first, one time unit per step.

    Finished jobs are moved to the front of the list in completion order.
    """
    out = sys.stdout if out is None else out
    if not threads:
        out.write("No threads given.")
        return [] if threads is None else threads

    spent = [thread.tid for thread in threads if thread.remaining_time <= 0]
    if spent:
        raise ValueError(f"threads with no remaining time cannot be scheduled: {spent}")

    completed = 0
    current_time = 0
    while completed < len(threads):
        ready = [
            (thread.remaining_time, index)
            for index, thread in enumerate(threads)
            if thread.arrival_time <= current_time and thread.remaining_time > 0
        ]
        if not ready:
            current_time += 1
            continue

        _, index = min(ready)
        chosen = threads[index]
        out.write(
            f"Thread {chosen.tid} is now running (Remaining Time: {chosen.remaining_time})\n"
        )
        chosen.remaining_time -= 1
        current_time += 1
        for other in threads:
            if other.tid != chosen.tid and other.remaining_time > 0:
                other.waiting_time += 1

        if chosen.remaining_time == 0:
            chosen.completion_time = current_time
            chosen.calculate_sum()
            completed += 1
            out.write(f"Thread {chosen.tid} has finished execution\n")
            slot = completed - 1
            threads[slot], threads[index] = threads[index], threads[slot]

    calculate_times(threads)
    out.write(format_results(threads))
    return threads