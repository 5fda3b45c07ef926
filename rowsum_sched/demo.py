"""Run the three scheduling simulations one after another on a fixed workload."""

from __future__ import annotations

import sys
from typing import TextIO

from rowsum_sched.scheduling import SchedulerState, ThreadData, fcfs, sjf, srjf

# (job id, arrival time, values to sum); the burst time is the number of values.
_WORKLOAD = (
    (0, 0, range(1, 16)),
    (1, 3, range(16, 21)),
    (2, 5, range(21, 31)),
    (3, 2, range(31, 38)),
)


def default_threads(state: SchedulerState | None = None) -> list[ThreadData]:
    """Build the standard four jobs, all sharing one scheduler state."""
    if state is None:
        state = SchedulerState(len(_WORKLOAD))
    return [
        ThreadData(
            tid=tid,
            burst_time=len(values),
            arrival_time=arrival,
            array=list(values),
            scheduler=state,
        )
        for tid, arrival, values in _WORKLOAD
    ]


def run_all(out: TextIO | None = None) -> list[ThreadData]:
    """Run FCFS, SJF and SRJF in turn on the same jobs and return them."""
    out = sys.stdout if out is None else out
    threads = default_threads()

    out.write("Running FCFS Scheduling:\n")
    fcfs(threads, out)
    for thread in threads:
        thread.reset()

    out.write("\nRunning SJF Scheduling:\n")
    sjf(threads, out)
    for thread in threads:
        thread.reset()

    out.write("\nRunning SRJF Scheduling:\n")
    srjf(threads, out)
    return threads


def main(argv=None) -> int:
    """Print the results of all three simulations."""
    run_all(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())