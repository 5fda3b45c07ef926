# rowsum_sched

Three small operating-systems exercises in one package:

- **Process-parallel row summing** (`rowsum_sched.processes`). A matrix whose
  element `(i, j)` holds `i + j` is written to a memory-mapped file in a
  temporary directory. Worker processes (started as
  `python -m rowsum_sched.processes --child ...`) each sum a contiguous band
  of rows and write the result into their own slot of a second memory-mapped
  array of partial sums; the parent then adds the partial sums up.
- **Thread-parallel row summing** (`rowsum_sched.threads`). The same matrix
  and the same split of rows, summed by a pool of worker threads.
- **CPU scheduling simulation** (`rowsum_sched.scheduling`,
  `rowsum_sched.demo`). Four jobs with fixed burst and arrival times are run
  under First-Come-First-Served, Shortest-Job-First and
  Shortest-Remaining-Job-First, and the waiting, turnaround and completion
  times and the sum computed by each job are reported.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

Sum the full 16384 x 16384 matrix with a given number of worker processes:

```
rowsum-processes 4
```

Sum the same matrix with a given number of threads. The count must be 1 or
an even number, at most 256:

```
rowsum-threads 8
```

Both print the total sum and the elapsed time in seconds. A missing argument
prints a usage line; an invalid count is reported; in both cases the command
exits with status 1.

Rows are split into equal bands of `rows // count`; rows left over when the
count does not divide the row count are not summed.

Run the three scheduling algorithms on the built-in job set:

```
rowsum-schedule
```

## Library use

```python
from rowsum_sched.matrix import initialize_matrix, sum_matrix, partition_rows, format_matrix
from rowsum_sched.threads import sum_with_threads, validate_thread_count
from rowsum_sched.processes import sum_with_processes

matrix = initialize_matrix(8, 8)      # int32 array, element (i, j) == i + j
sum_matrix(matrix, 0, 7)              # rows 0..7, both ends included
partition_rows(8, 4)                  # [(0, 2), (2, 4), (4, 6), (6, 8)], half-open
format_matrix(matrix)                 # tab-separated text, one line per row
total, seconds = sum_with_threads(4, matrix)
total, seconds = sum_with_processes(2, 8, 8)
```

`sum_matrix` raises `IndexError` for a row range outside the matrix,
`sum_with_threads` and `validate_thread_count` raise `ValueError` for an
invalid thread count, and `sum_with_processes` raises `ValueError` for a
non-positive process count and `RuntimeError` if a worker process fails.

Scheduling:

```python
import sys
from rowsum_sched.demo import default_threads, run_all
from rowsum_sched.scheduling import SchedulerState, fcfs, sjf, srjf, format_results

jobs = default_threads(SchedulerState(4))
srjf(jobs, sys.stdout)

run_all(sys.stdout)                   # FCFS, SJF and SRJF in turn
```

Each job is a `ThreadData` holding its id, burst time, arrival time, the
values it sums and a shared `SchedulerState` of run flags.
`ThreadData.calculate_sum()` sums the first `burst_time` values and
`ThreadData.reset()` clears the results of a previous run.
`calculate_times` fills in turnaround and completion times from the waiting
times, and `format_results` renders the per-job table that the algorithms
write to their output stream.

`fcfs` keeps the list order; `sjf` reorders the list in place (earliest
arrival first, the rest by burst time); `srjf` steps one time unit at a time,
always running the ready job with the least remaining time, and moves finished
jobs to the front of the list in completion order. `fcfs` and `sjf` run each
job on a worker thread that briefly sleeps for its burst time in milliseconds.

## What it does not do

The scheduling simulations work on the job lists they are given and are not
configurable from the command line: `rowsum-schedule` always runs the fixed
four-job workload. The summing commands always use a 16384 x 16384 matrix;
other sizes are available only through the library functions.