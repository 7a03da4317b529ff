# listbench

`listbench` times a sorted singly linked list of integers under a mixed
workload of `member`, `insert` and `delete` operations. The workload runs
serially, with all threads sharing one mutex, or with a read-write lock that
lets lookups proceed together while updates hold the lock alone.

It also ships three small threading exercises: a parallel estimate of pi, a
row-partitioned matrix-vector product, and a "hello from each thread" demo.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### `listbench`

`listbench` has four subcommands.

```
listbench serial N M MEMBER INSERT DELETE [--output FILE]
listbench mutex  N M THREADS MEMBER INSERT DELETE [--output FILE]
listbench rwlock N M THREADS MEMBER INSERT DELETE [--output FILE]
listbench study  {serial,mutex,rwlock} N M MEMBER INSERT DELETE [--threads T] [--seed S]
```

`serial`, `mutex` and `rwlock` each do one timed run. They fill a list with
`N` distinct random values in `[0, 65536)`, build `M` operations split by the
three fractions (each share truncated toward zero), shuffle them, and run
them. Member and delete operations use random values; insert operations use
values not in the list when the workload was built. The threaded runs give
each thread a contiguous share of the operations, the first threads taking
one extra each when `M` does not divide evenly.

One CSV line is appended per run, with the time in milliseconds:

| subcommand | default file                               | columns                                  |
|------------|--------------------------------------------|------------------------------------------|
| `serial`   | `serial_execution_time.csv`                | `n,m,member,insert,delete,ms`            |
| `mutex`    | `execution_time_parallel_single_mutex.csv` | `n,m,threads,member,insert,delete,ms`    |
| `rwlock`   | `execution_time_parallel_rwlock.csv`       | `n,m,threads,member,insert,delete,ms`    |

Fractions are written with two decimals and the time with six. `--output`
picks another file. If the file cannot be opened, `Error opening file for
writing` is printed to standard error. These subcommands do not check that
the fractions add up to 1.

`study` checks its parameters (`1 <= N <= 65536`, `M > 0`, fractions summing
to 1 within 0.0001), runs 30 pilot experiments, works out how many runs give
a mean within ±5% at 95% confidence, runs that many, and prints:

```
Required runs: <float>
Required samples: <int>
All runs - Mean: <seconds>, StdDev: <seconds>
```

Each run is seeded from `--seed` (or the current time) plus its index. In a
study, delete operations target values present in the list, and with threads
any operations past `THREADS * (M // THREADS)` are skipped. The standard
deviation of the final runs divides by their count; the mean and standard
deviation are `nan` when no further run is needed.

### `listbench-pi`

```
listbench-pi THREADS [ITERATIONS]
```

Estimates pi as `4 * (1 - 1/3 + 1/5 - ...)` over `ITERATIONS` terms (default
1,000,000,000), split as evenly as possible across the threads, and prints the
estimate and the wall time used. The default term count takes a long time in
Python; pass a smaller one for a quick run.

### `listbench-matvec`

```
listbench-matvec
```

Multiplies a fixed 6x5 matrix by the vector `(1, 2, 3, 4, 5)` with three
threads, each computing two rows, and prints the result on one line.

### `listbench-hello`

```
listbench-hello THREADS
```

Starts `THREADS` threads, each printing `Hello from thread <rank> of
<THREADS>`, and prints `Hello from the main thread`. The order of the lines
depends on scheduling.

## Using it from Python

```python
import random

from listbench.sorted_list import SortedLinkedList
from listbench.workload import build_tasks, operation_counts, populate, partition
from listbench.experiment import LockStrategy, run_experiment, run_tasks

lst = SortedLinkedList([5, 1, 3])
lst.insert(4)      # True: added
lst.insert(4)      # False: already present
lst.delete(9)      # False: not present
3 in lst           # True
list(lst)          # [1, 3, 4, 5]
lst.format()       # 'List: 1 -> 3 -> 4 -> 5 -> NULL'

rng = random.Random(0)
big = populate(SortedLinkedList(), 1000, rng)
counts = operation_counts(10000, 0.99, 0.005, 0.005)   # (9900, 50, 50)
tasks = build_tasks(big, *counts, rng)
seconds = run_tasks(big, tasks, 4, LockStrategy.RWLOCK, keep_remainder=True)

partition(10, 3)           # [range(0, 4), range(4, 7), range(7, 10)]
partition(10, 3, False)    # [range(0, 3), range(3, 6), range(6, 9)]

run_experiment(1000, 10000, 4, 0.9, 0.05, 0.05, LockStrategy.MUTEX, rng)
```

Other pieces:

- `listbench.workload`: `OpType`, `Task`, `random_value`,
  `build_unique_tasks` (deletes drawn from values present in the list), `apply`.
- `listbench.experiment`: `validate_parameters`, `mean_and_stddev`,
  `required_samples`, `sample_study`.
- `listbench.locks.ReadWriteLock`: `acquire_read`/`release_read`,
  `acquire_write`/`release_write`, and the `read()` and `write()` context
  managers. Releasing a lock that is not held raises `RuntimeError`.
- `listbench.pi`: `thread_range`, `partial_sum`, `estimate_pi`.
- `listbench.matvec.matvec`: rows beyond `thread_count * (rows // thread_count)`
  are left at zero.
- `listbench.hello.greetings`: returns the thread greetings as a list.

## What it does not do

Threads run under Python's global interpreter lock, so the timings show the
cost of each locking scheme rather than parallel speedup. The CSV files are
only appended to; `listbench` does not read, summarise or plot them.