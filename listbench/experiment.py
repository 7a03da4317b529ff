"""Timed runs of list workloads under serial, mutex and read-write lock schemes."""

from __future__ import annotations

import math
import random
import threading
import time
from collections.abc import Callable, Iterable, Sequence
from contextlib import AbstractContextManager
from enum import Enum
from typing import NamedTuple

from listbench.locks import ReadWriteLock
from listbench.sorted_list import SortedLinkedList
from listbench.workload import (
    VALUE_RANGE,
    OpType,
    Task,
    apply,
    build_unique_tasks,
    operation_counts,
    partition,
    populate,
)

PILOT_RUNS = 30
ACCURACY_PERCENT = 5.0
CONFIDENCE_Z = 1.96


class LockStrategy(Enum):
    """How operations on the shared list are synchronised."""

    SERIAL = "serial"
    MUTEX = "mutex"
    RWLOCK = "rwlock"


class _StudyResult(NamedTuple):
    required_runs: float
    required_samples: int
    mean: float
    stddev: float


def validate_parameters(
    n: int, m: int, member_fraction: float, insert_fraction: float, delete_fraction: float
) -> None:
    """Raise ValueError unless the benchmark parameters are usable."""
    if n <= 0 or n > VALUE_RANGE:
        raise ValueError("n must be between 1 and 2^16")
    if m <= 0:
        raise ValueError("m must be greater than 0")
    total = member_fraction + insert_fraction + delete_fraction
    if total > 1.0001 or total < 0.9999:
        raise ValueError("Fraction sum must be equal to 1")


def _guards(
    strategy: LockStrategy,
) -> tuple[Callable[[], AbstractContextManager], Callable[[], AbstractContextManager]]:
    if strategy is LockStrategy.MUTEX:
        mutex = threading.Lock()
        return (lambda: mutex), (lambda: mutex)
    rwlock = ReadWriteLock()
    return rwlock.read, rwlock.write


def run_tasks(
    lst: SortedLinkedList,
    tasks: Iterable[Task],
    thread_count: int = 1,
    strategy: LockStrategy = LockStrategy.MUTEX,
    keep_remainder: bool = False,
) -> float:
    """Apply tasks to lst and return the wall time taken in seconds.

    Threaded strategies give each thread a contiguous share of the tasks; without
    keep_remainder the tasks past thread_count * (len // thread_count) are skipped.
    """
    tasks = list(tasks)
    if strategy is LockStrategy.SERIAL:
        start = time.perf_counter()
        apply(lst, tasks)
        return time.perf_counter() - start

    if thread_count <= 0:
        raise ValueError("thread_count must be positive")
    read_guard, write_guard = _guards(strategy)

    def work(span: range) -> None:
        for task in tasks[span.start:span.stop]:
            if task.op is OpType.MEMBER:
                with read_guard():
                    lst.member(task.value)
            elif task.op is OpType.INSERT:
                with write_guard():
                    lst.insert(task.value)
            else:
                with write_guard():
                    lst.delete(task.value)

    spans = partition(len(tasks), thread_count, keep_remainder)
    start = time.perf_counter()
    threads = [threading.Thread(target=work, args=(span,)) for span in spans]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return time.perf_counter() - start


def run_experiment(
    n: int,
    m: int,
    thread_count: int,
    member_fraction: float,
    insert_fraction: float,
    delete_fraction: float,
    strategy: LockStrategy = LockStrategy.MUTEX,
    rng: random.Random | None = None,
) -> float:
    """Fill a list with n random values, run m mixed operations, return seconds taken."""
    if strategy is not LockStrategy.SERIAL and thread_count <= 0:
        raise ValueError("thread_count must be positive")
    rng = rng if rng is not None else random.Random()
    lst = populate(SortedLinkedList(), n, rng)
    counts = operation_counts(m, member_fraction, insert_fraction, delete_fraction)
    tasks = build_unique_tasks(lst, *counts, rng)
    return run_tasks(lst, tasks, thread_count, strategy, keep_remainder=False)


def mean_and_stddev(times: Sequence[float], sample: bool = True) -> tuple[float, float]:
    """Mean and standard deviation; sample divides by n - 1, otherwise by n."""
    count = len(times)
    if count == 0:
        raise ValueError("at least one time is needed")
    if sample and count < 2:
        raise ValueError("a sample standard deviation needs at least two times")
    mean = sum(times) / count
    squares = sum((t - mean) ** 2 for t in times)
    variance = squares / (count - 1 if sample else count)
    return mean, math.sqrt(variance)


def required_samples(times: Sequence[float]) -> tuple[float, int]:
    """Runs needed for a 5% accurate mean at 95% confidence, and that count rounded up."""
    mean, stddev = mean_and_stddev(times, sample=True)
    if mean == 0:
        raise ValueError("mean time must not be zero")
    runs = ((100 * CONFIDENCE_Z * stddev) / (ACCURACY_PERCENT * mean)) ** 2
    return runs, math.ceil(runs)


def sample_study(
    n: int,
    m: int,
    thread_count: int,
    member_fraction: float,
    insert_fraction: float,
    delete_fraction: float,
    strategy: LockStrategy = LockStrategy.MUTEX,
    seed: int | None = None,
) -> _StudyResult:
    """Run pilot samples, work out how many runs are needed, then time that many.

    Returns (required_runs, required_samples, mean, stddev); mean and stddev are
    NaN when no further run is needed.
    """
    validate_parameters(n, m, member_fraction, insert_fraction, delete_fraction)
    base = int(time.time()) if seed is None else seed

    def timed(index: int) -> float:
        return run_experiment(
            n,
            m,
            thread_count,
            member_fraction,
            insert_fraction,
            delete_fraction,
            strategy,
            random.Random(base + index),
        )

    pilot = [timed(i) for i in range(PILOT_RUNS)]
    runs, samples = required_samples(pilot)
    all_times = [timed(i) for i in range(samples)]
    if all_times:
        mean, stddev = mean_and_stddev(all_times, sample=False)
    else:
        mean = stddev = math.nan
    return _StudyResult(runs, samples, mean, stddev)