import itertools
import math
import random
import statistics
from unittest.mock import patch

import pytest

from listbench.experiment import (
    LockStrategy,
    mean_and_stddev,
    required_samples,
    run_experiment,
    run_tasks,
    sample_study,
    validate_parameters,
)
from listbench.sorted_list import SortedLinkedList
from listbench.workload import OpType, Task


@pytest.mark.parametrize(
    "args, message",
    [
        ((0, 10000, 0.99, 0.005, 0.005), "n must be between 1 and 2^16"),
        ((-3, 10000, 0.99, 0.005, 0.005), "n must be between 1 and 2^16"),
        ((65537, 10000, 0.99, 0.005, 0.005), "n must be between 1 and 2^16"),
        ((1000, 0, 0.99, 0.005, 0.005), "m must be greater than 0"),
        ((1000, -1, 0.99, 0.005, 0.005), "m must be greater than 0"),
        ((1000, 10000, 0.5, 0.3, 0.1), "Fraction sum must be equal to 1"),
        ((1000, 10000, 0.9, 0.1, 0.1), "Fraction sum must be equal to 1"),
    ],
)
def test_validate_parameters_rejects(args, message):
    with pytest.raises(ValueError, match=message.replace("^", r"\^")):
        validate_parameters(*args)


def test_mean_and_stddev_population():
    times = [2, 4, 4, 4, 5, 5, 7, 9]
    mean, stddev = mean_and_stddev(times, sample=False)
    assert mean == pytest.approx(statistics.mean(times))
    assert stddev == pytest.approx(statistics.pstdev(times))


def test_mean_and_stddev_sample():
    times = [0.5, 0.75, 0.25, 1.5]
    mean, stddev = mean_and_stddev(times, sample=True)
    assert mean == pytest.approx(statistics.mean(times))
    assert stddev == pytest.approx(statistics.stdev(times))


def test_mean_and_stddev_empty_raises():
    with pytest.raises(ValueError):
        mean_and_stddev([], sample=False)


def test_sample_stddev_needs_two_values():
    with pytest.raises(ValueError):
        mean_and_stddev([1.0], sample=True)


def test_required_samples_constant_times():
    runs, samples = required_samples([0.25] * 30)
    assert runs == 0.0
    assert samples == 0


def test_required_samples_spread():
    runs, samples = required_samples([1.0, 3.0])
    assert runs == pytest.approx(768.32)
    assert samples == 769


def test_required_samples_rounds_up():
    runs, samples = required_samples([1.0, 1.1, 0.9, 1.05])
    assert samples >= runs
    assert samples - runs < 1


def test_required_samples_zero_mean_raises():
    with pytest.raises(ValueError):
        required_samples([0.0, 0.0])


@pytest.mark.parametrize("strategy", list(LockStrategy))
def test_run_tasks_applies_every_task(strategy):
    lst = SortedLinkedList([1, 3, 5, 7])
    tasks = [Task(OpType.INSERT, v) for v in range(100, 140)]
    tasks += [Task(OpType.DELETE, 3), Task(OpType.MEMBER, 5)]
    run_tasks(lst, tasks, 4, strategy, keep_remainder=True)
    assert set(lst) == ({1, 5, 7} | set(range(100, 140)))
    assert list(lst) == sorted(lst)


def test_run_tasks_drops_remainder_without_keep():
    lst = SortedLinkedList()
    tasks = [Task(OpType.INSERT, v) for v in range(10)]
    run_tasks(lst, tasks, 3, LockStrategy.MUTEX, keep_remainder=False)
    assert list(lst) == list(range(9))


def test_run_tasks_keeps_remainder():
    lst = SortedLinkedList()
    tasks = [Task(OpType.INSERT, v) for v in range(10)]
    run_tasks(lst, tasks, 3, LockStrategy.RWLOCK, keep_remainder=True)
    assert list(lst) == list(range(10))


def test_run_tasks_serial_ignores_threads():
    lst = SortedLinkedList([2])
    tasks = [Task(OpType.INSERT, 4), Task(OpType.DELETE, 2), Task(OpType.INSERT, 1)]
    run_tasks(lst, tasks, 2, LockStrategy.SERIAL, keep_remainder=False)
    assert list(lst) == [1, 4]


def test_run_tasks_bad_thread_count():
    with pytest.raises(ValueError):
        run_tasks(SortedLinkedList(), [Task(OpType.MEMBER, 1)], 0, LockStrategy.MUTEX)


@pytest.mark.parametrize("strategy", list(LockStrategy))
def test_run_experiment_reports_timer_difference(strategy):
    with patch("time.perf_counter", side_effect=[10.0, 12.5]):
        elapsed = run_experiment(
            50, 100, 4, 0.8, 0.1, 0.1, strategy, random.Random(7)
        )
    assert elapsed == pytest.approx(2.5)


@pytest.mark.parametrize("strategy", list(LockStrategy))
def test_run_experiment_real_time_is_non_negative(strategy):
    elapsed = run_experiment(1000, 1000, 4, 0.99, 0.005, 0.005, strategy, random.Random(1))
    assert elapsed >= 0.0


def test_run_experiment_bad_thread_count():
    with pytest.raises(ValueError):
        run_experiment(10, 10, 0, 0.5, 0.25, 0.25, LockStrategy.RWLOCK, random.Random(0))


def test_sample_study_with_steady_timer():
    with patch("time.perf_counter", side_effect=itertools.count(0.0, 0.5)):
        result = sample_study(5, 10, 2, 0.6, 0.2, 0.2, LockStrategy.MUTEX, seed=3)
    assert result.required_runs == 0.0
    assert result.required_samples == 0
    assert math.isnan(result.mean)
    assert math.isnan(result.stddev)


def test_sample_study_validates():
    with pytest.raises(ValueError, match="m must be greater than 0"):
        sample_study(5, 0, 2, 0.6, 0.2, 0.2, LockStrategy.SERIAL, seed=3)