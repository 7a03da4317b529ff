"""Command line entry point: time list workloads and append results to CSV files."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

from listbench.experiment import LockStrategy, run_tasks, sample_study
from listbench.sorted_list import SortedLinkedList
from listbench.workload import build_tasks, operation_counts, populate

DEFAULT_OUTPUTS = {
    LockStrategy.SERIAL: "serial_execution_time.csv",
    LockStrategy.MUTEX: "execution_time_parallel_single_mutex.csv",
    LockStrategy.RWLOCK: "execution_time_parallel_rwlock.csv",
}


def format_record(
    n: int,
    m: int,
    thread_count: int | None,
    member_fraction: float,
    insert_fraction: float,
    delete_fraction: float,
    elapsed_ms: float,
) -> str:
    """One CSV line (without newline); the thread column is left out when thread_count is None."""
    fields = [str(n), str(m)]
    if thread_count is not None:
        fields.append(str(thread_count))
    fields += [
        f"{member_fraction:.2f}",
        f"{insert_fraction:.2f}",
        f"{delete_fraction:.2f}",
        f"{elapsed_ms:.6f}",
    ]
    return ",".join(fields)


def record_run(
    n: int,
    m: int,
    thread_count: int,
    member_fraction: float,
    insert_fraction: float,
    delete_fraction: float,
    strategy: LockStrategy = LockStrategy.MUTEX,
    path: str | Path | None = None,
    rng: random.Random | None = None,
) -> float:
    """Time one workload, append its CSV record to path and return the time in milliseconds.

    Raises OSError if the record cannot be written.
    """
    rng = rng if rng is not None else random.Random()
    serial = strategy is LockStrategy.SERIAL
    if not serial and thread_count <= 0:
        raise ValueError("thread_count must be positive")
    lst = populate(SortedLinkedList(), n, rng)
    counts = operation_counts(m, member_fraction, insert_fraction, delete_fraction)
    tasks = build_tasks(lst, *counts, rng)
    seconds = run_tasks(lst, tasks, 1 if serial else thread_count, strategy, keep_remainder=True)
    elapsed_ms = seconds * 1000
    line = format_record(
        n,
        m,
        None if serial else thread_count,
        member_fraction,
        insert_fraction,
        delete_fraction,
        elapsed_ms,
    )
    target = Path(path) if path is not None else Path(DEFAULT_OUTPUTS[strategy])
    with target.open("a", encoding="utf-8") as handle:
        handle.write(line + "\n")
    return elapsed_ms


def _add_fractions(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("member_fraction", type=float)
    parser.add_argument("insert_fraction", type=float)
    parser.add_argument("delete_fraction", type=float)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="listbench", description="Benchmark a sorted linked list under different locking schemes."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    serial = commands.add_parser("serial", help="time one serial run and append it to a CSV file")
    serial.add_argument("n", type=int)
    serial.add_argument("m", type=int)
    _add_fractions(serial)
    serial.add_argument("--output")

    for name, text in (("mutex", "a single mutex"), ("rwlock", "a read-write lock")):
        threaded = commands.add_parser(name, help=f"time one threaded run guarded by {text}")
        threaded.add_argument("n", type=int)
        threaded.add_argument("m", type=int)
        threaded.add_argument("thread_count", type=int)
        _add_fractions(threaded)
        threaded.add_argument("--output")

    study = commands.add_parser("study", help="repeat runs until the mean is 5%% accurate")
    study.add_argument("strategy", choices=[s.value for s in LockStrategy])
    study.add_argument("n", type=int)
    study.add_argument("m", type=int)
    _add_fractions(study)
    study.add_argument("--threads", type=int, default=1)
    study.add_argument("--seed", type=int)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "study":
        strategy = LockStrategy(args.strategy)
        try:
            result = sample_study(
                args.n,
                args.m,
                args.threads,
                args.member_fraction,
                args.insert_fraction,
                args.delete_fraction,
                strategy,
                args.seed,
            )
        except ValueError as exc:
            parser.error(str(exc))
        print(f"Required runs: {result.required_runs:f}")
        print(f"Required samples: {result.required_samples}")
        print(f"All runs - Mean: {result.mean:f}, StdDev: {result.stddev:f}")
        return 0

    strategy = LockStrategy(args.command)
    thread_count = getattr(args, "thread_count", 1)
    try:
        record_run(
            args.n,
            args.m,
            thread_count,
            args.member_fraction,
            args.insert_fraction,
            args.delete_fraction,
            strategy,
            args.output,
        )
    except ValueError as exc:
        parser.error(str(exc))
    except OSError:
        print("Error opening file for writing", file=sys.stderr)
    return 0