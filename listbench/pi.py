"""Estimate pi with the Leibniz series, split across threads."""

from __future__ import annotations

import argparse
import threading
import time

NUM_ITER = 1_000_000_000


def thread_range(rank: int, thread_count: int, iterations: int = NUM_ITER) -> range:
    """Series terms handled by one thread; the first threads take one extra term each."""
    if thread_count <= 0:
        raise ValueError("thread_count must be positive")
    if not 0 <= rank < thread_count:
        raise ValueError("rank must be in [0, thread_count)")
    base, remainder = divmod(iterations, thread_count)
    if rank < remainder:
        size = base + 1
        first = rank * size
    else:
        size = base
        first = rank * size + remainder
    return range(first, first + size)


def partial_sum(first: int, count: int) -> float:
    """Sum of (-1)^i / (2i + 1) for i from first over count terms."""
    factor = 1.0 if first % 2 == 0 else -1.0
    total = 0.0
    for i in range(first, first + count):
        total += factor / (2 * i + 1)
        factor = -factor
    return total


def estimate_pi(thread_count: int, iterations: int = NUM_ITER) -> float:
    """Estimate pi, each thread summing its own slice of the series."""
    sums = [0.0] * thread_count

    def work(rank: int) -> None:
        terms = thread_range(rank, thread_count, iterations)
        sums[rank] = partial_sum(terms.start, len(terms))

    if thread_count <= 0:
        raise ValueError("thread_count must be positive")
    threads = [threading.Thread(target=work, args=(rank,)) for rank in range(thread_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return 4.0 * sum(sums)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Estimate pi with threads.")
    parser.add_argument("thread_count", type=int)
    parser.add_argument("iterations", type=int, nargs="?", default=NUM_ITER)
    args = parser.parse_args(argv)
    start = time.monotonic()
    try:
        pi = estimate_pi(args.thread_count, args.iterations)
    except ValueError as exc:
        parser.error(str(exc))
    elapsed = time.monotonic() - start
    print(f"{pi:f}")
    print(f"Wall time used: {elapsed:f} seconds")
    return 0