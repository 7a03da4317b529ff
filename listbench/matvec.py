"""Matrix-vector product with rows split across threads."""

from __future__ import annotations

import argparse
import threading
from collections.abc import Sequence

THREAD_COUNT = 3

DEFAULT_MATRIX = (
    (1, 0, 1, 1, 0),
    (0, 1, 0, 0, 1),
    (1, 0, 1, 0, 3),
    (2, 0, 0, 1, 0),
    (1, 2, 0, 1, 1),
    (1, 1, 0, 1, 1),
)

DEFAULT_VECTOR = (1, 2, 3, 4, 5)


def matvec(
    matrix: Sequence[Sequence[int]],
    vector: Sequence[int],
    thread_count: int = THREAD_COUNT,
) -> list[int]:
    """Compute matrix @ vector, each thread taking len(matrix) // thread_count rows.

    Rows past thread_count * (len(matrix) // thread_count) belong to no thread
    and stay zero.
    """
    if thread_count <= 0:
        raise ValueError("thread_count must be positive")
    if any(len(row) != len(vector) for row in matrix):
        raise ValueError("every matrix row must match the vector length")
    result = [0] * len(matrix)
    rows_per_thread = len(matrix) // thread_count

    def work(rank: int) -> None:
        for i in range(rank * rows_per_thread, (rank + 1) * rows_per_thread):
            result[i] = sum(a * x for a, x in zip(matrix[i], vector))

    threads = [threading.Thread(target=work, args=(rank,)) for rank in range(thread_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return result


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Multiply the built-in matrix by its vector.")
    parser.parse_args(argv)
    result = matvec(DEFAULT_MATRIX, DEFAULT_VECTOR, THREAD_COUNT)
    print("".join(f"{value} " for value in result))
    return 0