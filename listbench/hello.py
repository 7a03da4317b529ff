"""Greet from a number of threads."""

from __future__ import annotations

import argparse
import threading
from collections.abc import Callable

MAIN_GREETING = "Hello from the main thread"


def _start(thread_count: int, emit: Callable[[str], None]) -> list[threading.Thread]:
    if thread_count < 0:
        raise ValueError("thread_count must not be negative")

    def hello(rank: int) -> None:
        emit(f"Hello from thread {rank} of {thread_count}")

    threads = [threading.Thread(target=hello, args=(rank,)) for rank in range(thread_count)]
    for thread in threads:
        thread.start()
    return threads


def greetings(thread_count: int) -> list[str]:
    """Run thread_count threads and return their greetings in the order produced."""
    messages: list[str] = []
    for thread in _start(thread_count, messages.append):
        thread.join()
    return messages


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Say hello from several threads.")
    parser.add_argument("thread_count", type=int)
    args = parser.parse_args(argv)
    try:
        threads = _start(args.thread_count, print)
    except ValueError as exc:
        parser.error(str(exc))
    print(MAIN_GREETING)
    for thread in threads:
        thread.join()
    return 0