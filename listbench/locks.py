"""A readers-writer lock built on a condition variable."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager


class ReadWriteLock:
    """Lock that admits many readers at once or a single writer."""

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False

    def acquire_read(self) -> None:
        """Block until no writer holds the lock, then take a read share."""
        with self._condition:
            while self._writing:
                self._condition.wait()
            self._readers += 1

    def release_read(self) -> None:
        """Give back a read share."""
        with self._condition:
            if self._readers == 0:
                raise RuntimeError("release_read called without a held read lock")
            self._readers -= 1
            if self._readers == 0:
                self._condition.notify_all()

    def acquire_write(self) -> None:
        """Block until nobody holds the lock, then take it exclusively."""
        with self._condition:
            while self._writing or self._readers:
                self._condition.wait()
            self._writing = True

    def release_write(self) -> None:
        """Give back the exclusive hold."""
        with self._condition:
            if not self._writing:
                raise RuntimeError("release_write called without a held write lock")
            self._writing = False
            self._condition.notify_all()

    @contextmanager
    def read(self) -> Iterator[None]:
        """Hold a read share for the duration of the block."""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write(self) -> Iterator[None]:
        """Hold the lock exclusively for the duration of the block."""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()