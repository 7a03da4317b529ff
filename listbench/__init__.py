"""Sorted linked-list benchmarks under serial, mutex and read-write lock workloads, with small threading exercises."""

__version__ = "0.1.0"