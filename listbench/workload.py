"""Random workloads of member, insert and delete operations for the list benchmark."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from listbench.sorted_list import SortedLinkedList

VALUE_RANGE = 65536


class OpType(Enum):
    """Kind of list operation."""

    MEMBER = "M"
    INSERT = "I"
    DELETE = "D"


@dataclass(frozen=True)
class Task:
    """One operation to apply to the list."""

    op: OpType
    value: int


def random_value(rng: random.Random) -> int:
    """Draw a value in [0, 65536)."""
    return rng.randrange(VALUE_RANGE)


def _free_slots(lst: SortedLinkedList) -> int:
    return VALUE_RANGE - sum(1 for value in lst if 0 <= value < VALUE_RANGE)


def populate(lst: SortedLinkedList, count: int, rng: random.Random) -> SortedLinkedList:
    """Insert count distinct random values that are not yet in lst."""
    if count < 0:
        raise ValueError("count must not be negative")
    if count > _free_slots(lst):
        raise ValueError(f"cannot add {count} distinct values in [0, {VALUE_RANGE})")
    added = 0
    while added < count:
        if lst.insert(random_value(rng)):
            added += 1
    return lst


def operation_counts(
    m: int, member_fraction: float, insert_fraction: float, delete_fraction: float
) -> tuple[int, int, int]:
    """Split m operations by fraction, truncating each share toward zero."""
    return int(m * member_fraction), int(m * insert_fraction), int(m * delete_fraction)


def _absent_value(lst: SortedLinkedList, rng: random.Random) -> int:
    while True:
        value = random_value(rng)
        if not lst.member(value):
            return value


def _check_counts(*counts: int) -> None:
    if any(count < 0 for count in counts):
        raise ValueError("operation counts must not be negative")


def build_tasks(
    lst: SortedLinkedList, n_member: int, n_insert: int, n_delete: int, rng: random.Random
) -> list[Task]:
    """Shuffled tasks: random member and delete values, insert values absent from lst."""
    _check_counts(n_member, n_insert, n_delete)
    if n_insert and _free_slots(lst) == 0:
        raise ValueError("no value is left to insert")
    tasks = [Task(OpType.MEMBER, random_value(rng)) for _ in range(n_member)]
    tasks += [Task(OpType.INSERT, _absent_value(lst, rng)) for _ in range(n_insert)]
    tasks += [Task(OpType.DELETE, random_value(rng)) for _ in range(n_delete)]
    rng.shuffle(tasks)
    return tasks


def build_unique_tasks(
    lst: SortedLinkedList, n_member: int, n_insert: int, n_delete: int, rng: random.Random
) -> list[Task]:
    """Shuffled tasks whose inserts target absent values and deletes target present ones."""
    _check_counts(n_member, n_insert, n_delete)
    if n_insert and _free_slots(lst) == 0:
        raise ValueError("no value is left to insert")
    present = list(lst)
    if n_delete and not present:
        raise ValueError("no value is present to delete")
    inserts = [_absent_value(lst, rng) for _ in range(n_insert)]
    deletes = [rng.choice(present) for _ in range(n_delete)]
    tasks = [Task(OpType.MEMBER, random_value(rng)) for _ in range(n_member)]
    tasks += [Task(OpType.INSERT, value) for value in inserts]
    tasks += [Task(OpType.DELETE, value) for value in deletes]
    rng.shuffle(tasks)
    return tasks


def partition(total: int, parts: int, keep_remainder: bool = True) -> list[range]:
    """Split range(total) into parts contiguous chunks.

    With keep_remainder the leftover items go one each to the first chunks;
    otherwise every chunk has total // parts items and the rest are dropped.
    """
    if parts <= 0:
        raise ValueError("parts must be positive")
    if total < 0:
        raise ValueError("total must not be negative")
    chunk, remainder = divmod(total, parts)
    ranges = []
    start = 0
    for rank in range(parts):
        size = chunk + (1 if keep_remainder and rank < remainder else 0)
        ranges.append(range(start, start + size))
        start += size
    return ranges


def apply(lst: SortedLinkedList, tasks: Iterable[Task]) -> None:
    """Apply tasks to lst in order."""
    for task in tasks:
        if task.op is OpType.MEMBER:
            lst.member(task.value)
        elif task.op is OpType.INSERT:
            lst.insert(task.value)
        else:
            lst.delete(task.value)