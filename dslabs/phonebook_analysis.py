"""Timing comparison of sorting a phone book table and its key table."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence, TypeVar

from dslabs.phonebook import (
    ADDRESS_LEN,
    JOB_LEN,
    LASTNAME_LEN,
    MAX_TABLE_LEN,
    NAME_LEN,
    NUMBER_LEN,
    ORGANISATION_LEN,
    Subscriber,
    bubble_sort_keys,
    bubble_sort_subscribers,
    make_key_table,
    sort_keys,
    sort_subscribers,
)

TESTS_NUM = 100
START_GARBAGE_NUM = 10
SIZES = (40, 200, 500, 1000)

_INT_SIZE = 4
_T = TypeVar("_T")


def _align(size: int) -> int:
    return -(-size // _INT_SIZE) * _INT_SIZE


# Byte sizes of the fixed-width record and key layouts.
KEY_ENTRY_SIZE = _align(LASTNAME_LEN + 1) + _INT_SIZE
RECORD_SIZE = (
    _align(LASTNAME_LEN + 1 + NAME_LEN + 1 + NUMBER_LEN + 1 + ADDRESS_LEN + 1)
    + _INT_SIZE
    + _align(max(3 * _INT_SIZE, JOB_LEN + 1 + ORGANISATION_LEN + 1))
)


def _memory_overhead() -> float:
    key_table = KEY_ENTRY_SIZE * MAX_TABLE_LEN + _INT_SIZE
    table = RECORD_SIZE * MAX_TABLE_LEN + _INT_SIZE
    return key_table / table * 100.0


def calc_gain(before: float, after: float) -> float:
    """Return how many percent ``after`` is below ``before``."""
    if before == 0:
        return math.nan if after == 0 else -math.inf
    return (1.0 - after / before) * 100.0


@dataclass(frozen=True)
class SortTimings:
    """Mean sort times in nanoseconds for one table size."""

    size: int
    bubble_table: int
    bubble_keys: int
    qsort_table: int
    qsort_keys: int

    @property
    def key_gain_bubble(self) -> float:
        return calc_gain(self.bubble_table, self.bubble_keys)

    @property
    def key_gain_qsort(self) -> float:
        return calc_gain(self.qsort_table, self.qsort_keys)

    @property
    def qsort_gain_table(self) -> float:
        return calc_gain(self.bubble_table, self.qsort_table)

    @property
    def qsort_gain_keys(self) -> float:
        return calc_gain(self.bubble_keys, self.qsort_keys)


def time_sort(
    sort_func: Callable[[list[_T]], object],
    items: Iterable[_T],
    tests: int = TESTS_NUM,
    warmup: int = START_GARBAGE_NUM,
) -> int:
    """Return the mean time in nanoseconds of sorting fresh copies of ``items``.

    The first ``warmup`` runs are not counted.
    """
    if tests < 1:
        raise ValueError("at least one timed run is needed")
    source = list(items)
    for _ in range(warmup):
        sort_func(list(source))
    total = 0
    for _ in range(tests):
        copy = list(source)
        start = time.perf_counter_ns()
        sort_func(copy)
        total += time.perf_counter_ns() - start
    return total // tests


def measure(
    subscribers: Sequence[Subscriber],
    sizes: Iterable[int] = SIZES,
    tests: int = TESTS_NUM,
    warmup: int = START_GARBAGE_NUM,
) -> list[SortTimings]:
    """Time both sorts of the table and the key table for each leading size."""
    sizes = list(sizes)
    if sizes and len(subscribers) < max(sizes):
        raise ValueError("the table is too small for the requested sizes")
    results = []
    for size in sizes:
        part = list(subscribers[:size])
        keys = make_key_table(part)
        results.append(
            SortTimings(
                size=size,
                bubble_table=time_sort(bubble_sort_subscribers, part, tests, warmup),
                bubble_keys=time_sort(bubble_sort_keys, keys, tests, warmup),
                qsort_table=time_sort(sort_subscribers, part, tests, warmup),
                qsort_keys=time_sort(sort_keys, keys, tests, warmup),
            )
        )
    return results


def format_report(timings: Iterable[SortTimings]) -> str:
    """Return the timing and gain tables with the key table memory overhead."""
    timings = list(timings)
    lines = [
        "Результаты сортировок в наносекундах:",
        f"Размер | {'Таблицы пузырьком':>18} | Таблицы ключей пузырьком | "
        f"{'Таблицы qsort':>20} | Таблицы ключей qsort |",
    ]
    lines += [
        f"{t.size:6d} | {t.bubble_table:18d} | {t.bubble_keys:24d} | "
        f"{t.qsort_table:20d} | {t.qsort_keys:20d} |"
        for t in timings
    ]
    lines.append(
        "Размер | Выигрыш от сортировки таблицы ключей(пузырек) | "
        "Выигрыш от сортировки таблицы ключей(qsort) | "
        "Выигрыш от qsort(всей таблицы) | Выигрыш от qsort(таблицы ключей) |"
    )
    lines += [
        f"{t.size:6d} | {t.key_gain_bubble:+44.2f}% | {t.key_gain_qsort:+42.2f}% | "
        f"{t.qsort_gain_table:+29.2f}% | {t.qsort_gain_keys:+31.2f}% |"
        for t in timings
    ]
    lines.append("-" * 170)
    lines.append(
        "Дополнительные затраты памяти при сортировке таблицы ключей: "
        f"{_memory_overhead():.2f}%"
    )
    return "\n".join(lines)