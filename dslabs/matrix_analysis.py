"""Timing comparison of adding dense and sparse matrices."""

from __future__ import annotations

import math
import random
import time
from dataclasses import dataclass
from typing import Iterable, Iterator, Union

from dslabs.matrix import DenseMatrix, SparseMatrix, random_fill

TESTS_NUM = 30
START_GARBAGE_NUM = 3
ANALYSIS_SIZES = ((10, 10), (100, 100), (1000, 1000))
PERCENTS = range(0, 101)

ANALYSIS_HEADER = (
    "| Процент заполнения | Время сложения стандартных матриц | "
    "Время сложения разреженных матриц | Выигрыш времени при сложении разреженных |"
)

Matrix = Union[DenseMatrix, SparseMatrix]


def calc_gain(before: float, after: float) -> float:
    """Return how many percent ``after`` is below ``before``."""
    if before == 0:
        return math.nan if after == 0 else -math.inf
    return (1.0 - after / before) * 100.0


@dataclass(frozen=True)
class SumTiming:
    """Mean addition times in nanoseconds for one size and fill percentage."""

    rows: int
    cols: int
    percent: int
    standard_ns: int
    sparse_ns: int

    @property
    def gain(self) -> float:
        return calc_gain(self.standard_ns, self.sparse_ns)


def time_sum(
    left: Matrix, right: Matrix, tests: int = TESTS_NUM, warmup: int = START_GARBAGE_NUM
) -> int:
    """Return the mean time in nanoseconds of ``left + right``.

    The first ``warmup`` runs are not counted.
    """
    if tests < 1:
        raise ValueError("at least one timed run is needed")
    for _ in range(warmup):
        left + right
    total = 0
    for _ in range(tests):
        start = time.perf_counter_ns()
        left + right
        total += time.perf_counter_ns() - start
    return total // tests


def measure(
    sizes: Iterable[tuple[int, int]] = ANALYSIS_SIZES,
    percents: Iterable[int] = PERCENTS,
    tests: int = TESTS_NUM,
    warmup: int = START_GARBAGE_NUM,
    rng: random.Random | None = None,
) -> Iterator[SumTiming]:
    """Yield timings of both additions for each size and fill percentage."""
    rng = rng if rng is not None else random.Random()
    percents = list(percents)
    for rows, cols in sizes:
        for percent in percents:
            if not 0 <= percent <= 100:
                raise ValueError(f"fill percentage must be from 0 to 100: {percent}")
            nonzero = rows * cols * percent // 100
            first = random_fill(rows, cols, nonzero, rng)
            second = random_fill(rows, cols, nonzero, rng)
            yield SumTiming(
                rows=rows,
                cols=cols,
                percent=percent,
                standard_ns=time_sum(first, second, tests, warmup),
                sparse_ns=time_sum(first.to_sparse(), second.to_sparse(), tests, warmup),
            )


def format_row(timing: SumTiming) -> str:
    """Return one row of the comparison table."""
    return (
        f"| {timing.percent:18d} | {timing.standard_ns:33d} | "
        f"{timing.sparse_ns:33d} | {timing.gain:39f}% |"
    )