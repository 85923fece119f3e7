import math

import pytest

from dslabs.phonebook import Date, Position, Subscriber
from dslabs.phonebook_analysis import (
    SortTimings,
    calc_gain,
    format_report,
    measure,
    time_sort,
)


def _subscribers(names):
    return [
        Subscriber(name, "Ivan", "123", "Street", Date(1, 1, 2000))
        if i % 2 == 0
        else Subscriber(name, "Petr", "+456", "Road", Position("job", "org"))
        for i, name in enumerate(names)
    ]


def test_calc_gain_half():
    assert calc_gain(100, 50) == 50.0


def test_calc_gain_equal_is_zero():
    assert calc_gain(37, 37) == 0.0


def test_calc_gain_zero_before():
    assert math.isnan(calc_gain(0, 0))
    assert calc_gain(0, 5) == -math.inf


def test_time_sort_calls_and_keeps_input():
    calls = []
    items = [3, 1, 2]

    def sorter(values):
        calls.append(list(values))
        values.sort()

    result = time_sort(sorter, items, tests=4, warmup=2)
    assert len(calls) == 6
    assert all(call == [3, 1, 2] for call in calls)
    assert items == [3, 1, 2]
    assert result >= 0


def test_time_sort_needs_a_run():
    with pytest.raises(ValueError):
        time_sort(sorted, [1], tests=0, warmup=0)


def test_measure_sizes():
    subscribers = _subscribers(["c", "a", "b", "d"])
    results = measure(subscribers, sizes=(2, 4), tests=2, warmup=1)
    assert [r.size for r in results] == [2, 4]
    assert all(
        min(r.bubble_table, r.bubble_keys, r.qsort_table, r.qsort_keys) >= 0
        for r in results
    )


def test_measure_table_too_small():
    with pytest.raises(ValueError):
        measure(_subscribers(["a", "b"]), sizes=(3,), tests=1, warmup=0)


def test_timings_gains():
    timings = SortTimings(size=10, bubble_table=200, bubble_keys=100, qsort_table=50, qsort_keys=50)
    assert timings.key_gain_bubble == calc_gain(200, 100)
    assert timings.key_gain_qsort == 0.0
    assert timings.qsort_gain_table == calc_gain(200, 50)
    assert timings.qsort_gain_keys == calc_gain(100, 50)


def test_format_report_layout():
    timings = [SortTimings(40, 200, 100, 50, 50)]
    report = format_report(timings).split("\n")
    assert report[0] == "Результаты сортировок в наносекундах:"
    assert report[2].startswith("    40 | ")
    assert report[2].endswith(" |")
    assert report[4].startswith("    40 | ")
    assert "-" * 170 in report
    assert report[-1].startswith("Дополнительные затраты памяти при сортировке таблицы ключей: ")
    assert report[-1].endswith("%")