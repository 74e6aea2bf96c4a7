"""Tests for :mod:`webgadgets.ids`."""

from __future__ import annotations

import random
import threading

import pytest

from webgadgets.ids import (
    TABSET_ID_MAX,
    TABSET_ID_MIN,
    CounterTabsetIds,
    RandomTabsetIds,
    TabsetIdSource,
    get_default_id_source,
    set_default_id_source,
)


def test_random_ids_stay_in_range() -> None:
    source = RandomTabsetIds(random.Random(7))

    draws = [source.next_tabset_id() for _ in range(500)]

    assert all(TABSET_ID_MIN <= value <= TABSET_ID_MAX for value in draws)
    assert len(set(draws)) > 1


def test_seeded_random_ids_are_reproducible() -> None:
    first = RandomTabsetIds(random.Random(3))
    second = RandomTabsetIds(random.Random(3))

    assert [first.next_tabset_id() for _ in range(5)] == [second.next_tabset_id() for _ in range(5)]


def test_counter_wraps_to_start() -> None:
    source = CounterTabsetIds(start=TABSET_ID_MAX - 1)

    assert [source.next_tabset_id() for _ in range(3)] == [9998, 9999, 9998]


@pytest.mark.parametrize("start", [999, 10000])
def test_counter_rejects_out_of_range_start(start: int) -> None:
    with pytest.raises(ValueError):
        CounterTabsetIds(start=start)


def test_counter_is_thread_safe() -> None:
    """Given concurrent callers When drawing ids Then no id is handed out twice."""

    source = CounterTabsetIds()
    seen = []
    lock = threading.Lock()

    def _draw() -> None:
        values = [source.next_tabset_id() for _ in range(100)]
        with lock:
            seen.extend(values)

    threads = [threading.Thread(target=_draw) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(seen) == len(set(seen)) == 800


def test_sources_satisfy_protocol() -> None:
    assert isinstance(RandomTabsetIds(), TabsetIdSource)
    assert isinstance(CounterTabsetIds(), TabsetIdSource)


def test_default_source_can_be_replaced_and_restored() -> None:
    default = get_default_id_source()
    assert isinstance(default, RandomTabsetIds)
    assert get_default_id_source() is default

    counter = CounterTabsetIds(start=2000)
    set_default_id_source(counter)
    assert get_default_id_source() is counter

    set_default_id_source(None)
    assert isinstance(get_default_id_source(), RandomTabsetIds)
