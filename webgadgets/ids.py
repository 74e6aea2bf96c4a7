"""Sources of tabset identifiers.

A tabset identifier is shared by every tab produced in one builder call and
forms the DOM ids ``tab-{tabset}-{sequence}``. Builders receive a source as
an explicit dependency; :func:`get_default_id_source` returns the process
wide random source used when none is injected.
"""

from __future__ import annotations

import random
import threading
from typing import Optional, Protocol, runtime_checkable

__all__ = [
    "CounterTabsetIds",
    "RandomTabsetIds",
    "TABSET_ID_MAX",
    "TABSET_ID_MIN",
    "TabsetIdSource",
    "get_default_id_source",
    "set_default_id_source",
]

TABSET_ID_MIN = 1000
TABSET_ID_MAX = 9999


@runtime_checkable
class TabsetIdSource(Protocol):
    """Anything able to mint a tabset identifier."""

    def next_tabset_id(self) -> int:
        ...


class RandomTabsetIds:
    """Uniformly distributed identifiers in ``[TABSET_ID_MIN, TABSET_ID_MAX]``.

    The underlying generator is shared between threads, so draws are
    serialised with a lock.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()
        self._lock = threading.Lock()

    def next_tabset_id(self) -> int:
        with self._lock:
            return self._rng.randint(TABSET_ID_MIN, TABSET_ID_MAX)


class CounterTabsetIds:
    """Monotonic identifiers, wrapping back to ``start`` after ``TABSET_ID_MAX``."""

    def __init__(self, start: int = TABSET_ID_MIN) -> None:
        if not TABSET_ID_MIN <= start <= TABSET_ID_MAX:
            raise ValueError(
                f"Counter start must lie within [{TABSET_ID_MIN}, {TABSET_ID_MAX}], got {start}"
            )
        self._start = start
        self._next = start
        self._lock = threading.Lock()

    def next_tabset_id(self) -> int:
        with self._lock:
            value = self._next
            self._next = value + 1 if value < TABSET_ID_MAX else self._start
            return value


_DEFAULT_SOURCE: TabsetIdSource | None = None
_SOURCE_LOCK = threading.Lock()


def get_default_id_source() -> TabsetIdSource:
    """Return the process wide identifier source."""

    global _DEFAULT_SOURCE
    with _SOURCE_LOCK:
        if _DEFAULT_SOURCE is None:
            _DEFAULT_SOURCE = RandomTabsetIds()
        return _DEFAULT_SOURCE


def set_default_id_source(source: TabsetIdSource | None) -> None:
    """Replace the process wide source; ``None`` restores the random default lazily."""

    global _DEFAULT_SOURCE
    with _SOURCE_LOCK:
        _DEFAULT_SOURCE = source
