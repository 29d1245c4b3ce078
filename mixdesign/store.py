# mixdesign/store.py
from __future__ import annotations

import itertools
import threading
from typing import Generic, List, TypeVar

T = TypeVar("T")


class RunStore(Generic[T]):
    """
    In-memory, append-only run log with a sequential id counter.

    One instance per service; pass it in rather than sharing a module global.
    Appends and id reservation are serialized with a lock.
    """

    def __init__(self, start_id: int = 1):
        self._lock = threading.Lock()
        self._runs: List[T] = []
        self._start_id = int(start_id)
        self._ids = itertools.count(self._start_id)

    def next_id(self) -> int:
        with self._lock:
            return next(self._ids)

    def append(self, run: T) -> T:
        with self._lock:
            self._runs.append(run)
        return run

    def all(self) -> List[T]:
        with self._lock:
            return list(self._runs)

    def clear(self) -> None:
        with self._lock:
            self._runs.clear()
            self._ids = itertools.count(self._start_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._runs)
