"""
In-memory Result Store - Infrastructure Layer

Authoritative mapping of target name to its latest ``CheckResult``.
"""

from __future__ import annotations

import threading
from typing import Dict

from kenko.domain.entities.health import CheckResult
from kenko.domain.ports.result_store import IResultStore


class InMemoryResultStore(IResultStore):
    """
    Thread-safe dict of latest results.

    A single lock guards the backing dict and is only held for one
    assignment or one copy, never across I/O. ``CheckResult`` is frozen, so
    handing out the same instances in snapshots is safe.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._results: Dict[str, CheckResult] = {}

    def update(self, name: str, result: CheckResult) -> None:
        with self._lock:
            self._results[name] = result

    def snapshot(self) -> Dict[str, CheckResult]:
        with self._lock:
            return dict(self._results)


    def __len__(self) -> int:
        with self._lock:
            return len(self._results)
