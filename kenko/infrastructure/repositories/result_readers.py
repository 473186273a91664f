"""
Result readers - Infrastructure Layer

Two interchangeable implementations of ``IResultReader``: one reads the
in-memory store only, the other prefers the Redis mirror and falls back to
memory when the mirror is unavailable or empty. The choice is made once,
when the container is built.
"""

from __future__ import annotations

from typing import Dict, Optional

import structlog

from kenko.domain.entities.health import CheckResult
from kenko.domain.ports.result_mirror import IResultMirror
from kenko.domain.ports.result_reader import IResultReader
from kenko.domain.ports.result_store import IResultStore

logger = structlog.get_logger(__name__)


class MemoryResultReader(IResultReader):
    def __init__(self, store: IResultStore) -> None:
        self._store = store

    async def read_all(self) -> Dict[str, CheckResult]:
        return self._store.snapshot()


class MirroredResultReader(IResultReader):
    def __init__(self, mirror: IResultMirror, store: IResultStore) -> None:
        self._mirror = mirror
        self._store = store

    async def read_all(self) -> Dict[str, CheckResult]:
        mirrored = await self._mirror.read_all()
        if mirrored:
            return mirrored

        logger.debug("reader.mirror.fallback")
        return self._store.snapshot()


def build_result_reader(
    store: IResultStore, mirror: Optional[IResultMirror] = None
) -> IResultReader:
    """Pick the reader matching the configured collaborators."""
    if mirror is None:
        return MemoryResultReader(store)
    return MirroredResultReader(mirror, store)
