"""Domain abstraction for the query-side read of latest results."""

from __future__ import annotations

from typing import Dict, Protocol

from kenko.domain.entities.health import CheckResult


class IResultReader(Protocol):
    async def read_all(self) -> Dict[str, CheckResult]:
        """Return the latest known result for every target."""
        ...
