"""Domain abstraction for an external, best-effort copy of the result store."""

from __future__ import annotations

from typing import Dict, Optional, Protocol

from kenko.domain.entities.health import CheckResult


class IResultMirror(Protocol):
    """Durable mirror shared across restarts and checker instances."""

    async def write_through(self, name: str, result: CheckResult) -> None:
        """Store ``result`` under ``name``. Must not raise."""
        ...

    async def read_all(self) -> Optional[Dict[str, CheckResult]]:
        """Return every mirrored result, or ``None`` when unavailable or empty."""
        ...

    async def aclose(self) -> None: ...
