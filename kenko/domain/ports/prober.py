"""Domain abstraction for probing a single target."""

from __future__ import annotations

import asyncio
from typing import Optional, Protocol

from kenko.domain.entities.health import CheckResult, Target


class IProber(Protocol):
    """Performs one bounded check against a target."""

    async def probe(
        self,
        target: Target,
        timeout: float,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> CheckResult:
        """Check ``target`` once. Failures are encoded in the result, never raised."""
        ...
