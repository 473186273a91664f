"""Domain abstraction for the authoritative store of latest results."""

from __future__ import annotations

from typing import Dict, Protocol

from kenko.domain.entities.health import CheckResult


class IResultStore(Protocol):
    """Latest result per target name, shared between writers and readers."""

    def update(self, name: str, result: CheckResult) -> None:
        """Replace the entry for ``name`` as a whole."""
        ...

    def snapshot(self) -> Dict[str, CheckResult]:
        """Return an independent point-in-time copy of every entry."""
        ...
