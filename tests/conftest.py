from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, Dict, List, Optional

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from kenko.domain.entities.health import CheckResult, CheckStatus, Target  # noqa: E402

MONITOR_YAML = """\
port: 7070
check_interval: 30s
check_timeout: 2s
targets:
  - name: ok
    url: http://x/200
  - name: fail
    url: http://x/500
"""


@pytest.fixture()
def targets() -> List[Target]:
    return [
        Target(name="ok", url="http://x/200"),
        Target(name="fail", url="http://x/500"),
        Target(name="down", url="http://unreachable"),
    ]


@pytest.fixture()
def make_result() -> Callable[..., CheckResult]:
    def _make(
        name: str = "api",
        status: CheckStatus = CheckStatus.HEALTHY,
        status_code: Optional[int] = 200,
        latency_ms: float = 12.0,
        error: Optional[str] = None,
        checked_at: Optional[datetime] = None,
    ) -> CheckResult:
        return CheckResult(
            target=name,
            url=f"http://{name}.local/health",
            status=status,
            status_code=status_code,
            latency=timedelta(milliseconds=latency_ms),
            error=error,
            checked_at=checked_at or datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc),
        )

    return _make


@pytest.fixture()
def monitor_config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(MONITOR_YAML, encoding="utf-8")
    return path


class StubResultStore:
    """Plain dict store used where locking is not under test."""

    def __init__(self) -> None:
        self.results: Dict[str, CheckResult] = {}
        self.updates: List[str] = []

    def update(self, name: str, result: CheckResult) -> None:
        self.updates.append(name)
        self.results[name] = result

    def snapshot(self) -> Dict[str, CheckResult]:
        return dict(self.results)


class StubMetrics:
    def __init__(self) -> None:
        self.observed: List[CheckResult] = []

    def observe(self, result: CheckResult) -> None:
        self.observed.append(result)


class StubMirror:
    def __init__(self, stored: Optional[Dict[str, CheckResult]] = None) -> None:
        self.stored: Dict[str, CheckResult] = dict(stored or {})
        self.available = True
        self.closed = False

    async def write_through(self, name: str, result: CheckResult) -> None:
        if self.available:
            self.stored[name] = result

    async def read_all(self) -> Optional[Dict[str, CheckResult]]:
        if not self.available or not self.stored:
            return None
        return dict(self.stored)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture()
def stub_store() -> StubResultStore:
    return StubResultStore()


@pytest.fixture()
def stub_metrics() -> StubMetrics:
    return StubMetrics()


@pytest.fixture()
def stub_mirror() -> StubMirror:
    return StubMirror()
