from __future__ import annotations

from typing import Dict, Optional

import httpx
import pytest
from prometheus_client import CollectorRegistry
from redis.exceptions import ConnectionError as RedisConnectionError

from kenko.application.services.check_scheduler import CheckScheduler
from kenko.application.use_cases.health_use_cases import GetTargetStatusUseCase
from kenko.domain.entities.health import Target
from kenko.infrastructure.metrics import PrometheusCheckMetrics
from kenko.infrastructure.repositories import (
    InMemoryResultStore,
    RedisResultMirror,
    build_result_reader,
)
from kenko.infrastructure.services import HttpProber


def _handler(request: httpx.Request) -> httpx.Response:
    if request.url.host == "unreachable":
        raise httpx.ConnectError("connection refused", request=request)
    return httpx.Response(int(request.url.path.strip("/")))


class _MemoryRedis:
    def __init__(self) -> None:
        self.hashes: Dict[str, Dict[bytes, bytes]] = {}
        self.down = False

    async def hset(self, key: str, field: str, value: str) -> int:
        if self.down:
            raise RedisConnectionError("redis is down")
        self.hashes.setdefault(key, {})[field.encode()] = value.encode()
        return 1

    async def hgetall(self, key: str) -> Dict[bytes, bytes]:
        if self.down:
            raise RedisConnectionError("redis is down")
        return dict(self.hashes.get(key, {}))

    async def aclose(self) -> None:
        return None


def _wire(targets, mirror: Optional[RedisResultMirror] = None):
    prober = HttpProber(transport=httpx.MockTransport(_handler))
    store = InMemoryResultStore()
    metrics = PrometheusCheckMetrics(registry=CollectorRegistry())
    scheduler = CheckScheduler(
        targets,
        prober,
        store,
        metrics,
        interval=30.0,
        timeout=1.0,
        mirror=mirror,
    )
    use_case = GetTargetStatusUseCase(build_result_reader(store, mirror))
    return prober, store, metrics, scheduler, use_case


@pytest.mark.asyncio
async def test_cycle_reports_healthy_and_unhealthy_targets(targets):
    prober, store, metrics, scheduler, use_case = _wire(targets)

    await scheduler.run_cycle()
    status = await use_case.execute()
    await prober.aclose()

    by_name = {item.name: item for item in status.targets}
    assert [item.name for item in status.targets] == ["down", "fail", "ok"]

    assert by_name["ok"].status == "healthy"
    assert by_name["ok"].status_code == 200
    assert by_name["ok"].error is None

    assert by_name["fail"].status == "unhealthy"
    assert by_name["fail"].status_code == 500
    assert by_name["fail"].error is None

    assert by_name["down"].status == "unhealthy"
    assert by_name["down"].status_code is None
    assert by_name["down"].error.startswith("request failed: ")

    registry = metrics.registry
    assert registry.get_sample_value("kenko_target_up", {"target": "ok"}) == 1.0
    assert registry.get_sample_value("kenko_target_up", {"target": "fail"}) == 0.0
    assert (
        registry.get_sample_value(
            "kenko_check_total", {"target": "down", "status": "unhealthy"}
        )
        == 1.0
    )


@pytest.mark.asyncio
async def test_status_is_served_from_mirror_when_available(targets):
    client = _MemoryRedis()
    mirror = RedisResultMirror(client)
    prober, store, _, scheduler, use_case = _wire(targets, mirror)

    await scheduler.run_cycle()
    await prober.aclose()

    assert set(client.hashes["kenko:results"]) == {b"ok", b"fail", b"down"}

    # Diverge the in-memory copy; the answer must still come from Redis.
    store.update("ok", store.snapshot()["fail"])
    status = await use_case.execute()
    ok = next(item for item in status.targets if item.name == "ok")
    assert ok.status == "healthy"


@pytest.mark.asyncio
async def test_status_falls_back_to_memory_when_mirror_is_down(targets):
    client = _MemoryRedis()
    client.down = True
    mirror = RedisResultMirror(client)
    prober, store, _, scheduler, use_case = _wire(targets, mirror)

    await scheduler.run_cycle()
    await prober.aclose()

    assert len(store) == 3
    status = await use_case.execute()
    assert {item.name for item in status.targets} == {"ok", "fail", "down"}


@pytest.mark.asyncio
async def test_unencodable_target_url_is_recorded_as_bad_request():
    targets = [
        Target(name="ok", url="http://x/200"),
        Target(name="bad", url="http://xn--/"),
    ]
    prober, store, _, scheduler, _ = _wire(targets)

    await scheduler.run_cycle()
    await prober.aclose()

    snapshot = store.snapshot()
    assert set(snapshot) == {"ok", "bad"}
    assert snapshot["bad"].status_code is None
    assert snapshot["bad"].error.startswith("bad request: ")
