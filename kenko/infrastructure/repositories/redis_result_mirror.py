"""
Redis Result Mirror - Infrastructure Layer

Write-through copy of the result store kept in a Redis hash, one field per
target. The mirror is a convenience for sharing results across restarts
and checker instances: every failure is logged and swallowed.
"""

from __future__ import annotations

import asyncio
import json
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

import redis.asyncio as aioredis
import structlog
from redis.exceptions import RedisError

from kenko.domain.entities.health import CheckResult, CheckStatus
from kenko.domain.ports.result_mirror import IResultMirror
from kenko.shared.consts import DEFAULT_RESULTS_KEY

logger = structlog.get_logger(__name__)


def create_redis_client(url: str, socket_timeout: float = 2.0) -> aioredis.Redis:
    """Build an asyncio Redis client with bounded connect and socket timeouts."""
    return aioredis.from_url(
        url,
        socket_connect_timeout=socket_timeout,
        socket_timeout=socket_timeout,
    )


class RedisResultMirror(IResultMirror):
    """Mirror results into the ``results_key`` hash of a Redis server."""

    def __init__(
        self,
        client: aioredis.Redis,
        *,
        results_key: str = DEFAULT_RESULTS_KEY,
        read_timeout: float = 2.0,
    ) -> None:
        self._client = client
        self._results_key = results_key
        self._read_timeout = read_timeout

    async def write_through(self, name: str, result: CheckResult) -> None:
        try:
            payload = json.dumps(self._to_document(result))
        except (TypeError, ValueError) as exc:
            logger.error("mirror.serialize.failed", target=name, error=str(exc))
            return

        try:
            await self._client.hset(self._results_key, name, payload)
        except (RedisError, OSError, asyncio.TimeoutError) as exc:
            logger.warning("mirror.write.failed", target=name, error=str(exc))

    async def read_all(self) -> Optional[Dict[str, CheckResult]]:
        try:
            raw = await asyncio.wait_for(
                self._client.hgetall(self._results_key), timeout=self._read_timeout
            )
        except (RedisError, OSError, asyncio.TimeoutError) as exc:
            logger.warning("mirror.read.failed", key=self._results_key, error=str(exc))
            return None

        if not raw:
            return None

        results: Dict[str, CheckResult] = {}
        for field, data in raw.items():
            name = self._decode(field)
            try:
                results[name] = self._to_entity(json.loads(self._decode(data)))
            except (KeyError, TypeError, ValueError) as exc:
                logger.warning("mirror.decode.failed", target=name, error=str(exc))

        return results or None

    async def aclose(self) -> None:
        try:
            await self._client.aclose()
        except (RedisError, OSError) as exc:
            logger.warning("mirror.close.failed", error=str(exc))

    @staticmethod
    def _decode(value: Any) -> str:
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return str(value)

    @staticmethod
    def _to_document(result: CheckResult) -> Dict[str, Any]:
        return {
            "target": result.target,
            "url": result.url,
            "status": result.status.value,
            "status_code": result.status_code,
            "latency": result.latency.total_seconds(),
            "error": result.error,
            "checked_at": result.checked_at.isoformat(),
        }

    @staticmethod
    def _to_entity(document: Dict[str, Any]) -> CheckResult:
        return CheckResult(
            target=document["target"],
            url=document["url"],
            status=CheckStatus(document["status"]),
            status_code=document.get("status_code"),
            latency=timedelta(seconds=float(document["latency"])),
            error=document.get("error") or None,
            checked_at=datetime.fromisoformat(document["checked_at"]),
        )
