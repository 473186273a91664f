"""HTTP GET prober backed by a shared ``httpx.AsyncClient``."""

from __future__ import annotations

import asyncio
from datetime import timedelta
from time import perf_counter
from typing import Optional

import httpx

from kenko.domain.entities.health import CheckResult, Target
from kenko.domain.ports.prober import IProber

_ALLOWED_SCHEMES = ("http", "https")


class InvalidTargetURL(ValueError):
    """The target URL cannot be turned into an HTTP request."""


class _ProbeCancelled(Exception):
    pass


class HttpProber(IProber):
    """Probe targets with a single bounded GET request each."""

    def __init__(
        self,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        follow_redirects: bool = True,
    ) -> None:
        self._client = httpx.AsyncClient(
            transport=transport,
            follow_redirects=follow_redirects,
        )

    async def probe(
        self,
        target: Target,
        timeout: float,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> CheckResult:
        start = perf_counter()

        try:
            request = self._build_request(target.url, timeout)
        except (httpx.InvalidURL, ValueError) as exc:
            return CheckResult.from_failure(
                target, f"bad request: {exc}", self._elapsed(start)
            )

        try:
            status_code = await self._send(request, timeout, cancel_event)
        except httpx.HTTPError as exc:
            return CheckResult.from_failure(
                target, f"request failed: {self._describe(exc)}", self._elapsed(start)
            )
        except asyncio.TimeoutError:
            return CheckResult.from_failure(
                target,
                f"request failed: timed out after {timeout:g}s",
                self._elapsed(start),
            )
        except _ProbeCancelled:
            return CheckResult.from_failure(
                target, "request failed: check cancelled", self._elapsed(start)
            )

        return CheckResult.from_response(target, status_code, self._elapsed(start))

    async def aclose(self) -> None:
        await self._client.aclose()

    def _build_request(self, url: str, timeout: float) -> httpx.Request:
        request = self._client.build_request(
            "GET", url, timeout=httpx.Timeout(timeout)
        )
        if request.url.scheme not in _ALLOWED_SCHEMES:
            raise InvalidTargetURL(
                f"unsupported protocol scheme {request.url.scheme!r} in {url!r}"
            )
        if not request.url.host:
            raise InvalidTargetURL(f"no host in request URL {url!r}")
        return request

    async def _send(
        self,
        request: httpx.Request,
        timeout: float,
        cancel_event: Optional[asyncio.Event],
    ) -> int:
        """
        Send ``request`` and return its status code.

        The exchange is raced against the overall deadline and the cancel
        event; whichever loses is cancelled. The body is never read.
        """
        exchange = asyncio.create_task(self._exchange(request))
        waiters = {exchange}
        cancelled: Optional[asyncio.Task] = None
        if cancel_event is not None:
            cancelled = asyncio.create_task(cancel_event.wait())
            waiters.add(cancelled)

        try:
            done, _ = await asyncio.wait(
                waiters, timeout=timeout, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            for task in waiters:
                if not task.done():
                    task.cancel()
            await asyncio.gather(*waiters, return_exceptions=True)

        if exchange in done:
            return exchange.result()
        if cancelled is not None and cancelled in done:
            raise _ProbeCancelled()
        raise asyncio.TimeoutError()

    async def _exchange(self, request: httpx.Request) -> int:
        response = await self._client.send(request, stream=True)
        await response.aclose()
        return response.status_code

    @staticmethod
    def _describe(exc: httpx.HTTPError) -> str:
        return str(exc) or exc.__class__.__name__

    @staticmethod
    def _elapsed(start: float) -> timedelta:
        return timedelta(seconds=max(0.0, perf_counter() - start))

