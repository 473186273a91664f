"""
Check scheduler - Application Layer

Drives the repeating check cycle: one probe per target, all concurrent,
results fanned into the store, the optional mirror and the metrics.
"""

from __future__ import annotations

import asyncio
from enum import Enum
from typing import List, Optional, Sequence, Set

import structlog

from kenko.domain.entities.health import CheckResult, Target
from kenko.domain.ports.check_metrics import ICheckMetrics
from kenko.domain.ports.prober import IProber
from kenko.domain.ports.result_mirror import IResultMirror
from kenko.domain.ports.result_store import IResultStore

logger = structlog.get_logger(__name__)


class CheckerState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPING = "stopping"
    STOPPED = "stopped"


class CheckScheduler:
    """
    Run check cycles at a fixed wall-clock interval.

    The first cycle runs as soon as the scheduler starts. Later ticks are
    scheduled from the previous tick rather than from the end of the last
    cycle, and every tick launches its cycle without waiting for earlier
    ones, so slow cycles may overlap. An earlier cycle finishing late can
    then overwrite a newer result for the same target.

    ``stop()`` sets the stop event shared with every in-flight probe. No new
    cycle is launched afterwards; cycles already running are awaited and
    still record their (possibly cancelled) results.
    """

    def __init__(
        self,
        targets: Sequence[Target],
        prober: IProber,
        store: IResultStore,
        metrics: ICheckMetrics,
        *,
        interval: float,
        timeout: float,
        mirror: Optional[IResultMirror] = None,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        if timeout <= 0:
            raise ValueError("timeout must be positive")

        self._targets = tuple(targets)
        self._prober = prober
        self._store = store
        self._metrics = metrics
        self._mirror = mirror
        self._interval = interval
        self._timeout = timeout

        self._state = CheckerState.IDLE
        self._stop_event = asyncio.Event()
        self._loop_task: Optional[asyncio.Task] = None
        self._cycles: Set[asyncio.Task] = set()
        self._cycles_started = 0

    @property
    def state(self) -> CheckerState:
        return self._state

    @property
    def targets(self) -> Sequence[Target]:
        return self._targets

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def cycles_started(self) -> int:
        return self._cycles_started

    def start(self) -> None:
        """Launch the scheduling loop in the background."""
        if self._state is not CheckerState.IDLE:
            logger.warning("checker.start.ignored", state=self._state.value)
            return

        self._state = CheckerState.RUNNING
        self._loop_task = asyncio.create_task(self._run(), name="kenko-checker")
        logger.info(
            "checker.starting",
            targets=len(self._targets),
            interval=self._interval,
            timeout=self._timeout,
        )

    async def stop(self) -> None:
        """Signal cancellation and wait for in-flight cycles to finish."""
        if self._state is CheckerState.IDLE:
            self._state = CheckerState.STOPPED
            return
        if self._state is CheckerState.RUNNING:
            self._state = CheckerState.STOPPING
            logger.info("checker.stopping")
        self._stop_event.set()

        if self._loop_task is not None:
            await asyncio.gather(self._loop_task, return_exceptions=True)

    async def run_cycle(self) -> List[CheckResult]:
        """Probe every target concurrently and record each result."""
        self._cycles_started += 1
        cycle = self._cycles_started
        outcomes = await asyncio.gather(
            *(self._check_target(target) for target in self._targets),
            return_exceptions=True,
        )

        results: List[CheckResult] = []
        for target, outcome in zip(self._targets, outcomes):
            if isinstance(outcome, CheckResult):
                results.append(outcome)
            elif isinstance(outcome, Exception):
                logger.error(
                    "checker.check.error",
                    target=target.name,
                    cycle=cycle,
                    error=str(outcome),
                    exc_info=outcome,
                )
            else:
                raise outcome

        logger.debug(
            "checker.cycle.complete",
            cycle=cycle,
            checked=len(results),
            healthy=sum(1 for result in results if result.is_healthy),
        )
        return results

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        try:
            await self._run_guarded()
            next_tick = loop.time() + self._interval

            while not self._stop_event.is_set():
                delay = max(0.0, next_tick - loop.time())
                try:
                    await asyncio.wait_for(self._stop_event.wait(), timeout=delay)
                    break
                except asyncio.TimeoutError:
                    pass

                now = loop.time()
                while next_tick <= now:
                    next_tick += self._interval
                self._launch_cycle()
        finally:
            if self._cycles:
                await asyncio.gather(*self._cycles, return_exceptions=True)
            self._state = CheckerState.STOPPED
            logger.info("checker.stopped", cycles=self._cycles_started)

    def _launch_cycle(self) -> None:
        task = asyncio.create_task(self._run_guarded())
        self._cycles.add(task)
        task.add_done_callback(self._cycles.discard)

    async def _run_guarded(self) -> None:
        try:
            await self.run_cycle()
        except Exception as exc:
            logger.error("checker.cycle.error", error=str(exc), exc_info=exc)

    async def _check_target(self, target: Target) -> CheckResult:
        result = await self._prober.probe(target, self._timeout, self._stop_event)

        self._store.update(target.name, result)
        if self._mirror is not None:
            await self._mirror.write_through(target.name, result)
        self._metrics.observe(result)

        logger.info(
            "checker.check.complete",
            target=target.name,
            status=result.status.value,
            status_code=result.status_code,
            latency_ms=round(result.latency.total_seconds() * 1000, 3),
            error=result.error,
        )
        return result
