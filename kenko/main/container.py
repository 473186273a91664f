"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager
from operator import attrgetter
from typing import Optional

from dependency_injector import containers, providers
from prometheus_client import CollectorRegistry

from kenko.application.services.check_scheduler import CheckScheduler
from kenko.application.use_cases.health_use_cases import (
    GetLivenessUseCase,
    GetTargetStatusUseCase,
)
from kenko.infrastructure.config import MonitorConfig, load_monitor_config
from kenko.infrastructure.metrics import PrometheusCheckMetrics
from kenko.infrastructure.repositories import (
    InMemoryResultStore,
    RedisResultMirror,
    build_result_reader,
    create_redis_client,
)
from kenko.infrastructure.services.http_prober import HttpProber
from kenko.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


def _resolve_redis_url(
    override: Optional[str], monitor_config: MonitorConfig
) -> Optional[str]:
    return override or monitor_config.redis_url


def _build_result_mirror(
    redis_url: Optional[str],
    results_key: str,
    read_timeout: float,
    socket_timeout: float,
) -> Optional[RedisResultMirror]:
    if not redis_url:
        logger.info("container.mirror.disabled")
        return None

    return RedisResultMirror(
        create_redis_client(redis_url, socket_timeout=socket_timeout),
        results_key=results_key,
        read_timeout=read_timeout,
    )


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    monitor_config = providers.Singleton(
        load_monitor_config,
        path=config.checker.config_path,
    )

    # Infrastructure
    prober = providers.Singleton(HttpProber)

    result_store = providers.Singleton(InMemoryResultStore)

    result_mirror = providers.Singleton(
        _build_result_mirror,
        redis_url=providers.Callable(
            _resolve_redis_url, config.redis.url, monitor_config
        ),
        results_key=config.redis.results_key,
        read_timeout=config.redis.read_timeout,
        socket_timeout=config.redis.socket_timeout,
    )

    result_reader = providers.Singleton(
        build_result_reader,
        store=result_store,
        mirror=result_mirror,
    )

    metrics_registry = providers.Singleton(CollectorRegistry)

    check_metrics = providers.Singleton(
        PrometheusCheckMetrics,
        registry=metrics_registry,
    )

    # Application
    check_scheduler = providers.Singleton(
        CheckScheduler,
        targets=providers.Callable(MonitorConfig.domain_targets, monitor_config),
        prober=prober,
        store=result_store,
        metrics=check_metrics,
        interval=providers.Callable(attrgetter("check_interval"), monitor_config),
        timeout=providers.Callable(attrgetter("check_timeout"), monitor_config),
        mirror=result_mirror,
    )

    get_liveness_use_case = providers.Factory(GetLivenessUseCase)

    get_target_status_use_case = providers.Factory(
        GetTargetStatusUseCase,
        result_reader=result_reader,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for the checker.

    Starts the scheduler on entry. On exit the scheduler is stopped first,
    letting in-flight cycles record their results, and only then are the
    HTTP client and the Redis connection released.
    """
    container = get_container()

    scheduler = container.check_scheduler()
    scheduler.start()
    logger.info("container.resources.initialized")

    try:
        yield container
    finally:
        logger.info("container.checker.stop")
        await scheduler.stop()

        await container.prober().aclose()
        mirror = container.result_mirror()
        if mirror is not None:
            logger.info("container.mirror.close")
            await mirror.aclose()

        logger.info("container.resources.shutdown")
