"""
Repositories Package - Infrastructure Layer

Concrete storage for check results: the authoritative in-memory store,
the optional Redis mirror and the readers used by the query path.
"""

from .in_memory_result_store import InMemoryResultStore
from .redis_result_mirror import RedisResultMirror, create_redis_client
from .result_readers import (
    MemoryResultReader,
    MirroredResultReader,
    build_result_reader,
)

__all__ = [
    "InMemoryResultStore",
    "RedisResultMirror",
    "create_redis_client",
    "MemoryResultReader",
    "MirroredResultReader",
    "build_result_reader",
]
