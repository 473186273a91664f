"""Domain ports package."""

from .check_metrics import ICheckMetrics
from .prober import IProber
from .result_mirror import IResultMirror
from .result_reader import IResultReader
from .result_store import IResultStore

__all__ = [
    "ICheckMetrics",
    "IProber",
    "IResultMirror",
    "IResultReader",
    "IResultStore",
]
