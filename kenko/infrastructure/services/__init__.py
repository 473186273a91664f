"""Infrastructure services package."""

from .http_prober import HttpProber, InvalidTargetURL

__all__ = ["HttpProber", "InvalidTargetURL"]
