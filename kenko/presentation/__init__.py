"""
Presentation Layer Package

HTTP surface of Kenko: liveness, target status and Prometheus metrics.
"""

from kenko.presentation import controllers

__all__ = ["controllers"]
