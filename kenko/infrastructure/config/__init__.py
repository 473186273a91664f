"""Loading of the monitor YAML configuration."""

from .target_config import (
    MonitorConfig,
    TargetConfig,
    load_monitor_config,
    parse_duration,
)

__all__ = ["MonitorConfig", "TargetConfig", "load_monitor_config", "parse_duration"]
