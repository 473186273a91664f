"""
Monitor configuration - Infrastructure Layer

Loads the YAML file that lists the targets to check together with the
check cadence, the listening port and the optional Redis address.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, List, Optional, Union

import httpx
import structlog
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from kenko.domain.entities.errors import ConfigurationError
from kenko.domain.entities.health import Target

logger = structlog.get_logger(__name__)

_DURATION_PART = re.compile(r"(\d+(?:\.\d+)?)(ns|us|µs|ms|s|m|h)")
_UNIT_SECONDS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}


def parse_duration(value: Union[str, int, float]) -> float:
    """
    Parse a duration into seconds.

    Accepts plain numbers (seconds) and Go-style strings such as
    ``"500ms"``, ``"30s"`` or ``"1m30s"``.
    """
    if isinstance(value, bool):
        raise ValueError(f"invalid duration {value!r}")
    if isinstance(value, (int, float)):
        return float(value)

    text = str(value).strip()
    if not text:
        raise ValueError("empty duration")
    try:
        return float(text)
    except ValueError:
        pass

    position = 0
    total = 0.0
    for match in _DURATION_PART.finditer(text):
        if match.start() != position:
            break
        total += float(match.group(1)) * _UNIT_SECONDS[match.group(2)]
        position = match.end()

    if position != len(text):
        raise ValueError(f"invalid duration {value!r}")
    return total


class TargetConfig(BaseModel):
    name: str = Field(description="Unique target identifier")
    url: str = Field(description="Absolute http(s) URL probed with GET")

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("target name must not be empty")
        return value

    @field_validator("url")
    @classmethod
    def _absolute_http_url(cls, value: str) -> str:
        value = value.strip()
        try:
            url = httpx.URL(value)
        except (httpx.InvalidURL, ValueError) as exc:
            raise ValueError(
                f"target url is not a valid URL: {value!r} ({exc})"
            ) from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError(f"target url must be an absolute http(s) URL: {value!r}")
        return value

    def to_domain(self) -> Target:
        return Target(name=self.name, url=self.url)


class MonitorConfig(BaseModel):
    """Validated content of the monitor YAML file."""

    port: int = Field(default=6969, ge=1, le=65535)
    check_interval: float = Field(default=30.0, description="Seconds between cycles")
    check_timeout: float = Field(default=5.0, description="Per-probe deadline")
    redis_addr: Optional[str] = Field(
        default=None, description="host:port or redis:// URL of the result mirror"
    )
    targets: List[TargetConfig] = Field(default_factory=list)

    @field_validator("check_interval", "check_timeout", mode="before")
    @classmethod
    def _parse_duration(cls, value: Any) -> float:
        return parse_duration(value)

    @field_validator("check_interval", "check_timeout")
    @classmethod
    def _positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("duration must be positive")
        return value

    @field_validator("redis_addr")
    @classmethod
    def _blank_redis_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value.strip()

    @model_validator(mode="after")
    def _unique_targets(self) -> "MonitorConfig":
        if not self.targets:
            raise ValueError("at least one target must be configured")
        seen = set()
        for target in self.targets:
            if target.name in seen:
                raise ValueError(f"duplicate target name {target.name!r}")
            seen.add(target.name)
        return self

    @property
    def redis_url(self) -> Optional[str]:
        """``redis_addr`` normalised into a URL understood by redis-py."""
        if self.redis_addr is None:
            return None
        if "://" in self.redis_addr:
            return self.redis_addr
        return f"redis://{self.redis_addr}/0"

    def domain_targets(self) -> List[Target]:
        return [target.to_domain() for target in self.targets]


def load_monitor_config(path: Union[str, Path]) -> MonitorConfig:
    """Read and validate the monitor YAML file."""
    config_path = Path(path)
    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except OSError as exc:
        raise ConfigurationError(
            f"reading config: {exc}", details={"path": str(config_path)}
        ) from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            f"parsing config: {exc}", details={"path": str(config_path)}
        ) from exc

    if not isinstance(raw, dict):
        raise ConfigurationError(
            "parsing config: top-level document must be a mapping",
            details={"path": str(config_path)},
        )

    try:
        config = MonitorConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigurationError(
            f"invalid config: {exc}",
            details={"path": str(config_path), "errors": exc.errors()},
        ) from exc

    logger.info(
        "config.loaded",
        path=str(config_path),
        targets=len(config.targets),
        interval=config.check_interval,
        timeout=config.check_timeout,
        mirror=config.redis_url is not None,
    )
    return config
