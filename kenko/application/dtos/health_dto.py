"""DTOs for the liveness and target status responses."""

from __future__ import annotations

from datetime import timezone
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from kenko.domain.entities.health import CheckResult, CheckStatus

RFC3339_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class LivenessDTO(BaseModel):
    """DTO representing the /health response payload."""

    status: str = Field(default="healthy", description="Always 'healthy'")

    model_config = {"json_schema_extra": {"example": {"status": "healthy"}}}


class TargetResultDTO(BaseModel):
    """Serializable representation of the latest check of one target."""

    name: str = Field(description="Target identifier")
    url: str = Field(description="Probed URL")
    status: CheckStatus = Field(description="Outcome of the latest check")
    status_code: Optional[int] = Field(
        default=None, description="HTTP status code, absent when no response"
    )
    latency_ms: int = Field(description="Probe latency in whole milliseconds")
    error: Optional[str] = Field(
        default=None, description="Why no status code could be obtained"
    )
    checked_at: str = Field(description="RFC 3339 UTC time the probe finished")

    @classmethod
    def from_domain(cls, result: CheckResult) -> "TargetResultDTO":
        return cls(
            name=result.target,
            url=result.url,
            status=result.status,
            status_code=result.status_code,
            latency_ms=int(result.latency.total_seconds() * 1000),
            error=result.error or None,
            checked_at=result.checked_at.astimezone(timezone.utc).strftime(
                RFC3339_FORMAT
            ),
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "api",
                "url": "https://api.example.com/healthz",
                "status": "healthy",
                "status_code": 200,
                "latency_ms": 42,
                "checked_at": "2025-01-01T12:00:00Z",
            }
        }
    }


class StatusDTO(BaseModel):
    """DTO representing the /status response payload."""

    targets: List[TargetResultDTO] = Field(
        default_factory=list, description="Latest result per target, by name"
    )

    @classmethod
    def from_results(cls, results: Dict[str, CheckResult]) -> "StatusDTO":
        return cls(
            targets=[
                TargetResultDTO.from_domain(results[name]) for name in sorted(results)
            ]
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "targets": [
                    {
                        "name": "api",
                        "url": "https://api.example.com/healthz",
                        "status": "healthy",
                        "status_code": 200,
                        "latency_ms": 42,
                        "checked_at": "2025-01-01T12:00:00Z",
                    },
                    {
                        "name": "legacy",
                        "url": "http://legacy.internal",
                        "status": "unhealthy",
                        "latency_ms": 5000,
                        "error": "request failed: timed out after 5s",
                        "checked_at": "2025-01-01T12:00:05Z",
                    },
                ]
            }
        }
    }
