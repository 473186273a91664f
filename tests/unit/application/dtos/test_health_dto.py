from __future__ import annotations

from datetime import datetime, timedelta, timezone

from kenko.application.dtos.health_dto import StatusDTO, TargetResultDTO
from kenko.domain.entities.health import CheckStatus


def test_target_result_dto_formats_latency_and_timestamp(make_result) -> None:
    result = make_result(
        "api",
        latency_ms=41.9,
        checked_at=datetime(2025, 3, 4, 5, 6, 7, 890000, tzinfo=timezone.utc),
    )

    dto = TargetResultDTO.from_domain(result)

    assert dto.latency_ms == 41
    assert dto.checked_at == "2025-03-04T05:06:07Z"
    assert dto.status is CheckStatus.HEALTHY
    assert dto.status_code == 200
    assert dto.error is None


def test_target_result_dto_converts_timestamp_to_utc(make_result) -> None:
    offset = timezone(timedelta(hours=2))
    result = make_result(checked_at=datetime(2025, 3, 4, 7, 0, 0, tzinfo=offset))

    dto = TargetResultDTO.from_domain(result)

    assert dto.checked_at == "2025-03-04T05:00:00Z"


def test_target_result_dto_omits_absent_fields_when_excluding_none(
    make_result,
) -> None:
    failed = make_result(
        "down",
        status=CheckStatus.UNHEALTHY,
        status_code=None,
        error="request failed: connection refused",
    )
    code_only = make_result("fail", status=CheckStatus.UNHEALTHY, status_code=500)

    failed_payload = TargetResultDTO.from_domain(failed).model_dump(
        mode="json", exclude_none=True
    )
    code_payload = TargetResultDTO.from_domain(code_only).model_dump(
        mode="json", exclude_none=True
    )

    assert "status_code" not in failed_payload
    assert failed_payload["error"] == "request failed: connection refused"
    assert code_payload["status_code"] == 500
    assert "error" not in code_payload
    assert code_payload["status"] == "unhealthy"


def test_status_dto_sorts_by_name(make_result) -> None:
    dto = StatusDTO.from_results(
        {name: make_result(name) for name in ("zeta", "alpha", "mid")}
    )

    assert [target.name for target in dto.targets] == ["alpha", "mid", "zeta"]
