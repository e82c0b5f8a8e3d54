# This file builds the response envelope shared by every JSON endpoint.
# It exists so consumers always receive version metadata and request tracing fields.
# The helper returns a plain dictionary that Pydantic response models validate at runtime.

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from src.api.api_config import ApiConfig


def utc_now() -> datetime:
    return datetime.now(tz=UTC)


def version_fields(config: ApiConfig) -> dict[str, str]:
    return {
        "api_version": config.api_version_label(),
        "schema_version": config.schema_version,
    }


def build_object_envelope(
    *,
    config: ApiConfig,
    request_id: str,
    data: dict[str, Any] | None,
    warnings: list[str] | None = None,
) -> dict[str, Any]:
    """Build standard response envelope."""

    return {
        **version_fields(config),
        "request_id": request_id,
        "generated_at": utc_now(),
        "data": data,
        "warnings": warnings,
    }
