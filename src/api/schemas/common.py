# This file holds the response fields every preview API payload carries.
# Request ids and version labels let a rendered report be matched to the service build that produced it.

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class ResponseMeta(BaseModel):
    api_version: str
    schema_version: str
    request_id: str


class EnvelopeFields(ResponseMeta):
    generated_at: datetime
    warnings: list[str] | None = None


class ErrorResponse(BaseModel):
    """Body of every non-2xx response, including pager faults such as UNKNOWN_COLUMN."""

    error_code: str
    message: str
    details: Any | None = None
    request_id: str
    timestamp: datetime
