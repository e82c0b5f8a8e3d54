# This file defines the health and version payloads of the preview API.
# Both describe the report definition the service has loaded, so a deploy can be checked
# against the expected allow-list and paging options without rendering a report.

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from src.api.schemas.common import ResponseMeta


class PagerOptionsV1(BaseModel):
    results_per_page: int
    pages_in_window: int
    page_param_name: str
    sort_param_name: str
    default_sort: str | None = None


class ReportColumnV1(BaseModel):
    key: str
    display_label: str
    sortable: bool


class HealthResponse(ResponseMeta):
    status: Literal["ok"]
    environment: str
    column_count: int
    sortable_columns: list[str]
    checked_at: datetime


class VersionResponse(ResponseMeta):
    app_version: str
    api_version_path: str
    report_config_path: str
    pager: PagerOptionsV1
    columns: list[ReportColumnV1]
