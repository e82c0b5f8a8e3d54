# This file defines response schemas for the report fragment preview endpoint.
# It exists so consumers can rely on stable names for SQL fragments, paging state, and markup.
# HTML fragments are returned as strings exactly as the pager renders them.
# The paging bar is omitted when the report has no rows to page through.

from __future__ import annotations

from pydantic import BaseModel, Field

from src.api.schemas.common import EnvelopeFields


class SortStateV1(BaseModel):
    column: str | None = None
    direction: str | None = None


class ReportFragmentsV1(BaseModel):
    limit_clause: str
    order_clause: str
    current_page: int
    total_pages: int = Field(ge=0)
    num_results: int = Field(ge=0)
    page_window: list[int]
    sort: SortStateV1
    header_html: str
    paging_html: str | None = None


class ReportFragmentsResponseV1(EnvelopeFields):
    data: ReportFragmentsV1
