# This file defines report preview endpoints under the versioned API path.
# It exists so report authors can check the SQL fragments and markup a request would produce.
# Page and sort values are read from the configured query parameter names, not declared here.
# Any other query parameters, including `num_results`, are carried through generated links.

from __future__ import annotations

import html
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse

from src.api.api_config import ApiConfig
from src.api.dependencies import build_report_pager, get_config, get_report_definition
from src.api.response_envelope import build_object_envelope
from src.api.schemas.common import ErrorResponse
from src.api.schemas.report_schemas import ReportFragmentsResponseV1
from src.report_pager.pager_config import ReportDefinition

router = APIRouter(
    prefix="/report",
    tags=["report"],
    responses={400: {"model": ErrorResponse, "description": "Unknown sort column or missing allow-list."}},
)
ConfigDep = Annotated[ApiConfig, Depends(get_config)]
DefinitionDep = Annotated[ReportDefinition, Depends(get_report_definition)]


@router.get(
    "/fragments",
    response_model=ReportFragmentsResponseV1,
    response_model_exclude_none=True,
)
def report_fragments(
    request: Request,
    config: ConfigDep,
    definition: DefinitionDep,
    num_results: int = Query(ge=0),
) -> dict[str, object]:
    pager = build_report_pager(request, definition)
    limit_clause = pager.limit_clause()
    order_clause = pager.order_clause()
    pager.set_result_count(num_results)

    warnings = list(pager.config_notes)
    page_window: list[int] = []
    paging_html: str | None = None
    if num_results > 0:
        paging_html = pager.paging_table()
        page_window = pager.page_window()
    else:
        warnings.append("No results to page through.")

    data = {
        "limit_clause": limit_clause,
        "order_clause": order_clause,
        "current_page": pager.current_page,
        "total_pages": pager.total_pages,
        "num_results": pager.num_results,
        "page_window": page_window,
        "sort": {
            "column": pager.sort_state.column,
            "direction": pager.sort_state.direction.value if pager.sort_state.direction else None,
        },
        "header_html": pager.sortable_table_header(),
        "paging_html": paging_html,
    }

    return build_object_envelope(
        config=config,
        request_id=request.state.request_id,
        data=data,
        warnings=warnings or None,
    )


@router.get("/preview", response_class=HTMLResponse)
def report_preview(
    request: Request,
    config: ConfigDep,
    definition: DefinitionDep,
    num_results: int = Query(ge=0),
) -> HTMLResponse:
    pager = build_report_pager(request, definition)
    sql = f"{pager.order_clause()} {pager.limit_clause()}".strip()
    pager.set_result_count(num_results)

    page = (
        "<!DOCTYPE html><html><head>"
        f"<title>{html.escape(config.api_name)}</title>"
        "</head><body>"
        f'<table class="report-table">{pager.sortable_table_header()}</table>'
        f"{pager.paging_table()}"
        f"<pre>{html.escape(sql)}</pre>"
        "</body></html>"
    )
    return HTMLResponse(content=page)
