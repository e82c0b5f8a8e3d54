# This file builds paging and sorting links that reproduce the current request.
# It exists so navigation keeps every unrelated query parameter (filters, report ids) intact.
# A page link only swaps the page value; a sort link sets the sort and drops the page entirely.
# Overrides go through `override_params`, so the shared parameter source is never left modified.

from __future__ import annotations

from src.report_pager.request_params import RequestParams, override_params
from src.report_pager.sort_state import SortDirection, SortState


def build_page_link(params: RequestParams, *, page_param: str, page: int) -> str:
    with override_params(params, {page_param: str(page)}):
        return params.url()


def build_sort_link(
    params: RequestParams,
    *,
    sort_param: str,
    page_param: str,
    column: str,
    direction: SortDirection,
) -> str:
    """Link to `column` sorted by `direction`; re-sorting always starts again at page 1."""

    overrides: dict[str, str | None] = {
        sort_param: SortState(column=column, direction=direction).as_param,
        page_param: None,
    }
    with override_params(params, overrides):
        return params.url()
