# This file wires request parsing, paging, sorting, SQL fragments, and markup into one pager.
# It exists so a report handler can drive a paged, sortable table through a single object.
# Usage: build the pager, use limit/order clauses in the query, set the result count, render.
# Sorting is disabled (with a logged note) when no column allow-list is configured.

from __future__ import annotations

import logging
from collections.abc import Iterable

from src.report_pager.columns import ColumnAllowList, ColumnDescriptor
from src.report_pager.errors import MissingAllowListError, ZeroResultsError
from src.report_pager.links import build_page_link, build_sort_link
from src.report_pager.markup import render_paging_stylesheet, render_paging_table, render_sortable_header
from src.report_pager.pager_config import PagerConfig
from src.report_pager.paging_window import build_page_window, clamp_current_page, compute_total_pages
from src.report_pager.request_params import RequestParams
from src.report_pager.sort_state import (
    ReportState,
    SortDirection,
    SortState,
    next_sort_direction,
    resolve_current_page,
    resolve_sort_state,
)
from src.report_pager.sql_fragments import build_limit_clause, build_order_clause

LOGGER = logging.getLogger("report_pager")


class ReportPager:
    """Paging and sorting state for one rendered report request."""

    def __init__(
        self,
        *,
        params: RequestParams,
        columns: ColumnAllowList | Iterable[ColumnDescriptor] | None = None,
        config: PagerConfig | None = None,
        current_page: int | None = None,
        current_sort: SortState | None = None,
    ) -> None:
        self.params = params
        self.config = config or PagerConfig()
        if columns is None or isinstance(columns, ColumnAllowList):
            self.columns = columns
        else:
            self.columns = ColumnAllowList(columns)
        self.config_notes: list[str] = []

        page = (
            current_page
            if current_page is not None
            else resolve_current_page(params.get(self.config.page_param_name))
        )
        sort_state = (
            current_sort
            if current_sort is not None
            else resolve_sort_state(params.get(self.config.sort_param_name), self.config.default_sort)
        )
        self.state = ReportState(current_page=page, sort_state=sort_state)

        if not self.sorting_enabled and (sort_state.column or sort_state.direction):
            note = "Column allow-list is not configured; sorting disabled."
            self.config_notes.append(note)
            LOGGER.warning(note)

    @property
    def sorting_enabled(self) -> bool:
        return bool(self.columns)

    @property
    def current_page(self) -> int:
        return self.state.current_page

    @property
    def sort_state(self) -> SortState:
        return self.state.sort_state

    @property
    def num_results(self) -> int:
        return self.state.num_results

    @property
    def total_pages(self) -> int:
        return compute_total_pages(
            num_results=self.state.num_results,
            results_per_page=self.config.results_per_page,
        )

    def set_result_count(self, num_results: int) -> int:
        """Record the total row count of the report query and return it."""

        if num_results < 0:
            raise ValueError("num_results must be nonnegative.")
        self.state.num_results = num_results
        return num_results

    def _require_columns(self) -> ColumnAllowList:
        if not self.columns:
            raise MissingAllowListError()
        return self.columns

    # paging

    def page_window(self) -> list[int]:
        total_pages = self.total_pages
        if total_pages < 1:
            raise ZeroResultsError()
        self.state.current_page = clamp_current_page(self.state.current_page, total_pages)
        return build_page_window(
            current_page=self.state.current_page,
            total_pages=total_pages,
            pages_in_window=self.config.pages_in_window,
        )

    def page_link(self, page: int) -> str:
        return build_page_link(self.params, page_param=self.config.page_param_name, page=page)

    def limit_clause(self) -> str:
        return build_limit_clause(
            current_page=self.state.current_page,
            results_per_page=self.config.results_per_page,
        )

    # sorting

    def next_sort_direction(self, column: str) -> SortDirection:
        self._require_columns().resolve(column)
        return next_sort_direction(self.state.sort_state, column)

    def sort_link(self, column: str) -> str:
        direction = self.next_sort_direction(column)
        return build_sort_link(
            self.params,
            sort_param=self.config.sort_param_name,
            page_param=self.config.page_param_name,
            column=column,
            direction=direction,
        )

    def order_clause(self) -> str:
        return build_order_clause(self.state.sort_state, self._require_columns())

    # markup

    def paging_stylesheet(self) -> str:
        return render_paging_stylesheet(self.config)

    def sortable_table_header(self) -> str:
        return render_sortable_header(
            columns=self._require_columns(),
            sort_state=self.state.sort_state,
            config=self.config,
            sort_link=self.sort_link,
        )

    def paging_table(self) -> str:
        """Inline stylesheet followed by the paging bar for the current page."""

        if self.state.num_results == 0:
            raise ZeroResultsError()
        window = self.page_window()
        table = render_paging_table(
            current_page=self.state.current_page,
            total_pages=self.total_pages,
            num_results=self.state.num_results,
            window=window,
            config=self.config,
            page_link=self.page_link,
        )
        return self.paging_stylesheet() + table
