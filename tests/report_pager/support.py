# This file provides shared builders for report pager tests.
# It exists so every test uses the same small people report allow-list.
# The helpers build pagers from plain URLs, mirroring how a request handler would.

from __future__ import annotations

from typing import Any

from src.report_pager.columns import ColumnAllowList, ColumnDescriptor
from src.report_pager.pager import ReportPager
from src.report_pager.pager_config import PagerConfig
from src.report_pager.request_params import QueryParamSource


def people_columns() -> ColumnAllowList:
    return ColumnAllowList(
        [
            ColumnDescriptor(key="name", sql_expression="people.name", display_label="Full Name"),
            ColumnDescriptor(key="age", sql_expression="people.age", display_label="Age (in years)"),
            ColumnDescriptor(
                key="email",
                sql_expression="people.email",
                display_label="Email",
                sortable=False,
            ),
        ]
    )


def make_pager(
    url: str,
    *,
    num_results: int | None = None,
    columns: ColumnAllowList | None | str = "people",
    **config_values: Any,
) -> ReportPager:
    resolved_columns = people_columns() if columns == "people" else columns
    pager = ReportPager(
        params=QueryParamSource.from_url(url),
        columns=resolved_columns,
        config=PagerConfig(**config_values),
    )
    if num_results is not None:
        pager.set_result_count(num_results)
    return pager
