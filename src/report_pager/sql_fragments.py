# This file emits the LIMIT and ORDER BY fragments that match the current paging and sort state.
# It exists so report queries never interpolate raw request values into SQL.
# Sort keys are resolved to the trusted SQL expression declared in the column allow-list.
# Only the comma form `LIMIT offset, count` is produced.

from __future__ import annotations

from src.report_pager.columns import ColumnAllowList
from src.report_pager.sort_state import SortState


def build_limit_clause(*, current_page: int, results_per_page: int) -> str:
    """LIMIT for `current_page` as given; callers clamp beforehand if they need to."""

    offset = (current_page - 1) * results_per_page
    return f"LIMIT {offset}, {results_per_page}"


def build_order_clause(sort_state: SortState, columns: ColumnAllowList) -> str:
    if not sort_state.is_active:
        return ""
    column = columns.resolve(sort_state.column)
    return f"ORDER BY {column.sql_expression} {sort_state.direction.value}"
