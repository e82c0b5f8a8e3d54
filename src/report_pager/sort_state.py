# This file resolves the current page and sort selection from raw request values.
# It exists so request parsing follows one set of defaulting rules for every report.
# Sort values use the `<column>,<DIRECTION>` form; a bare column sorts ascending.
# Columns are not checked against the allow-list here; that happens when SQL or links are built.

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

LOGGER = logging.getLogger("report_pager")


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    def toggled(self) -> SortDirection:
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


@dataclass(frozen=True)
class SortState:
    column: str | None = None
    direction: SortDirection | None = None

    @property
    def is_active(self) -> bool:
        return bool(self.column) and self.direction is not None

    @property
    def as_param(self) -> str | None:
        if not self.is_active:
            return None
        return f"{self.column},{self.direction.value}"


@dataclass
class ReportState:
    current_page: int = 1
    sort_state: SortState = field(default_factory=SortState)
    num_results: int = 0


def resolve_current_page(raw_page: str | int | None) -> int:
    """Parse the page parameter; missing or falsy values mean page 1."""

    if not raw_page:
        return 1
    try:
        page = int(raw_page)
    except (TypeError, ValueError):
        LOGGER.warning("Invalid page value %r, falling back to 1", raw_page)
        return 1
    return page or 1


def _resolve_direction(raw_direction: str) -> SortDirection:
    normalized = raw_direction.strip().upper()
    try:
        return SortDirection(normalized)
    except ValueError:
        LOGGER.warning("Unsupported sort direction %r, falling back to ASC", raw_direction)
        return SortDirection.ASC


def resolve_sort_state(raw_sort: str | None, default_sort: str | None = None) -> SortState:
    """Parse `<column>,<DIRECTION>`, falling back to the configured default sort."""

    sort_value = raw_sort or default_sort
    if not sort_value:
        return SortState()

    column, _, raw_direction = sort_value.partition(",")
    column = column.strip()
    if not column:
        return SortState()
    if not raw_direction.strip():
        return SortState(column=column, direction=SortDirection.ASC)
    return SortState(column=column, direction=_resolve_direction(raw_direction))


def next_sort_direction(sort_state: SortState, column: str) -> SortDirection:
    """Direction a link for `column` should request: toggle the active column, else ASC."""

    if column != sort_state.column or sort_state.direction is None:
        return SortDirection.ASC
    return sort_state.direction.toggled()
