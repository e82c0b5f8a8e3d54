# This file defines the typed failures raised by the report pager.
# It exists so callers can tell usage faults apart from internal defects without parsing messages.
# Every error carries a stable machine-readable code that the API layer forwards unchanged.
# Configuration problems that are not fatal are logged instead and never raised from here.

from __future__ import annotations

from typing import Any


class ReportPagerError(Exception):
    """Base error with a stable code and optional structured details."""

    error_code = "REPORT_PAGER_ERROR"

    def __init__(self, message: str, *, details: Any | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)


class UnknownColumnError(ReportPagerError):
    """A sort key that is not part of the column allow-list."""

    error_code = "UNKNOWN_COLUMN"

    def __init__(self, column: str | None) -> None:
        self.column = column
        super().__init__(
            f"Requested sort {column!r} is impossible, not defined in the column allow-list.",
            details={"column": column},
        )


class ZeroResultsError(ReportPagerError):
    error_code = "ZERO_RESULTS"

    def __init__(self) -> None:
        super().__init__("Cannot draw paging for a report with no results.")


class MissingAllowListError(ReportPagerError):
    error_code = "MISSING_ALLOW_LIST"

    def __init__(self) -> None:
        super().__init__("No column allow-list was configured, sorting is disabled.")


class PagingWindowConsistencyError(ReportPagerError):
    """Raised when no paging window rule matched; indicates a logic defect."""

    error_code = "PAGING_WINDOW_INCONSISTENT"

    def __init__(self, *, current_page: int, total_pages: int, pages_in_window: int) -> None:
        super().__init__(
            "No paging window rule matched.",
            details={
                "current_page": current_page,
                "total_pages": total_pages,
                "pages_in_window": pages_in_window,
            },
        )
