# This file computes which page numbers the paging bar shows around the current page.
# It exists so the window arithmetic lives in one pure, easily tested place.
# The window is contiguous, ascending, contains the current page, and stays inside the result set.
# Its size is `pages_in_window`, or the total page count when there are fewer pages than that.

from __future__ import annotations

import logging
import math

from src.report_pager.errors import PagingWindowConsistencyError

LOGGER = logging.getLogger("report_pager")


def compute_total_pages(*, num_results: int, results_per_page: int) -> int:
    """Number of pages needed for `num_results` rows; 0 when there are no rows."""

    if results_per_page <= 0:
        raise ValueError("results_per_page must be greater than 0.")
    if num_results <= 0:
        return 0
    return math.ceil(num_results / results_per_page)


def clamp_current_page(current_page: int, total_pages: int) -> int:
    """Snap a page past the end back to the last page and a page below 1 up to 1."""

    if total_pages < 1:
        return 1
    if current_page > total_pages:
        LOGGER.debug("Requested page %s is past the end, using last page %s", current_page, total_pages)
        return total_pages
    return max(1, current_page)


def build_page_window(*, current_page: int, total_pages: int, pages_in_window: int) -> list[int]:
    """Return the page numbers to render, given an already clamped current page."""

    if total_pages < 1:
        raise ValueError("total_pages must be at least 1 to build a paging window.")
    if not 1 <= current_page <= total_pages:
        raise ValueError(f"current_page must be in [1, {total_pages}], got {current_page}")
    if pages_in_window < 1:
        raise ValueError("pages_in_window must be greater than 0.")

    pages_on_either_side = math.ceil((pages_in_window - 1) / 2)

    # at the end of the results
    if current_page == total_pages:
        first = max(1, current_page - pages_in_window + 1)
        return list(range(first, current_page + 1))

    # centered on the current page
    if (
        current_page - pages_on_either_side >= 1
        and current_page + pages_on_either_side <= total_pages
    ):
        return list(range(current_page - pages_on_either_side, current_page + pages_on_either_side + 1))

    # too close to the beginning
    if current_page - pages_in_window < 1:
        return list(range(1, min(pages_in_window, total_pages) + 1))

    # too close to the end
    if current_page + pages_in_window > total_pages:
        first = max(1, total_pages - pages_in_window + 1)
        return list(range(first, total_pages + 1))

    raise PagingWindowConsistencyError(
        current_page=current_page,
        total_pages=total_pages,
        pages_in_window=pages_in_window,
    )


def result_range(
    *,
    current_page: int,
    results_per_page: int,
    num_results: int,
    total_pages: int,
) -> tuple[int, int]:
    """First and last row numbers (1-based) shown on the current page."""

    first = 1 if current_page == 1 else (current_page - 1) * results_per_page + 1
    last = num_results if current_page == total_pages else current_page * results_per_page
    return first, last
