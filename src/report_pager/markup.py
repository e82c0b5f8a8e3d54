# This file renders the HTML fragments for a paged, sortable report.
# It exists so the header row, paging bar, and their stylesheet share one consistent markup.
# Fragments are plain strings meant to be dropped into a caller-owned page template.
# Configured *_html labels are trusted markup; URLs and column labels are escaped.

from __future__ import annotations

import html
from collections.abc import Callable

from src.report_pager.columns import ColumnAllowList
from src.report_pager.errors import ZeroResultsError
from src.report_pager.pager_config import PagerConfig
from src.report_pager.paging_window import result_range
from src.report_pager.sort_state import SortDirection, SortState


def render_paging_stylesheet(config: PagerConfig) -> str:
    return (
        '<style type="text/css">'
        ".paging-table {"
        "border: 0px solid black;"
        "}"
        ".paging-td {"
        "padding: 4px;"
        "font-weight: normal;"
        f"color: {config.highlight_color};"
        "}"
        ".paging-a {"
        f"color: {config.font_color};"
        "font-weight: bold;"
        "text-decoration: none;"
        "}"
        "</style>"
    )


def _sort_indicator(direction: SortDirection | None, config: PagerConfig) -> str:
    image = config.asc_image if direction is SortDirection.ASC else config.desc_image
    return f'<img src="{html.escape(image, quote=True)}" border="0" />'


def render_sortable_header(
    *,
    columns: ColumnAllowList,
    sort_state: SortState,
    config: PagerConfig,
    sort_link: Callable[[str], str],
) -> str:
    """Header row with one cell per column; sortable columns link to their next sort."""

    cells: list[str] = []
    for column in columns:
        label = html.escape(column.display_label)
        if not column.sortable:
            cells.append(f'<td class="sortable-header-td">{label}</td>')
            continue

        url = html.escape(sort_link(column.key), quote=True)
        indicator = ""
        if sort_state.is_active and sort_state.column == column.key:
            indicator = " " + _sort_indicator(sort_state.direction, config)
        cells.append(
            '<td class="sortable-header-td">'
            f'<a class="sortable-header-a" href="{url}">{label}{indicator}</a>'
            "</td>"
        )

    return '<tr class="sortable-header-tr">' + "".join(cells) + "</tr>"


def _link(url: str, text: str) -> str:
    return f'<a class="paging-a" href="{html.escape(url, quote=True)}">{text}</a>'


def render_paging_table(
    *,
    current_page: int,
    total_pages: int,
    num_results: int,
    window: list[int],
    config: PagerConfig,
    page_link: Callable[[int], str],
) -> str:
    """Paging bar: result summary, first/prev, numbered window, next/last."""

    if num_results <= 0:
        raise ZeroResultsError()

    first_row, last_row = result_range(
        current_page=current_page,
        results_per_page=config.results_per_page,
        num_results=num_results,
        total_pages=total_pages,
    )
    summary = (
        '<td nowrap class="paging-td" style="font-size: 7pt;">'
        f"Displaying Results {first_row} to {last_row} of {num_results}</td>"
    )

    on_first_page = current_page == 1
    on_last_page = current_page == total_pages

    controls: list[str] = [
        config.first_html if on_first_page else _link(page_link(1), config.first_html),
        config.prev_html if on_first_page else _link(page_link(current_page - 1), config.prev_html),
    ]
    for page in window:
        controls.append(str(page) if page == current_page else _link(page_link(page), str(page)))
    controls.append(config.next_html if on_last_page else _link(page_link(current_page + 1), config.next_html))
    controls.append(config.last_html if on_last_page else _link(page_link(total_pages), config.last_html))

    body = "".join(f'<td class="paging-td">{control}</td>' for control in controls)
    return '<table class="paging-table"><tr>' + summary + body + "</tr></table>"
