# This test file validates the HTML fragments for the header row, paging bar, and stylesheet.
# It exists to keep link placement, disabled controls, and the result summary stable.
# Link targets are produced by simple fakes so only the rendering rules are under test.

from __future__ import annotations

import pytest

from src.report_pager.errors import ZeroResultsError
from src.report_pager.markup import render_paging_stylesheet, render_paging_table, render_sortable_header
from src.report_pager.pager_config import PagerConfig
from src.report_pager.sort_state import SortDirection, SortState
from tests.report_pager.support import people_columns


def _page_link(page: int) -> str:
    return f"/people?page={page}&region=west"


def test_header_links_sortable_columns_and_marks_active_sort() -> None:
    header = render_sortable_header(
        columns=people_columns(),
        sort_state=SortState(column="age", direction=SortDirection.DESC),
        config=PagerConfig(),
        sort_link=lambda column: f"/people?sort={column}",
    )

    assert header.startswith('<tr class="sortable-header-tr">')
    assert header.endswith("</tr>")
    assert '<a class="sortable-header-a" href="/people?sort=name">Full Name</a>' in header
    assert (
        '<a class="sortable-header-a" href="/people?sort=age">'
        'Age (in years) <img src="/img/standard/desc.gif" border="0" /></a>'
    ) in header
    assert '<td class="sortable-header-td">Email</td>' in header
    assert header.index("Full Name") < header.index("Age (in years)") < header.index("Email")


def test_header_uses_ascending_image_and_escapes_urls() -> None:
    header = render_sortable_header(
        columns=people_columns(),
        sort_state=SortState(column="name", direction=SortDirection.ASC),
        config=PagerConfig(asc_image="/icons/up.png"),
        sort_link=lambda column: f"/people?sort={column}&region=west",
    )

    assert 'href="/people?sort=name&amp;region=west"' in header
    assert '<img src="/icons/up.png" border="0" />' in header
    assert header.count("<img") == 1


def test_active_sort_on_plain_column_shows_no_indicator() -> None:
    header = render_sortable_header(
        columns=people_columns(),
        sort_state=SortState(column="email", direction=SortDirection.DESC),
        config=PagerConfig(),
        sort_link=lambda column: f"/people?sort={column}",
    )

    assert '<td class="sortable-header-td">Email</td>' in header
    assert "<img" not in header


def test_paging_table_on_a_middle_page() -> None:
    table = render_paging_table(
        current_page=2,
        total_pages=5,
        num_results=120,
        window=[1, 2, 3, 4, 5],
        config=PagerConfig(),
        page_link=_page_link,
    )

    assert table.startswith('<table class="paging-table"><tr>')
    assert "Displaying Results 26 to 50 of 120" in table
    assert '<a class="paging-a" href="/people?page=1&amp;region=west">&laquo;</a>' in table
    assert '<a class="paging-a" href="/people?page=1&amp;region=west">&lt;</a>' in table
    assert '<td class="paging-td">2</td>' in table
    assert '<a class="paging-a" href="/people?page=3&amp;region=west">&gt;</a>' in table
    assert '<a class="paging-a" href="/people?page=5&amp;region=west">&raquo;</a>' in table


def test_paging_table_disables_controls_at_the_edges() -> None:
    first = render_paging_table(
        current_page=1,
        total_pages=3,
        num_results=60,
        window=[1, 2, 3],
        config=PagerConfig(),
        page_link=_page_link,
    )
    assert '<td class="paging-td">&laquo;</td><td class="paging-td">&lt;</td>' in first
    assert "Displaying Results 1 to 25 of 60" in first

    last = render_paging_table(
        current_page=3,
        total_pages=3,
        num_results=60,
        window=[1, 2, 3],
        config=PagerConfig(next_html="next", last_html="last"),
        page_link=_page_link,
    )
    assert '<td class="paging-td">next</td><td class="paging-td">last</td>' in last
    assert "Displaying Results 51 to 60 of 60" in last


def test_paging_table_requires_results() -> None:
    with pytest.raises(ZeroResultsError):
        render_paging_table(
            current_page=1,
            total_pages=0,
            num_results=0,
            window=[],
            config=PagerConfig(),
            page_link=_page_link,
        )


def test_stylesheet_uses_configured_colors() -> None:
    css = render_paging_stylesheet(PagerConfig(font_color="navy", highlight_color="#123456"))
    assert css.startswith('<style type="text/css">')
    assert css.endswith("</style>")
    assert "color: #123456;" in css
    assert "color: navy;" in css
