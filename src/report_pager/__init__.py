"""
Package marker for source code under `src.report_pager`.
It groups request parsing, paging windows, SQL fragments, and markup rendering for tabular reports.
`src.report_pager.pager.ReportPager` is the entry point; sibling modules hold the pure building blocks.
"""
