"""
Package marker for the report pager sources under `src`.
`src.report_pager` holds the library; `src.api` serves previews and `src.common` holds settings and logging.
"""
