# This file provides dependency factories for FastAPI routes.
# It exists so the report definition is loaded once and shared through dependency injection.
# A fresh pager is built per request because it holds that request's paging and sort state.
# Tests override these factories to swap in small in-memory report definitions.

from __future__ import annotations

from functools import lru_cache

from fastapi import Request

from src.api.api_config import ApiConfig, get_api_config
from src.report_pager.pager import ReportPager
from src.report_pager.pager_config import ReportDefinition, load_report_definition
from src.report_pager.request_params import QueryParamSource


@lru_cache(maxsize=1)
def get_report_definition() -> ReportDefinition:
    config = get_api_config()
    return load_report_definition(config_path=config.report_config_path)


def get_config() -> ApiConfig:
    return get_api_config()


def build_report_pager(request: Request, definition: ReportDefinition) -> ReportPager:
    return ReportPager(
        params=QueryParamSource.from_request(request),
        columns=definition.columns,
        config=definition.config,
    )
