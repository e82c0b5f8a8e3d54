# This file defines paging, sorting, and rendering options for a report pager.
# It exists so every report draws its paging bar and sort links from one validated option set.
# The loader merges a YAML report definition with REPORT_PAGER_* environment overrides.
# Options are validated once at load time and are immutable for the life of a pager.

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

from src.report_pager.columns import ColumnAllowList

LOGGER = logging.getLogger("report_pager")

DEFAULT_REPORT_CONFIG_PATH = "configs/report_pager.yaml"


class PagerConfig(BaseModel):
    """Typed pager options with the documented defaults."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    results_per_page: int = 25
    pages_in_window: int = 5
    page_param_name: str = "page"
    sort_param_name: str = "sort"
    default_sort: str | None = None

    font_color: str = "black"
    highlight_color: str = "#555555"
    prev_html: str = "&lt;"
    next_html: str = "&gt;"
    first_html: str = "&laquo;"
    last_html: str = "&raquo;"
    asc_image: str = "/img/standard/asc.gif"
    desc_image: str = "/img/standard/desc.gif"

    @field_validator("results_per_page")
    @classmethod
    def validate_results_per_page(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("results_per_page must be greater than 0.")
        return value

    @field_validator("pages_in_window")
    @classmethod
    def validate_pages_in_window(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("pages_in_window must be greater than 0.")
        if value % 2 == 0:
            LOGGER.warning("pages_in_window must be odd, got %s; using %s", value, value - 1)
            return value - 1
        return value

    @field_validator("page_param_name", "sort_param_name")
    @classmethod
    def validate_param_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Request parameter names cannot be empty.")
        return value

    @field_validator("default_sort")
    @classmethod
    def validate_default_sort(cls, value: str | None) -> str | None:
        if value is None or value.strip() == "":
            return None
        return value.strip()


@dataclass(frozen=True)
class ReportDefinition:
    config: PagerConfig
    columns: ColumnAllowList


def _load_yaml(path: str) -> dict[str, Any]:
    with open(path, encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config at {path} must be a mapping, got: {type(loaded).__name__}")
    return dict(loaded)


def _env_str(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value


def _env_int(name: str, default: int | None = None) -> int | None:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return int(value)


_ENV_INT_OPTIONS: dict[str, str] = {
    "results_per_page": "REPORT_PAGER_RESULTS_PER_PAGE",
    "pages_in_window": "REPORT_PAGER_PAGES_IN_WINDOW",
}

_ENV_STR_OPTIONS: dict[str, str] = {
    "page_param_name": "REPORT_PAGER_PAGE_PARAM",
    "sort_param_name": "REPORT_PAGER_SORT_PARAM",
    "default_sort": "REPORT_PAGER_DEFAULT_SORT",
    "font_color": "REPORT_PAGER_FONT_COLOR",
    "highlight_color": "REPORT_PAGER_HIGHLIGHT_COLOR",
    "asc_image": "REPORT_PAGER_ASC_IMAGE",
    "desc_image": "REPORT_PAGER_DESC_IMAGE",
}


def build_pager_config(values: dict[str, Any] | None = None) -> PagerConfig:
    """Apply environment overrides on top of `values` and validate."""

    merged: dict[str, Any] = dict(values or {})
    for field_name, env_name in _ENV_INT_OPTIONS.items():
        override = _env_int(env_name)
        if override is not None:
            merged[field_name] = override
    for field_name, env_name in _ENV_STR_OPTIONS.items():
        override = _env_str(env_name)
        if override is not None:
            merged[field_name] = override
    return PagerConfig.model_validate(merged)


def load_report_definition(
    *,
    config_path: str | None = None,
    load_env: bool = True,
) -> ReportDefinition:
    """Load pager options and the column allow-list from a YAML report definition."""

    if load_env:
        load_dotenv()

    path = config_path or str(_env_str("REPORT_PAGER_CONFIG_PATH", DEFAULT_REPORT_CONFIG_PATH))
    cfg = _load_yaml(path)

    pager_cfg = cfg.get("pager", {}) or {}
    if not isinstance(pager_cfg, dict):
        raise ValueError(f"'pager' in {path} must be a mapping")
    column_records = cfg.get("columns", []) or []
    if not isinstance(column_records, list):
        raise ValueError(f"'columns' in {path} must be a list of column definitions")

    return ReportDefinition(
        config=build_pager_config(dict(pager_cfg)),
        columns=ColumnAllowList.from_records(column_records),
    )
