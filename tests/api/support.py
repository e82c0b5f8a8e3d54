# This file provides shared helpers for API endpoint tests.
# It exists so tests can override the report definition without reading YAML from disk.
# The helpers build consistent config objects and scoped TestClient contexts.
# Centralized test wiring keeps API tests small and focused on behavior.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from fastapi.testclient import TestClient

from src.api.api_config import ApiConfig
from src.api.app import app
from src.api.dependencies import get_config, get_report_definition
from src.report_pager.pager_config import PagerConfig, ReportDefinition
from tests.report_pager.support import people_columns


def build_test_config() -> ApiConfig:
    """Create deterministic API config for tests."""

    return ApiConfig(
        api_name="Test Report API",
        api_version_path="/api/v1",
        schema_version="1.0.0",
        environment="test",
        app_version="0.1.0",
        allowed_origins=[],
        report_config_path="configs/report_pager.yaml",
    )


def build_test_definition(**config_values: object) -> ReportDefinition:
    return ReportDefinition(config=PagerConfig(**config_values), columns=people_columns())


@contextmanager
def api_test_client(
    *,
    config: ApiConfig | None = None,
    definition: ReportDefinition | None = None,
) -> Iterator[TestClient]:
    """Yield a TestClient with scoped dependency overrides."""

    resolved_config = config or build_test_config()
    resolved_definition = definition or build_test_definition()

    app.dependency_overrides[get_config] = lambda: resolved_config
    app.dependency_overrides[get_report_definition] = lambda: resolved_definition

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
