# This file tests API health and version endpoints.
# It exists to validate that both report on the loaded report definition.
# The tests confirm request IDs and version metadata are always returned.

from __future__ import annotations

import pytest

from src.api.api_config import ApiConfig, load_api_config
from tests.api.support import api_test_client, build_test_config, build_test_definition


def test_health_endpoint_summarizes_loaded_report() -> None:
    config = build_test_config()
    with api_test_client(config=config) as client:
        response = client.get("/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["environment"] == "test"
    assert payload["column_count"] == 3
    assert payload["sortable_columns"] == ["name", "age"]
    assert payload["api_version"] == "v1"
    assert payload["schema_version"] == config.schema_version
    assert payload["request_id"]
    assert response.headers["x-request-id"] == payload["request_id"]
    assert "checked_at" in payload


def test_version_endpoint_reports_pager_options_and_allow_list() -> None:
    config = build_test_config()
    definition = build_test_definition(results_per_page=10, default_sort="age,DESC")
    with api_test_client(config=config, definition=definition) as client:
        response = client.get("/version", headers={"x-request-id": "req-123"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["request_id"] == "req-123"
    assert payload["api_version_path"] == "/api/v1"
    assert payload["app_version"] == config.app_version
    assert payload["report_config_path"] == config.report_config_path
    assert payload["pager"] == {
        "results_per_page": 10,
        "pages_in_window": 5,
        "page_param_name": "page",
        "sort_param_name": "sort",
        "default_sort": "age,DESC",
    }
    assert payload["columns"] == [
        {"key": "name", "display_label": "Full Name", "sortable": True},
        {"key": "age", "display_label": "Age (in years)", "sortable": True},
        {"key": "email", "display_label": "Email", "sortable": False},
    ]


def test_unknown_route_uses_error_shape() -> None:
    with api_test_client() as client:
        response = client.get("/missing", headers={"x-request-id": "req-404"})

    assert response.status_code == 404
    payload = response.json()
    assert payload["error_code"] == "HTTP_ERROR"
    assert payload["request_id"] == "req-404"


def test_api_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("API_VERSION_PATH", "/reports/v2/")
    monkeypatch.setenv("API_ALLOWED_ORIGINS", "http://a.test, ,http://b.test")
    monkeypatch.setenv("APP_VERSION", "")

    config = load_api_config(load_env=False)

    assert config.api_version_path == "/reports/v2"
    assert config.api_version_label() == "v2"
    assert config.allowed_origins == ["http://a.test", "http://b.test"]
    assert config.app_version == "0.1.0"


@pytest.mark.parametrize("path", ["api/v1", "/api/latest", "/api/v1/extra"])
def test_api_config_rejects_malformed_version_path(path: str) -> None:
    with pytest.raises(ValueError, match="api_version_path"):
        ApiConfig(api_version_path=path)
