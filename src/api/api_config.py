# This file defines runtime settings for the report preview API.
# Settings cover the service name, its mounted version prefix, CORS origins, and the report definition path.
# Values come from API_* environment variables (after `.env` loading) with local defaults.

from __future__ import annotations

import os
import re
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.report_pager.pager_config import DEFAULT_REPORT_CONFIG_PATH

VERSION_PATH_PATTERN = re.compile(r"^(/[A-Za-z0-9_-]+)*/v\d+$")

ENV_FIELDS: dict[str, str] = {
    "api_name": "API_NAME",
    "api_version_path": "API_VERSION_PATH",
    "schema_version": "API_SCHEMA_VERSION",
    "environment": "ENV",
    "app_version": "APP_VERSION",
    "report_config_path": "REPORT_PAGER_CONFIG_PATH",
}


class ApiConfig(BaseModel):
    """Preview service settings."""

    model_config = ConfigDict(extra="ignore")

    api_name: str = "Report Pager Preview API"
    api_version_path: str = "/api/v1"
    schema_version: str = "1.0.0"
    environment: str = "local"
    app_version: str = "0.1.0"
    allowed_origins: list[str] = Field(default_factory=list)
    report_config_path: str = DEFAULT_REPORT_CONFIG_PATH

    @field_validator("api_version_path")
    @classmethod
    def validate_api_version_path(cls, value: str) -> str:
        normalized = value.rstrip("/")
        if not VERSION_PATH_PATTERN.match(normalized):
            raise ValueError("api_version_path must look like '/api/v1'.")
        return normalized

    def api_version_label(self) -> str:
        return self.api_version_path.rsplit("/", 1)[-1]


def load_api_config(*, load_env: bool = True) -> ApiConfig:
    """Build the preview service settings from the process environment."""

    if load_env:
        load_dotenv()

    values: dict[str, object] = {
        field_name: os.environ[env_name]
        for field_name, env_name in ENV_FIELDS.items()
        if os.getenv(env_name, "").strip()
    }
    origins = os.getenv("API_ALLOWED_ORIGINS", "")
    values["allowed_origins"] = [origin.strip() for origin in origins.split(",") if origin.strip()]
    return ApiConfig.model_validate(values)


@lru_cache(maxsize=1)
def get_api_config() -> ApiConfig:
    return load_api_config()
