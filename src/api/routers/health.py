# This file serves liveness and version checks for the preview API.
# Both endpoints read the cached report definition, so a broken YAML file surfaces here first.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.api.api_config import ApiConfig
from src.api.dependencies import get_config, get_report_definition
from src.api.response_envelope import utc_now, version_fields
from src.api.schemas.health_schemas import HealthResponse, VersionResponse
from src.report_pager.pager_config import ReportDefinition

router = APIRouter(tags=["health"])
ConfigDep = Annotated[ApiConfig, Depends(get_config)]
DefinitionDep = Annotated[ReportDefinition, Depends(get_report_definition)]


@router.get("/health", response_model=HealthResponse)
def health(request: Request, config: ConfigDep, definition: DefinitionDep) -> dict[str, object]:
    columns = definition.columns
    return {
        **version_fields(config),
        "request_id": request.state.request_id,
        "status": "ok",
        "environment": config.environment,
        "column_count": len(columns),
        "sortable_columns": [column.key for column in columns if column.sortable],
        "checked_at": utc_now(),
    }


@router.get("/version", response_model=VersionResponse)
def version(request: Request, config: ConfigDep, definition: DefinitionDep) -> dict[str, object]:
    """Service version plus the paging options and allow-list it serves."""

    return {
        **version_fields(config),
        "request_id": request.state.request_id,
        "app_version": config.app_version,
        "api_version_path": config.api_version_path,
        "report_config_path": config.report_config_path,
        "pager": definition.config.model_dump(),
        "columns": [
            column.model_dump(include={"key", "display_label", "sortable"})
            for column in definition.columns
        ],
    }
