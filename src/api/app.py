# This file builds the FastAPI application and registers all API routers.
# It exists so startup behavior, middleware, and error handling are configured in one place.
# The app adds request IDs and timing headers so preview calls can be traced in logs.
# Keeping bootstrap logic centralized makes deployment and testing more predictable.

from __future__ import annotations

import logging
import time
import uuid

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import RequestResponseEndpoint

from src.api.api_config import get_api_config
from src.api.error_handlers import register_error_handlers
from src.api.routers.health import router as health_router
from src.api.routers.report import router as report_router
from src.common.logging import configure_logging

LOGGER = logging.getLogger("report_pager.api")


def create_app() -> FastAPI:
    """Create configured FastAPI application instance."""

    configure_logging()
    config = get_api_config()

    app = FastAPI(
        title=config.api_name,
        description=(
            "Preview API for paged, sortable HTML reports. "
            "Returns the LIMIT/ORDER BY fragments and the header and paging markup for a request."
        ),
        version=config.app_version,
        openapi_tags=[
            {"name": "health", "description": "Service liveness and version metadata."},
            {"name": "report", "description": "SQL fragments and markup for the configured report."},
        ],
    )

    if config.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.allowed_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def request_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        started = time.perf_counter()
        response: Response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000.0

        response.headers["x-request-id"] = request_id
        response.headers["x-response-time-ms"] = f"{duration_ms:.2f}"
        LOGGER.debug(
            "%s %s status=%s duration_ms=%.2f request_id=%s",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            request_id,
        )
        return response

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(report_router, prefix=config.api_version_path)

    return app


app = create_app()
