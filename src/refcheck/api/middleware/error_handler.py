"""Global exception handlers mapping domain exceptions to HTTP responses."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from refcheck.exceptions import (
    ExportError,
    InvalidReportDataError,
    MissingRequiredDataError,
    RefcheckError,
    ReportValidationError,
)


def register_error_handlers(app: FastAPI) -> None:
    """Register exception-to-HTTP-status mappings."""

    @app.exception_handler(MissingRequiredDataError)
    async def handle_missing_data(request: Request, exc: MissingRequiredDataError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"error": str(exc), "type": "missing_required_data", "field": exc.field_path},
        )

    @app.exception_handler(InvalidReportDataError)
    async def handle_invalid_data(request: Request, exc: InvalidReportDataError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"error": str(exc), "type": "invalid_report_data", "field": exc.field_path},
        )

    @app.exception_handler(ReportValidationError)
    async def handle_validation_error(request: Request, exc: ReportValidationError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"error": str(exc), "type": "report_validation_error"})

    @app.exception_handler(ExportError)
    async def handle_export_error(request: Request, exc: ExportError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"error": str(exc), "type": "export_error"})

    @app.exception_handler(RefcheckError)
    async def handle_generic_error(request: Request, exc: RefcheckError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"error": str(exc), "type": "refcheck_error"})
