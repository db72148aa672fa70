"""Liveness and readiness endpoints for the report export service."""

from __future__ import annotations

from importlib.util import find_spec

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(req: Request) -> dict[str, str]:
    """Always 200 while the process is up; names the service."""
    return {"status": "ok", "service": req.app.state.settings.observability.service_name}


@router.get("/ready")
async def ready() -> dict[str, object]:
    """Lists the export formats this instance can produce.

    PDF is only offered when reportlab is importable.
    """
    formats = ["json"]
    if find_spec("reportlab") is not None:
        formats.insert(0, "pdf")
    return {"status": "ready", "formats": formats}
