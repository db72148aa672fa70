"""Nested pydantic-settings configuration for the application.

Each group reads its own ``REFCHECK_<GROUP>_*`` env vars::

    export REFCHECK_PDF_PAGE_SIZE=letter
    export REFCHECK_OBSERVABILITY_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class ReportLayoutConfig(BaseSettings):
    """Page geometry and typography for the PDF compositor.

    All lengths are millimetres, measured from the top-left corner of the
    page.  Env vars use ``REFCHECK_PDF_`` prefix::

        export REFCHECK_PDF_PAGE_SIZE=a4
        export REFCHECK_PDF_INCLUDE_METADATA=false
    """

    model_config = {"env_prefix": "REFCHECK_PDF_"}

    page_size: Literal["a4", "letter"] = "a4"
    margin_mm: float = Field(default=20.0, gt=0.0, le=100.0)
    header_top_mm: float = Field(default=12.0, ge=0.0, le=150.0)
    header_height_mm: float = Field(default=8.0, ge=0.0, le=150.0)
    bottom_margin_mm: float = Field(default=25.0, gt=0.0, le=150.0)
    font_family: Literal["Helvetica", "Times-Roman", "Courier"] = "Helvetica"
    body_font_size: int = Field(default=10, ge=6, le=24)
    report_title: str = "Reference Check Report"
    report_kind: str = "Reference Check"
    confidentiality_label: str = "CONFIDENTIAL"
    include_metadata: bool = True
    invariant: bool = True


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Env vars use ``REFCHECK_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "REFCHECK_OBSERVABILITY_"}

    service_name: str = "refcheck-report"
    log_level: str = "INFO"


class APIConfig(BaseSettings):
    """HTTP API metadata.

    Env vars use ``REFCHECK_API_`` prefix.
    """

    model_config = {"env_prefix": "REFCHECK_API_"}

    title: str = "refcheck-report"
    description: str = "Render reference-check reports as paginated PDF documents"
    port: int = 8080


class AppSettings(BaseSettings):
    """Top-level application settings aggregating all sub-configs."""

    pdf: ReportLayoutConfig = ReportLayoutConfig()
    observability: ObservabilityConfig = ObservabilityConfig()
    api: APIConfig = APIConfig()
