"""Startup validation: fail-fast on layout settings that leave no room to draw."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from refcheck.core.config import AppSettings

log = logging.getLogger(__name__)

# Smallest content band that still fits a section title and one body line.
_MIN_USABLE_HEIGHT_MM = 30.0
_MIN_CONTENT_WIDTH_MM = 80.0


def validate_settings(settings: AppSettings) -> None:
    """Validate application settings at startup. Raises ValueError on fatal misconfig."""
    _check_page_geometry(settings)
    _check_log_level(settings)


def _check_page_geometry(settings: AppSettings) -> None:
    from refcheck.formatters.pdf_styles import page_dimensions

    pdf = settings.pdf
    width, height = page_dimensions(pdf.page_size)
    usable = height - pdf.bottom_margin_mm - (pdf.header_top_mm + pdf.header_height_mm)
    if usable < _MIN_USABLE_HEIGHT_MM:
        raise ValueError(
            f"REFCHECK_PDF_* margins leave {usable:.1f}mm of usable page height "
            f"(minimum {_MIN_USABLE_HEIGHT_MM:.0f}mm)."
        )
    content_width = width - 2 * pdf.margin_mm
    if content_width < _MIN_CONTENT_WIDTH_MM:
        raise ValueError(
            f"REFCHECK_PDF_MARGIN_MM={pdf.margin_mm} leaves {content_width:.1f}mm of content width "
            f"(minimum {_MIN_CONTENT_WIDTH_MM:.0f}mm)."
        )


def _check_log_level(settings: AppSettings) -> None:
    level = settings.observability.log_level.upper()
    if level not in logging.getLevelNamesMapping():
        log.warning("Unknown REFCHECK_OBSERVABILITY_LOG_LEVEL=%s, falling back to INFO", level)
