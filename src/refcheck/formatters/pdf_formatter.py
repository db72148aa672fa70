"""PDF output formatter: assembles a ``ReportContentModel`` into pages.

The compositor validates the model, draws the cover at fixed positions, then
runs every section renderer in ``SECTION_PIPELINE`` order against one fresh
``PageManager`` and finalizes the last page.  Either the whole document is
returned or an exception propagates; nothing partial leaves this module.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Callable

from refcheck.core.config import ReportLayoutConfig
from refcheck.exceptions import ExportError, MeasurementError
from refcheck.formatters.layout import PageManager
from refcheck.formatters.pdf_styles import build_text_styles
from refcheck.formatters.protocols import IDrawingSurface
from refcheck.formatters.sections import SECTION_PIPELINE, ExportOptions, render_cover
from refcheck.models import ReportContentModel
from refcheck.validation import validate_report

log = logging.getLogger(__name__)

SurfaceFactory = Callable[[ReportLayoutConfig, ReportContentModel], IDrawingSurface]


def _reportlab_surface(config: ReportLayoutConfig, model: ReportContentModel) -> IDrawingSurface:
    from refcheck.formatters.surface import ReportLabSurface

    return ReportLabSurface(
        config,
        title=f"{config.report_title} - {model.subject.name}",
        subject=model.subject.role,
    )


def report_filename(report_kind: str, subject_name: str, on: date, ext: str = "pdf") -> str:
    """``Reference_Check_Jane_Doe_2026-10-17.pdf``."""

    def _slug(text: str) -> str:
        return re.sub(r"[^\w.\-]", "_", re.sub(r"\s+", "_", text.strip()))

    return f"{_slug(report_kind)}_{_slug(subject_name)}_{on.isoformat()}.{ext}"


@dataclass(frozen=True)
class ExportedReport:
    """A finished document and the name it should be saved under."""

    filename: str
    content: bytes
    page_count: int
    content_type: str = "application/pdf"


class ReportCompositor:
    """Document assembler for reference-check reports."""

    def __init__(
        self,
        config: ReportLayoutConfig | None = None,
        surface_factory: SurfaceFactory | None = None,
    ) -> None:
        self._config = config or ReportLayoutConfig()
        self._surface_factory = surface_factory or _reportlab_surface
        self._styles = build_text_styles(self._config.font_family, self._config.body_font_size)

    @property
    def config(self) -> ReportLayoutConfig:
        return self._config

    def compose(
        self,
        model: ReportContentModel,
        surface: IDrawingSurface,
        options: ExportOptions,
        *,
        generated_on: date,
    ) -> PageManager:
        """Draw the whole report onto *surface* and return the spent page manager."""
        validate_report(model)
        manager = PageManager(
            surface,
            self._config,
            self._styles,
            subject_name=model.subject.name,
            footer_date=generated_on.isoformat(),
        )
        render_cover(manager, model, options)
        manager.break_page()
        for name, renderer, enabled in SECTION_PIPELINE:
            if not enabled(model, options):
                log.debug("Skipping section %s", name)
                continue
            renderer(manager, model, options)
        manager.finalize_page()
        return manager

    def export(
        self,
        model: ReportContentModel,
        *,
        include_transcript: bool = False,
        include_signature: bool = True,
        generated_on: date | None = None,
    ) -> ExportedReport:
        """Validate, render and serialize *model*.

        Raises ``ReportValidationError`` before any page exists when the
        model is incomplete, and ``ExportError`` when rendering fails.
        """
        validate_report(model)
        generated_on = generated_on or date.today()
        options = ExportOptions(
            include_transcript=include_transcript,
            include_signature=include_signature,
            include_metadata=self._config.include_metadata,
        )
        surface = self._surface_factory(self._config, model)
        try:
            manager = self.compose(model, surface, options, generated_on=generated_on)
            content = surface.save()
        except MeasurementError as exc:
            log.warning("Report export failed for %s: %s", model.subject.name, exc)
            raise ExportError("Report export failed: text could not be measured") from exc

        filename = report_filename(self._config.report_kind, model.subject.name, generated_on)
        log.info(
            "Exported %s (%d pages, %d bytes, transcript=%s, signature=%s)",
            filename,
            manager.page_number,
            len(content),
            include_transcript,
            include_signature,
        )
        return ExportedReport(filename=filename, content=content, page_count=manager.page_number)


class PDFFormatter:
    """Renders ``ReportContentModel`` as a paginated reference-check PDF."""

    def __init__(
        self,
        config: ReportLayoutConfig | None = None,
        compositor: ReportCompositor | None = None,
    ) -> None:
        self._compositor = compositor or ReportCompositor(config)
        self._config = self._compositor.config

    # ── Public API ───────────────────────────────────────────────────

    def export(self, summary: ReportContentModel, **kwargs: Any) -> ExportedReport:
        """Render *summary*; see ``ReportCompositor.export`` for keyword options."""
        return self._compositor.export(summary, **kwargs)

    def format(self, summary: ReportContentModel, **kwargs: Any) -> bytes:
        """Render *summary* to PDF bytes."""
        return self.export(summary, **kwargs).content

    def format_to_file(self, summary: ReportContentModel, path: Path, **kwargs: Any) -> Path:
        """Write PDF to *path* and return it."""
        content = self.format(summary, **kwargs)
        path.write_bytes(content)
        return path

    def export_to_dir(self, summary: ReportContentModel, directory: Path, **kwargs: Any) -> Path:
        """Write the PDF under its report filename inside *directory*."""
        exported = self.export(summary, **kwargs)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / exported.filename
        path.write_bytes(exported.content)
        return path

    @property
    def content_type(self) -> str:
        return "application/pdf"
