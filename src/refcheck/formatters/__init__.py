"""Output formatters for rendering ReportContentModel to PDF and JSON.

Usage::

    from refcheck.formatters import PDFFormatter, JSONFormatter

    pdf = PDFFormatter()
    exported = pdf.export(report, include_transcript=True)
    exported.filename, exported.content

    js = JSONFormatter()
    json_bytes = js.format(report)
"""

from __future__ import annotations

from typing import Any

from refcheck.formatters.json_formatter import JSONFormatter
from refcheck.formatters.protocols import IDrawingSurface, IOutputFormatter

__all__ = [
    "IDrawingSurface",
    "IOutputFormatter",
    "JSONFormatter",
    "PDFFormatter",
]


def __getattr__(name: str) -> Any:
    """Lazy-load PDFFormatter so reportlab is only imported when needed."""
    if name == "PDFFormatter":
        from refcheck.formatters.pdf_formatter import PDFFormatter

        return PDFFormatter
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
