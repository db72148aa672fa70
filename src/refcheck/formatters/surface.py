"""reportlab canvas adapter implementing ``IDrawingSurface``.

Translates the compositor's top-down millimetre coordinates into reportlab's
bottom-up point space.  Requires reportlab::

    pip install reportlab
"""

from __future__ import annotations

from io import BytesIO

from refcheck.core.config import ReportLayoutConfig
from refcheck.exceptions import ExportError, MeasurementError
from refcheck.formatters.pdf_styles import TextStyle, page_dimensions
from refcheck.formatters.protocols import Align

try:
    from reportlab.lib.colors import HexColor
    from reportlab.lib.units import mm
    from reportlab.lib.utils import simpleSplit
    from reportlab.pdfgen import canvas as rl_canvas
except ImportError as _exc:
    raise ImportError("reportlab is required for PDF output. Install with: pip install reportlab") from _exc


# ── Unicode sanitization ────────────────────────────────────────────
# The standard Type 1 fonts lack glyphs for many characters that
# transcripts and generated summaries contain.  Text is sanitized at the
# surface boundary so measuring and drawing always see the same string.

_UNICODE_REPLACEMENTS: dict[str, str] = {
    # Dashes / hyphens
    "\u2011": "-",       # non-breaking hyphen
    "\u2010": "-",       # hyphen
    "\u2012": "-",       # figure dash
    "\u2013": "-",       # en-dash
    "\u2014": "-",       # em-dash
    "\u2015": "-",       # horizontal bar
    # Spaces
    "\u202f": " ",       # narrow no-break space
    "\u00a0": " ",       # non-breaking space
    "\u2009": " ",       # thin space
    "\u200a": " ",       # hair space
    # Quotes
    "\u2018": "'",       # left single quote
    "\u2019": "'",       # right single quote
    "\u201c": '"',       # left double quote
    "\u201d": '"',       # right double quote
    # Misc punctuation
    "\u2026": "...",     # ellipsis
    "\u2022": "-",       # bullet
    "\u2192": "->",      # rightwards arrow
    "\u2610": "[ ]",     # ballot box
    "\u2611": "[x]",     # ballot box with check
}


def sanitize_text(text: str) -> str:
    for char, replacement in _UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)
    return text


def _hex(color_str: str) -> HexColor:
    return HexColor(color_str)


class ReportLabSurface:
    """One PDF document drawn page by page on a reportlab canvas."""

    def __init__(self, config: ReportLayoutConfig, *, title: str = "", subject: str = "") -> None:
        self._width, self._height = page_dimensions(config.page_size)
        self._buffer = BytesIO()
        self._canvas = rl_canvas.Canvas(
            self._buffer,
            pagesize=(self._width * mm, self._height * mm),
            invariant=1 if config.invariant else 0,
        )
        if title:
            self._canvas.setTitle(title)
        if subject:
            self._canvas.setSubject(subject)
        self._canvas.setAuthor(config.report_kind)

    @property
    def page_width(self) -> float:
        return self._width

    @property
    def page_height(self) -> float:
        return self._height

    def _y(self, y: float) -> float:
        return (self._height - y) * mm

    # ── Text ─────────────────────────────────────────────────────────

    def measure(self, text: str, max_width: float, style: TextStyle) -> list[str]:
        try:
            return simpleSplit(sanitize_text(text), style.font, style.size, max_width * mm)
        except Exception as exc:  # noqa: BLE001 - any font/metrics failure is a measurement failure
            raise MeasurementError(f"Cannot measure text in font {style.font!r}: {exc}") from exc

    def draw_text(self, x: float, y: float, text: str, style: TextStyle, align: Align = "left") -> None:
        c = self._canvas
        try:
            c.setFont(style.font, style.size)
        except Exception as exc:  # noqa: BLE001 - unknown or unregistered font
            raise MeasurementError(f"Cannot set font {style.font!r}: {exc}") from exc
        c.setFillColor(_hex(style.color))
        text = sanitize_text(text)
        if align == "center":
            c.drawCentredString(x * mm, self._y(y), text)
        elif align == "right":
            c.drawRightString(x * mm, self._y(y), text)
        else:
            c.drawString(x * mm, self._y(y), text)

    # ── Shapes ───────────────────────────────────────────────────────

    def draw_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        fill: str | None = None,
        radius: float = 0.0,
        stroke: str | None = None,
    ) -> None:
        c = self._canvas
        c.saveState()
        if fill:
            c.setFillColor(_hex(fill))
        if stroke:
            c.setStrokeColor(_hex(stroke))
            c.setLineWidth(0.5)
        args = (x * mm, self._y(y + height), width * mm, height * mm)
        if radius:
            c.roundRect(*args, radius * mm, stroke=1 if stroke else 0, fill=1 if fill else 0)
        else:
            c.rect(*args, stroke=1 if stroke else 0, fill=1 if fill else 0)
        c.restoreState()

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, color: str, width: float = 0.5) -> None:
        c = self._canvas
        c.saveState()
        c.setStrokeColor(_hex(color))
        c.setLineWidth(width)
        c.line(x1 * mm, self._y(y1), x2 * mm, self._y(y2))
        c.restoreState()

    def draw_circle(
        self,
        cx: float,
        cy: float,
        radius: float,
        fill: str | None = None,
        stroke: str | None = None,
        line_width: float = 0.5,
    ) -> None:
        c = self._canvas
        c.saveState()
        if fill:
            c.setFillColor(_hex(fill))
        if stroke:
            c.setStrokeColor(_hex(stroke))
            c.setLineWidth(line_width)
        c.circle(cx * mm, self._y(cy), radius * mm, stroke=1 if stroke else 0, fill=1 if fill else 0)
        c.restoreState()

    def draw_circle_segment(
        self,
        cx: float,
        cy: float,
        radius: float,
        start_deg: float,
        extent_deg: float,
        color: str,
        line_width: float = 0.5,
    ) -> None:
        c = self._canvas
        c.saveState()
        c.setStrokeColor(_hex(color))
        c.setLineWidth(line_width)
        c.arc(
            (cx - radius) * mm,
            self._y(cy + radius),
            (cx + radius) * mm,
            self._y(cy - radius),
            startAng=start_deg,
            extent=extent_deg,
        )
        c.restoreState()

    # ── Document ─────────────────────────────────────────────────────

    def new_page(self) -> None:
        self._canvas.showPage()

    def save(self) -> bytes:
        try:
            self._canvas.save()
        except Exception as exc:  # noqa: BLE001 - serialization failures surface as one export error
            raise ExportError(f"Could not serialize PDF: {exc}") from exc
        return self._buffer.getvalue()
