"""Formatter and drawing-surface protocols.

``IOutputFormatter`` is the contract every output formatter implements.
``IDrawingSurface`` is the small set of primitives the PDF compositor draws
with; the reportlab canvas adapter implements it for real output and the test
suite swaps in a recording fake.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal, Protocol, runtime_checkable

if TYPE_CHECKING:
    from refcheck.formatters.pdf_styles import TextStyle

Align = Literal["left", "center", "right"]


@runtime_checkable
class IOutputFormatter(Protocol):
    """Protocol for output formatters (PDF, JSON, etc.)."""

    def format(self, summary: Any, **kwargs: Any) -> bytes:
        """Render the report into output bytes."""
        ...

    def format_to_file(self, summary: Any, path: Path, **kwargs: Any) -> Path:
        """Render and write to a file. Returns the output path."""
        ...

    @property
    def content_type(self) -> str:
        """MIME type for the output format (e.g. 'application/pdf')."""
        ...


@runtime_checkable
class IDrawingSurface(Protocol):
    """Paged drawing primitives.

    Coordinates are millimetres from the top-left corner of the current
    page, ``y`` growing downwards.  Text ``y`` is the baseline.  Line widths
    are points.
    """

    @property
    def page_width(self) -> float: ...

    @property
    def page_height(self) -> float: ...

    def measure(self, text: str, max_width: float, style: TextStyle) -> list[str]:
        """Wrap *text* to *max_width*; raises ``MeasurementError`` on failure."""
        ...

    def draw_text(self, x: float, y: float, text: str, style: TextStyle, align: Align = "left") -> None: ...

    def draw_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        fill: str | None = None,
        radius: float = 0.0,
        stroke: str | None = None,
    ) -> None: ...

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, color: str, width: float = 0.5) -> None: ...

    def draw_circle(
        self,
        cx: float,
        cy: float,
        radius: float,
        fill: str | None = None,
        stroke: str | None = None,
        line_width: float = 0.5,
    ) -> None: ...

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
        """Stroke an arc; angles are counter-clockwise from three o'clock."""
        ...

    def new_page(self) -> None: ...

    def save(self) -> bytes:
        """Close the document and return its serialized bytes."""
        ...
