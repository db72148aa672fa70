"""Page manager and the two placement strategies built on it.

The ``PageManager`` is the single owner of the vertical write position.  Every
block goes through one of two strategies:

* ``AtomicBlock`` measures its full height once, asks for that much space and
  is drawn on one page.
* ``FlowBlock`` wraps text into lines and asks for space one line at a time,
  so a paragraph may continue on the next page between lines.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from refcheck.formatters.pdf_styles import RULE_COLOR, TextStyle

if TYPE_CHECKING:
    from refcheck.core.config import ReportLayoutConfig
    from refcheck.formatters.protocols import IDrawingSurface

log = logging.getLogger(__name__)

_EPSILON = 1e-6


@dataclass(frozen=True)
class Placement:
    """Vertical extent of one placed block, kept as a layout trace."""

    page: int
    top: float
    bottom: float
    kind: str


class PageManager:
    """Tracks the cursor, inserts page breaks and draws page chrome.

    Created fresh for every export and discarded afterwards.
    """

    def __init__(
        self,
        surface: IDrawingSurface,
        config: ReportLayoutConfig,
        styles: dict[str, TextStyle],
        *,
        subject_name: str,
        footer_date: str,
    ) -> None:
        self.surface = surface
        self.styles = styles
        self.margin = config.margin_mm
        self.page_width = surface.page_width
        self.page_height = surface.page_height
        self.header_top = config.header_top_mm
        self.content_top = config.header_top_mm + config.header_height_mm
        self.content_bottom = self.page_height - config.bottom_margin_mm
        self.title = config.report_title
        self.confidentiality_label = config.confidentiality_label
        self.subject_name = subject_name
        self.footer_date = footer_date

        self.page_number = 1
        self.cursor_y = self.content_top
        self.placements: list[Placement] = []
        self._footer_drawn = False

    # ── Geometry ─────────────────────────────────────────────────────

    @property
    def content_width(self) -> float:
        return self.page_width - 2 * self.margin

    @property
    def usable_height(self) -> float:
        return self.content_bottom - self.content_top

    @property
    def at_page_top(self) -> bool:
        return self.cursor_y <= self.content_top + _EPSILON

    # ── Cursor ───────────────────────────────────────────────────────

    def ensure_space(self, required_height: float) -> float:
        """Break the page unless *required_height* fits above the footer.

        Returns the cursor position the caller should draw at.  A block
        taller than a whole page gets a fresh page to itself and is placed
        there anyway.
        """
        if self.cursor_y + required_height > self.content_bottom + _EPSILON:
            if not self.at_page_top:
                self.break_page()
            if required_height > self.usable_height:
                log.warning(
                    "Block of %.1fmm exceeds usable page height %.1fmm; placing it alone on page %d",
                    required_height,
                    self.usable_height,
                    self.page_number,
                )
        return self.cursor_y

    def advance(self, height: float, kind: str = "flow") -> None:
        """Move the cursor below a block that was just drawn."""
        self.placements.append(Placement(self.page_number, self.cursor_y, self.cursor_y + height, kind))
        self.cursor_y += height

    def skip(self, height: float) -> None:
        """Leave blank space. Ignored at the top of a page."""
        if not self.at_page_top:
            self.cursor_y += height

    def skip_to(self, y: float, page: int) -> None:
        """Move the cursor down to *y* if still on *page* and above it."""
        if self.page_number == page and self.cursor_y < y:
            self.cursor_y = y

    # ── Pages ────────────────────────────────────────────────────────

    def break_page(self) -> None:
        """Finalize the current page and start the next one with a header."""
        self.finalize_page()
        self.surface.new_page()
        self.page_number += 1
        self._footer_drawn = False
        self._draw_header()
        self.cursor_y = self.content_top
        log.debug("Started page %d", self.page_number)

    def finalize_page(self) -> None:
        """Draw the footer of the current page once."""
        if self._footer_drawn:
            return
        style = self.styles["chrome"]
        y = self.page_height - 10
        self.surface.draw_text(self.page_width / 2, y, self.confidentiality_label, style, align="center")
        self.surface.draw_text(self.page_width - self.margin, y, f"Page {self.page_number}", style, align="right")
        self.surface.draw_text(self.margin, y, self.footer_date, style)
        self._footer_drawn = True

    def _draw_header(self) -> None:
        style = self.styles["chrome"]
        baseline = self.header_top - 2
        self.surface.draw_text(self.margin, baseline, self.title, style)
        self.surface.draw_text(self.page_width - self.margin, baseline, self.subject_name, style, align="right")
        self.surface.draw_line(self.margin, self.header_top, self.page_width - self.margin, self.header_top, RULE_COLOR)


# ── Placement strategies ─────────────────────────────────────────────


@runtime_checkable
class Placeable(Protocol):
    """Anything that knows its height and can put itself on the page."""

    kind: str

    def height(self, manager: PageManager) -> float: ...

    def place(self, manager: PageManager) -> float: ...


class AtomicBlock(ABC):
    """A block drawn whole on a single page."""

    kind = "atomic"

    @abstractmethod
    def height(self, manager: PageManager) -> float:
        """Full vertical extent of the block, in millimetres."""

    @abstractmethod
    def draw(self, manager: PageManager, top: float) -> None:
        """Draw the block with its top edge at *top*."""

    def place(self, manager: PageManager, keep_with: float = 0.0) -> float:
        """Reserve space (plus *keep_with* for what follows), draw, advance.

        Returns the top the block was drawn at.
        """
        height = self.height(manager)
        top = manager.ensure_space(height + keep_with)
        self.draw(manager, top)
        manager.advance(height, self.kind)
        return top


class Marker(Protocol):
    """Glyph drawn beside the first line of a flow block (bullet, checkbox, label)."""

    def draw(self, manager: PageManager, top: float, line_height: float) -> None: ...


class FlowBlock:
    """Wrapped text placed line by line."""

    kind = "flow"

    def __init__(
        self,
        text: str,
        style: TextStyle,
        *,
        indent: float = 0.0,
        marker: Marker | None = None,
        space_after: float = 2.0,
    ) -> None:
        self.text = text
        self.style = style
        self.indent = indent
        self.marker = marker
        self.space_after = space_after

    def lines(self, manager: PageManager) -> list[str]:
        return manager.surface.measure(self.text, manager.content_width - self.indent, self.style)

    def height(self, manager: PageManager) -> float:
        return len(self.lines(manager)) * self.style.leading + self.space_after

    def place(self, manager: PageManager) -> float:
        """Place every wrapped line, breaking pages between lines as needed.

        Returns the top of the first line.
        """
        lines = self.lines(manager)
        x = manager.margin + self.indent
        first_top = manager.cursor_y
        for i, line in enumerate(lines):
            top = manager.ensure_space(self.style.leading)
            if i == 0:
                first_top = top
                if self.marker is not None:
                    self.marker.draw(manager, top, self.style.leading)
            manager.surface.draw_text(x, top + self.style.baseline_offset, line, self.style)
            manager.advance(self.style.leading, self.kind)
        manager.skip(self.space_after)
        return first_top
