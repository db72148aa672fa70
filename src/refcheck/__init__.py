"""refcheck-report: paginated PDF compositor for reference-check reports."""

from __future__ import annotations

__version__ = "0.1.0"
