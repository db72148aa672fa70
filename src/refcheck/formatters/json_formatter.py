"""JSON output formatter: the normalized report model as indented JSON."""

from __future__ import annotations

import dataclasses
import json
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Any

from refcheck.models import ReportContentModel


def _default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    return str(value)


class JSONFormatter:
    """Renders ReportContentModel as indented JSON bytes."""

    def format(self, summary: ReportContentModel, **kwargs: Any) -> bytes:
        """Serialize *summary* to pretty-printed JSON bytes."""
        return json.dumps(dataclasses.asdict(summary), indent=2, default=_default).encode()

    def format_to_file(self, summary: ReportContentModel, path: Path, **kwargs: Any) -> Path:
        """Write JSON to *path* and return it."""
        path.write_bytes(self.format(summary, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "application/json"
