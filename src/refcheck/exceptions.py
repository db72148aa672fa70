"""Exception hierarchy for refcheck-report."""


class RefcheckError(Exception):
    """Base exception for all refcheck-report errors."""


class ReportValidationError(RefcheckError):
    """Raised when a report model cannot be rendered as given."""


class MissingRequiredDataError(ReportValidationError):
    """A required field of the report model is absent or blank."""

    def __init__(self, field_path: str) -> None:
        super().__init__(f"Missing required report data: {field_path}")
        self.field_path = field_path


class InvalidReportDataError(ReportValidationError):
    """A field of the report model is outside its allowed range."""

    def __init__(self, field_path: str, message: str) -> None:
        super().__init__(f"Invalid report data at {field_path}: {message}")
        self.field_path = field_path


class MeasurementError(RefcheckError):
    """Raised by a drawing surface when text cannot be measured."""


class ExportError(RefcheckError):
    """Raised when the document could not be produced. No artifact exists."""
