"""Report export endpoint: JSON payload in, PDF (or normalized JSON) out."""

from __future__ import annotations

from datetime import date
from io import BytesIO
from typing import Literal

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import StreamingResponse
from pydantic import BaseModel

from refcheck.schemas import ReportPayload

router = APIRouter(tags=["reports"])


class ExportRequest(BaseModel):
    """Request to export a reference-check report in a given format."""

    report: ReportPayload
    include_transcript: bool = False
    include_signature: bool = True
    output_format: Literal["pdf", "json"] = "pdf"
    generated_on: date | None = None


@router.post("/reports/export")
async def export_report(request: ExportRequest, req: Request) -> StreamingResponse:
    """Export a report as a streamed attachment.

    The attachment is named ``<ReportKind>_<SubjectName>_<ISODate>.<ext>``.
    """
    from refcheck.formatters.pdf_formatter import PDFFormatter, report_filename

    settings = req.app.state.settings
    model = request.report.to_model()
    generated_on = request.generated_on or date.today()

    if request.output_format == "pdf":
        try:
            from refcheck.formatters.surface import ReportLabSurface  # noqa: F401
        except ImportError as exc:
            raise HTTPException(status_code=501, detail="PDF export requires reportlab") from exc
        exported = PDFFormatter(settings.pdf).export(
            model,
            include_transcript=request.include_transcript,
            include_signature=request.include_signature,
            generated_on=generated_on,
        )
        output_bytes, filename, media_type = exported.content, exported.filename, exported.content_type
    else:
        from refcheck.formatters.json_formatter import JSONFormatter
        from refcheck.validation import validate_report

        validate_report(model)
        formatter = JSONFormatter()
        output_bytes = formatter.format(model)
        filename = report_filename(settings.pdf.report_kind, model.subject.name, generated_on, ext="json")
        media_type = formatter.content_type

    return StreamingResponse(
        BytesIO(output_bytes),
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
