"""CLI for refcheck-report: render / validate / dump commands."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from refcheck.core.config import AppSettings, ObservabilityConfig
from refcheck.exceptions import RefcheckError
from refcheck.formatters.json_formatter import JSONFormatter
from refcheck.hooks import setup_logging
from refcheck.models import ReportContentModel
from refcheck.schemas import load_report_file
from refcheck.validation import validate_report

app = typer.Typer(name="refcheck-report", help="Render reference-check reports as paginated PDFs")
console = Console()


def _configure_logging(verbose: bool) -> None:
    level = "DEBUG" if verbose else "INFO"
    setup_logging(ObservabilityConfig(log_level=level))


def _load(model_file: Path) -> ReportContentModel:
    try:
        return load_report_file(model_file)
    except RefcheckError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc


def _parse_date(value: Optional[str]) -> Optional[date]:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise typer.BadParameter(f"Expected YYYY-MM-DD, got {value!r}") from exc


@app.command()
def render(
    model_file: Path = typer.Argument(..., help="JSON file with the report model"),
    transcript: bool = typer.Option(False, "--transcript", help="Append the full interview transcript"),
    no_signature: bool = typer.Option(False, "--no-signature", help="Omit the signature block"),
    output_dir: Path = typer.Option(Path("."), "--output-dir", "-o", help="Directory for the PDF"),
    on: Optional[str] = typer.Option(None, "--date", help="Report date (YYYY-MM-DD), defaults to today"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Render a report model to PDF."""
    from refcheck.formatters.pdf_formatter import PDFFormatter

    _configure_logging(verbose)
    settings = AppSettings()
    generated_on = _parse_date(on)
    model = _load(model_file)

    formatter = PDFFormatter(settings.pdf)
    try:
        exported = formatter.export(
            model,
            include_transcript=transcript,
            include_signature=not no_signature,
            generated_on=generated_on,
        )
    except RefcheckError as exc:
        console.print(f"[red]Export failed: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / exported.filename
    path.write_bytes(exported.content)
    console.print(f"[green]Report saved to {path}[/green] ({exported.page_count} pages)")


@app.command()
def validate(
    model_file: Path = typer.Argument(..., help="JSON file with the report model"),
) -> None:
    """Check that a report model can be rendered."""
    model = _load(model_file)
    try:
        validate_report(model)
    except RefcheckError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    table = Table(title=f"Report: {model.subject.name}")
    table.add_column("Section", style="cyan")
    table.add_column("Items", justify="right")
    table.add_row("Strengths", str(len(model.key_findings.strengths)))
    table.add_row("Concerns", str(len(model.key_findings.concerns)))
    table.add_row("Observations", str(len(model.key_findings.neutral_observations)))
    table.add_row("Categories", str(len(model.category_breakdown)))
    table.add_row("Highlights", str(len(model.conversation_highlights)))
    table.add_row("Red flags", str(len(model.red_flags)))
    table.add_row("Verification items", str(len(model.verification_items)))
    table.add_row("Transcript turns", str(len(model.transcript or ())))
    console.print(table)
    console.print("[green]Report model is valid[/green]")


@app.command()
def dump(
    model_file: Path = typer.Argument(..., help="JSON file with the report model"),
    output: Optional[Path] = typer.Option(None, help="Write normalized JSON here instead of stdout"),
) -> None:
    """Print the normalized report model as JSON."""
    model = _load(model_file)
    formatter = JSONFormatter()
    if output:
        formatter.format_to_file(model, output)
        console.print(f"[green]Normalized model saved to {output}[/green]")
    else:
        typer.echo(formatter.format(model).decode())


if __name__ == "__main__":
    app()
