import logging
import sys
from pathlib import Path

import typer
from csslint_report.exceptions import UnknownFormatterError
from csslint_report.models import FileResult, ReadFailure
from csslint_report.registry import registry
from csslint_report.report import render_report
from pydantic import ValidationError

from .config import DEFAULT_CONFIG_FILE, ReportConfig
from .converters import file_result_model_to_result
from .models import ResultsDocument

logger = logging.getLogger(__name__)

app = typer.Typer(help="CSS Lint Reporter - Render lint results in report formats")


def load_results(path: Path) -> list[FileResult | ReadFailure]:
    """Load one JSON results document; unreadable documents become a read failure"""
    try:
        document = ResultsDocument.model_validate_json(path.read_bytes())
    except OSError as e:
        logger.debug("Could not read %s: %s", path, e)
        return [ReadFailure(filename=str(path), message=e.strerror or str(e))]
    except ValidationError as e:
        logger.debug("Invalid results document %s: %s", path, e)
        return [ReadFailure(filename=str(path), message=f"Invalid results document: {e}")]

    return [file_result_model_to_result(entry) for entry in document.files]


@app.command()
def report(
    inputs: list[Path] = typer.Argument(..., help="JSON results files"),
    fmt: str = typer.Option(None, "--format", "-f", help="Output format identifier"),
    output: Path = typer.Option(None, "--output", "-o", help="Write report to file instead of stdout"),
    config_file: Path = typer.Option(DEFAULT_CONFIG_FILE, "--config", help="Path to config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Render lint results as a report"""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    config = ReportConfig(config_file)
    format_id = fmt or config.format
    output = output or config.output

    try:
        formatter = registry.get(format_id)
    except UnknownFormatterError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    results: list[FileResult | ReadFailure] = []
    for path in inputs:
        results.extend(load_results(path))

    text = render_report(formatter, results)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
        logger.debug("Report written to %s", output)
    else:
        typer.echo(text, nl=False)


@app.command()
def formatters():
    """List available report formats"""
    for formatter in registry.get_all_formatters():
        typer.echo(f"{formatter.id}\t{formatter.name}")


if __name__ == "__main__":
    app()
