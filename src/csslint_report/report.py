import logging
from collections.abc import Iterable

from .formatters.base import Formatter
from .models import FileResult, ReadFailure

logger = logging.getLogger(__name__)


def render_report(formatter: Formatter, results: Iterable[FileResult | ReadFailure]) -> str:
    """
    Assemble a complete report.

    The formatter's start text comes first, then one fragment per entry in
    ``results`` (read failures through ``read_error``, everything else through
    ``format_results``), then the end text.
    """
    output = [formatter.start_format()]
    files = 0
    failures = 0

    for result in results:
        if isinstance(result, ReadFailure):
            output.append(formatter.read_error(result.filename, result.message))
            failures += 1
        else:
            output.append(formatter.format_results(result, result.filename))
            files += 1

    output.append(formatter.end_format())
    logger.debug(
        "Rendered %s report: %d files, %d read failures", formatter.id, files, failures
    )
    return "".join(output)
