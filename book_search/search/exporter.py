"""
Rendering and export of search reports.

Reports are written as JSON in the interchange layout, or formatted as a
plain-text table for the console.
"""

import json
from pathlib import Path
from typing import Union

from ..core import get_logger, ExportError
from .models import SearchReport

logger = get_logger(__name__)


def report_to_json(report: SearchReport, indent: int = 2) -> str:
    """Serialize a report to a JSON string."""
    return json.dumps(report.to_dict(), indent=indent, ensure_ascii=False)


def write_report(report: SearchReport, path: Union[str, Path]) -> Path:
    """
    Write a report to disk as UTF-8 JSON.

    Args:
        report: The report to write.
        path: Destination file. Parent directories are created.

    Returns:
        The path written.

    Raises:
        ExportError: If the file cannot be written.
    """
    path = Path(path)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(report_to_json(report) + "\n", encoding="utf-8")
    except OSError as e:
        raise ExportError(
            f"Failed to write report: {e}",
            path=str(path)
        )

    logger.info(f"Wrote {report.total_results} results to {path}")
    return path


def format_report_table(report: SearchReport) -> str:
    """
    Format a report as an aligned ISBN / Page / Line table.

    Args:
        report: The report to format.

    Returns:
        Multi-line string ready for printing.
    """
    header = f"Search term: {report.search_term!r}"

    if not report.results:
        return f"{header}\nNo matches."

    rows = [("ISBN", "Page", "Line")]
    rows.extend(
        (str(result.isbn), str(result.page), str(result.line))
        for result in report.results
    )

    widths = [max(len(row[col]) for row in rows) for col in range(3)]

    lines = [header, f"{report.total_results} match(es)", ""]
    for i, row in enumerate(rows):
        lines.append("  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip())
        if i == 0:
            lines.append("  ".join("-" * width for width in widths))

    return "\n".join(lines)
