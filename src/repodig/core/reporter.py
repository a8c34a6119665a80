"""Markdown report rendering."""

from collections.abc import Sequence
from datetime import datetime, timedelta, timezone

from repodig.models.analysis import AnalysisFailure, AnalysisResult

MAX_LISTED_FILES = 10
TOP_FILE_TYPES = 5

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def report_filename(now: datetime | None = None) -> str:
    """Name of the report file written to the working directory."""
    moment = now or datetime.now(timezone.utc)
    millis = (moment.astimezone(timezone.utc) - EPOCH) // timedelta(milliseconds=1)
    return f"analysis-report-{millis}.md"


def _format_timestamp(moment: datetime) -> str:
    stamp = moment.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


def _render_result(index: int, result: AnalysisResult) -> list[str]:
    repo = result.repo
    lines = [
        f"## {index}. {repo.full_name}",
        "",
        f"**Description:** {repo.description}",
        f"**Stars:** {repo.stars} | **Language:** {repo.language}",
        f"**URL:** {repo.url}",
        "",
    ]

    analysis = result.analysis
    if isinstance(analysis, AnalysisFailure):
        lines += [f"**Error:** {analysis.error}", ""]
        return lines

    matching = result.matching_files
    lines += [
        f"**Files:** {analysis.total_files} total",
        f"**Matching files:** {len(matching)}",
        "",
    ]

    if matching:
        lines.append("**Matching files found:**")
        lines += [f"- {path}" for path in matching[:MAX_LISTED_FILES]]
        if len(matching) > MAX_LISTED_FILES:
            lines.append(f"- ... and {len(matching) - MAX_LISTED_FILES} more")
        lines.append("")

    top_types = analysis.top_file_types(TOP_FILE_TYPES)
    if top_types:
        lines.append("**Top file types:**")
        lines += [f"- {ext}: {count} files" for ext, count in top_types]
        lines.append("")

    lines += ["---", ""]
    return lines


def render(
    results: Sequence[AnalysisResult], generated_at: datetime | None = None
) -> str:
    """Render analysis results as a Markdown document.

    Args:
        results: Results in the order they should appear.
        generated_at: Timestamp for the header. Defaults to now.

    Returns:
        The report text.
    """
    moment = generated_at or datetime.now(timezone.utc)
    lines = [
        "# GitHub Repository Analysis Report",
        "",
        f"Generated on: {_format_timestamp(moment)}",
        f"Total repositories analyzed: {len(results)}",
        "",
    ]

    for index, result in enumerate(results, 1):
        lines += _render_result(index, result)

    return "\n".join(lines) + "\n"
