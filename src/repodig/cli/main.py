"""Root CLI application for repodig."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

import typer

from repodig.core.github import GitHubClient
from repodig.core.matcher import validate_patterns
from repodig.core.orchestrator import RepositoryAnalyzer
from repodig.core.reporter import render, report_filename
from repodig.exceptions import RepodigError, SearchError
from repodig.utils.config import get_clone_timeout, get_default_limit, get_work_base
from repodig.utils.deps import require
from repodig.utils.output import console

LIMIT_FLAG = "--limit"
HELP_FLAG = "--help"

USAGE = """
Usage: repodig <search-query> [file-patterns...] [options]

Examples:
  repodig "dotfiles" "*.zsh" "*.bash" --limit 15
  repodig "claude.md" --limit 10
  repodig "cursor rules" ".cursor/rules" "cursor-rules" --limit 20

Options:
  --limit <number>    Number of repositories to analyze (default: 10)
  --help              Show this help message
"""

app = typer.Typer(
    name="repodig",
    help="Search GitHub, clone matching repositories and report files by pattern.",
    add_completion=False,
)


@dataclass
class RunOptions:
    """Parsed command line."""

    query: str = ""
    patterns: list[str] = field(default_factory=list)
    limit: int = 10
    show_help: bool = False


def _is_number(token: str) -> bool:
    return token.isascii() and token.isdigit()


def parse_arguments(args: list[str], default_limit: int = 10) -> RunOptions:
    """Parse `<query> [pattern...] [--limit <n>] [--help]`.

    The first argument is always the query. `--limit` consumes the next
    token only when it is a number; otherwise the default limit is used and
    the token is kept as a pattern. A limit of 0 also falls back to the
    default.
    """
    if not args or not args[0].strip() or HELP_FLAG in args:
        return RunOptions(limit=default_limit, show_help=True)

    limit = default_limit
    patterns: list[str] = []

    i = 1
    while i < len(args):
        token = args[i]
        if token == LIMIT_FLAG:
            following = args[i + 1] if i + 1 < len(args) else None
            if following is not None and _is_number(following):
                limit = int(following) or default_limit
                i += 2
                continue
            limit = default_limit
            i += 1
            continue
        patterns.append(token)
        i += 1

    return RunOptions(query=args[0], patterns=patterns, limit=limit)


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    add_help_option=False,
)
def main(ctx: typer.Context) -> None:
    """Search GitHub for <query>, clone each hit and report files matching the patterns."""
    options = parse_arguments(list(ctx.args), get_default_limit())
    if options.show_help:
        typer.echo(USAGE)
        return

    try:
        validate_patterns(options.patterns)
        require("gh", "git")
    except RepodigError as e:
        console.print_error(str(e))
        raise typer.Exit(1) from None

    console.print("[bold]Starting analysis...[/bold]")
    console.print_info(f'Query: "{options.query}"')
    console.print_info(
        f"File patterns: {', '.join(options.patterns) if options.patterns else 'None'}"
    )
    console.print_info(f"Limit: {options.limit}")
    console.print()

    try:
        analyzer = RepositoryAnalyzer(
            client=GitHubClient(clone_timeout=get_clone_timeout()),
            work_base=get_work_base(),
        )
    except OSError as e:
        console.print_error(f"Cannot create clone directory: {e}")
        raise typer.Exit(1) from None

    try:
        results = analyzer.analyze(options.query, options.patterns, options.limit)

        console.print("\n[bold]Analysis complete![/bold]")
        now = datetime.now(timezone.utc)
        report = render(results, generated_at=now)
        typer.echo("\n" + report)

        report_path = Path.cwd() / report_filename(now)
        report_path.write_text(report, encoding="utf-8")
        console.print_success(f"Report saved to: {report_path.name}")

    except SearchError as e:
        console.print_error(f"Analysis failed: {e}")
        raise typer.Exit(1) from None
    except OSError as e:
        console.print_error(f"Failed to write report: {e}")
        raise typer.Exit(1) from None
    finally:
        console.print_info(f"Repositories are checked out to: {analyzer.work_dir}")


if __name__ == "__main__":
    app()
