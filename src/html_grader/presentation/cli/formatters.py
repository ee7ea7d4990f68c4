"""Rich formatting utilities for the CLI.

All console rendering (report lines, tables, panels) lives here and knows
nothing about how a report was produced. The ``format_*`` helpers are
plain string builders so the output format can be tested without a
terminal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from html_grader.domain.models.check import Check, CheckResult
    from html_grader.domain.models.report import Report

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "HTML Grader") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(Text(f"❌ {message}", style="bold red"), soft_wrap=True)


# ---------------------------------------------------------------------------
# Report rendering
# ---------------------------------------------------------------------------


def format_result_line(result: CheckResult, show_error_details: bool = True) -> str:
    """One line per check: marker, name, points awarded."""
    if result.passed:
        return f"{result.icon} {result.name} ({result.points_awarded} points)"
    if result.failure_reason and show_error_details:
        return f"{result.icon} {result.name} - Error: {result.failure_reason} (0 points)"
    return f"{result.icon} {result.name} (0 points)"


def format_summary(report: Report) -> str:
    return (
        f"📊 Final Score: {report.total_awarded}/{report.total_possible} "
        f"({report.rounded_percentage}%)"
    )


def print_report(report: Report, show_error_details: bool = True) -> None:
    """Print the full rubric breakdown followed by the score summary."""
    for result in report.results:
        style = "green" if result.passed else "red"
        console.print(
            Text(format_result_line(result, show_error_details), style=style),
            soft_wrap=True,
        )

    summary_style = "bold green" if report.is_perfect else "bold yellow"
    console.print()
    console.print(Text(format_summary(report), style=summary_style), soft_wrap=True)


def print_report_json(report: Report) -> None:
    console.print_json(data=report.to_dict())


# ---------------------------------------------------------------------------
# Rubric / config rendering
# ---------------------------------------------------------------------------


def rubric_table(checks: Sequence[Check]) -> None:
    """Print the rubric as a table of checks and point values."""
    table = Table(title="📋 Grading Rubric", show_header=True, border_style="blue")
    table.add_column("#", justify="right", width=3)
    table.add_column("Check", style="cyan")
    table.add_column("Points", justify="right", style="green")

    for index, check in enumerate(checks, start=1):
        table.add_row(str(index), check.name, str(check.points))

    table.add_section()
    table.add_row("", "[bold]Total[/]", f"[bold]{sum(c.points for c in checks)}[/]")
    console.print(table)


def json_panel(raw_json: str, title: str = "⚙️  Active Grader Configuration") -> None:
    """Render JSON inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(raw_json, "json", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )
