"""Thin CLI wrapper — Typer commands that delegate to Use Cases.

All grading logic is accessed through the Container (bootstrap.py).
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.logging import RichHandler

from html_grader.presentation.cli.formatters import (
    console,
    err_console,
    error_message,
    json_panel,
    print_report,
    print_report_json,
    rubric_table,
    success_panel,
)

app = typer.Typer(
    name="html-grader",
    help="📝 Auto-grade a single-file HTML assignment against a fixed rubric",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for config commands
config_app = typer.Typer(
    name="config",
    help="⚙️  Manage grader configuration",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")


def _configure_logging(verbose: bool) -> None:
    """Route log records to stderr through rich; DEBUG when *verbose*."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _print_config_error(exc: Exception) -> None:
    from pydantic import ValidationError

    from html_grader.application.error_messages import format_validation_errors

    error_message(str(exc))
    if isinstance(exc.__cause__, ValidationError):
        for line in format_validation_errors(exc.__cause__.errors()):
            console.print(f"  • {line}", markup=False)


# ---------------------------------------------------------------------------
# html-grader grade
# ---------------------------------------------------------------------------


@app.command()
def grade(
    directory: Annotated[
        Optional[Path],
        typer.Argument(help="Directory containing the submission (default: current)"),
    ] = None,
    config: Annotated[
        Optional[str],
        typer.Option("--config", "-c", help="Path to a JSON configuration file"),
    ] = None,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the report as JSON")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-V", help="Show debug logging on stderr")
    ] = False,
) -> None:
    """Grade the HTML submission and exit 0 only on a perfect score."""
    from html_grader.application.exit_codes import ExitCode, exit_code
    from html_grader.bootstrap import Container
    from html_grader.domain.errors import (
        ConfigurationError,
        DocumentParseError,
        SubmissionNotFoundError,
    )

    _configure_logging(verbose)

    try:
        container = Container(config_path=config, directory=directory)
    except ConfigurationError as exc:
        _print_config_error(exc)
        raise typer.Exit(code=int(ExitCode.FAILURE))

    try:
        report = container.grade_submission().execute()
    except SubmissionNotFoundError as exc:
        error_message("No HTML file found!")
        console.print(
            f"  Looked in {exc.directory} for: {', '.join(exc.candidates)}",
            markup=False,
            style="dim",
        )
        raise typer.Exit(code=int(ExitCode.FAILURE))
    except DocumentParseError as exc:
        error_message(f"Could not parse submission: {exc}")
        raise typer.Exit(code=int(ExitCode.FAILURE))

    if as_json:
        print_report_json(report)
    else:
        print_report(report, show_error_details=container.config.show_error_details)

    raise typer.Exit(code=int(exit_code(report)))


# ---------------------------------------------------------------------------
# html-grader rubric
# ---------------------------------------------------------------------------


@app.command()
def rubric() -> None:
    """Show the checks and point values of the grading rubric."""
    from html_grader.domain.rubric import RUBRIC

    rubric_table(RUBRIC)


# ---------------------------------------------------------------------------
# html-grader config show / init / validate
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(
    config: Annotated[
        Optional[str],
        typer.Option("--config", "-c", help="Path to a JSON configuration file"),
    ] = None,
) -> None:
    """Show the active grader configuration."""
    from html_grader.infrastructure.config.json_config_provider import JsonConfigProvider
    from html_grader.domain.errors import ConfigurationError

    try:
        cfg = JsonConfigProvider(config).get_config()
    except ConfigurationError as exc:
        _print_config_error(exc)
        raise typer.Exit(code=1)

    json_panel(cfg.model_dump_json(indent=2))


@config_app.command("init")
def config_init(
    output: Annotated[
        str, typer.Option("--output", "-o", help="Destination file name")
    ] = "grader_config.json",
) -> None:
    """Copy the default configuration into the current directory for editing."""
    from html_grader.config.loader import DEFAULT_CONFIG_PATH

    dest = Path(output)
    if dest.exists():
        console.print(f"[bold yellow]⚠️  File already exists:[/] {dest}")
        overwrite = typer.confirm("Overwrite it?")
        if not overwrite:
            raise typer.Abort()

    shutil.copy2(DEFAULT_CONFIG_PATH, dest)
    success_panel(
        f"✅ Configuration copied to: [bold green]{dest}[/]\n\n"
        "Edit this file and use it with [bold]--config[/]:\n"
        f'  html-grader grade --config "{dest}"',
        title="⚙️  Config Init",
    )


@config_app.command("validate")
def config_validate(
    config_file: Annotated[str, typer.Argument(help="Path to the JSON configuration file")],
) -> None:
    """Validate a grader configuration file."""
    from html_grader.infrastructure.config.json_config_provider import JsonConfigProvider
    from html_grader.domain.errors import ConfigurationError

    path = Path(config_file)
    if not path.exists():
        error_message(f"File not found: {path}")
        raise typer.Exit(code=1)

    try:
        cfg = JsonConfigProvider(path).get_config()
    except ConfigurationError as exc:
        _print_config_error(exc)
        raise typer.Exit(code=1)

    success_panel(
        f"✅ Valid configuration\n\n"
        f"  Candidates: [cyan]{', '.join(cfg.candidate_filenames)}[/]\n"
        f"  Parser: [cyan]{cfg.parser_features}[/]",
        title="✅ Validation",
    )


if __name__ == "__main__":
    app()
