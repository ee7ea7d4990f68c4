"""Map a grading Report to a process exit status."""

from __future__ import annotations

from enum import IntEnum

from html_grader.domain.models.report import Report


class ExitCode(IntEnum):
    SUCCESS = 0
    FAILURE = 1


def exit_code(report: Report) -> ExitCode:
    """``SUCCESS`` only for a perfect score; a 0/0 report is a failure."""
    return ExitCode.SUCCESS if report.is_perfect else ExitCode.FAILURE
