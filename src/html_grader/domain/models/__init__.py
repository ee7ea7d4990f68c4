"""Domain models — public API."""

from html_grader.domain.models.check import Check, CheckOutcome, CheckResult
from html_grader.domain.models.document import HtmlDocument
from html_grader.domain.models.report import Report

__all__ = [
    "Check",
    "CheckOutcome",
    "CheckResult",
    "HtmlDocument",
    "Report",
]
