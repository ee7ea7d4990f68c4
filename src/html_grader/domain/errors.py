"""Domain errors — custom exceptions for HTML Grader.

These exceptions are raised by infrastructure adapters and use cases and
caught by the presentation layer. A failing check predicate never raises
one of these: the rubric engine turns it into an errored ``CheckResult``.
"""

from __future__ import annotations

from pathlib import Path


class GraderError(Exception):
    """Base exception for all HTML Grader errors."""


class SubmissionNotFoundError(GraderError):
    """Raised when none of the candidate submission files exist."""

    def __init__(self, candidates: list[str] | tuple[str, ...], directory: Path) -> None:
        self.candidates = tuple(candidates)
        self.directory = Path(directory)
        names = ", ".join(self.candidates) or "<none>"
        super().__init__(f"No HTML file found in {self.directory} (looked for: {names})")


class DocumentParseError(GraderError):
    """Raised when a submission cannot be decoded or parsed at all."""


class ConfigurationError(GraderError):
    """Raised when configuration is invalid or missing."""
