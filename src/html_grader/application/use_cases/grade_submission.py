"""Use Case: Grade Submission.

Resolver → Parser → Rubric engine. Locating and parsing the file are
preconditions: if either fails the engine is never run and no report is
produced.
"""

from __future__ import annotations

import logging
from typing import Sequence

from html_grader.domain.errors import SubmissionNotFoundError
from html_grader.domain.models.check import Check
from html_grader.domain.models.report import Report
from html_grader.domain.ports.document_parser import DocumentParserPort
from html_grader.domain.ports.source_resolver import SourceResolverPort
from html_grader.domain.services.engine import evaluate

logger = logging.getLogger(__name__)


class GradeSubmissionUseCase:
    """Orchestrate grading of one HTML submission."""

    def __init__(
        self,
        resolver: SourceResolverPort,
        parser: DocumentParserPort,
        checks: Sequence[Check],
        candidates: Sequence[str],
    ) -> None:
        self._resolver = resolver
        self._parser = parser
        self._checks = tuple(checks)
        self._candidates = tuple(candidates)

    def execute(self) -> Report:
        """Grade the first existing candidate file.

        Returns:
            The scored Report.

        Raises:
            SubmissionNotFoundError: No candidate file exists.
            DocumentParseError: The file could not be read or parsed.
        """
        path = self._resolver.resolve(self._candidates)
        if path is None:
            raise SubmissionNotFoundError(self._candidates, self._resolver.directory)

        logger.info("Grading %s", path)
        document = self._parser.parse(self._resolver.read(path), source_path=path)
        report = evaluate(document, self._checks)
        logger.info("Score %d/%d", report.total_awarded, report.total_possible)
        return report
