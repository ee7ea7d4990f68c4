"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together. All other layers refer to ports.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

from html_grader.application.use_cases.grade_submission import GradeSubmissionUseCase
from html_grader.domain.models.check import Check
from html_grader.domain.ports.config_provider import ConfigProviderPort
from html_grader.domain.ports.document_parser import DocumentParserPort
from html_grader.domain.ports.source_resolver import SourceResolverPort
from html_grader.domain.rubric import RUBRIC
from html_grader.infrastructure.config.json_config_provider import JsonConfigProvider
from html_grader.infrastructure.parsers.soup_parser import SoupDocumentParser
from html_grader.infrastructure.resolvers.filesystem_resolver import FilesystemSourceResolver


class Container:
    """Simple dependency injection container.

    Usage::

        container = Container(directory=Path("submission"))
        report = container.grade_submission().execute()
    """

    def __init__(
        self,
        config_path: str | Path | None = None,
        directory: Path | None = None,
        checks: Sequence[Check] = RUBRIC,
    ) -> None:
        self._config_provider = JsonConfigProvider(config_path)
        self._config: Any = self._config_provider.get_config()

        self._resolver = FilesystemSourceResolver(directory)
        self._parser = SoupDocumentParser(features=self._config.parser_features)
        self._checks = tuple(checks)

    # -- Port accessors ------------------------------------------------------

    @property
    def config_provider(self) -> ConfigProviderPort:
        return self._config_provider

    @property
    def config(self) -> Any:
        return self._config

    @property
    def resolver(self) -> SourceResolverPort:
        return self._resolver

    @property
    def parser(self) -> DocumentParserPort:
        return self._parser

    @property
    def checks(self) -> tuple[Check, ...]:
        return self._checks

    # -- Use Case factories --------------------------------------------------

    def grade_submission(self) -> GradeSubmissionUseCase:
        """Create a use case that grades the configured submission."""
        return GradeSubmissionUseCase(
            resolver=self._resolver,
            parser=self._parser,
            checks=self._checks,
            candidates=self._config.candidate_filenames,
        )
