"""Filesystem source resolver — implements SourceResolverPort."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from html_grader.domain.errors import DocumentParseError
from html_grader.domain.ports.source_resolver import SourceResolverPort

logger = logging.getLogger(__name__)


class FilesystemSourceResolver(SourceResolverPort):
    """Look for the submission inside a single directory.

    Parameters
    ----------
    directory : Path | None
        Directory to search. Defaults to the current working directory.
    """

    def __init__(self, directory: Path | None = None) -> None:
        self._directory = Path(directory) if directory else Path.cwd()

    @property
    def directory(self) -> Path:
        return self._directory

    def resolve(self, candidates: Sequence[str]) -> Optional[Path]:
        """Return the first candidate file that exists, in *candidates* order."""
        for name in candidates:
            path = self._directory / name
            if path.is_file():
                logger.debug("Resolved submission: %s", path)
                return path
            logger.debug("Candidate not found: %s", path)
        return None

    def read(self, path: Path) -> bytes:
        try:
            return Path(path).read_bytes()
        except OSError as exc:
            raise DocumentParseError(f"Could not read {path}: {exc}") from exc
