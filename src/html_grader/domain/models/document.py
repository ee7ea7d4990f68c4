"""Parsed HTML document — the read-only input of every rubric check."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from html_grader.domain.rules.constants import DOCTYPE_MARKER

if TYPE_CHECKING:
    from bs4 import BeautifulSoup


@dataclass(frozen=True)
class HtmlDocument:
    """A submission parsed into a queryable tree.

    Attributes:
        raw_text: Decoded markup exactly as submitted.
        tree: Parsed element tree (a ``BeautifulSoup`` instance).
        source_path: File the markup was read from, or ``None`` when the
            document was built from an in-memory string.
    """

    raw_text: str
    tree: BeautifulSoup
    source_path: Path | None = None

    # -- Element lookup ------------------------------------------------------

    def find(self, tag: str) -> Any:
        """Return the first element named *tag*, or ``None``."""
        return self.tree.find(tag)

    def find_all(self, tag: str) -> list[Any]:
        """Return every element named *tag* in document order."""
        return list(self.tree.find_all(tag))

    def count(self, tag: str) -> int:
        return len(self.find_all(tag))

    def select_one(self, selector: str) -> Any:
        """Return the first element matching a CSS *selector*, or ``None``."""
        return self.tree.select_one(selector)

    def select(self, selector: str) -> list[Any]:
        return list(self.tree.select(selector))

    # -- Raw text ------------------------------------------------------------

    def has_doctype(self) -> bool:
        """True if the raw markup declares ``<!doctype html>`` (any case)."""
        return DOCTYPE_MARKER in self.raw_text.lower()
