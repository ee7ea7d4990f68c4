"""The fixed HTML assignment rubric.

Each check is a module-level predicate over an ``HtmlDocument`` plus a
row in ``RUBRIC``. The table is built once at import time and is never
modified; the engine in ``domain.services.engine`` knows nothing about
what any individual check tests.

Attribute rules differ between checks and are part of the graded
contract:

* images need a *non-empty* ``src`` and a *non-empty* ``alt``;
* links only need an ``href`` to be *present* (``href=""`` is fine).
"""

from __future__ import annotations

from html_grader.domain.models.check import Check
from html_grader.domain.models.document import HtmlDocument
from html_grader.domain.rules.constants import (
    FORMATTING_MINIMUMS,
    HEADING_MINIMUMS,
    LIST_MINIMUMS,
    MIN_IMAGES,
    MIN_LINKS,
    POINTS_FILE_EXISTS,
    POINTS_FORMATTING,
    POINTS_HEADINGS,
    POINTS_IMAGES,
    POINTS_LINKS,
    POINTS_LISTS,
    POINTS_SEMANTIC,
    POINTS_STRUCTURE,
    SEMANTIC_ELEMENTS,
    STRUCTURE_SELECTORS,
)


def _meets_minimums(document: HtmlDocument, minimums: dict[str, int]) -> bool:
    return all(document.count(tag) >= minimum for tag, minimum in minimums.items())


def _non_empty(value: object) -> bool:
    return isinstance(value, str) and len(value) > 0


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def file_exists(document: HtmlDocument) -> bool:
    """The document was read from a resolved submission file."""
    return document.source_path is not None


def valid_structure(document: HtmlDocument) -> bool:
    """Doctype plus html/head/body/title and a ``meta`` with ``charset``."""
    if not document.has_doctype():
        return False
    return all(document.select_one(selector) is not None for selector in STRUCTURE_SELECTORS)


def semantic_elements(document: HtmlDocument) -> bool:
    """All five semantic sectioning elements are used."""
    return all(document.find(tag) is not None for tag in SEMANTIC_ELEMENTS)


def images_well_formed(document: HtmlDocument) -> bool:
    """Enough images, each with a non-empty ``src`` and ``alt``."""
    images = document.find_all("img")
    if len(images) < MIN_IMAGES:
        return False
    return all(_non_empty(img.get("src")) and _non_empty(img.get("alt")) for img in images)


def links_well_formed(document: HtmlDocument) -> bool:
    """Enough anchors, each carrying an ``href`` attribute."""
    links = document.find_all("a")
    if len(links) < MIN_LINKS:
        return False
    return all(link.has_attr("href") for link in links)


def heading_hierarchy(document: HtmlDocument) -> bool:
    return _meets_minimums(document, HEADING_MINIMUMS)


def lists_present(document: HtmlDocument) -> bool:
    return _meets_minimums(document, LIST_MINIMUMS)


def text_formatting(document: HtmlDocument) -> bool:
    return _meets_minimums(document, FORMATTING_MINIMUMS)


# ---------------------------------------------------------------------------
# Rubric table
# ---------------------------------------------------------------------------

RUBRIC: tuple[Check, ...] = (
    Check("HTML file exists", POINTS_FILE_EXISTS, file_exists),
    Check("Valid HTML structure", POINTS_STRUCTURE, valid_structure),
    Check("Semantic HTML elements", POINTS_SEMANTIC, semantic_elements),
    Check("Images with proper attributes", POINTS_IMAGES, images_well_formed),
    Check("Links with href attributes", POINTS_LINKS, links_well_formed),
    Check("Proper heading hierarchy", POINTS_HEADINGS, heading_hierarchy),
    Check("Lists (ordered and unordered)", POINTS_LISTS, lists_present),
    Check("Text formatting elements", POINTS_FORMATTING, text_formatting),
)

TOTAL_POSSIBLE: int = sum(check.points for check in RUBRIC)
