"""Rubric constants for the HTML assignment.

Point values and hard cutoffs used by the fixed rubric. A threshold is a
minimum count (``>=``); there is no proportional scoring.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Point values (sum to 100)
# ---------------------------------------------------------------------------

POINTS_FILE_EXISTS = 5
POINTS_STRUCTURE = 10
POINTS_SEMANTIC = 25
POINTS_IMAGES = 15
POINTS_LINKS = 10
POINTS_HEADINGS = 15
POINTS_LISTS = 10
POINTS_FORMATTING = 10

# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------

DOCTYPE_MARKER = "<!doctype html>"
STRUCTURE_SELECTORS: tuple[str, ...] = ("html", "head", "body", "title", "meta[charset]")

SEMANTIC_ELEMENTS: tuple[str, ...] = ("header", "article", "aside", "footer", "nav")

# ---------------------------------------------------------------------------
# Minimum element counts
# ---------------------------------------------------------------------------

MIN_IMAGES = 4
MIN_LINKS = 4

# Tag -> minimum count
HEADING_MINIMUMS: dict[str, int] = {"h1": 1, "h2": 1, "h3": 2, "h4": 1}
LIST_MINIMUMS: dict[str, int] = {"ol": 1, "ul": 2}
FORMATTING_MINIMUMS: dict[str, int] = {"strong": 4, "em": 1}
