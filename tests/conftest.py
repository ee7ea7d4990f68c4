"""Shared fixtures: a submission that earns full marks, and helpers to parse it."""

from __future__ import annotations

from pathlib import Path

import pytest

from html_grader.domain.models import HtmlDocument
from html_grader.infrastructure.parsers.soup_parser import SoupDocumentParser

PERFECT_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>My Portfolio</title>
</head>
<body>
  <header>
    <h1>My Portfolio</h1>
    <nav>
      <ul>
        <li><a href="#about">About</a></li>
        <li><a href="#work">Work</a></li>
        <li><a href="">Blog</a></li>
        <li><a href="mailto:me@example.com">Contact</a></li>
      </ul>
    </nav>
  </header>
  <article>
    <h2>About me</h2>
    <p>I am a <strong>student</strong> who likes <em>clean</em> markup.</p>
    <h3>Skills</h3>
    <ul>
      <li><strong>HTML</strong></li>
      <li><strong>CSS</strong></li>
    </ul>
    <h3>Process</h3>
    <ol>
      <li>Plan</li>
      <li>Build</li>
    </ol>
    <h4>Gallery</h4>
    <img src="one.png" alt="First project">
    <img src="two.png" alt="Second project">
    <img src="three.png" alt="Third project">
    <img src="four.png" alt="Fourth project">
  </article>
  <aside><p><strong>Tip:</strong> view the source.</p></aside>
  <footer><p>&copy; 2024 Student</p></footer>
</body>
</html>
"""

# Same page with the last image removed: only the image check fails.
THREE_IMAGES_HTML = PERFECT_HTML.replace('    <img src="four.png" alt="Fourth project">\n', "")


@pytest.fixture()
def parser() -> SoupDocumentParser:
    return SoupDocumentParser()


@pytest.fixture()
def make_document(parser):
    """Parse markup as if it had been read from ``index.html``."""

    def _make(markup: str, source_path: Path | None = Path("index.html")) -> HtmlDocument:
        return parser.parse(markup, source_path=source_path)

    return _make


@pytest.fixture()
def perfect_document(make_document) -> HtmlDocument:
    return make_document(PERFECT_HTML)


@pytest.fixture()
def submission_dir(tmp_path: Path) -> Path:
    """A directory holding a perfect ``index.html``."""
    (tmp_path / "index.html").write_text(PERFECT_HTML, encoding="utf-8")
    return tmp_path


@pytest.fixture()
def perfect_html() -> str:
    return PERFECT_HTML


@pytest.fixture()
def three_images_html() -> str:
    return THREE_IMAGES_HTML
