"""BeautifulSoup document parser — implements DocumentParserPort.

Bytes are decoded with ``UnicodeDammit`` in HTML mode, so a charset
declared inside the document wins over guessing. Parsing itself is
lenient: unclosed or misnested tags never raise.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from bs4 import BeautifulSoup, FeatureNotFound
from bs4.builder import ParserRejectedMarkup
from bs4.dammit import UnicodeDammit

from html_grader.domain.errors import DocumentParseError
from html_grader.domain.models.document import HtmlDocument
from html_grader.domain.ports.document_parser import DocumentParserPort

logger = logging.getLogger(__name__)


class SoupDocumentParser(DocumentParserPort):
    """Parse submissions with BeautifulSoup.

    Parameters
    ----------
    features : str
        Tree builder passed to ``BeautifulSoup`` (``html5lib`` by default, which
        builds the implied ``html``, ``head`` and ``body`` elements).
    """

    def __init__(self, features: str = "html5lib") -> None:
        self._features = features

    @property
    def features(self) -> str:
        return self._features

    def parse(
        self, markup: Union[bytes, str], source_path: Optional[Path] = None
    ) -> HtmlDocument:
        text = self._decode(markup) if isinstance(markup, bytes) else markup

        try:
            tree = BeautifulSoup(text, self._features)
        except FeatureNotFound as exc:
            raise DocumentParseError(
                f"HTML parser '{self._features}' is not installed"
            ) from exc
        except ParserRejectedMarkup as exc:
            raise DocumentParseError(f"Markup rejected by parser: {exc}") from exc

        return HtmlDocument(raw_text=text, tree=tree, source_path=source_path)

    def _decode(self, data: bytes) -> str:
        if not data:
            return ""
        dammit = UnicodeDammit(data, is_html=True)
        if dammit.unicode_markup is None:
            raise DocumentParseError("Could not determine the document's text encoding")
        logger.debug("Decoded submission as %s", dammit.original_encoding)
        return dammit.unicode_markup
