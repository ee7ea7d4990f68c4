"""Port: Document parser — turn raw markup into a queryable document."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from html_grader.domain.models.document import HtmlDocument


class DocumentParserPort(ABC):
    """Contract for lenient HTML parsing.

    Implementations must accept merely-invalid markup without raising and
    only signal ``DocumentParseError`` for input they cannot read at all.
    """

    @abstractmethod
    def parse(
        self, markup: Union[bytes, str], source_path: Optional[Path] = None
    ) -> HtmlDocument:
        """Parse *markup* into an ``HtmlDocument``."""
        ...
