"""Port: Source resolver — locate and read the submitted HTML file."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Sequence


class SourceResolverPort(ABC):
    """Contract for finding the submission among candidate filenames."""

    @property
    @abstractmethod
    def directory(self) -> Path:
        """Directory the candidates are looked up in."""
        ...

    @abstractmethod
    def resolve(self, candidates: Sequence[str]) -> Optional[Path]:
        """Return the first candidate that exists, or ``None`` if none do."""
        ...

    @abstractmethod
    def read(self, path: Path) -> bytes:
        """Return the raw bytes of a resolved submission."""
        ...
