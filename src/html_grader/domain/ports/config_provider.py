"""Port: Configuration provider — supply grader configuration."""

from abc import ABC, abstractmethod
from typing import Any


class ConfigProviderPort(ABC):
    """Contract for providing configuration to the application.

    The concrete return type is ``Any`` at the domain level; the config
    package's ``GraderConfig`` provides the typed contract. This keeps the
    domain free of Pydantic model dependencies.
    """

    @abstractmethod
    def get_config(self) -> Any:
        """Return the current grader configuration object."""
        ...
