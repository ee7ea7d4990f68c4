"""JSON config provider — implements ConfigProviderPort.

Wraps ``html_grader.config.loader`` and turns loader failures into
``ConfigurationError``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from html_grader.domain.errors import ConfigurationError
from html_grader.domain.ports.config_provider import ConfigProviderPort


class JsonConfigProvider(ConfigProviderPort):
    """Load grader configuration from JSON files, lazily."""

    def __init__(self, config_path: str | Path | None = None) -> None:
        self._config_path = Path(config_path) if config_path else None
        self._config: Any = None

    def get_config(self) -> Any:
        """Return the current configuration, loading it on first access."""
        if self._config is None:
            from html_grader.config.loader import load_config

            try:
                self._config = load_config(self._config_path)
            except FileNotFoundError as exc:
                raise ConfigurationError(str(exc)) from exc
            except json.JSONDecodeError as exc:
                raise ConfigurationError(f"Config file is not valid JSON: {exc}") from exc
            except ValidationError as exc:
                raise ConfigurationError(
                    f"Invalid configuration ({exc.error_count()} error(s))"
                ) from exc
        return self._config
