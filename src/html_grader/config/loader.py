"""Read ``GraderConfig`` from JSON.

The built-in ``grader_default.json`` mirrors the model defaults; an
instructor can copy it with ``html-grader config init`` and point
``--config`` at the edited file. Each file is validated once and the
result kept for the rest of the run.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from html_grader.config.models import GraderConfig

# Resolved file path -> validated config
_config_cache: dict[str, GraderConfig] = {}

DEFAULT_CONFIG_PATH = Path(__file__).parent / "grader_default.json"


def load_config(path: Optional[Path] = None) -> GraderConfig:
    """Return the validated config stored at *path*.

    Parameters
    ----------
    path : Path | None
        Grader config file; ``None`` selects ``grader_default.json``.

    Returns
    -------
    GraderConfig
        The same instance on every call for the same resolved path.

    Raises
    ------
    FileNotFoundError
        *path* does not exist.
    json.JSONDecodeError
        The file is not JSON.
    pydantic.ValidationError
        The JSON does not describe a ``GraderConfig``.
    """
    config_path = Path(path) if path else DEFAULT_CONFIG_PATH
    cache_key = str(config_path.resolve())

    cached = _config_cache.get(cache_key)
    if cached is not None:
        return cached

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    raw = json.loads(config_path.read_text(encoding="utf-8"))
    config = GraderConfig.model_validate(raw)
    _config_cache[cache_key] = config
    return config


def get_config() -> GraderConfig:
    """Config from the built-in ``grader_default.json``."""
    return load_config()


def clear_cache() -> None:
    """Forget every loaded config so the next call re-reads its file."""
    _config_cache.clear()
