"""Grader configuration package."""

from html_grader.config.loader import get_config, load_config
from html_grader.config.models import GraderConfig

__all__ = ["GraderConfig", "get_config", "load_config"]
