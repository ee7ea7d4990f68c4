"""Pydantic models for grader configuration.

These models validate and type the JSON configuration file that controls
where the grader looks for a submission and how it parses it. The rubric
itself is fixed in code and is not part of the configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

DEFAULT_CANDIDATES = ["index.html", "main.html", "assignment.html"]


class GraderConfig(BaseModel):
    """Root configuration model."""

    candidate_filenames: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CANDIDATES),
        min_length=1,
        description="Submission filenames, searched in order; first existing wins",
    )
    parser_features: str = Field(
        default="html5lib",
        description="BeautifulSoup tree builder; html5lib adds implied html/head/body",
    )
    show_error_details: bool = Field(
        default=True,
        description="Print the predicate error message for errored checks",
    )

    @field_validator("candidate_filenames")
    @classmethod
    def _names_not_blank(cls, value: list[str]) -> list[str]:
        cleaned = [name.strip() for name in value]
        if any(not name for name in cleaned):
            raise ValueError("candidate filenames must not be blank")
        return cleaned
