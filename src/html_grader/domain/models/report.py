"""Grading report — the complete, ordered output of one evaluation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from html_grader.domain.models.check import CheckOutcome, CheckResult


@dataclass(frozen=True)
class Report:
    """Ordered check results plus the aggregated score.

    Attributes:
        results: One result per check, in rubric order.
        total_awarded: Sum of ``points_awarded`` over *results*.
        total_possible: Sum of the points of every check in the rubric.
    """

    results: tuple[CheckResult, ...]
    total_awarded: int
    total_possible: int

    @property
    def percentage(self) -> float:
        """Score as a percentage; an empty rubric scores 0."""
        if self.total_possible == 0:
            return 0.0
        return self.total_awarded / self.total_possible * 100

    @property
    def rounded_percentage(self) -> int:
        """Percentage rounded half-up to the nearest integer."""
        return math.floor(self.percentage + 0.5)

    @property
    def is_perfect(self) -> bool:
        return self.total_possible > 0 and self.total_awarded == self.total_possible

    @property
    def passed_count(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed_count(self) -> int:
        return len(self.results) - self.passed_count

    @property
    def errored_count(self) -> int:
        return sum(1 for r in self.results if r.outcome is CheckOutcome.ERRORED)

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form of the report, suitable for JSON output."""
        return {
            "results": [
                {
                    "name": r.name,
                    "points": r.check.points,
                    "outcome": r.outcome.value,
                    "points_awarded": r.points_awarded,
                    "failure_reason": r.failure_reason,
                }
                for r in self.results
            ],
            "total_awarded": self.total_awarded,
            "total_possible": self.total_possible,
            "percentage": self.rounded_percentage,
            "perfect": self.is_perfect,
            "passed": self.passed_count,
            "failed": self.failed_count,
            "errored": self.errored_count,
        }
