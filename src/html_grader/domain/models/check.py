"""Rubric check definitions and per-check results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from html_grader.domain.models.document import HtmlDocument

Predicate = Callable[["HtmlDocument"], bool]


@dataclass(frozen=True)
class Check:
    """A single named, weighted test against a parsed document."""

    name: str
    points: int
    predicate: Predicate

    def __post_init__(self) -> None:
        if self.points < 0:
            raise ValueError(f"Check '{self.name}' has negative points: {self.points}")


class CheckOutcome(str, Enum):
    """How a check's predicate ended."""

    PASSED = "passed"
    FAILED = "failed"  # Predicate returned something other than True
    ERRORED = "errored"  # Predicate raised


@dataclass(frozen=True)
class CheckResult:
    """Outcome of running one check once."""

    check: Check
    outcome: CheckOutcome
    points_awarded: int = 0
    failure_reason: str | None = None

    @property
    def name(self) -> str:
        return self.check.name

    @property
    def passed(self) -> bool:
        return self.outcome is CheckOutcome.PASSED

    @property
    def icon(self) -> str:
        return "✅" if self.passed else "❌"

    @classmethod
    def passing(cls, check: Check) -> CheckResult:
        return cls(check=check, outcome=CheckOutcome.PASSED, points_awarded=check.points)

    @classmethod
    def failing(cls, check: Check) -> CheckResult:
        return cls(check=check, outcome=CheckOutcome.FAILED)

    @classmethod
    def errored(cls, check: Check, reason: str) -> CheckResult:
        return cls(check=check, outcome=CheckOutcome.ERRORED, failure_reason=reason)
