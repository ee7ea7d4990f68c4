"""Rubric engine — run every check against a document and score it.

Checks run one at a time, in declaration order. Each check yields exactly
one immutable ``CheckResult``; a predicate that raises is recorded as an
errored result and the remaining checks still run. Totals are computed
from the finished results, not tracked while the loop runs.
"""

from __future__ import annotations

import logging
from typing import Sequence

from html_grader.domain.models.check import Check, CheckResult
from html_grader.domain.models.document import HtmlDocument
from html_grader.domain.models.report import Report

logger = logging.getLogger(__name__)


def describe_exception(exc: Exception) -> str:
    """Human-readable, never-empty description of a predicate failure."""
    message = str(exc).strip()
    name = type(exc).__name__
    return f"{name}: {message}" if message else name


def run_check(document: HtmlDocument, check: Check) -> CheckResult:
    """Evaluate a single check in isolation."""
    try:
        outcome = check.predicate(document)
    except Exception as exc:
        reason = describe_exception(exc)
        logger.debug("Check %r raised: %s", check.name, reason)
        return CheckResult.errored(check, reason)

    if outcome is True:
        logger.debug("Check %r passed (%d points)", check.name, check.points)
        return CheckResult.passing(check)

    logger.debug("Check %r failed", check.name)
    return CheckResult.failing(check)


def evaluate(document: HtmlDocument, checks: Sequence[Check]) -> Report:
    """Run *checks* against *document* and return the scored ``Report``.

    Args:
        document: A successfully parsed submission. Never mutated.
        checks: The rubric, in the order results should be reported.

    Returns:
        A ``Report`` with one result per check, in the same order.
    """
    results = tuple(run_check(document, check) for check in checks)
    return Report(
        results=results,
        total_awarded=sum(r.points_awarded for r in results),
        total_possible=sum(c.points for c in checks),
    )
