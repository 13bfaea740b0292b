"""Coverage scoring, gap detection and risk assessment."""

import logging
from collections.abc import Sequence

from ..modeling.models import DesignModels
from ..test_generator.models import CaseType, RiskLevel, TestCase
from .models import Coverage

logger = logging.getLogger(__name__)

# Percentage points awarded for having at least one case of the type
CATEGORY_WEIGHTS = {
    CaseType.FUNCTIONAL: 30,
    CaseType.NEGATIVE: 30,
    CaseType.BOUNDARY: 20,
    CaseType.SECURITY: 20,
}

# A risk level of Medium needs more than this many High-risk cases
HIGH_RISK_THRESHOLD = 3


def count_type(test_cases: Sequence[TestCase], case_type: str) -> int:
    """Count cases whose type value equals ``case_type``."""
    return sum(1 for tc in test_cases if tc.type.value == case_type)


def calculate_coverage_score(test_cases: Sequence[TestCase]) -> int:
    """Presence-weighted score: each represented category adds its weight."""
    return sum(
        weight
        for case_type, weight in CATEGORY_WEIGHTS.items()
        if count_type(test_cases, case_type.value) > 0
    )


def identify_missing_coverage(
    test_cases: Sequence[TestCase], models: DesignModels | None = None
) -> list[str]:
    """List coverage categories with no representative test case."""
    missing = []

    # Never generated, so always reported
    if count_type(test_cases, "Performance") == 0:
        missing.append("Performance tests")

    if not any("concurrent" in tc.title for tc in test_cases):
        missing.append("Concurrency tests")

    return missing


def assess_risk(test_cases: Sequence[TestCase]) -> RiskLevel:
    """Overall risk of the feature under test.

    High if any case is Critical-risk, Medium if more than three cases are
    High-risk, otherwise Low.
    """
    critical_count = sum(1 for tc in test_cases if tc.risk == RiskLevel.CRITICAL)
    high_count = sum(1 for tc in test_cases if tc.risk == RiskLevel.HIGH)

    if critical_count > 0:
        return RiskLevel.HIGH
    if high_count > HIGH_RISK_THRESHOLD:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def validate_coverage(
    test_cases: Sequence[TestCase], models: DesignModels | None = None
) -> Coverage:
    """Assess the coverage of a generated test case list.

    Args:
        test_cases: The generated test cases.
        models: The design models the cases were generated from.

    Returns:
        Coverage with ``total == len(test_cases)``.
    """
    coverage = Coverage(
        functional=count_type(test_cases, CaseType.FUNCTIONAL.value),
        negative=count_type(test_cases, CaseType.NEGATIVE.value),
        boundary=count_type(test_cases, CaseType.BOUNDARY.value),
        security=count_type(test_cases, CaseType.SECURITY.value),
        total=len(test_cases),
        score=calculate_coverage_score(test_cases),
        missing=tuple(identify_missing_coverage(test_cases, models)),
        risk=assess_risk(test_cases),
    )
    logger.debug("Coverage score %d%%, risk %s", coverage.score, coverage.risk.value)
    return coverage
