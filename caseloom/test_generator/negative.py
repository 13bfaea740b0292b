"""Generate negative tests: invalid input and unauthorized access."""

from ..analysis.models import Understanding
from .gherkin import build_behavior_script
from .models import CaseIdSequence, CaseType, Priority, RiskLevel, TestCase


def generate_negative_tests(
    next_id: CaseIdSequence, understanding: Understanding
) -> list[TestCase]:
    """Generate the invalid-input and unauthorized-access tests, in that order."""
    feature = understanding.feature

    invalid_input = TestCase(
        id=next_id(),
        title=f"{feature} - Invalid input data",
        type=CaseType.NEGATIVE,
        priority=Priority.HIGH,
        risk=RiskLevel.MEDIUM,
        preconditions=understanding.assumptions,
        steps=(
            "Navigate to the feature",
            "Enter invalid input data",
            "Attempt to submit",
            "Verify error handling",
        ),
        expected_result="System displays appropriate error message and prevents invalid operation",
        behavior_script=build_behavior_script("Invalid input", feature, "invalid", "error"),
    )

    unauthorized = TestCase(
        id=next_id(),
        title=f"{feature} - Unauthorized access attempt",
        type=CaseType.NEGATIVE,
        priority=Priority.HIGH,
        risk=RiskLevel.HIGH,
        preconditions=("User is not authenticated",),
        steps=(
            "Attempt to access feature without authentication",
            "Verify access is denied",
        ),
        expected_result="System denies access and redirects to login or shows error",
        behavior_script=build_behavior_script(
            "Unauthorized access", feature, "unauthenticated", "denied"
        ),
    )

    return [invalid_input, unauthorized]
