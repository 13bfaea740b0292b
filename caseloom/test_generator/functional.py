"""Generate happy-path functional tests."""

from ..analysis.models import Understanding
from .gherkin import build_behavior_script
from .models import CaseIdSequence, CaseType, Priority, RiskLevel, TestCase


def generate_functional_tests(
    next_id: CaseIdSequence, understanding: Understanding
) -> list[TestCase]:
    """Generate the single happy-path test for the primary feature."""
    feature = understanding.feature

    return [
        TestCase(
            id=next_id(),
            title=f"{feature} - Valid scenario (Happy Path)",
            type=CaseType.FUNCTIONAL,
            priority=Priority.HIGH,
            risk=RiskLevel.HIGH,
            preconditions=understanding.assumptions,
            steps=(
                "Navigate to the feature",
                "Enter valid input data",
                "Submit the request",
                "Verify successful completion",
            ),
            expected_result="Operation completes successfully with appropriate confirmation",
            behavior_script=build_behavior_script("Valid scenario", feature, "valid", "success"),
        )
    ]
