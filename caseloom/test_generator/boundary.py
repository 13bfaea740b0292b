"""Generate boundary-value tests."""

from ..analysis.models import Understanding
from ..modeling.models import BoundarySpec
from .gherkin import build_behavior_script
from .models import CaseIdSequence, CaseType, Priority, RiskLevel, TestCase


def generate_boundary_tests(
    next_id: CaseIdSequence,
    boundaries: tuple[BoundarySpec, ...],
    understanding: Understanding,
) -> list[TestCase]:
    """Generate one test per test value of every BoundarySpec.

    IDs continue the run-wide sequence, so they stay unique however many
    test values a spec carries.
    """
    test_cases = []
    feature = understanding.feature

    for boundary in boundaries:
        for value in boundary.test_values:
            valid = boundary.is_valid(value)
            amount = f"{value}{boundary.unit}"

            if valid:
                expected = "Operation succeeds"
            else:
                expected = f"System rejects with error: {boundary.parameter} out of range"

            test_cases.append(
                TestCase(
                    id=next_id(),
                    title=f"{feature} - {boundary.parameter} = {amount}",
                    type=CaseType.BOUNDARY,
                    priority=Priority.MEDIUM,
                    risk=RiskLevel.MEDIUM,
                    preconditions=understanding.assumptions,
                    steps=(
                        f"Set {boundary.parameter} to {amount}",
                        "Submit the request",
                        "Verify system response",
                    ),
                    expected_result=expected,
                    behavior_script=build_behavior_script(
                        f"Boundary test {amount}",
                        feature,
                        f"{boundary.parameter} is {amount}",
                        "success" if valid else "error",
                    ),
                )
            )

    return test_cases
