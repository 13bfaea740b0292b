"""Generate injection-attack security tests."""

from ..analysis.models import Understanding
from .gherkin import build_behavior_script
from .models import CaseIdSequence, CaseType, Priority, RiskLevel, TestCase

SQL_INJECTION_PAYLOAD = "' OR '1'='1"
XSS_PAYLOAD = '<script>alert("XSS")</script>'


def generate_security_tests(
    next_id: CaseIdSequence, understanding: Understanding
) -> list[TestCase]:
    """Generate the SQL injection and XSS tests, in that order."""
    feature = understanding.feature

    sql_injection = TestCase(
        id=next_id(),
        title=f"{feature} - SQL Injection attempt",
        type=CaseType.SECURITY,
        priority=Priority.CRITICAL,
        risk=RiskLevel.CRITICAL,
        preconditions=understanding.assumptions,
        steps=(
            "Navigate to the feature",
            f"Enter SQL injection payload (e.g., {SQL_INJECTION_PAYLOAD})",
            "Submit the request",
            "Verify input is sanitized",
        ),
        expected_result="System sanitizes input and prevents SQL injection",
        behavior_script=build_behavior_script(
            "SQL injection prevention", feature, "malicious SQL", "sanitized"
        ),
    )

    xss = TestCase(
        id=next_id(),
        title=f"{feature} - XSS attack prevention",
        type=CaseType.SECURITY,
        priority=Priority.CRITICAL,
        risk=RiskLevel.CRITICAL,
        preconditions=understanding.assumptions,
        steps=(
            "Navigate to the feature",
            f"Enter XSS payload (e.g., {XSS_PAYLOAD})",
            "Submit the request",
            "Verify script is not executed",
        ),
        expected_result="System escapes HTML and prevents script execution",
        behavior_script=build_behavior_script(
            "XSS prevention", feature, "malicious script", "escaped"
        ),
    )

    return [sql_injection, xss]
