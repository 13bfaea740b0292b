"""Coverage validation for generated test cases."""

from .models import Coverage
from .validator import (
    assess_risk,
    calculate_coverage_score,
    identify_missing_coverage,
    validate_coverage,
)

__all__ = [
    "Coverage",
    "assess_risk",
    "calculate_coverage_score",
    "identify_missing_coverage",
    "validate_coverage",
]
