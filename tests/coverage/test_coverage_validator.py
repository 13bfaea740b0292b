"""Tests for coverage.validator."""

from dataclasses import replace

from caseloom.coverage.validator import (
    assess_risk,
    calculate_coverage_score,
    identify_missing_coverage,
    validate_coverage,
)
from caseloom.test_generator.models import CaseType, RiskLevel


class TestCoverageScore:
    def test_all_categories(self, upload_cases):
        assert calculate_coverage_score(upload_cases) == 100

    def test_presence_not_volume(self, upload_cases):
        functional = upload_cases[0]
        assert calculate_coverage_score([functional] * 10) == 30

    def test_without_boundary(self, upload_cases):
        cases = [tc for tc in upload_cases if tc.type != CaseType.BOUNDARY]
        assert calculate_coverage_score(cases) == 80

    def test_empty(self):
        assert calculate_coverage_score([]) == 0


class TestMissingCoverage:
    def test_performance_and_concurrency_always_flagged(self, upload_cases, upload_models):
        assert identify_missing_coverage(upload_cases, upload_models) == [
            "Performance tests",
            "Concurrency tests",
        ]

    def test_concurrent_title_satisfies_concurrency(self, upload_cases):
        cases = [replace(upload_cases[0], title="Upload - concurrent uploads")]
        assert identify_missing_coverage(cases) == ["Performance tests"]


class TestAssessRisk:
    def test_any_critical_is_high(self, upload_cases):
        security = [tc for tc in upload_cases if tc.risk == RiskLevel.CRITICAL][:1]
        low = [replace(upload_cases[0], risk=RiskLevel.LOW)] * 20

        assert assess_risk(security + low) == RiskLevel.HIGH

    def test_more_than_three_high_is_medium(self, upload_cases):
        high = replace(upload_cases[0], risk=RiskLevel.HIGH)

        assert assess_risk([high] * 4) == RiskLevel.MEDIUM
        assert assess_risk([high] * 3) == RiskLevel.LOW

    def test_empty_is_low(self):
        assert assess_risk([]) == RiskLevel.LOW


class TestValidateCoverage:
    def test_counts(self, upload_cases, upload_models):
        coverage = validate_coverage(upload_cases, upload_models)

        assert coverage.functional == 1
        assert coverage.negative == 2
        assert coverage.boundary == 5
        assert coverage.security == 2
        assert coverage.total == len(upload_cases)
        assert coverage.score == 100
        assert coverage.risk == RiskLevel.HIGH

    def test_to_dict(self, upload_cases, upload_models):
        data = validate_coverage(upload_cases, upload_models).to_dict()

        assert data["risk"] == "High"
        assert data["missing"] == ["Performance tests", "Concurrency tests"]
