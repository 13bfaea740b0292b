"""Tests for analysis.interpreter."""

from caseloom.analysis.extractor import extract_context
from caseloom.analysis.interpreter import interpret
from caseloom.analysis.models import Context


def _context(raw: str, **overrides) -> Context:
    values = {
        "features": ("Login",),
        "actors": ("User",),
        "inputs": (),
        "outputs": ("System Response",),
        "constraints": (),
        "raw_input": raw,
    }
    values.update(overrides)
    return Context(**values)


class TestRules:
    def test_constraints_come_first(self, upload_understanding):
        assert upload_understanding.rules == (
            "Max size: 10MB",
            "Authentication required",
        )

    def test_authenticated_keyword(self):
        understanding = interpret(_context("Only authenticated members"))
        assert "Authentication required" in understanding.rules

    def test_valid_keyword_includes_invalid(self):
        understanding = interpret(_context("Reject invalid codes"))
        assert understanding.rules == ("Input validation required",)

    def test_fallback_rule(self):
        understanding = interpret(_context("Show the dashboard"))
        assert understanding.rules == ("Standard validation rules apply",)


class TestAssumptions:
    def test_authentication_assumed_without_guest(self):
        understanding = interpret(_context("Members can search"))
        assert "User authentication is required" in understanding.assumptions

    def test_no_authentication_for_guests(self):
        understanding = interpret(_context("Guest checkout"))
        assert "User authentication is required" not in understanding.assumptions

    def test_no_authentication_for_anonymous(self):
        understanding = interpret(_context("Anonymous search"))
        assert understanding.assumptions == ()

    def test_upload_assumptions(self, upload_understanding):
        assert upload_understanding.assumptions == (
            "User authentication is required",
            "File type validation exists",
            "Virus scanning may be performed",
        )


class TestGaps:
    def test_all_gaps_for_plain_text(self, plain_description):
        understanding = interpret(extract_context(plain_description))
        assert understanding.gaps == (
            "Input specifications not provided",
            "Constraints not specified",
        )

    def test_no_gaps_when_signals_present(self, upload_understanding):
        assert upload_understanding.gaps == ()


class TestFeature:
    def test_primary_feature_is_first(self):
        understanding = interpret(_context("x", features=("Login", "Search")))
        assert understanding.feature == "Login"

    def test_default_feature_for_empty_features(self):
        understanding = interpret(_context("x", features=()))
        assert understanding.feature == "General Feature"

    def test_deterministic(self, upload_context):
        assert interpret(upload_context) == interpret(upload_context)
