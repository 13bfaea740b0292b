"""Test case generation from design models."""

from .generator import generate_test_cases
from .models import CaseIdSequence, CaseType, Priority, RiskLevel, TestCase, format_case_id

__all__ = [
    "generate_test_cases",
    "CaseIdSequence",
    "CaseType",
    "Priority",
    "RiskLevel",
    "TestCase",
    "format_case_id",
]
