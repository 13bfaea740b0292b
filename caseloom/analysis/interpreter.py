"""Derive business rules, assumptions and gaps from a Context."""

import logging

from .keywords import ANONYMOUS_RULE, AUTH_RULE, VALIDATION_RULE
from .models import Context, Understanding

logger = logging.getLogger(__name__)

DEFAULT_FEATURE = "General Feature"
DEFAULT_RULES = ("Standard validation rules apply",)

AUTH_ASSUMPTION = "User authentication is required"
UPLOAD_ASSUMPTIONS = ("File type validation exists", "Virus scanning may be performed")


def extract_business_rules(context: Context) -> list[str]:
    """Constraints first, then rules implied by keywords in the raw text."""
    rules = list(context.constraints)

    for rule in (AUTH_RULE, VALIDATION_RULE):
        if rule.matches(context.raw_input):
            rules.append(rule.label)

    return rules or list(DEFAULT_RULES)


def make_assumptions(context: Context) -> list[str]:
    assumptions = []

    if not ANONYMOUS_RULE.matches(context.raw_input):
        assumptions.append(AUTH_ASSUMPTION)

    if any("upload" in feature.lower() for feature in context.features):
        assumptions.extend(UPLOAD_ASSUMPTIONS)

    return assumptions


def identify_gaps(context: Context) -> list[str]:
    gaps = []

    if not context.inputs:
        gaps.append("Input specifications not provided")

    if not context.constraints:
        gaps.append("Constraints not specified")

    return gaps


def interpret(context: Context) -> Understanding:
    """Build an Understanding from an extracted Context.

    Args:
        context: The extracted Context.

    Returns:
        The inferred Understanding. Deterministic for a given Context.
    """
    understanding = Understanding(
        feature=context.features[0] if context.features else DEFAULT_FEATURE,
        rules=tuple(extract_business_rules(context)),
        assumptions=tuple(make_assumptions(context)),
        gaps=tuple(identify_gaps(context)),
    )
    logger.debug(
        "Interpreted '%s': %d rule(s), %d gap(s)",
        understanding.feature,
        len(understanding.rules),
        len(understanding.gaps),
    )
    return understanding
