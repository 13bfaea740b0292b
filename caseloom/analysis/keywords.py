"""Declarative keyword tables used by the analysis stages.

Each table is evaluated in order, so the order of labels in a Context
follows the order of the table, not the order of words in the text.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class KeywordRule:
    """Maps any of several keywords to a canonical label."""

    keywords: tuple[str, ...]
    label: str

    def matches(self, text: str) -> bool:
        """Case-insensitive substring match against any keyword."""
        lowered = text.lower()
        return any(keyword in lowered for keyword in self.keywords)


def _titled(*words: str) -> tuple[KeywordRule, ...]:
    return tuple(KeywordRule((word,), word.capitalize()) for word in words)


FEATURE_RULES = _titled(
    "login",
    "upload",
    "download",
    "register",
    "reset",
    "search",
    "filter",
    "payment",
    "checkout",
    "profile",
)

ACTOR_RULES = _titled("user", "admin", "customer", "guest", "visitor", "member")

INPUT_RULES = (
    KeywordRule(("email",), "Email"),
    KeywordRule(("password",), "Password"),
    KeywordRule(("phone",), "Phone Number"),
)

OUTPUT_RULES = (
    KeywordRule(("error", "fail"), "Error Message"),
    KeywordRule(("success",), "Success Message"),
    KeywordRule(("redirect",), "Page Redirect"),
    KeywordRule(("email",), "Email Notification"),
)

DEFAULT_FEATURES = ("General Functionality",)
DEFAULT_ACTORS = ("User",)
DEFAULT_OUTPUTS = ("System Response",)

FILE_TYPE_PATTERN = re.compile(r"\.(jpg|png|pdf|doc|csv|xml|json)", re.IGNORECASE)
SIZE_PATTERN = re.compile(r"\d+\s*(?:mb|kb|gb)", re.IGNORECASE)
NUMBER_PATTERN = re.compile(r"\d+")

AUTH_RULE = KeywordRule(("authenticated", "logged in"), "Authentication required")
VALIDATION_RULE = KeywordRule(("valid",), "Input validation required")
ANONYMOUS_RULE = KeywordRule(("guest", "anonymous"), "Anonymous access")


def match_labels(rules: tuple[KeywordRule, ...], text: str) -> list[str]:
    """Return the labels of all matching rules, in table order."""
    return [rule.label for rule in rules if rule.matches(text)]
