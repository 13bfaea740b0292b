"""Analysis stages: context extraction and requirement interpretation."""

from .extractor import extract_context
from .interpreter import interpret
from .keywords import KeywordRule
from .models import Context, Understanding

__all__ = [
    "Context",
    "KeywordRule",
    "Understanding",
    "extract_context",
    "interpret",
]
