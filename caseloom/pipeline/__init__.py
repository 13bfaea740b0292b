"""Pipeline orchestration and run history."""

from .history import HistoryStore
from .models import Result
from .runner import TestDesignPipeline, generate_from_description

__all__ = [
    "HistoryStore",
    "Result",
    "TestDesignPipeline",
    "generate_from_description",
]
