"""Caseloom: turn free-text feature descriptions into designed test cases."""

from .pipeline import HistoryStore, Result, TestDesignPipeline, generate_from_description

__version__ = "0.1.0"

__all__ = [
    "HistoryStore",
    "Result",
    "TestDesignPipeline",
    "generate_from_description",
]
