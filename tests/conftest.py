"""Shared fixtures for tests."""

import pytest

from caseloom.analysis.extractor import extract_context
from caseloom.analysis.interpreter import interpret
from caseloom.modeling.builder import build_models
from caseloom.pipeline.history import HistoryStore
from caseloom.pipeline.runner import TestDesignPipeline
from caseloom.test_generator.generator import generate_test_cases


@pytest.fixture
def upload_description() -> str:
    """A description that triggers every test category."""
    return (
        "Logged in users can upload .pdf and .png files up to 10MB. "
        "Show an error on failure and a success message otherwise."
    )


@pytest.fixture
def plain_description() -> str:
    """A description with no recognizable signals."""
    return "Show the dashboard"


@pytest.fixture
def upload_context(upload_description):
    return extract_context(upload_description)


@pytest.fixture
def upload_understanding(upload_context):
    return interpret(upload_context)


@pytest.fixture
def upload_models(upload_understanding):
    return build_models(upload_understanding)


@pytest.fixture
def upload_cases(upload_models, upload_understanding, upload_context):
    return generate_test_cases(upload_models, upload_understanding, upload_context)


@pytest.fixture
def history() -> HistoryStore:
    return HistoryStore()


@pytest.fixture
def pipeline(history) -> TestDesignPipeline:
    return TestDesignPipeline(history)
