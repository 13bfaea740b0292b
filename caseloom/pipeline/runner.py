"""Pipeline orchestrator chaining the analysis and generation stages."""

import logging
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone

from ..analysis.extractor import extract_context
from ..analysis.interpreter import interpret
from ..coverage.validator import validate_coverage
from ..modeling.builder import build_models
from ..output.exporter import export_test_cases
from ..schema.loader import parse_request, parse_request_data
from ..schema.models import GenerationRequest
from ..test_generator.generator import generate_test_cases
from ..test_generator.models import TestCase
from .history import HistoryStore
from .models import Result

logger = logging.getLogger(__name__)


class TestDesignPipeline:
    """Runs requests through extraction, interpretation, modeling,
    generation and coverage validation, recording each result.

    The history store is injected so its lifetime belongs to the caller.
    """

    __test__ = False  # not a pytest class

    def __init__(self, history: HistoryStore | None = None):
        self.history = history if history is not None else HistoryStore()

    def run(self, request: GenerationRequest | Mapping) -> Result:
        """Run the full pipeline for one request.

        Args:
            request: A GenerationRequest, or raw request data to validate.

        Returns:
            The complete Result, already appended to history.

        Raises:
            RequestValidationError: If the request is malformed. Raised
                before any stage runs.
        """
        if not isinstance(request, GenerationRequest):
            request = parse_request_data(dict(request))

        try:
            context = extract_context(request.description)
            understanding = interpret(context)
            models = build_models(understanding)
            test_cases = generate_test_cases(
                models, understanding, context, request.options
            )
            coverage = validate_coverage(test_cases, models)
        except Exception:
            logger.exception("Test generation failed")
            raise

        result = Result(
            timestamp=datetime.now(timezone.utc),
            input=request.description,
            context=context,
            understanding=understanding,
            models=models,
            test_cases=tuple(test_cases),
            coverage=coverage,
        )
        self.history.append(result)

        logger.info(
            "Generated %d test case(s) for '%s' (coverage %d%%)",
            coverage.total,
            understanding.feature,
            coverage.score,
        )
        return result

    def run_file(self, path: str) -> Result:
        """Load a YAML request file and run it."""
        return self.run(parse_request(path))

    def export(self, test_cases: Sequence[TestCase], format: str | None) -> str:
        """Serialize test cases; unknown formats fall back to JSON."""
        return export_test_cases(test_cases, format)

    def list_history(self) -> tuple[Result, ...]:
        """All results recorded so far, oldest first."""
        return self.history.snapshot()

    def total_test_cases(self) -> int:
        """Test cases generated by every run recorded so far."""
        return self.history.total_test_cases()


def generate_from_description(description: str, **options: bool) -> Result:
    """Run a one-off pipeline for a description.

    Convenience wrapper with a private history store. Options use the
    snake_case flag names, e.g. ``include_security=False``.
    """
    pipeline = TestDesignPipeline()
    return pipeline.run({"description": description, "options": options})
