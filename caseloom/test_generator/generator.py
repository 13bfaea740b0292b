"""Main test case generation orchestrator."""

import logging

from ..analysis.models import Context, Understanding
from ..modeling.models import DesignModels
from ..schema.models import GenerationOptions
from .boundary import generate_boundary_tests
from .functional import generate_functional_tests
from .models import CaseIdSequence, TestCase
from .negative import generate_negative_tests
from .security import generate_security_tests

logger = logging.getLogger(__name__)


def generate_test_cases(
    models: DesignModels,
    understanding: Understanding,
    context: Context,
    options: GenerationOptions | None = None,
) -> list[TestCase]:
    """Generate the ordered test case list for one run.

    Categories are emitted in a fixed order and share one ID sequence:
    - Functional (always)
    - Negative (unless disabled)
    - Boundary (when the models carry boundary specs, unless disabled)
    - Security (unless disabled)

    Args:
        models: Test design models for the run.
        understanding: The interpreted requirements.
        context: The extracted context.
        options: Category flags; all categories are enabled when omitted.

    Returns:
        Test cases in generation order with strictly increasing IDs.
    """
    options = options or GenerationOptions()
    next_id = CaseIdSequence()
    test_cases: list[TestCase] = []

    test_cases.extend(generate_functional_tests(next_id, understanding))

    if options.include_negative:
        test_cases.extend(generate_negative_tests(next_id, understanding))

    if options.include_boundary and models.boundary_values:
        test_cases.extend(
            generate_boundary_tests(next_id, models.boundary_values, understanding)
        )

    if options.include_security:
        test_cases.extend(generate_security_tests(next_id, understanding))

    logger.debug(
        "Generated %d test case(s) for '%s' (%d input signal(s))",
        len(test_cases),
        understanding.feature,
        len(context.inputs),
    )
    return test_cases
