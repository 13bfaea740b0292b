"""Output formatting for pipeline results."""

import json
from typing import TYPE_CHECKING, Literal

from ..modeling.state_graph import find_state_paths

if TYPE_CHECKING:
    from ..pipeline.models import Result


def format_result(result: "Result", format: Literal["text", "json"] = "text") -> str:
    """Format a pipeline result for output.

    Args:
        result: The result to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return json.dumps(result.to_dict(), indent=2)
    return _format_text(result)


def _format_list(title: str, items) -> list[str]:
    lines = [f"{title}:"]
    if items:
        lines.extend(f"  - {item}" for item in items)
    else:
        lines.append("  (none)")
    return lines


def _format_text(result: "Result") -> str:
    """Format result as a human-readable report."""
    context = result.context
    understanding = result.understanding
    models = result.models
    coverage = result.coverage

    lines: list[str] = [f"FEATURE: {understanding.feature}", ""]

    # Context
    lines.append(f"Actors: {', '.join(context.actors)}")
    lines.append(f"Inputs: {', '.join(context.inputs) or '(none)'}")
    lines.append(f"Outputs: {', '.join(context.outputs)}")
    lines.append("")

    # Understanding
    lines.extend(_format_list("RULES", understanding.rules))
    lines.extend(_format_list("ASSUMPTIONS", understanding.assumptions))
    lines.extend(_format_list("GAPS", understanding.gaps))
    lines.append("")

    # Models
    lines.append("STATE PATHS:")
    for path in find_state_paths(models.state_transitions):
        lines.append(f"  {' → '.join(path)}")
    boundaries = [
        f"{b.parameter} {b.min}-{b.max}{b.unit}: "
        + ", ".join(str(v) for v in b.test_values)
        for b in models.boundary_values
    ]
    lines.extend(_format_list("BOUNDARIES", boundaries))
    lines.append("")

    # Test cases
    lines.append("TEST CASES:")
    for tc in result.test_cases:
        lines.append(
            f"  {tc.id} [{tc.type.value}] {tc.title} "
            f"(priority {tc.priority.value}, risk {tc.risk.value})"
        )
    lines.append("")

    # Coverage
    lines.append(
        f"Coverage: {coverage.score}% "
        f"(functional {coverage.functional}, negative {coverage.negative}, "
        f"boundary {coverage.boundary}, security {coverage.security})"
    )
    lines.append(f"Risk: {coverage.risk.value}")
    if coverage.missing:
        lines.append(f"Missing: {', '.join(coverage.missing)}")
    lines.append(f"\nGenerated {coverage.total} test case(s)")

    return "\n".join(lines)
