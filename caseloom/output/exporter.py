"""Serialize test case lists into shareable text formats."""

import csv
import io
import json
import logging
from collections.abc import Sequence
from enum import Enum

from ..test_generator.models import TestCase

logger = logging.getLogger(__name__)


class ExportFormat(str, Enum):
    """Supported export formats."""

    JSON = "json"
    GHERKIN = "gherkin"
    MARKDOWN = "markdown"
    CSV = "csv"


FORMAT_ALIASES = {
    "structured-data": ExportFormat.JSON,
    "behavior-scenario": ExportFormat.GHERKIN,
    "table-document": ExportFormat.MARKDOWN,
    "tabular-text": ExportFormat.CSV,
}

SCENARIO_SEPARATOR = "\n\n---\n\n"

CSV_HEADERS = [
    "ID",
    "Title",
    "Type",
    "Priority",
    "Risk",
    "Preconditions",
    "Steps",
    "Expected Result",
]


def resolve_format(name: str | None) -> ExportFormat:
    """Map a format name or alias to an ExportFormat, defaulting to JSON."""
    if not name:
        return ExportFormat.JSON

    key = name.strip().lower()
    if key in FORMAT_ALIASES:
        return FORMAT_ALIASES[key]
    try:
        return ExportFormat(key)
    except ValueError:
        logger.debug("Unknown export format '%s', using json", name)
        return ExportFormat.JSON


def export_test_cases(test_cases: Sequence[TestCase], format: str | None = "json") -> str:
    """Serialize test cases in the requested format.

    Args:
        test_cases: Cases to serialize.
        format: A format name (``json``, ``gherkin``, ``markdown``, ``csv``)
            or alias. Unknown names produce JSON.

    Returns:
        The serialized text. Identical inputs give identical output.
    """
    fmt = resolve_format(format)

    if fmt == ExportFormat.GHERKIN:
        return _export_gherkin(test_cases)
    if fmt == ExportFormat.MARKDOWN:
        return _export_markdown(test_cases)
    if fmt == ExportFormat.CSV:
        return _export_csv(test_cases)
    return _export_json(test_cases)


def _export_json(test_cases: Sequence[TestCase]) -> str:
    return json.dumps([tc.to_dict() for tc in test_cases], indent=2)


def _export_gherkin(test_cases: Sequence[TestCase]) -> str:
    return SCENARIO_SEPARATOR.join(tc.behavior_script for tc in test_cases)


def _export_markdown(test_cases: Sequence[TestCase]) -> str:
    """Render one section per case under a single top-level heading."""
    lines = ["# Test Cases", ""]

    for tc in test_cases:
        lines.append(f"## {tc.id}: {tc.title}")
        lines.append("")
        lines.append(f"**Type:** {tc.type.value}  ")
        lines.append(f"**Priority:** {tc.priority.value}  ")
        lines.append(f"**Risk:** {tc.risk.value}  ")
        lines.append("")
        lines.append("**Preconditions:**")
        lines.extend(f"- {pre}" for pre in tc.preconditions)
        lines.append("")
        lines.append("**Steps:**")
        lines.extend(f"{idx}. {step}" for idx, step in enumerate(tc.steps, start=1))
        lines.append("")
        lines.append(f"**Expected Result:** {tc.expected_result}")
        lines.append("")
        lines.append("---")
        lines.append("")

    return "\n".join(lines) + "\n"


def _export_csv(test_cases: Sequence[TestCase]) -> str:
    """Header row plus one fully quoted row per case.

    List fields are joined with ``; ``.
    """
    output = io.StringIO()
    output.write(",".join(CSV_HEADERS) + "\n")

    writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for tc in test_cases:
        writer.writerow(
            [
                tc.id,
                tc.title,
                tc.type.value,
                tc.priority.value,
                tc.risk.value,
                "; ".join(tc.preconditions),
                "; ".join(tc.steps),
                tc.expected_result,
            ]
        )

    return output.getvalue()
