"""Extract a Context from raw feature text."""

import logging
import re

from .keywords import (
    ACTOR_RULES,
    DEFAULT_ACTORS,
    DEFAULT_FEATURES,
    DEFAULT_OUTPUTS,
    FEATURE_RULES,
    FILE_TYPE_PATTERN,
    INPUT_RULES,
    NUMBER_PATTERN,
    OUTPUT_RULES,
    SIZE_PATTERN,
    match_labels,
)
from .models import Context

logger = logging.getLogger(__name__)


def extract_features(text: str) -> list[str]:
    """Find known feature keywords, defaulting to a generic feature."""
    return match_labels(FEATURE_RULES, text) or list(DEFAULT_FEATURES)


def extract_actors(text: str) -> list[str]:
    """Find known actor roles, defaulting to a generic user."""
    return match_labels(ACTOR_RULES, text) or list(DEFAULT_ACTORS)


def extract_inputs(text: str) -> list[str]:
    """Collect file types, size tokens and well-known input fields.

    File types are uppercased with their leading dot (``.PDF``); size tokens
    are kept as written (``10 MB``). May be empty.
    """
    inputs = [m.group(0).upper() for m in FILE_TYPE_PATTERN.finditer(text)]
    inputs.extend(m.group(0) for m in SIZE_PATTERN.finditer(text))
    inputs.extend(match_labels(INPUT_RULES, text))
    return inputs


def extract_outputs(text: str) -> list[str]:
    """Find expected system outputs, defaulting to a generic response."""
    return match_labels(OUTPUT_RULES, text) or list(DEFAULT_OUTPUTS)


def extract_constraints(text: str) -> list[str]:
    """Synthesize size and length limits from numbers in the text.

    Each distinct number is examined once, in order of first occurrence.
    A number counts only as a whole token, so ``5`` does not match inside
    ``15mb``.
    """
    constraints: list[str] = []
    seen: set[str] = set()

    for match in NUMBER_PATTERN.finditer(text):
        num = match.group(0)
        if num in seen:
            continue
        seen.add(num)

        lead = rf"(?<!\d){num}"
        if re.search(lead + r"\s?mb", text, re.IGNORECASE):
            constraints.append(f"Max size: {num}MB")
        if re.search(lead + r"(?: characters|chars)", text, re.IGNORECASE):
            constraints.append(f"Max length: {num} characters")

    return constraints


def extract_context(description: str) -> Context:
    """Parse a feature description into a Context.

    Never fails: every category falls back to a default (or is left empty)
    when the text carries no signal for it.

    Args:
        description: Free-text feature description.

    Returns:
        The extracted Context.
    """
    context = Context(
        features=tuple(extract_features(description)),
        actors=tuple(extract_actors(description)),
        inputs=tuple(extract_inputs(description)),
        outputs=tuple(extract_outputs(description)),
        constraints=tuple(extract_constraints(description)),
        raw_input=description,
    )
    logger.debug(
        "Extracted context: %d feature(s), %d input(s), %d constraint(s)",
        len(context.features),
        len(context.inputs),
        len(context.constraints),
    )
    return context
