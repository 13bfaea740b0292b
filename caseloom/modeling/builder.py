"""Build test design models from an Understanding."""

import logging
import re

from ..analysis.models import Understanding
from .models import (
    BoundarySpec,
    DecisionTable,
    DesignModels,
    EquivalenceClasses,
    StateModel,
    StateTransition,
)
from .state_graph import unreachable_states

logger = logging.getLogger(__name__)

SIZE_RULE_MARKER = "Max size:"
DECISION_ACTIONS = ("Accept", "Reject", "Warn")


def create_state_model() -> StateModel:
    """The generic processing skeleton: Initial → Processing → Success | Error."""
    return StateModel(
        states=("Initial", "Processing", "Success", "Error"),
        transitions=(
            StateTransition("Initial", "Processing", "Valid input"),
            StateTransition("Processing", "Success", "All validations pass"),
            StateTransition("Processing", "Error", "Validation fails"),
        ),
    )


def create_decision_table(understanding: Understanding) -> DecisionTable:
    return DecisionTable(conditions=understanding.rules, actions=DECISION_ACTIONS)


def create_boundary_model(understanding: Understanding) -> list[BoundarySpec]:
    """One file-size BoundarySpec per ``Max size:`` rule, in rule order."""
    boundaries = []

    for rule in understanding.rules:
        if SIZE_RULE_MARKER not in rule:
            continue
        match = re.search(r"\d+", rule)
        if not match:
            continue

        limit = int(match.group(0))
        boundaries.append(
            BoundarySpec(
                parameter="File Size",
                min=0,
                max=limit,
                unit="MB",
                test_values=(0, 1, limit - 1, limit, limit + 1),
            )
        )

    return boundaries


def create_equivalence_classes() -> EquivalenceClasses:
    return EquivalenceClasses(
        valid=("Within constraints", "Proper format", "Authorized user"),
        invalid=("Exceeds limits", "Invalid format", "Unauthorized access"),
    )


def build_models(understanding: Understanding) -> DesignModels:
    """Derive all test design models for an Understanding.

    Args:
        understanding: The interpreted requirements.

    Returns:
        DesignModels with state, decision-table, boundary and
        equivalence-class models.
    """
    state_model = create_state_model()
    for state in unreachable_states(state_model):
        logger.warning("State '%s' is unreachable from the initial state", state)

    models = DesignModels(
        state_transitions=state_model,
        decision_table=create_decision_table(understanding),
        boundary_values=tuple(create_boundary_model(understanding)),
        equivalence_classes=create_equivalence_classes(),
    )
    logger.debug("Built models with %d boundary spec(s)", len(models.boundary_values))
    return models
