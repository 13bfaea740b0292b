"""Test design models: state machine, decision table, boundaries, partitions."""

from .builder import build_models
from .models import (
    BoundarySpec,
    DecisionTable,
    DesignModels,
    EquivalenceClasses,
    StateModel,
    StateTransition,
)
from .state_graph import build_state_graph, find_state_paths

__all__ = [
    "BoundarySpec",
    "DecisionTable",
    "DesignModels",
    "EquivalenceClasses",
    "StateModel",
    "StateTransition",
    "build_models",
    "build_state_graph",
    "find_state_paths",
]
