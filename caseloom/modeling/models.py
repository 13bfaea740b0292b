"""Data models for test design artifacts."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StateTransition:
    """A guarded move between two states."""

    from_state: str
    to_state: str
    condition: str

    def to_dict(self) -> dict:
        return {"from": self.from_state, "to": self.to_state, "condition": self.condition}


@dataclass(frozen=True)
class StateModel:
    """A state-transition sketch. The first state is the initial one."""

    states: tuple[str, ...]
    transitions: tuple[StateTransition, ...]

    def to_dict(self) -> dict:
        return {
            "states": list(self.states),
            "transitions": [t.to_dict() for t in self.transitions],
        }


@dataclass(frozen=True)
class DecisionTable:
    conditions: tuple[str, ...]
    actions: tuple[str, ...]

    def to_dict(self) -> dict:
        return {"conditions": list(self.conditions), "actions": list(self.actions)}


@dataclass(frozen=True)
class BoundarySpec:
    """Boundary-value analysis for one bounded parameter."""

    parameter: str
    min: int
    max: int
    unit: str
    test_values: tuple[int, ...]

    def is_valid(self, value: int) -> bool:
        """Whether a value lies inside the inclusive range."""
        return self.min <= value <= self.max

    def to_dict(self) -> dict:
        return {
            "parameter": self.parameter,
            "min": self.min,
            "max": self.max,
            "unit": self.unit,
            "testValues": list(self.test_values),
        }


@dataclass(frozen=True)
class EquivalenceClasses:
    valid: tuple[str, ...]
    invalid: tuple[str, ...]

    def to_dict(self) -> dict:
        return {"valid": list(self.valid), "invalid": list(self.invalid)}


@dataclass(frozen=True)
class DesignModels:
    """All test design models derived from one Understanding."""

    state_transitions: StateModel
    decision_table: DecisionTable
    boundary_values: tuple[BoundarySpec, ...]
    equivalence_classes: EquivalenceClasses

    def to_dict(self) -> dict:
        return {
            "stateTransitions": self.state_transitions.to_dict(),
            "decisionTable": self.decision_table.to_dict(),
            "boundaryValues": [b.to_dict() for b in self.boundary_values],
            "equivalenceClasses": self.equivalence_classes.to_dict(),
        }
