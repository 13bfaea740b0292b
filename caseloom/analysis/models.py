"""Value objects produced by the analysis stages."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Context:
    """Categorical signals extracted from a feature description."""

    features: tuple[str, ...]
    actors: tuple[str, ...]
    inputs: tuple[str, ...]
    outputs: tuple[str, ...]
    constraints: tuple[str, ...]
    raw_input: str

    def to_dict(self) -> dict:
        return {
            "features": list(self.features),
            "actors": list(self.actors),
            "inputs": list(self.inputs),
            "outputs": list(self.outputs),
            "constraints": list(self.constraints),
            "rawInput": self.raw_input,
        }


@dataclass(frozen=True)
class Understanding:
    """Business rules, assumptions and gaps inferred from a Context."""

    feature: str
    rules: tuple[str, ...]
    assumptions: tuple[str, ...]
    gaps: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "feature": self.feature,
            "rules": list(self.rules),
            "assumptions": list(self.assumptions),
            "gaps": list(self.gaps),
        }
