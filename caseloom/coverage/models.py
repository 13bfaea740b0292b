"""Coverage assessment results."""

from dataclasses import dataclass

from ..test_generator.models import RiskLevel


@dataclass(frozen=True)
class Coverage:
    """Category counts, weighted score, gaps and overall risk for a run."""

    functional: int
    negative: int
    boundary: int
    security: int
    total: int
    score: int  # 0-100
    missing: tuple[str, ...]
    risk: RiskLevel  # Low, Medium or High

    def to_dict(self) -> dict:
        return {
            "functional": self.functional,
            "negative": self.negative,
            "boundary": self.boundary,
            "security": self.security,
            "total": self.total,
            "score": self.score,
            "missing": list(self.missing),
            "risk": self.risk.value,
        }
