"""The record produced by one pipeline run."""

from dataclasses import dataclass
from datetime import datetime

from ..analysis.models import Context, Understanding
from ..coverage.models import Coverage
from ..modeling.models import DesignModels
from ..test_generator.models import TestCase


@dataclass(frozen=True)
class Result:
    """Everything one run derived from its input, stamped with a UTC time."""

    timestamp: datetime
    input: str
    context: Context
    understanding: Understanding
    models: DesignModels
    test_cases: tuple[TestCase, ...]
    coverage: Coverage

    def to_dict(self) -> dict:
        return {
            "timestamp": self.timestamp.isoformat(),
            "input": self.input,
            "context": self.context.to_dict(),
            "understanding": self.understanding.to_dict(),
            "models": self.models.to_dict(),
            "testCases": [tc.to_dict() for tc in self.test_cases],
            "coverage": self.coverage.to_dict(),
        }
