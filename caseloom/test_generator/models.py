"""Data models for generated test cases."""

from dataclasses import dataclass
from enum import Enum


class CaseType(str, Enum):
    """Category of a generated test case."""

    FUNCTIONAL = "Functional"
    NEGATIVE = "Negative"
    BOUNDARY = "Boundary"
    SECURITY = "Security"


class Priority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class RiskLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


def format_case_id(number: int) -> str:
    """Format a case number as ``TC-###`` (wider past 999)."""
    return f"TC-{number:03d}"


class CaseIdSequence:
    """Hands out sequential case IDs across all categories of a run."""

    def __init__(self, start: int = 1):
        self._next = start

    def __call__(self) -> str:
        case_id = format_case_id(self._next)
        self._next += 1
        return case_id


@dataclass(frozen=True)
class TestCase:
    """A single generated test case."""

    __test__ = False  # not a pytest class

    id: str  # e.g. TC-001
    title: str
    type: CaseType
    priority: Priority
    risk: RiskLevel
    preconditions: tuple[str, ...]
    steps: tuple[str, ...]
    expected_result: str
    behavior_script: str  # Given/When/Then

    def to_dict(self) -> dict:
        """Serialize using the wire field names."""
        return {
            "id": self.id,
            "title": self.title,
            "type": self.type.value,
            "priority": self.priority.value,
            "risk": self.risk.value,
            "preconditions": list(self.preconditions),
            "steps": list(self.steps),
            "expectedResult": self.expected_result,
            "behaviorScript": self.behavior_script,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TestCase":
        """Rebuild a TestCase from its ``to_dict`` form."""
        return cls(
            id=data["id"],
            title=data["title"],
            type=CaseType(data["type"]),
            priority=Priority(data["priority"]),
            risk=RiskLevel(data["risk"]),
            preconditions=tuple(data["preconditions"]),
            steps=tuple(data["steps"]),
            expected_result=data["expectedResult"],
            behavior_script=data["behaviorScript"],
        )
