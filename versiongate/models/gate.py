"""
Gate Decision data models.

This module defines the pass/fail decision produced by the version gate.
"""

from enum import Enum
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field

from versiongate.models.version import ComparisonResult


class GateVerdict(str, Enum):
    """Whether the gate lets the candidate through."""
    PASS = "pass"
    FAIL = "fail"


class GateDecision(BaseModel):
    """
    Complete result of a gate run.

    Carries the verdict, a human-readable explanation, the raw inputs and,
    when both inputs parsed, the comparison that produced the verdict.
    """
    verdict: GateVerdict = Field(..., description="Pass or fail")
    explanation: str = Field(..., description="Human-readable reason for the verdict")
    candidate_raw: str = Field(..., description="Candidate version as given")
    reference_raw: str = Field(..., description="Reference version as given")
    comparison: Optional[ComparisonResult] = Field(None, description="Comparison result, absent on parse failure")
    error: Optional[str] = Field(None, description="Parse error detail, if any")

    model_config = {"frozen": True}

    @property
    def passed(self) -> bool:
        return self.verdict == GateVerdict.PASS

    @property
    def exit_code(self) -> int:
        """Process exit code for this decision."""
        return 0 if self.passed else 1

    def to_summary(self) -> Dict[str, Any]:
        """Generate a summary of the decision."""
        return {
            "verdict": "PASS" if self.passed else "FAIL",
            "candidate": str(self.comparison.candidate) if self.comparison else self.candidate_raw,
            "reference": str(self.comparison.reference) if self.comparison else self.reference_raw,
            "outcome": self.comparison.outcome.value if self.comparison else None,
            "explanation": self.explanation,
            "error": self.error,
        }
