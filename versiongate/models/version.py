"""
Version data models.

This module defines the parsed Version value and the result of comparing
two of them.
"""

from enum import Enum
from typing import Optional, Tuple
from pydantic import BaseModel, Field, field_validator


class ComparisonOutcome(str, Enum):
    """Ordering of a candidate relative to a reference."""
    GREATER = "greater"
    EQUAL = "equal"
    LESS = "less"

    @property
    def inverse(self) -> "ComparisonOutcome":
        """The outcome with the operands swapped."""
        if self is ComparisonOutcome.GREATER:
            return ComparisonOutcome.LESS
        if self is ComparisonOutcome.LESS:
            return ComparisonOutcome.GREATER
        return ComparisonOutcome.EQUAL


class Version(BaseModel):
    """
    A parsed version.

    Numeric segments are kept exactly as many as were written, so "1.2" and
    "1.2.0" are distinct values that compare equal.
    """
    segments: Tuple[int, ...] = Field(..., min_length=1, description="Numeric segments, most significant first")
    suffix: Optional[str] = Field(None, description="Pre-release/build suffix including its leading '-' or '+'")

    model_config = {"frozen": True}

    @field_validator("segments")
    @classmethod
    def validate_segments(cls, v: Tuple[int, ...]) -> Tuple[int, ...]:
        if any(segment < 0 for segment in v):
            raise ValueError(f"Version segments must be non-negative: {v}")
        return v

    @property
    def major(self) -> int:
        return self.segment(0)

    @property
    def minor(self) -> int:
        return self.segment(1)

    @property
    def patch(self) -> int:
        return self.segment(2)

    def segment(self, index: int) -> int:
        """Return the segment at ``index``, zero when absent."""
        return self.segments[index] if index < len(self.segments) else 0

    def __str__(self) -> str:
        return ".".join(str(s) for s in self.segments) + (self.suffix or "")


class ComparisonResult(BaseModel):
    """Outcome of comparing a candidate Version against a reference Version."""
    outcome: ComparisonOutcome = Field(..., description="Ordering of candidate relative to reference")
    candidate: Version = Field(..., description="Left-hand version")
    reference: Version = Field(..., description="Right-hand version")

    model_config = {"frozen": True}

    @property
    def is_greater(self) -> bool:
        return self.outcome == ComparisonOutcome.GREATER
