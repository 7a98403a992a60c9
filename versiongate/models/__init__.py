"""Data models for the version gate."""

from versiongate.models.version import (
    ComparisonOutcome,
    ComparisonResult,
    Version,
)
from versiongate.models.gate import (
    GateDecision,
    GateVerdict,
)

__all__ = [
    # Version models
    "ComparisonOutcome",
    "ComparisonResult",
    "Version",
    # Gate models
    "GateDecision",
    "GateVerdict",
]
