"""Core engine components for the version gate."""

from versiongate.engine.gate import VersionGate, compare, decide, parse_version

__all__ = [
    "VersionGate",
    "compare",
    "decide",
    "parse_version",
]
