"""
VersionGate - A version-ordering gate for continuous integration.

This package provides tools for:
- Parsing dot-separated version strings into comparable Versions
- Comparing a candidate version against a reference version
- Gating merges on the candidate being strictly greater
- Reading versions from manifest files and git references
"""

__version__ = "0.1.0"
