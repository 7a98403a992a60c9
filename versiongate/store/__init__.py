"""Manifest access for the version gate."""

from versiongate.store.manifest import (
    extract_version,
    read_manifest_version,
    read_ref_manifest_version,
)

__all__ = [
    "extract_version",
    "read_manifest_version",
    "read_ref_manifest_version",
]
