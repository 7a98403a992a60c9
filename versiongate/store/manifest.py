"""
Manifest Reader - Extracts version strings from package manifests.

Reads the manifest either from the working copy or as committed on a git
reference (e.g. the main branch). Supports TOML (Cargo.toml,
pyproject.toml), JSON (package.json) and YAML (Chart.yaml, pubspec.yaml).
"""

import json
import logging
import os
import subprocess
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from versiongate.errors import ManifestError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Tried in order when no explicit field is configured
DEFAULT_VERSION_FIELDS = (
    "version",
    "package.version",
    "project.version",
    "tool.poetry.version",
    "workspace.package.version",
)

_FORMATS = {
    ".toml": "toml",
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


def detect_format(path: PathLike) -> str:
    """
    Determine the manifest format from its file suffix.

    Raises:
        ManifestError: If the suffix is not a supported format
    """
    suffix = Path(path).suffix.lower()
    fmt = _FORMATS.get(suffix)
    if fmt is None:
        raise ManifestError(str(path), f"unsupported manifest format {suffix or '(none)'!r}")
    return fmt


def _load(text: str, fmt: str, source: str) -> Dict[str, Any]:
    try:
        if fmt == "toml":
            data = tomllib.loads(text)
        elif fmt == "json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (tomllib.TOMLDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ManifestError(source, f"malformed {fmt} manifest") from e

    if not isinstance(data, dict):
        raise ManifestError(source, f"{fmt} manifest is not a mapping")
    return data


def _lookup(data: Dict[str, Any], field: str) -> Optional[Any]:
    node: Any = data
    for key in field.split("."):
        if not isinstance(node, dict) or key not in node:
            return None
        node = node[key]
    return node


def extract_version(text: str, fmt: str, field: Optional[str] = None, source: str = "<manifest>") -> str:
    """
    Extract the version string from manifest text.

    Args:
        text: Manifest contents
        fmt: One of "toml", "json", "yaml"
        field: Dotted path of the version field; auto-detected when None
        source: Description of where the text came from, for error messages

    Returns:
        The version string, unparsed

    Raises:
        ManifestError: If the text is malformed or no usable version field exists
    """
    data = _load(text, fmt, source)
    candidates = (field,) if field else DEFAULT_VERSION_FIELDS

    for name in candidates:
        value = _lookup(data, name)
        if value is None:
            continue
        if not isinstance(value, str) or not value.strip():
            raise ManifestError(source, f"field {name!r} is not a version string: {value!r}")
        logger.debug("Found version %r in field %r of %s", value, name, source)
        return value.strip()

    raise ManifestError(source, f"no version field found (looked for {', '.join(candidates)})")


def read_manifest_version(path: PathLike, field: Optional[str] = None) -> str:
    """
    Read the version from a manifest in the working copy.

    Raises:
        ManifestError: If the file cannot be read or holds no version
    """
    path = Path(path)
    fmt = detect_format(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ManifestError(str(path), f"cannot read manifest: {e.strerror or e}") from e
    return extract_version(text, fmt, field, source=str(path))


def _git_path(path: Path) -> str:
    """Spell ``path`` the way ``git show <ref>:<path>`` resolves it from the cwd."""
    if path.is_absolute():
        path = Path(os.path.relpath(path))
    return "./" + path.as_posix()


def read_ref_manifest_version(
    ref: str,
    path: PathLike,
    field: Optional[str] = None,
    git_executable: str = "git",
) -> str:
    """
    Read the version from a manifest as committed on a git reference.

    Args:
        ref: Branch, tag or commit (e.g. "main")
        path: Manifest path relative to the working directory
        field: Dotted path of the version field; auto-detected when None
        git_executable: Git binary to run

    Raises:
        ManifestError: If git fails or the committed manifest holds no version
    """
    path = Path(path)
    fmt = detect_format(path)
    spec = f"{ref}:{_git_path(path)}"
    source = f"{ref}:{path.as_posix()}"
    command = [git_executable, "show", spec]
    logger.debug("Running %s", " ".join(command))

    try:
        process = subprocess.run(
            command,
            text=True,
            capture_output=True,
            check=False,
        )
    except OSError as e:
        raise ManifestError(source, f"cannot run {git_executable!r}: {e.strerror or e}") from e

    if process.returncode != 0:
        message = process.stderr.strip() or f"git exited with status {process.returncode}"
        raise ManifestError(source, message)

    return extract_version(process.stdout, fmt, field, source=source)
