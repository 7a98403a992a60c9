"""Tests for reading versions out of manifests."""

import json
import shutil

import pytest

from versiongate.errors import ManifestError
from versiongate.store.manifest import (
    detect_format,
    extract_version,
    read_manifest_version,
    read_ref_manifest_version,
)

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


class TestDetectFormat:

    @pytest.mark.parametrize(
        "name,fmt",
        [
            ("Cargo.toml", "toml"),
            ("pyproject.toml", "toml"),
            ("package.json", "json"),
            ("Chart.yaml", "yaml"),
            ("pubspec.YML", "yaml"),
        ],
    )
    def test_known_suffixes(self, name, fmt):
        assert detect_format(name) == fmt

    def test_unknown_suffix(self):
        with pytest.raises(ManifestError, match="unsupported manifest format"):
            detect_format("setup.cfg")


class TestExtractVersion:

    def test_cargo_package_version(self, cargo_manifest):
        assert extract_version(cargo_manifest("0.3.1"), "toml") == "0.3.1"

    def test_pyproject_project_version(self):
        text = '[project]\nname = "demo"\nversion = "2.0.0"\n'
        assert extract_version(text, "toml") == "2.0.0"

    def test_poetry_version(self):
        text = '[tool.poetry]\nname = "demo"\nversion = "0.9.0"\n'
        assert extract_version(text, "toml") == "0.9.0"

    def test_package_json(self):
        text = json.dumps({"name": "demo", "version": "1.4.2"})
        assert extract_version(text, "json") == "1.4.2"

    def test_chart_yaml(self):
        text = "apiVersion: v2\nname: demo\nversion: 1.0.3\n"
        assert extract_version(text, "yaml") == "1.0.3"

    def test_explicit_field(self):
        text = '[package]\nversion = "1.0.0"\n\n[metadata]\nrelease = "3.1.4"\n'
        assert extract_version(text, "toml", field="metadata.release") == "3.1.4"

    def test_explicit_field_missing(self):
        with pytest.raises(ManifestError, match="no version field found"):
            extract_version('[package]\nversion = "1.0.0"\n', "toml", field="project.version")

    def test_no_version_field(self):
        with pytest.raises(ManifestError, match="no version field found"):
            extract_version('[package]\nname = "demo"\n', "toml")

    def test_numeric_yaml_version_is_rejected(self):
        with pytest.raises(ManifestError, match="not a version string"):
            extract_version("version: 1.2\n", "yaml")

    def test_workspace_inherited_version_is_rejected(self):
        text = '[package]\nname = "demo"\nversion.workspace = true\n'
        with pytest.raises(ManifestError, match="not a version string"):
            extract_version(text, "toml")

    def test_malformed_toml(self):
        with pytest.raises(ManifestError, match="malformed toml manifest"):
            extract_version("[package\nversion = ", "toml", source="Cargo.toml")

    def test_malformed_manifest_chains_decoder_error(self):
        with pytest.raises(ManifestError) as exc_info:
            extract_version("{not json", "json")
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_non_mapping_json(self):
        with pytest.raises(ManifestError, match="not a mapping"):
            extract_version('["1.0.0"]', "json")

    def test_value_is_stripped(self):
        assert extract_version('{"version": " 1.0.0 "}', "json") == "1.0.0"


class TestReadManifestVersion:

    def test_reads_file(self, tmp_path, cargo_manifest):
        path = tmp_path / "Cargo.toml"
        path.write_text(cargo_manifest("1.1.0"), encoding="utf-8")
        assert read_manifest_version(path) == "1.1.0"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ManifestError, match="cannot read manifest") as exc_info:
            read_manifest_version(tmp_path / "Cargo.toml")
        assert exc_info.value.source.endswith("Cargo.toml")


class TestReadRefManifestVersion:

    @requires_git
    def test_reads_committed_manifest(self, git_repo, cargo_manifest):
        repo = git_repo("1.2.0")
        (repo / "Cargo.toml").write_text(cargo_manifest("1.3.0"), encoding="utf-8")

        assert read_ref_manifest_version("main", "Cargo.toml") == "1.2.0"
        assert read_manifest_version("Cargo.toml") == "1.3.0"

    @requires_git
    def test_unknown_ref(self, git_repo):
        git_repo("1.2.0")
        with pytest.raises(ManifestError) as exc_info:
            read_ref_manifest_version("does-not-exist", "Cargo.toml")
        assert exc_info.value.source == "does-not-exist:Cargo.toml"

    @requires_git
    def test_absolute_path_inside_repo(self, git_repo):
        repo = git_repo("0.5.0")
        assert read_ref_manifest_version("main", (repo / "Cargo.toml").resolve()) == "0.5.0"

    def test_missing_git_binary(self, tmp_path):
        with pytest.raises(ManifestError, match="cannot run"):
            read_ref_manifest_version(
                "main", "Cargo.toml", git_executable=str(tmp_path / "no-such-git")
            )
