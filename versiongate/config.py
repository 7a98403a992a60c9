"""
Configuration management for VersionGate.

Loads configuration from environment variables and .env file.
"""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


class GateConfig(BaseSettings):
    """Configuration settings for the version gate."""

    # Manifest
    manifest_path: Path = Field(
        default=Path("Cargo.toml"),
        description="Manifest file holding the version, relative to the working directory"
    )
    version_field: Optional[str] = Field(
        None,
        description="Dotted path of the version field (e.g. package.version); auto-detected when unset"
    )

    # Version control
    reference_ref: str = Field("main", description="Git reference holding the baseline manifest")
    git_executable: str = Field("git", description="Git binary used to read the reference manifest")

    # Logging
    log_level: str = Field("WARNING", description="Log level name")

    model_config = {
        "env_prefix": "VERSIONGATE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra fields from env
    }

    @field_validator("reference_ref")
    @classmethod
    def validate_reference_ref(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("reference_ref must not be empty")
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level


# Global config instance - loaded from environment
config = GateConfig()
