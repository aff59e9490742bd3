"""
Setup settings — every constant the setup command works with.

Defaults reproduce the stock LWC Jest setup. A YAML override file can
replace any field (see ``lwc_setup.core.config.loader``); the planner
and services only ever read these values from an injected instance.
"""

from __future__ import annotations

from pathlib import PurePath
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TEST_SCRIPTS: dict[str, str] = {
    "test:unit": "lwc-jest",
    "test:unit:debug": "lwc-jest --debug",
    "test:unit:watch": "lwc-jest --watch",
}

DEFAULT_JEST_CONFIG = """\
const { jestConfig } = require('@salesforce/lwc-jest/config');

module.exports = {
    ...jestConfig,
    // add any custom configurations here
};
"""

DEFAULT_FORCEIGNORE_MARKER = "**/__tests__/**"
DEFAULT_FORCEIGNORE_ENTRY = f"# LWC Jest tests\n{DEFAULT_FORCEIGNORE_MARKER}\n"


class SetupSettings(BaseModel):
    """Configuration constants for one setup run.

    Attributes:
        test_scripts:        Scripts merged into package.json.
        jest_config:         Boilerplate written to the Jest config file.
        forceignore_entry:   Block appended to the ignore file.
        forceignore_marker:  Substring whose presence means "already ignored".
        min_runtime_version: Oldest supported Node.js release.
        version_comparison:  ``semver`` (numeric) or ``lexical`` (string).
        strict_scripts:      Treat pre-existing test scripts as an error
                             instead of a warning.

    The ``*_file`` names are joined onto the project root, so they must
    be relative and stay inside it.
    """

    model_config = ConfigDict(extra="forbid")

    test_scripts: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_TEST_SCRIPTS),
    )
    jest_config: str = DEFAULT_JEST_CONFIG
    forceignore_entry: str = DEFAULT_FORCEIGNORE_ENTRY
    forceignore_marker: str = DEFAULT_FORCEIGNORE_MARKER

    project_file: str = "sfdx-project.json"
    manifest_file: str = "package.json"
    jest_config_file: str = "jest.config.js"
    forceignore_file: str = ".forceignore"

    runtime: str = "node"
    package_manager: str = "npm"
    min_runtime_version: str = "8.12.0"
    version_comparison: Literal["semver", "lexical"] = "semver"

    dev_dependency: str = "@salesforce/lwc-jest"
    strict_scripts: bool = False

    @field_validator("project_file", "manifest_file", "jest_config_file", "forceignore_file")
    @classmethod
    def validate_project_relative(cls, v: str) -> str:
        """Reject names that would resolve outside the project root."""
        path = PurePath(v)
        if not v or path.anchor or path.is_absolute():
            raise ValueError(f"must be a path relative to the project root, got {v!r}")
        if ".." in path.parts:
            raise ValueError(f"must not leave the project root, got {v!r}")
        return v
