"""
Shared test fixtures and configuration.
"""

import json
from pathlib import Path

import pytest

from lwc_setup.adapters.mock import MockAdapter
from lwc_setup.core.models.settings import SetupSettings


@pytest.fixture
def settings() -> SetupSettings:
    """Default settings."""
    return SetupSettings()


@pytest.fixture
def sfdx_project(tmp_path: Path) -> Path:
    """A minimal Salesforce DX project with an empty-scripts package.json."""
    root = tmp_path / "project"
    root.mkdir()
    (root / "sfdx-project.json").write_text(
        json.dumps({"packageDirectories": [{"path": "force-app", "default": True}]})
    )
    (root / "package.json").write_text(
        json.dumps({"name": "demo", "version": "1.0.0"}, indent=2)
    )
    return root


@pytest.fixture
def toolchain() -> MockAdapter:
    """A mock toolchain reporting a supported node and npm."""
    mock = MockAdapter(adapter_name="node")
    mock.set_output("runtime-version", "14.17.0")
    mock.set_output("package-manager-version", "6.14.13")
    return mock

