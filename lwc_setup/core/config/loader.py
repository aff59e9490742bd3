"""
Configuration loader — settings overrides and project root lookup.

Settings start from the defaults in ``SetupSettings``. A YAML file can
override any field: either passed explicitly (``--config``) or found as
``.lwc-test-setup.yml`` in the project root.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from lwc_setup.core.errors import ConfigError, ProjectNotFoundError
from lwc_setup.core.messages import message
from lwc_setup.core.models.settings import SetupSettings

logger = logging.getLogger(__name__)

# Default overrides filename (looked up in the project root)
SETTINGS_FILE = ".lwc-test-setup.yml"

DEFAULT_PROJECT_FILE = "sfdx-project.json"


def find_project_root(
    start_dir: Path | None = None,
    project_file: str = DEFAULT_PROJECT_FILE,
) -> Path | None:
    """Search for the project file starting from the given directory, walking up.

    This allows running the command from a subdirectory and still
    finding the project root.

    Args:
        start_dir: Directory to start searching from (default: cwd).
        project_file: Marker file that identifies the project root.

    Returns:
        The directory containing the marker file, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(50):  # safety limit
        if (current / project_file).is_file():
            return current
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def resolve_project_root(
    start_dir: Path | None = None,
    project_file: str = DEFAULT_PROJECT_FILE,
) -> Path:
    """Like ``find_project_root`` but raise when no project is found.

    Raises:
        ProjectNotFoundError: If no ancestor holds the project file.
    """
    root = find_project_root(start_dir, project_file)
    if root is None:
        raise ProjectNotFoundError(
            message(
                "error_project_not_found",
                project_file=project_file,
                start_dir=(start_dir or Path.cwd()).resolve(),
            )
        )
    logger.debug("Resolved project root: %s", root)
    return root


def load_settings(
    path: Path | None = None,
    project_root: Path | None = None,
) -> SetupSettings:
    """Load settings, applying YAML overrides when present.

    Args:
        path: Explicit overrides file. Must exist when given.
        project_root: Project root to look for ``.lwc-test-setup.yml`` in.

    Returns:
        Validated SetupSettings.

    Raises:
        ConfigError: If the file is missing (explicit path only) or invalid.
    """
    if path is None and project_root is not None:
        candidate = project_root / SETTINGS_FILE
        if candidate.is_file():
            path = candidate

    if path is None:
        return SetupSettings()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading settings overrides from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"{path} is not UTF-8 text: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return SetupSettings()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        settings = SetupSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {path}: {e}") from e

    logger.info("Loaded settings overrides from %s (%d keys)", path, len(data))
    return settings
