"""
Error kinds — one exception per terminal failure of the setup command.

Every error is terminal: the command stops at the first one and never
retries. ``kind`` is a stable identifier used in JSON output.
"""

from __future__ import annotations


class SetupError(Exception):
    """Base class for all setup failures."""

    kind = "setup-error"


class ProjectNotFoundError(SetupError):
    kind = "project-not-found"


class ConfigError(SetupError):
    """Raised when the settings override file is invalid."""

    kind = "invalid-config"


class RuntimeNotFoundError(SetupError):
    kind = "runtime-not-found"


class RuntimeVersionError(SetupError):
    kind = "runtime-version"

    def __init__(self, message: str, version: str = "", minimum: str = ""):
        super().__init__(message)
        self.version = version
        self.minimum = minimum


class PackageManagerNotFoundError(SetupError):
    kind = "package-manager-not-found"


class ManifestNotFoundError(SetupError):
    kind = "manifest-not-found"


class ManifestError(SetupError):
    """Raised when package.json exists but cannot be parsed as an object."""

    kind = "invalid-manifest"


class ExistingScriptsError(SetupError):
    kind = "existing-scripts"

    def __init__(self, message: str, keys: list[str] | None = None):
        super().__init__(message)
        self.keys = keys or []


class DependencyInstallError(SetupError):
    kind = "dependency-install"
