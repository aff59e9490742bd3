"""
Preflight checks — confirm the Node toolchain before touching files.

Order: runtime present → runtime version → package manager present.
Each failure raises its own error kind.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from lwc_setup.adapters.base import Adapter
from lwc_setup.core.errors import (
    PackageManagerNotFoundError,
    RuntimeNotFoundError,
    RuntimeVersionError,
)
from lwc_setup.core.messages import message
from lwc_setup.core.models.action import Action
from lwc_setup.core.models.settings import SetupSettings
from lwc_setup.core.services.version_constraint import version_satisfies

logger = logging.getLogger(__name__)


@dataclass
class EnvironmentReport:
    """Versions detected by the preflight checks."""

    runtime: str
    runtime_version: str
    package_manager: str
    package_manager_version: str


def _version_action(action_id: str, tool: str, adapter: Adapter) -> Action:
    return Action(
        id=action_id,
        name=f"{tool} -v",
        adapter=adapter.name,
        params={"operation": "version", "tool": tool},
    )


def check_environment(adapter: Adapter, settings: SetupSettings) -> EnvironmentReport:
    """Verify the runtime and package manager are usable.

    Raises:
        RuntimeNotFoundError: The runtime cannot be invoked.
        RuntimeVersionError: The runtime is older than the minimum.
        PackageManagerNotFoundError: The package manager cannot be invoked.
    """
    runtime_receipt = adapter.run(
        _version_action("runtime-version", settings.runtime, adapter),
    )
    if not runtime_receipt.ok:
        logger.debug("Runtime version check failed: %s", runtime_receipt.error)
        raise RuntimeNotFoundError(
            message("error_runtime_not_found", runtime=settings.runtime)
        )

    runtime_version = runtime_receipt.output.strip()
    if not version_satisfies(
        runtime_version,
        settings.min_runtime_version,
        settings.version_comparison,
    ):
        raise RuntimeVersionError(
            message(
                "error_runtime_version",
                version=runtime_version,
                minimum=settings.min_runtime_version,
            ),
            version=runtime_version,
            minimum=settings.min_runtime_version,
        )

    pm_receipt = adapter.run(
        _version_action("package-manager-version", settings.package_manager, adapter),
    )
    if not pm_receipt.ok:
        logger.debug("Package manager version check failed: %s", pm_receipt.error)
        raise PackageManagerNotFoundError(
            message(
                "error_package_manager_not_found",
                package_manager=settings.package_manager,
            )
        )

    report = EnvironmentReport(
        runtime=settings.runtime,
        runtime_version=runtime_version,
        package_manager=settings.package_manager,
        package_manager_version=pm_receipt.output.strip(),
    )
    logger.info(
        "Preflight ok: %s %s, %s %s",
        report.runtime, report.runtime_version,
        report.package_manager, report.package_manager_version,
    )
    return report
