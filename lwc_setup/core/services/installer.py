"""
Dependency installer — add the test-support package as a dev dependency.

Runs last, after every file change has been flushed.
"""

from __future__ import annotations

import logging
from pathlib import Path

from lwc_setup.adapters.base import Adapter
from lwc_setup.core.errors import DependencyInstallError
from lwc_setup.core.messages import message
from lwc_setup.core.models.action import Action, Receipt
from lwc_setup.core.models.settings import SetupSettings

logger = logging.getLogger(__name__)


def install_dev_dependency(
    adapter: Adapter,
    project_root: Path,
    settings: SetupSettings,
) -> Receipt:
    """Install ``settings.dev_dependency`` with the package manager.

    Raises:
        DependencyInstallError: The install command failed or could not start.
    """
    action = Action(
        id="install-dev-dependency",
        name=f"{settings.package_manager} add --save-dev {settings.dev_dependency}",
        adapter=adapter.name,
        params={
            "operation": "add_dev",
            "package_manager": settings.package_manager,
            "package": settings.dev_dependency,
        },
    )
    receipt = adapter.run(action, project_root=str(project_root))
    if not receipt.ok:
        raise DependencyInstallError(
            message(
                "error_dependency_install",
                dependency=settings.dev_dependency,
                detail=receipt.error or "unknown error",
            )
        )

    logger.info("Installed %s in %s", settings.dev_dependency, project_root)
    return receipt
