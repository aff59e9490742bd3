"""
Setup use case — scaffold Jest unit testing into the current project.

Steps run strictly in order and stop at the first failure:

    resolve project → preflight → plan → flush → install

Resolving the project only reads the filesystem; it comes first so the
project's settings overrides apply to the preflight checks too.
Progress lines and warnings are handed to ``on_progress`` and
``on_warning`` as each step runs, so whatever was reported before a
failure stays on screen.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from lwc_setup.adapters.base import Adapter
from lwc_setup.adapters.languages.node import NodeToolchainAdapter
from lwc_setup.core.config.loader import (
    DEFAULT_PROJECT_FILE,
    load_settings,
    resolve_project_root,
)
from lwc_setup.core.messages import message
from lwc_setup.core.models.settings import SetupSettings
from lwc_setup.core.services.installer import install_dev_dependency
from lwc_setup.core.services.planner import MutationPlan, plan_mutations
from lwc_setup.core.services.preflight import EnvironmentReport, check_environment

logger = logging.getLogger(__name__)


@dataclass
class SetupResult:
    """Outcome of a successful setup run."""

    project_root: Path
    environment: EnvironmentReport
    plan: MutationPlan
    files_written: list[str] = field(default_factory=list)
    dependency: str = ""

    def to_dict(self) -> dict:
        return {
            "project_root": str(self.project_root),
            "runtime_version": self.environment.runtime_version,
            "package_manager_version": self.environment.package_manager_version,
            "files_written": self.files_written,
            "skipped": self.plan.skipped,
            "warnings": self.plan.warnings,
            "dependency": self.dependency,
        }


def run_setup(
    start_dir: Path | None = None,
    settings: SetupSettings | None = None,
    adapter: Adapter | None = None,
    config_path: Path | None = None,
    on_progress: Callable[[str], None] | None = None,
    on_warning: Callable[[str], None] | None = None,
) -> SetupResult:
    """Run the whole setup against the project containing ``start_dir``.

    Args:
        start_dir: Where to start looking for the project (default: cwd).
        settings: Settings to use. When None they are loaded from
            ``config_path``, else from the project's override file.
        adapter: Toolchain adapter (default: the real Node adapter).
        config_path: Explicit settings override file.
        on_progress: Optional callback receiving each progress line.
        on_warning: Optional callback receiving each planner warning,
            called right after planning, before anything is written.

    Raises:
        SetupError: A subclass naming the step that failed.
        OSError: A queued file write failed while flushing.
    """
    def _progress(text: str) -> None:
        logger.debug("progress: %s", text)
        if on_progress:
            on_progress(text)

    adapter = adapter or NodeToolchainAdapter()

    # ── 1. Project ──────────────────────────────────────────────
    if settings is None and config_path is not None:
        settings = load_settings(config_path)
    project_file = settings.project_file if settings else DEFAULT_PROJECT_FILE
    project_root = resolve_project_root(start_dir, project_file)
    if settings is None:
        settings = load_settings(project_root=project_root)

    # ── 2. Preflight ────────────────────────────────────────────
    _progress(
        message(
            "progress_preflight",
            runtime=settings.runtime,
            package_manager=settings.package_manager,
        )
    )
    environment = check_environment(adapter, settings)
    _progress(
        message(
            "progress_runtime_found",
            runtime=settings.runtime,
            version=environment.runtime_version,
        )
    )

    # ── 3. Plan ─────────────────────────────────────────────────
    plan = plan_mutations(project_root, settings)
    for note in plan.notes:
        _progress(note)
    for warning in plan.warnings:
        logger.debug("warning: %s", warning)
        if on_warning:
            on_warning(warning)

    # ── 4. Flush ────────────────────────────────────────────────
    if plan.changes:
        _progress(message("progress_writing", count=plan.changes))
    applied = plan.queue.flush()

    # ── 5. Install ──────────────────────────────────────────────
    _progress(message("progress_installing", dependency=settings.dev_dependency))
    install_dev_dependency(adapter, project_root, settings)

    return SetupResult(
        project_root=project_root,
        environment=environment,
        plan=plan,
        files_written=[str(w.path.relative_to(project_root)) for w in applied],
        dependency=settings.dev_dependency,
    )
