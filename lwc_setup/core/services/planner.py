"""
Mutation planner — decide what to change, without changing anything.

Each ``plan_*`` function looks at the current state of one artifact and
returns its verdict. ``plan_mutations`` runs all three against a project
and collects the writes, in the order they will be flushed:

    package.json  →  .forceignore  →  jest.config.js

Every artifact changes at most once per run, and only when needed:
re-running the command on a set-up project queues nothing.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

from lwc_setup.core.errors import (
    ExistingScriptsError,
    ManifestError,
    ManifestNotFoundError,
)
from lwc_setup.core.messages import message
from lwc_setup.core.models.plan import PendingWrite
from lwc_setup.core.models.settings import SetupSettings
from lwc_setup.core.services.writer import PendingWrites

logger = logging.getLogger(__name__)


@dataclass
class MutationPlan:
    """Everything the planner decided for one project.

    ``queue`` holds the writes, ready to flush; ``notes`` are progress
    lines and ``warnings`` are things the user should look at.
    """

    project_root: Path
    queue: PendingWrites = field(default_factory=PendingWrites)
    skipped: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)

    @property
    def writes(self) -> list[PendingWrite]:
        return list(self.queue.pending)

    @property
    def changes(self) -> int:
        return len(self.queue)


# ═══════════════════════════════════════════════════════════════════
#  Manifest I/O
# ═══════════════════════════════════════════════════════════════════


def load_manifest(project_root: Path, settings: SetupSettings) -> dict[str, Any]:
    """Read and parse package.json from the project root.

    Raises:
        ManifestNotFoundError: The file does not exist.
        ManifestError: The file is not a JSON object.
    """
    path = project_root / settings.manifest_file
    if not path.is_file():
        raise ManifestNotFoundError(
            message(
                "error_no_manifest",
                manifest_file=settings.manifest_file,
                project_root=project_root,
            )
        )

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ManifestError(
            message("error_invalid_manifest", manifest_file=settings.manifest_file, detail=e)
        ) from e

    if not isinstance(data, dict):
        raise ManifestError(
            message(
                "error_invalid_manifest",
                manifest_file=settings.manifest_file,
                detail=f"expected a JSON object, got {type(data).__name__}",
            )
        )
    return data


def dump_manifest(manifest: dict[str, Any]) -> str:
    """Serialize package.json: 4-space indent, key order kept, trailing newline."""
    return json.dumps(manifest, indent=4, ensure_ascii=False) + "\n"


# ═══════════════════════════════════════════════════════════════════
#  Per-artifact planners
# ═══════════════════════════════════════════════════════════════════


@dataclass
class ScriptsDecision:
    """Verdict for the package.json ``scripts`` mapping.

    ``scripts`` is the mapping to store, or None when nothing changes.
    """

    action: Literal["create", "merge", "skip"]
    scripts: dict[str, str] | None = None
    conflicts: list[str] = field(default_factory=list)


def plan_scripts(manifest: dict[str, Any], settings: SetupSettings) -> ScriptsDecision:
    """Decide how to add the test scripts to ``manifest``.

    - no ``scripts`` mapping → create it from the test scripts
    - mapping without any test script key → merge, existing keys first
    - any test script key already present → skip, nothing merged
    """
    scripts = manifest.get("scripts")

    if not scripts:
        return ScriptsDecision(action="create", scripts=dict(settings.test_scripts))

    if not isinstance(scripts, dict):
        raise ManifestError(
            message(
                "error_invalid_manifest",
                manifest_file=settings.manifest_file,
                detail=f"'scripts' must be an object, got {type(scripts).__name__}",
            )
        )

    conflicts = [key for key in settings.test_scripts if key in scripts]
    if conflicts:
        return ScriptsDecision(action="skip", conflicts=conflicts)

    return ScriptsDecision(action="merge", scripts={**scripts, **settings.test_scripts})


@dataclass
class FileDecision:
    """Verdict for a whole file: a pending write, or a reason to leave it."""

    write: PendingWrite | None = None
    note: str = ""


def plan_jest_config(
    manifest: dict[str, Any],
    project_root: Path,
    settings: SetupSettings,
) -> FileDecision:
    """Create the Jest config file unless Jest is already configured."""
    if manifest.get("jest"):
        return FileDecision(
            note=message(
                "progress_jest_in_manifest",
                manifest_file=settings.manifest_file,
                jest_config_file=settings.jest_config_file,
            ),
        )

    path = project_root / settings.jest_config_file
    if path.exists():
        return FileDecision(
            note=message("progress_jest_config_exists", jest_config_file=settings.jest_config_file),
        )

    return FileDecision(
        write=PendingWrite(
            path=path,
            content=settings.jest_config,
            mode="overwrite",
            reason="create jest config",
        ),
        note=message("progress_jest_config_create", jest_config_file=settings.jest_config_file),
    )


def plan_forceignore(project_root: Path, settings: SetupSettings) -> FileDecision:
    """Make sure the ignore file excludes Jest test directories."""
    path = project_root / settings.forceignore_file

    if not path.exists():
        return FileDecision(
            write=PendingWrite(
                path=path,
                content=settings.forceignore_entry,
                mode="overwrite",
                reason="create ignore file",
            ),
            note=message("progress_forceignore_create", forceignore_file=settings.forceignore_file),
        )

    # Bytes: the file may be in any ASCII-compatible encoding.
    current = path.read_bytes()
    if settings.forceignore_marker.encode("utf-8") in current:
        return FileDecision()

    content = settings.forceignore_entry
    if current and not current.endswith(b"\n"):
        content = "\n" + content

    return FileDecision(
        write=PendingWrite(
            path=path,
            content=content,
            mode="append",
            reason="append test ignore entry",
        ),
        note=message(
            "progress_forceignore_append",
            marker=settings.forceignore_marker,
            forceignore_file=settings.forceignore_file,
        ),
    )


# ═══════════════════════════════════════════════════════════════════
#  Whole project
# ═══════════════════════════════════════════════════════════════════


def plan_mutations(project_root: Path, settings: SetupSettings) -> MutationPlan:
    """Plan every change the setup makes to ``project_root``.

    Raises:
        ManifestNotFoundError: No package.json in the project root.
        ManifestError: package.json is not a usable JSON object.
        ExistingScriptsError: Test scripts exist and ``strict_scripts`` is on.
    """
    plan = MutationPlan(project_root=project_root)
    manifest = load_manifest(project_root, settings)

    # ── package.json scripts ────────────────────────────────────
    decision = plan_scripts(manifest, settings)
    if decision.action == "skip":
        keys = ", ".join(decision.conflicts)
        if settings.strict_scripts:
            raise ExistingScriptsError(
                message("error_existing_scripts", manifest_file=settings.manifest_file, keys=keys),
                keys=decision.conflicts,
            )
        plan.warnings.append(
            message("warn_existing_scripts", manifest_file=settings.manifest_file, keys=keys)
        )
        plan.skipped.append(settings.manifest_file)
    else:
        manifest["scripts"] = decision.scripts
        plan.queue.queue_write(
            project_root / settings.manifest_file,
            dump_manifest(manifest),
            reason=f"{decision.action} test scripts",
        )
        plan.notes.append(message("progress_scripts_added", manifest_file=settings.manifest_file))

    # ── .forceignore, then jest.config.js ───────────────────────
    for file_name, verdict in (
        (settings.forceignore_file, plan_forceignore(project_root, settings)),
        (settings.jest_config_file, plan_jest_config(manifest, project_root, settings)),
    ):
        if verdict.write:
            _enqueue(plan.queue, verdict.write)
        else:
            plan.skipped.append(file_name)
        if verdict.note:
            plan.notes.append(verdict.note)

    logger.info(
        "Planned %d write(s) for %s, skipped: %s",
        plan.changes, project_root, ", ".join(plan.skipped) or "none",
    )
    return plan


def _enqueue(queue: PendingWrites, write: PendingWrite) -> None:
    if write.mode == "append":
        queue.queue_append(write.path, write.content, reason=write.reason)
    else:
        queue.queue_write(write.path, write.content, reason=write.reason)
