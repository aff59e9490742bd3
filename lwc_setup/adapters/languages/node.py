"""
Node.js toolchain adapter — runtime / package-manager version checks and installs.

Action params:
    operation (str): One of 'version', 'add_dev'.
    tool (str): Executable whose version is read (for 'version').
    package_manager (str): Executable that installs (for 'add_dev').
    package (str): Package to add as a dev dependency (for 'add_dev').
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import time

from lwc_setup.adapters.base import Adapter, ExecutionContext
from lwc_setup.core.models.action import Receipt

logger = logging.getLogger(__name__)

# Raw descriptor: sys.stderr may be a stream with no fileno().
STDERR_FD = 2


class NodeToolchainAdapter(Adapter):
    """Runs ``node`` / ``npm`` and reports the outcome as receipts.

    Commands block until the subprocess exits; there is no timeout.
    ``add_dev`` is not captured: the package manager's progress reaches
    the user's terminal, but on stderr, since stdout belongs to the CLI
    (``setup --json`` prints its payload there).
    """

    @property
    def name(self) -> str:
        return "node"

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        operation = context.action.params.get("operation", "")
        if not operation:
            return False, "Missing required param: 'operation'"

        if operation == "version":
            if not context.action.params.get("tool"):
                return False, "Missing required param: 'tool'"
        elif operation == "add_dev":
            for key in ("package_manager", "package"):
                if not context.action.params.get(key):
                    return False, f"Missing required param: '{key}'"
        else:
            return False, f"Unknown operation '{operation}'. Valid: add_dev, version"

        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        operation = context.action.params["operation"]
        if operation == "version":
            return self._version(context)
        return self._add_dev(context)

    # ── Operations ──────────────────────────────────────────────

    def _version(self, ctx: ExecutionContext) -> Receipt:
        tool = ctx.action.params["tool"]
        executable = shutil.which(tool)
        if executable is None:
            return Receipt.failure(
                adapter=self.name,
                action_id=ctx.action.id,
                error=f"{tool}: command not found",
                metadata={"tool": tool, "missing": True},
            )

        start = time.monotonic()
        try:
            result = subprocess.run(
                [executable, "-v"],
                capture_output=True,
                text=True,
            )
        except OSError as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=ctx.action.id,
                error=f"{tool}: {e}",
                metadata={"tool": tool, "missing": True},
            )

        elapsed_ms = int((time.monotonic() - start) * 1000)
        if result.returncode != 0:
            return Receipt.failure(
                adapter=self.name,
                action_id=ctx.action.id,
                error=result.stderr.strip() or f"Exit code {result.returncode}",
                duration_ms=elapsed_ms,
                metadata={"tool": tool, "return_code": result.returncode},
            )

        # "v8.12.0\n" → "8.12.0"
        version = result.stdout.strip().lstrip("v")
        logger.debug("%s -v → %s", tool, version)
        return Receipt.success(
            adapter=self.name,
            action_id=ctx.action.id,
            output=version,
            duration_ms=elapsed_ms,
            metadata={"tool": tool, "path": executable},
        )

    def _add_dev(self, ctx: ExecutionContext) -> Receipt:
        pm = ctx.action.params["package_manager"]
        package = ctx.action.params["package"]
        executable = shutil.which(pm) or pm
        cmd = [executable, "add", "--save-dev", package]

        logger.debug("Executing: %s (cwd=%s)", " ".join(cmd), ctx.working_dir)
        start = time.monotonic()
        try:
            result = subprocess.run(cmd, cwd=ctx.working_dir, stdout=STDERR_FD)
        except OSError as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=ctx.action.id,
                error=str(e),
                metadata={"command": " ".join(cmd)},
            )

        elapsed_ms = int((time.monotonic() - start) * 1000)
        if result.returncode != 0:
            return Receipt.failure(
                adapter=self.name,
                action_id=ctx.action.id,
                error=f"{pm} exited with code {result.returncode}",
                duration_ms=elapsed_ms,
                metadata={"command": " ".join(cmd), "return_code": result.returncode},
            )

        return Receipt.success(
            adapter=self.name,
            action_id=ctx.action.id,
            output=f"Added {package}",
            duration_ms=elapsed_ms,
            metadata={"command": " ".join(cmd), "return_code": 0},
        )
