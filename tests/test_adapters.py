"""
Tests for the adapter protocol, the mock adapter and the Node toolchain adapter.
"""

import sys
from unittest.mock import MagicMock, patch

import pytest

from lwc_setup.adapters.base import ExecutionContext
from lwc_setup.adapters.languages.node import STDERR_FD, NodeToolchainAdapter
from lwc_setup.adapters.mock import MockAdapter
from lwc_setup.core.models.action import Action, Receipt

_NODE = "lwc_setup.adapters.languages.node"


def _completed(stdout: str = "", stderr: str = "", returncode: int = 0) -> MagicMock:
    m = MagicMock()
    m.stdout = stdout
    m.stderr = stderr
    m.returncode = returncode
    return m


def _version_action(tool: str = "node") -> Action:
    return Action(
        id="runtime-version",
        adapter="node",
        params={"operation": "version", "tool": tool},
    )


def _add_action() -> Action:
    return Action(
        id="install-dev-dependency",
        adapter="node",
        params={
            "operation": "add_dev",
            "package_manager": "npm",
            "package": "@salesforce/lwc-jest",
        },
    )


# ── Protocol ────────────────────────────────────────────────────────


class TestExecutionContext:
    def test_working_dir_defaults_to_root(self):
        ctx = ExecutionContext(action=Action(id="x", adapter="node"), project_root="/p")
        assert ctx.working_dir == "/p"

    def test_working_dir_override(self):
        ctx = ExecutionContext(
            action=Action(id="x", adapter="node", params={"cwd": "/other"}),
            project_root="/p",
        )
        assert ctx.working_dir == "/other"


class TestReceipt:
    def test_success(self):
        r = Receipt.success(adapter="node", action_id="a", output="8.12.0")
        assert r.ok and r.error is None

    def test_failure(self):
        r = Receipt.failure(adapter="node", action_id="a", error="boom")
        assert not r.ok
        assert r.error == "boom"


# ── Mock ────────────────────────────────────────────────────────────


class TestMockAdapter:
    def test_default_success(self):
        mock = MockAdapter()
        receipt = mock.run(Action(id="op-1", adapter="mock"))
        assert receipt.ok
        assert mock.call_count == 1

    def test_set_output_and_failure(self):
        mock = MockAdapter()
        mock.set_output("a", "1.2.3")
        mock.set_failure("b", error="nope")
        assert mock.run(Action(id="a", adapter="mock")).output == "1.2.3"
        assert mock.run(Action(id="b", adapter="mock")).error == "nope"
        assert mock.called_ids == ["a", "b"]


# ── Node toolchain ──────────────────────────────────────────────────


class TestNodeValidate:
    def test_missing_operation(self):
        receipt = NodeToolchainAdapter().run(Action(id="x", adapter="node"))
        assert not receipt.ok
        assert "operation" in receipt.error

    def test_unknown_operation(self):
        receipt = NodeToolchainAdapter().run(
            Action(id="x", adapter="node", params={"operation": "publish"}),
        )
        assert not receipt.ok
        assert "Unknown operation" in receipt.error

    def test_add_dev_requires_package(self):
        receipt = NodeToolchainAdapter().run(
            Action(id="x", adapter="node", params={"operation": "add_dev", "package_manager": "npm"}),
        )
        assert not receipt.ok
        assert "'package'" in receipt.error


class TestNodeVersion:
    def test_strips_v_and_newline(self):
        with patch(f"{_NODE}.shutil.which", return_value="/usr/bin/node"), \
             patch(f"{_NODE}.subprocess.run", return_value=_completed("v8.12.0\n")) as run:
            receipt = NodeToolchainAdapter().run(_version_action())
        assert receipt.ok
        assert receipt.output == "8.12.0"
        assert run.call_args[0][0] == ["/usr/bin/node", "-v"]

    def test_not_on_path(self):
        with patch(f"{_NODE}.shutil.which", return_value=None), \
             patch(f"{_NODE}.subprocess.run") as run:
            receipt = NodeToolchainAdapter().run(_version_action())
        assert not receipt.ok
        assert receipt.metadata["missing"] is True
        run.assert_not_called()

    def test_spawn_error(self):
        with patch(f"{_NODE}.shutil.which", return_value="/usr/bin/node"), \
             patch(f"{_NODE}.subprocess.run", side_effect=PermissionError("denied")):
            receipt = NodeToolchainAdapter().run(_version_action())
        assert not receipt.ok
        assert "denied" in receipt.error

    def test_nonzero_exit(self):
        with patch(f"{_NODE}.shutil.which", return_value="/usr/bin/npm"), \
             patch(f"{_NODE}.subprocess.run", return_value=_completed(stderr="broken", returncode=1)):
            receipt = NodeToolchainAdapter().run(_version_action("npm"))
        assert not receipt.ok
        assert receipt.error == "broken"


class TestNodeAddDev:
    def test_success_goes_to_stderr_uncaptured(self, tmp_path):
        with patch(f"{_NODE}.shutil.which", return_value="/usr/bin/npm"), \
             patch(f"{_NODE}.subprocess.run", return_value=_completed()) as run:
            receipt = NodeToolchainAdapter().run(_add_action(), project_root=str(tmp_path))
        assert receipt.ok
        args, kwargs = run.call_args
        assert args[0] == ["/usr/bin/npm", "add", "--save-dev", "@salesforce/lwc-jest"]
        assert kwargs["cwd"] == str(tmp_path)
        assert kwargs["stdout"] == STDERR_FD
        assert "capture_output" not in kwargs
        assert "stderr" not in kwargs
        assert "timeout" not in kwargs

    @pytest.mark.skipif(sys.platform == "win32", reason="shell script stand-in for npm")
    def test_package_manager_output_lands_on_stderr(self, tmp_path, capfd):
        npm = tmp_path / "npm"
        npm.write_text("#!/bin/sh\necho \"added 1 package in $PWD\"\n")
        npm.chmod(0o755)

        receipt = NodeToolchainAdapter().run(
            Action(
                id="install-dev-dependency",
                adapter="node",
                params={"operation": "add_dev", "package_manager": str(npm), "package": "x"},
            ),
            project_root=str(tmp_path),
        )

        assert receipt.ok
        out, err = capfd.readouterr()
        assert "added 1 package" not in out
        assert "added 1 package" in err

    def test_nonzero_exit(self, tmp_path):
        with patch(f"{_NODE}.shutil.which", return_value="/usr/bin/npm"), \
             patch(f"{_NODE}.subprocess.run", return_value=_completed(returncode=1)):
            receipt = NodeToolchainAdapter().run(_add_action(), project_root=str(tmp_path))
        assert not receipt.ok
        assert "code 1" in receipt.error

    def test_spawn_error(self, tmp_path):
        with patch(f"{_NODE}.shutil.which", return_value=None), \
             patch(f"{_NODE}.subprocess.run", side_effect=FileNotFoundError("npm")):
            receipt = NodeToolchainAdapter().run(_add_action(), project_root=str(tmp_path))
        assert not receipt.ok
