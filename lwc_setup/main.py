"""
LWC test setup — CLI entrypoint.

Usage:
    lwc-test-setup --help
    lwc-test-setup setup
    lwc-test-setup setup --json
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from lwc_setup import __version__
from lwc_setup.core.messages import message
from lwc_setup.core.observability.logging_config import (
    ENV_FILE,
    ENV_FILE_LEVEL,
    resolve_level,
    setup_logging,
)


@click.group(help=message("command_description"))
@click.version_option(version=__version__, prog_name="lwc-test-setup")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to a settings override file (default: .lwc-test-setup.yml in the project).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(ENV_FILE),
        log_file_level=os.environ.get(ENV_FILE_LEVEL),
    )


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def setup(ctx: click.Context, as_json: bool) -> None:
    """Add Jest scripts, config and ignore entries, then install lwc-jest.

    Run from anywhere inside a Salesforce DX project.
    """
    from lwc_setup.core.errors import SetupError
    from lwc_setup.core.use_cases.setup import run_setup

    quiet = ctx.obj.get("quiet", False)
    warnings: list[str] = []

    def _progress(line: str) -> None:
        if not as_json and not quiet:
            click.echo(line)

    def _warning(line: str) -> None:
        warnings.append(line)
        if not as_json:
            click.secho(f"⚠️  {line}", fg="yellow")

    try:
        result = run_setup(
            config_path=ctx.obj.get("config_path"),
            on_progress=_progress,
            on_warning=_warning,
        )
    except SetupError as e:
        _fail(as_json, str(e), e.kind, warnings)
        return
    except OSError as e:
        _fail(as_json, f"File update failed: {e}", "write-failed", warnings)
        return

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    click.echo()
    click.secho("✅ LWC Jest setup complete", fg="green", bold=True)
    env = result.environment
    click.echo(f"   Project: {result.project_root}")
    click.echo(
        f"   Toolchain: {env.runtime} {env.runtime_version}, "
        f"{env.package_manager} {env.package_manager_version}"
    )
    if result.files_written:
        click.echo(f"   Updated: {', '.join(result.files_written)}")
    if result.plan.skipped and ctx.obj.get("verbose"):
        click.echo(f"   Unchanged: {', '.join(result.plan.skipped)}")
    click.echo(f"   Installed: {result.dependency}")
    click.echo()


def _fail(as_json: bool, error: str, kind: str, warnings: list[str]) -> None:
    if as_json:
        payload: dict = {"error": error, "kind": kind}
        if warnings:
            payload["warnings"] = warnings
        click.echo(json.dumps(payload, indent=2))
    else:
        click.secho(f"❌ {error}", fg="red")
    sys.exit(1)


if __name__ == "__main__":
    cli()
