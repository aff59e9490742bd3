"""
Message table — every user-facing string the command prints.

Lookups go through ``message(key, **params)`` so wording lives in one
place and tests can assert on the formatted text.
"""

from __future__ import annotations

MESSAGES: dict[str, str] = {
    "command_description": (
        "Install Jest unit testing tools for Lightning Web Components."
    ),
    # ── Errors ──────────────────────────────────────────────────
    "error_project_not_found": (
        "No {project_file} found in {start_dir} or any parent directory. "
        "Run this command inside a Salesforce DX project."
    ),
    "error_runtime_not_found": (
        "Could not run '{runtime}'. Install Node.js and make sure it is on your PATH."
    ),
    "error_runtime_version": (
        "Node.js {version} is not supported. Version {minimum} or later is required."
    ),
    "error_package_manager_not_found": (
        "Could not run '{package_manager}'. Install npm and make sure it is on your PATH."
    ),
    "error_no_manifest": (
        "No {manifest_file} found in the project root {project_root}. "
        "Run 'npm init' to create one."
    ),
    "error_invalid_manifest": "Cannot read {manifest_file}: {detail}",
    "error_existing_scripts": (
        "{manifest_file} already defines {keys}. "
        "Remove them or add the test scripts manually."
    ),
    "error_dependency_install": "Failed to install {dependency}: {detail}",
    # ── Warnings ────────────────────────────────────────────────
    "warn_existing_scripts": (
        "Test scripts already present in {manifest_file} ({keys}). "
        "Skipping the scripts update."
    ),
    # ── Progress ────────────────────────────────────────────────
    "progress_preflight": "Checking for {runtime} and {package_manager}...",
    "progress_runtime_found": "Found {runtime} {version}.",
    "progress_scripts_added": "Adding test scripts to {manifest_file}...",
    "progress_forceignore_create": (
        "Creating missing {forceignore_file} file in the project root..."
    ),
    "progress_forceignore_append": (
        'No "{marker}" entry found in {forceignore_file}. Adding now...'
    ),
    "progress_jest_in_manifest": (
        "Jest configuration found in {manifest_file}. "
        "Skipping creation of {jest_config_file} file."
    ),
    "progress_jest_config_exists": (
        "Jest configuration found in {jest_config_file}. "
        "Skipping creation of new config file."
    ),
    "progress_jest_config_create": (
        "Creating {jest_config_file} configuration file in the project root..."
    ),
    "progress_writing": "Writing {count} file change(s)...",
    "progress_installing": "Installing {dependency} node package...",
}


def message(key: str, **params: object) -> str:
    """Look up a message by key and format it with ``params``."""
    return MESSAGES[key].format(**params)
