"""
Services — the steps of the setup command.

Each module owns one step: preflight checks, mutation planning,
the batching writer, and the dependency install.
"""
