"""Adapters — bindings for the external toolchain.

Public re-exports for convenient access.
"""

from lwc_setup.adapters.base import Adapter, ExecutionContext
from lwc_setup.adapters.languages.node import NodeToolchainAdapter
from lwc_setup.adapters.mock import MockAdapter

__all__ = [
    "Adapter",
    "ExecutionContext",
    "MockAdapter",
    "NodeToolchainAdapter",
]
