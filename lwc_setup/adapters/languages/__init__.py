"""Language adapters — node."""

from lwc_setup.adapters.languages.node import NodeToolchainAdapter

__all__ = ["NodeToolchainAdapter"]
