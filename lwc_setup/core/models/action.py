"""
Action and Receipt models — how services talk to the toolchain adapter.

A service describes the command it needs as an ``Action``; the adapter
runs it and answers with a ``Receipt``. Adapters report failures in the
receipt instead of raising, and the service picks the error to raise.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class Action(BaseModel):
    """One toolchain command requested by a service."""

    id: str                         # e.g. "runtime-version"
    name: str = ""                  # shown in logs
    adapter: str                    # "node"
    params: dict[str, Any] = Field(default_factory=dict)


class Receipt(BaseModel):
    """What came of running an ``Action``."""

    adapter: str
    action_id: str
    ok: bool = True
    output: str = ""                # version string, install summary
    error: str | None = None
    duration_ms: int = 0
    metadata: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def success(cls, adapter: str, action_id: str, output: str = "", **kwargs: Any) -> Receipt:
        return cls(adapter=adapter, action_id=action_id, output=output, **kwargs)

    @classmethod
    def failure(cls, adapter: str, action_id: str, error: str, **kwargs: Any) -> Receipt:
        return cls(adapter=adapter, action_id=action_id, ok=False, error=error, **kwargs)
