"""
Mock adapter — stands in for the Node toolchain in tests.

Every action succeeds with ``default_output`` unless a response was
set for its ID. Each context received is kept in ``call_log``.
"""

from __future__ import annotations

from lwc_setup.adapters.base import Adapter, ExecutionContext
from lwc_setup.core.models.action import Receipt


class MockAdapter(Adapter):
    """Scripted toolchain: canned receipts per action ID."""

    def __init__(self, adapter_name: str = "mock", default_output: str = "[mock] executed"):
        self._name = adapter_name
        self._default_output = default_output
        self._responses: dict[str, Receipt] = {}
        self.call_log: list[ExecutionContext] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_count(self) -> int:
        return len(self.call_log)

    @property
    def called_ids(self) -> list[str]:
        return [ctx.action.id for ctx in self.call_log]

    def set_output(self, action_id: str, output: str) -> None:
        """Answer ``action_id`` with a success carrying ``output``."""
        self._responses[action_id] = Receipt.success(self._name, action_id, output=output)

    def set_failure(self, action_id: str, error: str = "Mock failure") -> None:
        """Answer ``action_id`` with a failure."""
        self._responses[action_id] = Receipt.failure(self._name, action_id, error=error)

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        self.call_log.append(context)
        if context.action.id in self._responses:
            return self._responses[context.action.id]
        return Receipt.success(
            self._name,
            context.action.id,
            output=self._default_output,
            metadata={"mock": True},
        )
