"""
Adapter base — the contract between services and external tools.

Services never call external executables directly; they build an
``Action`` and hand it to an adapter, which returns a ``Receipt``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel

from lwc_setup.core.models.action import Action, Receipt


class ExecutionContext(BaseModel):
    """An action plus the project it runs against."""

    action: Action
    project_root: str = "."

    @property
    def working_dir(self) -> str:
        """``cwd`` param when given, else the project root."""
        return self.action.params.get("cwd") or self.project_root


class Adapter(ABC):
    """Runs actions against one external toolchain.

    ``run`` never raises: a rejected or failed action comes back as a
    receipt with ``ok=False``.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Adapter identifier, matched against ``Action.adapter``."""

    @abstractmethod
    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        """Check the action's params before anything is spawned.

        Returns:
            (is_valid, error_message). error_message is empty if valid.
        """

    @abstractmethod
    def execute(self, context: ExecutionContext) -> Receipt:
        """Carry out a validated action. Must not raise."""

    def run(self, action: Action, project_root: str = ".") -> Receipt:
        """Validate then execute ``action``."""
        context = ExecutionContext(action=action, project_root=project_root)
        valid, error = self.validate(context)
        if not valid:
            return Receipt.failure(
                adapter=self.name,
                action_id=action.id,
                error=f"Validation failed: {error}",
            )
        return self.execute(context)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
