"""
Domain models — Pydantic types for the setup command.

All models are re-exported here for convenient access:

    from lwc_setup.core.models import Action, Receipt, SetupSettings, PendingWrite
"""

from lwc_setup.core.models.action import Action, Receipt
from lwc_setup.core.models.plan import PendingWrite
from lwc_setup.core.models.settings import SetupSettings

__all__ = [
    "Action",
    "PendingWrite",
    "Receipt",
    "SetupSettings",
]
