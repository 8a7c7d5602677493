"""Application ports - interfaces for external adapters."""

from docregistry.application.ports.access_control import AccessControl, TransferOutcome
from docregistry.application.ports.clock import Clock
from docregistry.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "AccessControl",
    "Clock",
    "TransferOutcome",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
