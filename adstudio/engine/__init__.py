"""Generation engine: result set, busy gate, regeneration and edit sessions."""

from .editing import EditHistorySession, Version
from .gate import Activity, GateBusyError, Operation, OperationGate
from .regeneration import RegenerationCoordinator
from .results import ResultSet
from .studio import AdStudio

__all__ = [
    "Activity",
    "AdStudio",
    "EditHistorySession",
    "GateBusyError",
    "Operation",
    "OperationGate",
    "RegenerationCoordinator",
    "ResultSet",
    "Version",
]
