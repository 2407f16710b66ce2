"""
SevaLink request agent - turns citizen messages into service requests
"""

from .orchestrator import RequestOrchestrator
from .errors import (
    SevaLinkError,
    InputError,
    AugmentationUnavailable,
    ValidationError,
    PersistenceError
)

__all__ = [
    "RequestOrchestrator",
    "SevaLinkError",
    "InputError",
    "AugmentationUnavailable",
    "ValidationError",
    "PersistenceError"
]
