"""
Contract Validation Module

Модуль для валидации persisted snapshot ledger (JSON Schema).
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    TrackerStateValidator,
    validate_tracker_state,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TrackerStateValidator",
    # Functions
    "validate_tracker_state",
]
