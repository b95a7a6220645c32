"""
Domain models and value objects.

Contains fundamental domain entities like Asset, Price, AdminConfig, TrackerResult.
"""

from asset_tracker.core.domain.admin_config import AdminConfig
from asset_tracker.core.domain.asset import Asset, AssetCategory
from asset_tracker.core.domain.limits import (
    DEFAULT_MAX_ASSETS_PER_USER,
    DEFAULT_PRICE_UPDATE_FEE,
    INITIAL_UPDATE_TIMESTAMP,
    MAX_DECIMALS,
    MAX_RISK_SCORE,
    MAX_YIELD_BPS,
    MIN_DECIMALS,
    TOKEN_MAX_LENGTH,
    TOKEN_MIN_LENGTH,
)
from asset_tracker.core.domain.price import Price, TransferRecord
from asset_tracker.core.domain.results import ErrorKind, TrackerResult

__all__ = [
    # Limits
    "TOKEN_MIN_LENGTH",
    "TOKEN_MAX_LENGTH",
    "MIN_DECIMALS",
    "MAX_DECIMALS",
    "MAX_YIELD_BPS",
    "MAX_RISK_SCORE",
    "DEFAULT_MAX_ASSETS_PER_USER",
    "DEFAULT_PRICE_UPDATE_FEE",
    "INITIAL_UPDATE_TIMESTAMP",
    # Models
    "AdminConfig",
    "Asset",
    "AssetCategory",
    "Price",
    "TransferRecord",
    # Results
    "ErrorKind",
    "TrackerResult",
]
