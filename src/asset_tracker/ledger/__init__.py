"""Ledger — stores и операции над состоянием трекера.

- TrackerStore: пять mappings + скалярная конфигурация + transfer log
- AdminConfigManager: admin-операции
- AssetLedger: per-owner списки активов
- PriceOracleFeed: цены с глобальными монотонными часами
- YieldRegistry / RiskRegistry / CategoryRegistry: key → value хранилища
- PortfolioValuator: read-only стоимость портфеля
"""

from .admin_config import AdminConfigManager
from .asset_ledger import AssetLedger
from .price_oracle import PriceOracleFeed
from .registries import CategoryRegistry, RiskRegistry, YieldRegistry
from .store import TrackerStore
from .valuator import PortfolioValuator

__all__ = [
    "TrackerStore",
    "AdminConfigManager",
    "AssetLedger",
    "PriceOracleFeed",
    "YieldRegistry",
    "RiskRegistry",
    "CategoryRegistry",
    "PortfolioValuator",
]
