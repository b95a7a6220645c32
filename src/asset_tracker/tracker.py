"""AssetTracker — Фасад ledger с явным caller в каждом вызове

Единая точка входа для всех вызовов:
- admin:  set_oracle_contract, set_max_assets, set_price_update_fee, set_asset_category
- owner:  add_asset, update_asset_balance, remove_asset (owner = caller)
- oracle: update_asset_price, set_asset_yield, set_user_risk_score
- read:   get_user_assets, get_asset_price, get_portfolio_value и остальные getters

Мутирующие вызовы сериализуются одним RLock (single writer): монотонность
часов цен и проверка лимита активов опираются на строгий порядок вызовов.
Reads возвращают immutable значения (frozen модели, tuples).
"""

import threading
from typing import Any, Dict, Optional, Tuple

from asset_tracker.core.config import TrackerConfig
from asset_tracker.core.domain.admin_config import AdminConfig
from asset_tracker.core.domain.asset import Asset, AssetCategory
from asset_tracker.core.domain.price import Price, TransferRecord
from asset_tracker.core.domain.results import TrackerResult
from asset_tracker.ledger import (
    AdminConfigManager,
    AssetLedger,
    CategoryRegistry,
    PortfolioValuator,
    PriceOracleFeed,
    RiskRegistry,
    TrackerStore,
    YieldRegistry,
)


class AssetTracker:
    """Ledger трекера активов."""

    def __init__(
        self,
        tracker_config: Optional[TrackerConfig] = None,
        store: Optional[TrackerStore] = None,
    ):
        """
        Args:
            tracker_config: admin и начальные параметры (default TrackerConfig())
            store: готовый store (например, из snapshot); имеет приоритет
        """
        self.store = store if store is not None else TrackerStore(tracker_config)
        self._lock = threading.RLock()

        self._admin = AdminConfigManager()
        self._ledger = AssetLedger()
        self._prices = PriceOracleFeed()
        self._yields = YieldRegistry()
        self._risk = RiskRegistry()
        self._categories = CategoryRegistry()
        self._valuator = PortfolioValuator()

    @classmethod
    def from_snapshot(cls, data: Dict[str, Any]) -> "AssetTracker":
        return cls(store=TrackerStore.from_snapshot(data))

    def reset(self) -> None:
        with self._lock:
            self.store.reset()

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return self.store.to_snapshot()

    # =========================================================================
    # ADMIN
    # =========================================================================

    def set_oracle_contract(self, caller: str, new_oracle: str) -> TrackerResult:
        with self._lock:
            return self._admin.set_oracle_contract(self.store, caller, new_oracle)

    def set_max_assets(self, caller: str, n: int) -> TrackerResult:
        with self._lock:
            return self._admin.set_max_assets(self.store, caller, n)

    def set_price_update_fee(self, caller: str, fee: int) -> TrackerResult:
        with self._lock:
            return self._admin.set_price_update_fee(self.store, caller, fee)

    def set_asset_category(self, caller: str, token: str, category: str) -> TrackerResult:
        with self._lock:
            return self._categories.set_asset_category(self.store, caller, token, category)

    # =========================================================================
    # OWNER
    # =========================================================================

    def add_asset(
        self, caller: str, token: str, amount: int, decimals: int, category: str
    ) -> TrackerResult:
        with self._lock:
            return self._ledger.add_asset(self.store, caller, token, amount, decimals, category)

    def update_asset_balance(self, caller: str, token: str, new_amount: int) -> TrackerResult:
        with self._lock:
            return self._ledger.update_asset_balance(self.store, caller, token, new_amount)

    def remove_asset(self, caller: str, token: str) -> TrackerResult:
        with self._lock:
            return self._ledger.remove_asset(self.store, caller, token)

    # =========================================================================
    # ORACLE
    # =========================================================================

    def update_asset_price(
        self, caller: str, token: str, price: int, timestamp: int
    ) -> TrackerResult:
        with self._lock:
            return self._prices.update_asset_price(self.store, caller, token, price, timestamp)

    def set_asset_yield(self, caller: str, token: str, rate: int) -> TrackerResult:
        with self._lock:
            return self._yields.set_asset_yield(self.store, caller, token, rate)

    def set_user_risk_score(self, caller: str, user: str, score: int) -> TrackerResult:
        with self._lock:
            return self._risk.set_user_risk_score(self.store, caller, user, score)

    # =========================================================================
    # READS
    # =========================================================================

    def get_user_assets(self, user: str) -> Optional[Tuple[Asset, ...]]:
        with self._lock:
            return self._ledger.get_user_assets(self.store, user)

    def get_asset_price(self, token: str) -> Optional[Price]:
        with self._lock:
            return self._prices.get_asset_price(self.store, token)

    def get_portfolio_value(self, user: str) -> int:
        with self._lock:
            return self._valuator.get_portfolio_value(self.store, user)

    def get_asset_yield(self, token: str) -> Optional[int]:
        with self._lock:
            return self._yields.get_asset_yield(self.store, token)

    def get_user_risk_score(self, user: str) -> Optional[int]:
        with self._lock:
            return self._risk.get_user_risk_score(self.store, user)

    def get_asset_category(self, token: str) -> Optional[AssetCategory]:
        with self._lock:
            return self._categories.get_asset_category(self.store, token)

    def get_transfer_log(self) -> Tuple[TransferRecord, ...]:
        with self._lock:
            return self._prices.get_transfer_log(self.store)

    def get_config(self) -> AdminConfig:
        with self._lock:
            return self.store.config
