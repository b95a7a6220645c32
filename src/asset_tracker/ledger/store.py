"""
TrackerStore — Единое разделяемое состояние ledger

Пять keyed mappings + скалярная конфигурация + append-only transfer log:
- user_assets:       owner → упорядоченный список Asset
- asset_prices:      token → Price
- asset_yields:      token → bps
- user_risk_scores:  user → score
- asset_categories:  token → AssetCategory (admin override)

Store создаётся один раз на процесс и передаётся явно в каждую операцию.
Между тестовыми сценариями сбрасывается через reset().
"""

import logging
from typing import Any, Dict, List, Optional

from asset_tracker.core.config import TrackerConfig
from asset_tracker.core.contracts import validate_tracker_state
from asset_tracker.core.domain.admin_config import AdminConfig
from asset_tracker.core.domain.asset import Asset, AssetCategory
from asset_tracker.core.domain.price import Price, TransferRecord

logger = logging.getLogger(__name__)

SNAPSHOT_SCHEMA_VERSION = "1"


class TrackerStore:
    """Состояние ledger."""

    def __init__(self, tracker_config: Optional[TrackerConfig] = None):
        self.tracker_config = tracker_config or TrackerConfig()
        self.reset()

    def reset(self) -> None:
        """Возврат к начальному состоянию: admin из TrackerConfig, oracle отсутствует."""
        self.config = AdminConfig(
            admin=self.tracker_config.admin,
            max_assets_per_user=self.tracker_config.max_assets_per_user,
            price_update_fee=self.tracker_config.price_update_fee,
        )
        self.user_assets: Dict[str, List[Asset]] = {}
        self.asset_prices: Dict[str, Price] = {}
        self.asset_yields: Dict[str, int] = {}
        self.user_risk_scores: Dict[str, int] = {}
        self.asset_categories: Dict[str, AssetCategory] = {}
        self.transfer_log: List[TransferRecord] = []
        logger.debug("Store reset: admin=%s", self.config.admin)

    # =========================================================================
    # PERSISTED LAYOUT
    # =========================================================================

    def to_snapshot(self) -> Dict[str, Any]:
        """
        JSON-совместимый snapshot состояния (tracker_state.json).

        Returns:
            dict, проходящий validate_tracker_state
        """
        return {
            "schema_version": SNAPSHOT_SCHEMA_VERSION,
            "config": self.config.model_dump(mode="json"),
            "user_assets": {
                owner: [asset.model_dump(mode="json") for asset in assets]
                for owner, assets in self.user_assets.items()
            },
            "asset_prices": {
                token: price.model_dump(mode="json")
                for token, price in self.asset_prices.items()
            },
            "asset_yields": dict(self.asset_yields),
            "user_risk_scores": dict(self.user_risk_scores),
            "asset_categories": {
                token: category.value for token, category in self.asset_categories.items()
            },
            "transfer_log": [record.model_dump(mode="json") for record in self.transfer_log],
        }

    @classmethod
    def from_snapshot(cls, data: Dict[str, Any]) -> "TrackerStore":
        """
        Восстановление store из snapshot.

        Snapshot проверяется JSON Schema, затем каждая запись проходит
        через pydantic модель, так что инварианты выполняются после загрузки.

        Raises:
            jsonschema.ValidationError: snapshot не соответствует схеме
            pydantic.ValidationError: запись нарушает ограничения модели
        """
        validate_tracker_state(data)

        config = AdminConfig.model_validate(data["config"])
        store = cls(
            TrackerConfig(
                admin=config.admin,
                max_assets_per_user=config.max_assets_per_user,
                price_update_fee=config.price_update_fee,
            )
        )
        store.config = config
        store.user_assets = {
            owner: [Asset.model_validate(item) for item in items]
            for owner, items in data["user_assets"].items()
        }
        store.asset_prices = {
            token: Price.model_validate(item) for token, item in data["asset_prices"].items()
        }
        store.asset_yields = dict(data["asset_yields"])
        store.user_risk_scores = dict(data["user_risk_scores"])
        store.asset_categories = {
            token: AssetCategory(value) for token, value in data["asset_categories"].items()
        }
        store.transfer_log = [TransferRecord.model_validate(item) for item in data["transfer_log"]]

        logger.info(
            "Store loaded from snapshot: owners=%d prices=%d transfers=%d",
            len(store.user_assets),
            len(store.asset_prices),
            len(store.transfer_log),
        )
        return store
