"""AdminConfig операции: oracle, лимит активов, комиссия за price update.

Все три операции admin-gated.
"""

import logging
from typing import Any

from asset_tracker.core.guards import check_fee_type, check_max_assets, first_failure
from asset_tracker.core.domain.results import TrackerResult
from asset_tracker.core.roles import require_admin
from asset_tracker.ledger.store import TrackerStore

logger = logging.getLogger(__name__)


class AdminConfigManager:
    """Admin-операции над store.config (stateless)."""

    def set_oracle_contract(self, store: TrackerStore, caller: str, new_oracle: Any) -> TrackerResult:
        """
        Замена oracle без проверки формы new_oracle.

        Args:
            store: Состояние ledger
            caller: Вызывающий principal
            new_oracle: Новый oracle principal

        Returns:
            TrackerResult (UNAUTHORIZED если caller != admin)
        """
        failure = require_admin(store.config, caller)
        if failure is not None:
            logger.debug("set_oracle_contract rejected: %s", failure.block_reason)
            return failure

        previous = store.config.oracle
        store.config = store.config.model_copy(update={"oracle": new_oracle})
        logger.info("Oracle changed: %s -> %s", previous, new_oracle)
        return TrackerResult.success(details=f"oracle={new_oracle!r}")

    def set_max_assets(self, store: TrackerStore, caller: str, n: Any) -> TrackerResult:
        """
        Новый лимит активов на владельца (n > 0).

        Существующие списки длиннее нового лимита не усекаются:
        лимит проверяется только при вставке.
        """
        failure = first_failure(require_admin(store.config, caller), check_max_assets(n))
        if failure is not None:
            logger.debug("set_max_assets rejected: %s (%s)", failure.block_reason, failure.details)
            return failure

        store.config = store.config.model_copy(update={"max_assets_per_user": n})
        logger.info("max_assets_per_user set to %d", n)
        return TrackerResult.success(details=f"max_assets_per_user={n}")

    def set_price_update_fee(self, store: TrackerStore, caller: str, fee: Any) -> TrackerResult:
        """
        Новая комиссия за price update.

        Нижняя граница не проверяется: ноль и отрицательные значения
        сохраняются как есть.
        """
        failure = first_failure(require_admin(store.config, caller), check_fee_type(fee))
        if failure is not None:
            logger.debug("set_price_update_fee rejected: %s (%s)", failure.block_reason, failure.details)
            return failure

        store.config = store.config.model_copy(update={"price_update_fee": fee})
        logger.info("price_update_fee set to %d", fee)
        return TrackerResult.success(details=f"price_update_fee={fee}")
