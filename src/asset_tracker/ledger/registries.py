"""Registries — Простые key → value хранилища oracle / admin данных

- YieldRegistry:    token → bps [0, 10000], oracle-gated
- RiskRegistry:     user → score [0, 100], oracle-gated
- CategoryRegistry: token → AssetCategory, admin-gated

CategoryRegistry независим от inline category каждого Asset:
override не меняет уже сохранённые активы и не влияет на add_asset.
"""

import logging
from typing import Any, Optional

from asset_tracker.core.domain.asset import AssetCategory
from asset_tracker.core.domain.results import TrackerResult
from asset_tracker.core.guards import (
    check_category,
    check_risk_score,
    check_token,
    check_yield_bps,
    coerce_category,
    first_failure,
)
from asset_tracker.core.roles import require_admin, require_oracle
from asset_tracker.ledger.store import TrackerStore

logger = logging.getLogger(__name__)


class YieldRegistry:
    """Доходность токенов (basis points)."""

    def set_asset_yield(self, store: TrackerStore, caller: str, token: Any, rate: Any) -> TrackerResult:
        failure = require_oracle(store.config, caller)
        if failure is None:
            failure = first_failure(check_token(token), check_yield_bps(rate))
        if failure is not None:
            logger.debug("set_asset_yield rejected: %s (%s)", failure.block_reason, failure.details)
            return failure

        store.asset_yields[token] = rate
        logger.debug("Yield set: %s=%d bps", token, rate)
        return TrackerResult.success(details=f"{token}={rate}bps")

    def get_asset_yield(self, store: TrackerStore, token: str) -> Optional[int]:
        return store.asset_yields.get(token)


class RiskRegistry:
    """Риск-скоры пользователей."""

    def set_user_risk_score(self, store: TrackerStore, caller: str, user: Any, score: Any) -> TrackerResult:
        """
        Upsert риск-скора. Идентификатор user не проверяется.
        """
        failure = require_oracle(store.config, caller)
        if failure is None:
            failure = check_risk_score(score)
        if failure is not None:
            logger.debug("set_user_risk_score rejected: %s (%s)", failure.block_reason, failure.details)
            return failure

        store.user_risk_scores[user] = score
        logger.debug("Risk score set: %s=%d", user, score)
        return TrackerResult.success(details=f"{user}={score}")

    def get_user_risk_score(self, store: TrackerStore, user: str) -> Optional[int]:
        return store.user_risk_scores.get(user)


class CategoryRegistry:
    """Admin override категорий токенов."""

    def set_asset_category(
        self, store: TrackerStore, caller: str, token: Any, category: Any
    ) -> TrackerResult:
        failure = first_failure(
            require_admin(store.config, caller),
            check_token(token),
            check_category(category),
        )
        if failure is not None:
            logger.debug("set_asset_category rejected: %s (%s)", failure.block_reason, failure.details)
            return failure

        resolved = coerce_category(category)
        store.asset_categories[token] = resolved
        logger.info("Category override: %s -> %s", token, resolved.value)
        return TrackerResult.success(details=f"{token}={resolved.value}")

    def get_asset_category(self, store: TrackerStore, token: str) -> Optional[AssetCategory]:
        return store.asset_categories.get(token)
