"""PriceOracleFeed — Цены токенов с глобальными монотонными часами

Порядок проверок update_asset_price:
1. oracle настроен (ORACLE_NOT_CONFIGURED)
2. caller == oracle (UNAUTHORIZED)
3. token, price > 0 (INVALID_INPUT)
4. timestamp > last_update_timestamp (STALE_TIMESTAMP)

Часы ГЛОБАЛЬНЫЕ для всех token: update BTC@200 делает update ETH@150
устаревшим. Поведение сохраняется намеренно, per-token часов нет.

Успешный update:
1. эмитирует TransferRecord {price_update_fee, oracle → admin}
2. upsert Price{price, timestamp, source=caller}
3. last_update_timestamp = timestamp
"""

import logging
from typing import Any, Optional, Tuple

from asset_tracker.core.domain.price import Price, TransferRecord
from asset_tracker.core.domain.results import (
    ERR_INVALID_TIMESTAMP,
    ErrorKind,
    TrackerResult,
)
from asset_tracker.core.guards import (
    check_price,
    check_timestamp_type,
    check_token,
    first_failure,
)
from asset_tracker.core.roles import require_oracle
from asset_tracker.ledger.store import TrackerStore

logger = logging.getLogger(__name__)


class PriceOracleFeed:
    """Oracle-gated цены (stateless)."""

    def update_asset_price(
        self, store: TrackerStore, caller: str, token: Any, price: Any, timestamp: Any
    ) -> TrackerResult:
        """
        Принять новую цену токена.

        Args:
            store: Состояние ledger
            caller: Вызывающий principal (должен быть oracle)
            token: Символ токена
            price: Цена (> 0)
            timestamp: Timestamp update (> глобального last_update_timestamp)

        Returns:
            TrackerResult, effects содержит ровно один TransferRecord при ok=True
        """
        failure = require_oracle(store.config, caller)
        if failure is None:
            failure = first_failure(
                check_token(token), check_price(price), check_timestamp_type(timestamp)
            )
        if failure is not None:
            logger.debug("update_asset_price rejected: %s (%s)", failure.block_reason, failure.details)
            return failure

        last_ts = store.config.last_update_timestamp
        if timestamp <= last_ts:
            logger.debug("update_asset_price rejected: stale timestamp %d <= %d", timestamp, last_ts)
            return TrackerResult.failure(
                ErrorKind.STALE_TIMESTAMP,
                ERR_INVALID_TIMESTAMP,
                "stale_timestamp",
                f"timestamp={timestamp} <= last_update_timestamp={last_ts}",
            )

        transfer = TransferRecord(
            amount=store.config.price_update_fee,
            sender=caller,
            recipient=store.config.admin,
        )
        new_price = Price(price=price, timestamp=timestamp, source=caller)

        store.transfer_log.append(transfer)
        store.asset_prices[token] = new_price
        store.config = store.config.model_copy(update={"last_update_timestamp": timestamp})

        logger.info(
            "Price updated: %s=%d @%d (fee %d %s -> %s)",
            token,
            price,
            timestamp,
            transfer.amount,
            transfer.sender,
            transfer.recipient,
        )
        return TrackerResult.success(details=f"{token}={price}@{timestamp}", effects=(transfer,))

    def get_asset_price(self, store: TrackerStore, token: str) -> Optional[Price]:
        return store.asset_prices.get(token)

    def get_transfer_log(self, store: TrackerStore) -> Tuple[TransferRecord, ...]:
        """Append-only лог переводов в порядке эмиссии."""
        return tuple(store.transfer_log)
