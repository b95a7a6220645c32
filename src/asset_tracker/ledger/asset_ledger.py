"""AssetLedger — Per-owner ограниченные списки активов

Список владельца:
- порядок вставки сохраняется
- дубликаты одного token допустимы и не сливаются
- лимит max_assets_per_user проверяется только при вставке

update / remove действуют на ПЕРВУЮ запись с совпадающим token,
последующие дубликаты не затрагиваются.
"""

import logging
from typing import Any, List, Optional, Tuple

from asset_tracker.core.domain.asset import Asset
from asset_tracker.core.domain.results import (
    ERR_ASSET_NOT_FOUND,
    ERR_LIST_FULL,
    ERR_NO_ASSETS,
    ErrorKind,
    TrackerResult,
)
from asset_tracker.core.guards import (
    check_amount,
    check_category,
    check_decimals,
    check_token,
    coerce_category,
    first_failure,
)
from asset_tracker.ledger.store import TrackerStore

logger = logging.getLogger(__name__)


def _first_index(assets: List[Asset], token: str) -> Optional[int]:
    """Индекс первой записи с данным token (линейный поиск)."""
    for index, asset in enumerate(assets):
        if asset.token == token:
            return index
    return None


class AssetLedger:
    """Owner-операции над store.user_assets (stateless)."""

    def add_asset(
        self,
        store: TrackerStore,
        owner: str,
        token: Any,
        amount: Any,
        decimals: Any,
        category: Any,
    ) -> TrackerResult:
        """
        Добавление актива в конец списка владельца.

        Порядок проверок:
        1. token: ASCII, длина 1..32
        2. amount > 0
        3. decimals в [0, 18]
        4. category в whitelist
        5. длина списка < max_assets_per_user → иначе CAPACITY_EXCEEDED

        Args:
            store: Состояние ledger
            owner: Владелец списка (вызывающий)
            token: Символ токена
            amount: Количество
            decimals: Число знаков после запятой
            category: Категория (str или AssetCategory)

        Returns:
            TrackerResult
        """
        failure = first_failure(
            check_token(token),
            check_amount(amount),
            check_decimals(decimals),
            check_category(category),
        )
        if failure is not None:
            logger.debug("add_asset rejected for %s: %s (%s)", owner, failure.block_reason, failure.details)
            return failure

        assets = store.user_assets.get(owner, [])
        limit = store.config.max_assets_per_user
        if len(assets) >= limit:
            logger.debug("add_asset rejected for %s: list full (%d/%d)", owner, len(assets), limit)
            return TrackerResult.failure(
                ErrorKind.CAPACITY_EXCEEDED,
                ERR_LIST_FULL,
                "asset_list_full",
                f"{len(assets)} assets, max_assets_per_user={limit}",
            )

        asset = Asset(
            token=token,
            amount=amount,
            decimals=decimals,
            category=coerce_category(category),
        )
        store.user_assets[owner] = [*assets, asset]
        logger.debug("Asset added for %s: %s amount=%d", owner, token, amount)
        return TrackerResult.success(details=f"position={len(assets)}")

    def update_asset_balance(
        self, store: TrackerStore, owner: str, token: Any, new_amount: Any
    ) -> TrackerResult:
        """
        Новый amount для первой записи с данным token.

        Returns:
            TrackerResult (NOT_FOUND если списка нет, он пуст или token не найден)
        """
        failure = first_failure(check_token(token), check_amount(new_amount))
        if failure is not None:
            logger.debug("update_asset_balance rejected for %s: %s", owner, failure.block_reason)
            return failure

        assets = store.user_assets.get(owner)
        if not assets:
            return TrackerResult.failure(
                ErrorKind.NOT_FOUND, ERR_NO_ASSETS, "no_assets", f"owner={owner!r}"
            )

        index = _first_index(assets, token)
        if index is None:
            return TrackerResult.failure(
                ErrorKind.NOT_FOUND, ERR_ASSET_NOT_FOUND, "asset_not_found", f"token={token!r}"
            )

        updated = list(assets)
        updated[index] = assets[index].with_amount(new_amount)
        store.user_assets[owner] = updated
        logger.debug("Balance updated for %s: %s[%d] amount=%d", owner, token, index, new_amount)
        return TrackerResult.success(details=f"position={index}")

    def remove_asset(self, store: TrackerStore, owner: str, token: Any) -> TrackerResult:
        """
        Удаление первой записи с данным token, порядок остальных сохраняется.

        Пустой список после удаления остаётся в store.
        """
        failure = check_token(token)
        if failure is not None:
            logger.debug("remove_asset rejected for %s: %s", owner, failure.block_reason)
            return failure

        assets = store.user_assets.get(owner)
        if assets is None:
            return TrackerResult.failure(
                ErrorKind.NOT_FOUND, ERR_NO_ASSETS, "no_assets", f"owner={owner!r}"
            )

        index = _first_index(assets, token)
        if index is None:
            return TrackerResult.failure(
                ErrorKind.NOT_FOUND, ERR_ASSET_NOT_FOUND, "asset_not_found", f"token={token!r}"
            )

        store.user_assets[owner] = assets[:index] + assets[index + 1:]
        logger.debug("Asset removed for %s: %s[%d]", owner, token, index)
        return TrackerResult.success(details=f"position={index}")

    def get_user_assets(self, store: TrackerStore, user: str) -> Optional[Tuple[Asset, ...]]:
        """Список активов владельца или None, если он ни разу не добавлял активы."""
        assets = store.user_assets.get(user)
        return tuple(assets) if assets is not None else None
