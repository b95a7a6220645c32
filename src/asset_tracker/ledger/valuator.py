"""PortfolioValuator — Read-only стоимость портфеля.

value = Σ amount_i × price(token_i) по всем записям списка, включая дубликаты.
Токен без Price даёт 0. Нормализация по decimals НЕ применяется:
amount и price умножаются как есть.
"""

from asset_tracker.ledger.store import TrackerStore


class PortfolioValuator:
    """Агрегатор AssetLedger × PriceOracleFeed."""

    def get_portfolio_value(self, store: TrackerStore, user: str) -> int:
        """
        Стоимость портфеля пользователя.

        Args:
            store: Состояние ledger
            user: Владелец

        Returns:
            0 если списка нет, иначе сумма amount × price
        """
        assets = store.user_assets.get(user)
        if assets is None:
            return 0

        total = 0
        for asset in assets:
            price = store.asset_prices.get(asset.token)
            if price is not None:
                total += asset.amount * price.price
        return total
