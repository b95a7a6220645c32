"""Конфигурация ledger при инициализации."""

from dataclasses import dataclass

from asset_tracker.core.domain.limits import (
    DEFAULT_MAX_ASSETS_PER_USER,
    DEFAULT_PRICE_UPDATE_FEE,
)


@dataclass(frozen=True)
class TrackerConfig:
    """
    Параметры создания TrackerStore.

    - admin: фиксируется на всё время жизни store
    - max_assets_per_user / price_update_fee: начальные значения,
      далее меняются только admin-операциями
    """

    admin: str = "ST1ADMIN"
    max_assets_per_user: int = DEFAULT_MAX_ASSETS_PER_USER
    price_update_fee: int = DEFAULT_PRICE_UPDATE_FEE

    def __post_init__(self):
        if not self.admin:
            raise ValueError("admin principal must be non-empty")
        if self.max_assets_per_user <= 0:
            raise ValueError(
                f"max_assets_per_user must be positive, got {self.max_assets_per_user}"
            )
