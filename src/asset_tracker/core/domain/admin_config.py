"""
AdminConfig — Скалярная конфигурация ledger

Admin фиксируется при создании, oracle изначально отсутствует.
Все изменения создают новый экземпляр (frozen=True).
"""

from typing import Optional

from pydantic import BaseModel, Field

from .limits import (
    DEFAULT_MAX_ASSETS_PER_USER,
    DEFAULT_PRICE_UPDATE_FEE,
    INITIAL_UPDATE_TIMESTAMP,
)


class AdminConfig(BaseModel):
    """Администратор, oracle и настраиваемые параметры."""

    admin: str = Field(..., description="Единственный администратор")
    oracle: Optional[str] = Field(None, description="Назначенный oracle (nullable)")
    max_assets_per_user: int = Field(
        DEFAULT_MAX_ASSETS_PER_USER, gt=0, description="Лимит активов на владельца"
    )
    price_update_fee: int = Field(
        DEFAULT_PRICE_UPDATE_FEE, description="Комиссия за price update (без нижней границы)"
    )
    last_update_timestamp: int = Field(
        INITIAL_UPDATE_TIMESTAMP, description="Глобальные монотонные часы цен"
    )

    model_config = {"frozen": True}

    @property
    def oracle_configured(self) -> bool:
        # Пустая строка эквивалентна отсутствию oracle
        return bool(self.oracle)
