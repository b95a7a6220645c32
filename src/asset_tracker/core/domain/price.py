"""
Price / TransferRecord — Модели oracle-данных

Price: последняя цена токена (одна запись на token, без истории).
TransferRecord: эффект оплаты price update (oracle → admin).
"""

from pydantic import BaseModel, Field


class Price(BaseModel):
    """Последняя принятая цена токена."""

    price: int = Field(..., gt=0, description="Цена за единицу amount")
    timestamp: int = Field(..., description="Timestamp принятого update (глобальные часы)")
    source: str = Field(..., description="Principal, отправивший update")

    model_config = {"frozen": True}


class TransferRecord(BaseModel):
    """
    Запись о переводе комиссии за price update.

    Fee может быть нулевым или отрицательным: ledger не ограничивает
    price_update_fee снизу.
    """

    amount: int = Field(..., description="Сумма комиссии (price_update_fee)")
    sender: str = Field(..., description="Плательщик (oracle)")
    recipient: str = Field(..., description="Получатель (admin)")

    model_config = {"frozen": True}
