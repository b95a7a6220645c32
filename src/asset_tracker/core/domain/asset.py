"""
Asset — Модель актива в списке владельца

Immutable Pydantic модель. Изменение баланса создаёт новый экземпляр
через model_copy, список владельца хранит порядок вставки.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from .limits import MAX_DECIMALS, MIN_DECIMALS, TOKEN_MAX_LENGTH, TOKEN_MIN_LENGTH


# =============================================================================
# ENUMS
# =============================================================================


class AssetCategory(str, Enum):
    """Категория актива (whitelist)."""

    CRYPTO = "crypto"
    STABLECOIN = "stablecoin"
    NFT = "nft"


# =============================================================================
# ASSET MODEL
# =============================================================================


class Asset(BaseModel):
    """
    Актив в списке владельца.

    Один и тот же token может встречаться в списке несколько раз:
    дубликаты не сливаются.
    """

    token: str = Field(
        ...,
        min_length=TOKEN_MIN_LENGTH,
        max_length=TOKEN_MAX_LENGTH,
        description="Символ токена (ASCII, например 'BTC')",
    )
    amount: int = Field(..., gt=0, description="Количество в минимальных единицах")
    decimals: int = Field(
        ..., ge=MIN_DECIMALS, le=MAX_DECIMALS, description="Число знаков после запятой"
    )
    category: AssetCategory = Field(..., description="Категория актива (inline)")

    model_config = {"frozen": True}

    @field_validator("token")
    @classmethod
    def validate_token_ascii(cls, v: str) -> str:
        if not v.isascii():
            raise ValueError(f"token {v!r} must be ASCII")
        return v

    def with_amount(self, amount: int) -> "Asset":
        """Новый экземпляр с обновлённым количеством."""
        return self.model_copy(update={"amount": amount})
