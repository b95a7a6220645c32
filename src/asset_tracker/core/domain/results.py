"""
Results — Tagged результат мутирующих вызовов ledger

Каждый мутирующий вызов возвращает TrackerResult вместо bare bool:
- ok / error_kind: класс ошибки для вызывающего кода
- error_code: числовой код ошибки
- block_reason: машиночитаемая причина отказа
- effects: побочные эффекты (перевод комиссии), только при ok=True

Ошибки являются обычными значениями, исключения не бросаются.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional, Tuple

from .price import TransferRecord


# =============================================================================
# ERROR TAXONOMY
# =============================================================================


class ErrorKind(str, Enum):
    """Класс отказа."""

    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_INPUT = "INVALID_INPUT"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"
    NOT_FOUND = "NOT_FOUND"
    STALE_TIMESTAMP = "STALE_TIMESTAMP"
    ORACLE_NOT_CONFIGURED = "ORACLE_NOT_CONFIGURED"


# Числовые коды ошибок
ERR_NOT_AUTHORIZED: Final[int] = 100
ERR_INVALID_AMOUNT: Final[int] = 103
ERR_ASSET_NOT_FOUND: Final[int] = 104
ERR_INVALID_TOKEN_LENGTH: Final[int] = 106
ERR_LIST_FULL: Final[int] = 107
ERR_INVALID_PRICE: Final[int] = 108
ERR_NO_ASSETS: Final[int] = 109
ERR_INVALID_DECIMALS: Final[int] = 111
ERR_INVALID_TIMESTAMP: Final[int] = 112
ERR_INVALID_CATEGORY: Final[int] = 117
ERR_INVALID_YIELD: Final[int] = 118
ERR_INVALID_RISK_SCORE: Final[int] = 119
ERR_ORACLE_NOT_SET: Final[int] = 120
ERR_INVALID_MAX_ASSETS: Final[int] = 121


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class TrackerResult:
    """Результат мутирующего вызова."""

    ok: bool
    error_kind: Optional[ErrorKind]
    error_code: Optional[int]
    block_reason: str

    # Побочные эффекты в порядке эмиссии
    effects: Tuple[TransferRecord, ...] = ()

    # Для отладки
    details: str = ""

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(
        cls, details: str = "", effects: Tuple[TransferRecord, ...] = ()
    ) -> "TrackerResult":
        return cls(
            ok=True,
            error_kind=None,
            error_code=None,
            block_reason="",
            effects=effects,
            details=details,
        )

    @classmethod
    def failure(
        cls, error_kind: ErrorKind, error_code: int, block_reason: str, details: str = ""
    ) -> "TrackerResult":
        return cls(
            ok=False,
            error_kind=error_kind,
            error_code=error_code,
            block_reason=block_reason,
            details=details,
        )
