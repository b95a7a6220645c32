"""
Limits — Фиксированные границы входных данных ledger

Единственный источник числовых границ для guards и pydantic моделей.
Значения не настраиваются: изменение любой из них меняет инварианты
уже сохранённого состояния.
"""

from typing import Final


# =============================================================================
# TOKEN
# =============================================================================
# Длина символа токена (ASCII)
TOKEN_MIN_LENGTH: Final[int] = 1
TOKEN_MAX_LENGTH: Final[int] = 32


# =============================================================================
# ASSET
# =============================================================================
MIN_DECIMALS: Final[int] = 0
MAX_DECIMALS: Final[int] = 18


# =============================================================================
# ORACLE DATA
# =============================================================================
# Доходность в basis points: 10000 bps = 100%
MAX_YIELD_BPS: Final[int] = 10_000

MAX_RISK_SCORE: Final[int] = 100


# =============================================================================
# DEFAULTS
# =============================================================================
DEFAULT_MAX_ASSETS_PER_USER: Final[int] = 50

DEFAULT_PRICE_UPDATE_FEE: Final[int] = 100

# Начальное значение глобальных часов цен; первый update должен быть > 0
INITIAL_UPDATE_TIMESTAMP: Final[int] = 0
