"""
Guards — Проверки формы и диапазона входных данных

Каждый guard возвращает None, если проверка пройдена, иначе TrackerResult
с ErrorKind.INVALID_INPUT и числовым кодом ошибки. Guards чистые:
состояние ledger не читают и не меняют.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все guards вызываются до любой мутации
2. Первая непройденная проверка определяет результат вызова
3. bool не считается целым числом
"""

from typing import Any, Optional

from asset_tracker.core.domain.asset import AssetCategory
from asset_tracker.core.domain.limits import (
    MAX_DECIMALS,
    MAX_RISK_SCORE,
    MAX_YIELD_BPS,
    MIN_DECIMALS,
    TOKEN_MAX_LENGTH,
    TOKEN_MIN_LENGTH,
)
from asset_tracker.core.domain.results import (
    ERR_INVALID_AMOUNT,
    ERR_INVALID_CATEGORY,
    ERR_INVALID_DECIMALS,
    ERR_INVALID_MAX_ASSETS,
    ERR_INVALID_PRICE,
    ERR_INVALID_RISK_SCORE,
    ERR_INVALID_TIMESTAMP,
    ERR_INVALID_TOKEN_LENGTH,
    ERR_INVALID_YIELD,
    ErrorKind,
    TrackerResult,
)


def is_integer(value: Any) -> bool:
    """int, но не bool."""
    return isinstance(value, int) and not isinstance(value, bool)


def _invalid(error_code: int, block_reason: str, details: str) -> TrackerResult:
    return TrackerResult.failure(ErrorKind.INVALID_INPUT, error_code, block_reason, details)


# =============================================================================
# TOKEN / CATEGORY
# =============================================================================


def check_token(token: Any) -> Optional[TrackerResult]:
    """
    Проверка символа токена: ASCII строка длиной 1..32.

    Args:
        token: Символ токена

    Returns:
        None или INVALID_INPUT (ERR_INVALID_TOKEN_LENGTH)
    """
    if not isinstance(token, str):
        return _invalid(ERR_INVALID_TOKEN_LENGTH, "invalid_token_type", f"token={token!r}")

    if not TOKEN_MIN_LENGTH <= len(token) <= TOKEN_MAX_LENGTH:
        return _invalid(
            ERR_INVALID_TOKEN_LENGTH,
            "invalid_token_length",
            f"len(token)={len(token)} outside [{TOKEN_MIN_LENGTH}, {TOKEN_MAX_LENGTH}]",
        )

    if not token.isascii():
        return _invalid(ERR_INVALID_TOKEN_LENGTH, "token_not_ascii", f"token={token!r}")

    return None


def coerce_category(category: Any) -> Optional[AssetCategory]:
    """
    Приведение значения к AssetCategory.

    Returns:
        AssetCategory или None, если значение вне whitelist
    """
    if isinstance(category, AssetCategory):
        return category
    try:
        return AssetCategory(category)
    except ValueError:
        return None


def check_category(category: Any) -> Optional[TrackerResult]:
    if coerce_category(category) is None:
        return _invalid(
            ERR_INVALID_CATEGORY,
            "invalid_category",
            f"category={category!r} not in {[c.value for c in AssetCategory]}",
        )
    return None


# =============================================================================
# NUMERIC RANGES
# =============================================================================


def check_amount(amount: Any) -> Optional[TrackerResult]:
    """Количество: целое > 0."""
    if not is_integer(amount) or amount <= 0:
        return _invalid(ERR_INVALID_AMOUNT, "invalid_amount", f"amount={amount!r} must be > 0")
    return None


def check_decimals(decimals: Any) -> Optional[TrackerResult]:
    if not is_integer(decimals) or not MIN_DECIMALS <= decimals <= MAX_DECIMALS:
        return _invalid(
            ERR_INVALID_DECIMALS,
            "invalid_decimals",
            f"decimals={decimals!r} outside [{MIN_DECIMALS}, {MAX_DECIMALS}]",
        )
    return None


def check_price(price: Any) -> Optional[TrackerResult]:
    if not is_integer(price) or price <= 0:
        return _invalid(ERR_INVALID_PRICE, "invalid_price", f"price={price!r} must be > 0")
    return None


def check_timestamp_type(timestamp: Any) -> Optional[TrackerResult]:
    """Тип timestamp; монотонность проверяет PriceOracleFeed."""
    if not is_integer(timestamp):
        return _invalid(ERR_INVALID_TIMESTAMP, "invalid_timestamp", f"timestamp={timestamp!r}")
    return None


def check_yield_bps(rate: Any) -> Optional[TrackerResult]:
    """Доходность в basis points: [0, 10000]."""
    if not is_integer(rate) or not 0 <= rate <= MAX_YIELD_BPS:
        return _invalid(
            ERR_INVALID_YIELD, "invalid_yield", f"rate={rate!r} outside [0, {MAX_YIELD_BPS}]"
        )
    return None


def check_risk_score(score: Any) -> Optional[TrackerResult]:
    if not is_integer(score) or not 0 <= score <= MAX_RISK_SCORE:
        return _invalid(
            ERR_INVALID_RISK_SCORE,
            "invalid_risk_score",
            f"score={score!r} outside [0, {MAX_RISK_SCORE}]",
        )
    return None


def check_max_assets(n: Any) -> Optional[TrackerResult]:
    if not is_integer(n) or n <= 0:
        return _invalid(ERR_INVALID_MAX_ASSETS, "invalid_max_assets", f"n={n!r} must be > 0")
    return None


def check_fee_type(fee: Any) -> Optional[TrackerResult]:
    """Только тип: диапазон fee не ограничен (ноль и отрицательные допустимы)."""
    if not is_integer(fee):
        return _invalid(ERR_INVALID_AMOUNT, "invalid_fee", f"fee={fee!r} must be an integer")
    return None


# =============================================================================
# UTILITIES
# =============================================================================


def first_failure(*results: Optional[TrackerResult]) -> Optional[TrackerResult]:
    """
    Первый непройденный guard в порядке аргументов.

    Examples:
        >>> first_failure(check_token("BTC"), check_amount(0)).block_reason
        'invalid_amount'
        >>> first_failure(check_token("BTC"), check_amount(1)) is None
        True
    """
    for result in results:
        if result is not None:
            return result
    return None
