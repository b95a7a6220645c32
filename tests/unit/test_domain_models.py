"""
Тесты для доменных моделей: Asset, Price, TransferRecord, AdminConfig

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Immutability (frozen=True)
3. Граничные значения token / decimals / amount
4. JSON сериализацию
"""

import pytest
from pydantic import ValidationError

from asset_tracker.core.config import TrackerConfig
from asset_tracker.core.domain import (
    AdminConfig,
    Asset,
    AssetCategory,
    Price,
    TrackerResult,
    TransferRecord,
)
from asset_tracker.core.domain.results import ERR_LIST_FULL, ErrorKind


# =============================================================================
# ASSET TESTS
# =============================================================================


class TestAsset:
    """Тесты для модели Asset"""

    @pytest.fixture
    def btc(self) -> Asset:
        return Asset(token="BTC", amount=10, decimals=8, category=AssetCategory.CRYPTO)

    def test_create_valid(self, btc):
        assert btc.token == "BTC"
        assert btc.amount == 10
        assert btc.decimals == 8
        assert btc.category == AssetCategory.CRYPTO

    def test_category_from_string(self):
        asset = Asset(token="USDC", amount=1, decimals=6, category="stablecoin")
        assert asset.category == AssetCategory.STABLECOIN

    def test_immutable(self, btc):
        with pytest.raises(ValidationError):
            btc.amount = 20

    def test_with_amount_returns_new_instance(self, btc):
        updated = btc.with_amount(25)

        assert updated.amount == 25
        assert btc.amount == 10
        assert updated.token == btc.token

    @pytest.mark.parametrize("token", ["", "X" * 33, "BТC"])
    def test_invalid_token(self, token):
        """Пустой, длиннее 32 символов, не-ASCII (кириллическая Т)."""
        with pytest.raises(ValidationError):
            Asset(token=token, amount=1, decimals=0, category="crypto")

    def test_token_boundary_32(self):
        asset = Asset(token="X" * 32, amount=1, decimals=0, category="nft")
        assert len(asset.token) == 32

    @pytest.mark.parametrize("decimals", [-1, 19])
    def test_invalid_decimals(self, decimals):
        with pytest.raises(ValidationError):
            Asset(token="ETH", amount=1, decimals=decimals, category="crypto")

    def test_invalid_amount(self):
        with pytest.raises(ValidationError):
            Asset(token="ETH", amount=0, decimals=18, category="crypto")

    def test_invalid_category(self):
        with pytest.raises(ValidationError):
            Asset(token="ETH", amount=1, decimals=18, category="equity")

    def test_json_dump(self, btc):
        assert btc.model_dump(mode="json") == {
            "token": "BTC",
            "amount": 10,
            "decimals": 8,
            "category": "crypto",
        }


# =============================================================================
# PRICE / TRANSFER TESTS
# =============================================================================


class TestPrice:
    def test_create_valid(self):
        price = Price(price=50000, timestamp=100, source="ST2ORACLE")
        assert price.price == 50000
        assert price.source == "ST2ORACLE"

    def test_non_positive_price_rejected(self):
        with pytest.raises(ValidationError):
            Price(price=0, timestamp=100, source="ST2ORACLE")


class TestTransferRecord:
    def test_negative_amount_allowed(self):
        """Fee без нижней границы: запись с отрицательной суммой допустима."""
        record = TransferRecord(amount=-5, sender="ST2ORACLE", recipient="ST1ADMIN")
        assert record.amount == -5

    def test_equality(self):
        a = TransferRecord(amount=100, sender="O", recipient="A")
        b = TransferRecord(amount=100, sender="O", recipient="A")
        assert a == b


# =============================================================================
# ADMIN CONFIG TESTS
# =============================================================================


class TestAdminConfig:
    def test_defaults(self):
        config = AdminConfig(admin="ST1ADMIN")

        assert config.oracle is None
        assert config.oracle_configured is False
        assert config.max_assets_per_user == 50
        assert config.price_update_fee == 100
        assert config.last_update_timestamp == 0

    def test_empty_oracle_not_configured(self):
        assert AdminConfig(admin="A", oracle="").oracle_configured is False

    def test_max_assets_must_be_positive(self):
        with pytest.raises(ValidationError):
            AdminConfig(admin="A", max_assets_per_user=0)


class TestTrackerConfig:
    def test_defaults(self):
        config = TrackerConfig()
        assert config.admin == "ST1ADMIN"
        assert config.max_assets_per_user == 50

    def test_rejects_empty_admin(self):
        with pytest.raises(ValueError, match="admin"):
            TrackerConfig(admin="")

    def test_rejects_non_positive_max_assets(self):
        with pytest.raises(ValueError, match="max_assets_per_user"):
            TrackerConfig(max_assets_per_user=0)


# =============================================================================
# RESULT TESTS
# =============================================================================


class TestTrackerResult:
    def test_success_is_truthy(self):
        result = TrackerResult.success()
        assert result
        assert result.error_kind is None
        assert result.effects == ()

    def test_failure_is_falsy(self):
        result = TrackerResult.failure(ErrorKind.CAPACITY_EXCEEDED, ERR_LIST_FULL, "asset_list_full")
        assert not result
        assert result.error_kind == ErrorKind.CAPACITY_EXCEEDED
        assert result.error_code == 107
