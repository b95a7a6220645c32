"""Интеграционные тесты фасада AssetTracker.

Coverage:
- End-to-end сценарий: oracle → цена → актив → стоимость
- Owner = caller для операций над списком
- reset() между сценариями
- Сериализация мутаций под конкурентной нагрузкой
"""

import threading

import pytest

from asset_tracker import AssetTracker
from asset_tracker.core.config import TrackerConfig
from asset_tracker.core.domain import ErrorKind, Price, TransferRecord

ADMIN = "ST1ADMIN"
ORACLE = "ST2ORACLE"
USER = "ST1USER"


@pytest.fixture
def tracker():
    return AssetTracker(TrackerConfig(admin=ADMIN))


@pytest.fixture
def oracle_tracker(tracker):
    assert tracker.set_oracle_contract(ADMIN, ORACLE)
    return tracker


# =============================================================================
# END-TO-END
# =============================================================================


def test_end_to_end_portfolio_value(oracle_tracker):
    result = oracle_tracker.update_asset_price(ORACLE, "BTC", 50000, 100)

    assert result.ok
    assert oracle_tracker.get_asset_price("BTC") == Price(price=50000, timestamp=100, source=ORACLE)
    assert oracle_tracker.get_transfer_log() == (
        TransferRecord(amount=100, sender=ORACLE, recipient=ADMIN),
    )

    assert oracle_tracker.add_asset(USER, "BTC", 2, 8, "crypto")
    assert oracle_tracker.get_portfolio_value(USER) == 100000


def test_owner_is_caller(tracker):
    tracker.add_asset(USER, "BTC", 10, 8, "crypto")

    result = tracker.update_asset_balance("ST3STRANGER", "BTC", 1)

    assert result.error_kind == ErrorKind.NOT_FOUND
    assert tracker.get_user_assets(USER)[0].amount == 10
    assert tracker.get_user_assets("ST3STRANGER") is None


def test_capacity_after_exact_max(tracker):
    tracker.set_max_assets(ADMIN, 2)
    assert tracker.add_asset(USER, "BTC", 1, 8, "crypto")
    assert tracker.add_asset(USER, "BTC", 1, 8, "crypto")

    result = tracker.add_asset(USER, "ETH", 1, 18, "crypto")

    assert result.error_kind == ErrorKind.CAPACITY_EXCEEDED


def test_oracle_data_getters(oracle_tracker):
    oracle_tracker.set_asset_yield(ORACLE, "BTC", 500)
    oracle_tracker.set_user_risk_score(ORACLE, USER, 75)
    oracle_tracker.set_asset_category(ADMIN, "BTC", "crypto")

    assert oracle_tracker.get_asset_yield("BTC") == 500
    assert oracle_tracker.get_user_risk_score(USER) == 75
    assert oracle_tracker.get_asset_category("BTC").value == "crypto"
    assert oracle_tracker.get_asset_yield("ETH") is None


def test_get_config(oracle_tracker):
    oracle_tracker.set_price_update_fee(ADMIN, -1)
    oracle_tracker.update_asset_price(ORACLE, "BTC", 1, 42)

    config = oracle_tracker.get_config()

    assert config.admin == ADMIN
    assert config.oracle == ORACLE
    assert config.price_update_fee == -1
    assert config.last_update_timestamp == 42
    assert oracle_tracker.get_transfer_log()[0].amount == -1


def test_reset(oracle_tracker):
    oracle_tracker.update_asset_price(ORACLE, "BTC", 1, 10)
    oracle_tracker.add_asset(USER, "BTC", 1, 8, "crypto")

    oracle_tracker.reset()

    config = oracle_tracker.get_config()
    assert config.oracle is None
    assert config.last_update_timestamp == 0
    assert oracle_tracker.get_user_assets(USER) is None
    assert oracle_tracker.get_asset_price("BTC") is None
    assert oracle_tracker.get_transfer_log() == ()


def test_rejected_calls_leave_state_untouched(oracle_tracker):
    oracle_tracker.add_asset(USER, "BTC", 1, 8, "crypto")
    oracle_tracker.update_asset_price(ORACLE, "BTC", 10, 100)
    before = oracle_tracker.snapshot()

    rejected = [
        oracle_tracker.set_oracle_contract(USER, USER),
        oracle_tracker.set_max_assets(ADMIN, 0),
        oracle_tracker.add_asset(USER, "", 1, 8, "crypto"),
        oracle_tracker.update_asset_balance(USER, "ETH", 5),
        oracle_tracker.remove_asset(USER, "ETH"),
        oracle_tracker.update_asset_price(ORACLE, "BTC", 20, 100),
        oracle_tracker.set_asset_yield(ORACLE, "BTC", 20000),
        oracle_tracker.set_user_risk_score(USER, USER, 1),
        oracle_tracker.set_asset_category(ORACLE, "BTC", "nft"),
    ]

    assert not any(rejected)
    assert oracle_tracker.snapshot() == before


# =============================================================================
# CONCURRENCY
# =============================================================================


def test_concurrent_adds_respect_capacity(tracker):
    tracker.set_max_assets(ADMIN, 10)
    results = []

    def worker(i: int):
        results.append(tracker.add_asset(USER, f"T{i}", 1, 0, "crypto"))

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(40)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sum(1 for r in results if r.ok) == 10
    assert len(tracker.get_user_assets(USER)) == 10


def test_concurrent_price_updates_keep_clock_monotonic(oracle_tracker):
    accepted = []
    guard = threading.Lock()

    def worker(ts: int):
        result = oracle_tracker.update_asset_price(ORACLE, "BTC", ts, ts)
        if result.ok:
            with guard:
                accepted.append(ts)

    threads = [threading.Thread(target=worker, args=(ts,)) for ts in range(1, 51)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    clock = oracle_tracker.get_config().last_update_timestamp
    assert accepted
    assert clock == max(accepted)
    assert len(oracle_tracker.get_transfer_log()) == len(accepted)
    assert oracle_tracker.get_asset_price("BTC").timestamp == clock
