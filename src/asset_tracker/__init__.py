"""
Asset Tracker — guarded ledger для учёта активов и oracle-данных.

Per-owner ограниченные списки активов, глобальные цены / доходности / риск-скоры
от oracle и производная стоимость портфеля.
"""

from asset_tracker.tracker import AssetTracker

__all__ = ["AssetTracker"]
