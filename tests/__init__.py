"""
Test suite for asset-tracker

Contains:
- tests/unit/          : Unit tests for individual modules and the AssetTracker facade
"""
