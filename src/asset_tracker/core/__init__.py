"""
Core domain models, input guards, and role resolution.

This module contains the foundational building blocks that are independent
of the ledger stores.
"""
