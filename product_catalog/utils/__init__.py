"""Shared utilities for the product_catalog package.

Small, reusable helpers that keep stores and controllers focused on
business logic.
"""

__all__ = [
    "fs",
    "jsonio",
]
