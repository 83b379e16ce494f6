# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import MUTABLE_FIELDS, RECORD_KEYS, Product, ProductPage
from .exceptions import (
    InvalidPriceRangeError,
    InvalidProductIdsError,
    NoProductsDeletedError,
    PageOutOfBoundsError,
    ProductNotFoundError,
)

__all__ = [
    "MUTABLE_FIELDS",
    "InvalidPriceRangeError",
    "InvalidProductIdsError",
    "NoProductsDeletedError",
    "PageOutOfBoundsError",
    "Product",
    "ProductNotFoundError",
    "ProductPage",
    "RECORD_KEYS",
]
