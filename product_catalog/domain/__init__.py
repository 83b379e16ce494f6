# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .products import Product, ProductPage
from .users import Identity, User

__all__ = [
    "Identity",
    "Product",
    "ProductPage",
    "User",
]
