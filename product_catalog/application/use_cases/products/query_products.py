# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Catalogue listing: name/price filtering followed by pagination.

Query parameters arrive as raw strings and are parsed leniently. A price
bound is read from its leading number and ignored when it has none, and a
``page`` or ``limit`` that does not start with a non-zero integer falls back
to the default. An inverted price range is still reported as an error, but only
after both bounds have been applied to the collection.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from product_catalog.domain.products.entities import Product, ProductPage
from product_catalog.domain.products.exceptions import (
    InvalidPriceRangeError,
    PageOutOfBoundsError,
)
from product_catalog.domain.products.repositories import ProductRepository
from product_catalog.shared.logging import logger

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_NUMBER = r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
_LEADING_NUMBER = re.compile(rf"^\s*({_NUMBER})")
_WHOLE_NUMBER = re.compile(rf"^\s*({_NUMBER})\s*$")


@dataclass(slots=True, frozen=True)
class ProductQuery:
    name: str | None = None
    min_price: str | None = None
    max_price: str | None = None
    page: str | None = None
    limit: str | None = None


def _to_float(raw: Any, pattern: re.Pattern[str]) -> float | None:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return None if math.isnan(raw) else float(raw)
    match = pattern.match(str(raw))
    return float(match.group(1)) if match else None


def parse_price_bound(raw: Any) -> float | None:
    """Leading-number parse: ``"10abc"`` is 10, ``"abc"`` is ``None`` (ignored)."""

    return _to_float(raw, _LEADING_NUMBER)


def parse_positive_int(raw: Any, default: int) -> int:
    """Leading-integer parse; zero or garbage yields ``default``, result is at least 1."""

    if raw is None:
        return default
    match = _LEADING_INT.match(str(raw))
    value = int(match.group(1)) if match else 0
    return max(1, value or default)


def _numeric_price(product: Product) -> float | None:
    # stored strings only count when the whole value is a number
    return _to_float(product.price, _WHOLE_NUMBER)


def filter_by_name(products: Iterable[Product], needle: str) -> list[Product]:
    needle = needle.lower()
    return [
        product
        for product in products
        if isinstance(product.name, str) and needle in product.name.lower()
    ]


def filter_by_price(
    products: Iterable[Product], low: float | None, high: float | None
) -> list[Product]:
    selected = []
    for product in products:
        if low is None and high is None:
            selected.append(product)
            continue
        price = _numeric_price(product)
        if price is None:
            continue
        if low is not None and price < low:
            continue
        if high is not None and price > high:
            continue
        selected.append(product)
    return selected


def paginate(products: Sequence[Product], page: int, limit: int) -> ProductPage:
    total_count = len(products)
    total_pages = math.ceil(total_count / limit)
    if page > total_pages:
        raise PageOutOfBoundsError(page, total_pages)
    start = (page - 1) * limit
    return ProductPage(
        total_count=total_count,
        page=page,
        limit=limit,
        total_pages=total_pages,
        data=tuple(products[start : start + limit]),
    )


class QueryProductsUseCase:
    def __init__(self, *, products: ProductRepository) -> None:
        self._products = products

    def execute(self, query: ProductQuery) -> ProductPage:
        filtered: Sequence[Product] = self._products.list_all()

        if query.name:
            filtered = filter_by_name(filtered, query.name)

        low = parse_price_bound(query.min_price)
        high = parse_price_bound(query.max_price)
        filtered = filter_by_price(filtered, low, high)

        if low is not None and high is not None and low > high:
            raise InvalidPriceRangeError()

        page = parse_positive_int(query.page, DEFAULT_PAGE)
        limit = parse_positive_int(query.limit, DEFAULT_LIMIT)
        result = paginate(filtered, page, limit)

        logger.debug(
            f"products.query: ok total={result.total_count} page={page}/{result.total_pages} "
            f"limit={limit}"
        )
        return result
