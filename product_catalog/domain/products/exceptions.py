# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from product_catalog.shared.errors.base import DomainError


class ProductNotFoundError(DomainError):
    code = "product_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "Product not found"


class NoProductsDeletedError(ProductNotFoundError):
    message = "No products found to delete"


class InvalidProductIdsError(DomainError):
    code = "invalid_input"
    message = "IDs should be an array"


class InvalidPriceRangeError(DomainError):
    code = "invalid_price_range"
    message = "minPrice cannot be greater than maxPrice"


class PageOutOfBoundsError(DomainError):
    code = "page_out_of_bounds"

    def __init__(self, page: int, total_pages: int) -> None:
        super().__init__(
            f"Page {page} is out of bounds. There are only {total_pages} pages.",
            context={"page": page, "totalPages": total_pages},
        )
