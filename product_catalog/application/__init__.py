# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.products import (
    CreateProductUseCase,
    DeleteProductsUseCase,
    DeleteProductUseCase,
    GetProductUseCase,
    ProductQuery,
    QueryProductsUseCase,
    UpdateProductUseCase,
)
from .use_cases.users import LoginUserUseCase, RegisterUserUseCase

__all__ = [
    "CreateProductUseCase",
    "DeleteProductUseCase",
    "DeleteProductsUseCase",
    "GetProductUseCase",
    "LoginUserUseCase",
    "ProductQuery",
    "QueryProductsUseCase",
    "RegisterUserUseCase",
    "UpdateProductUseCase",
]
