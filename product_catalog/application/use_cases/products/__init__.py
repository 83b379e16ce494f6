from .create_product import CreateProductUseCase
from .delete_products import DeleteProductsUseCase, DeleteProductUseCase
from .get_product import GetProductUseCase
from .query_products import ProductQuery, QueryProductsUseCase
from .update_product import UpdateProductUseCase

__all__ = [
    "CreateProductUseCase",
    "DeleteProductUseCase",
    "DeleteProductsUseCase",
    "GetProductUseCase",
    "ProductQuery",
    "QueryProductsUseCase",
    "UpdateProductUseCase",
]
