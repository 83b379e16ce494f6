from .json_product_repository import JsonProductRepository
from .json_user_repository import JsonUserRepository

__all__ = ["JsonProductRepository", "JsonUserRepository"]
