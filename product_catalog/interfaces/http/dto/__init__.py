from .auth import LoginRequestDTO, MessageDTO, RegisterRequestDTO, TokenDTO
from .products import DeleteProductsDTO, ProductWriteDTO

__all__ = [
    "DeleteProductsDTO",
    "LoginRequestDTO",
    "MessageDTO",
    "ProductWriteDTO",
    "RegisterRequestDTO",
    "TokenDTO",
]
