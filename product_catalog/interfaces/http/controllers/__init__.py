from .auth_controller import AuthController
from .misc_controller import MiscController
from .product_controller import ProductController

__all__ = ["AuthController", "MiscController", "ProductController"]
