from .api import StorefrontClient, ApiError
from .session import AuthSession
from .cart import Cart, CartItem
from .calculator import Calculator
from .storage import JsonFileStore

__all__ = [
    "StorefrontClient",
    "ApiError",
    "AuthSession",
    "Cart",
    "CartItem",
    "Calculator",
    "JsonFileStore"
]
