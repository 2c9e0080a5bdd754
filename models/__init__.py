from .base import Base
from .user import User, ROLE_ADMIN, ROLE_CUSTOMER
from .product import Product, PRODUCT_TYPES
from .order import Order, OrderItem
from .invoice import Invoice
from .extras import FinanceRecord, UnboxingPhoto

__all__ = [
    "Base",
    "User",
    "ROLE_ADMIN",
    "ROLE_CUSTOMER",
    "Product",
    "PRODUCT_TYPES",
    "Order",
    "OrderItem",
    "Invoice",
    "FinanceRecord",
    "UnboxingPhoto"
]
