from .errors import StoreError, InvalidInput, NotFound, Conflict
from .product_service import ProductService
from .order_service import OrderService
from .invoice_service import InvoiceService
from .finance_service import FinanceService
from .gallery_service import GalleryService

__all__ = [
    "StoreError",
    "InvalidInput",
    "NotFound",
    "Conflict",
    "ProductService",
    "OrderService",
    "InvoiceService",
    "FinanceService",
    "GalleryService"
]
