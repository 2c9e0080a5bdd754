from .product import (
    ProductBase, ProductCreate, ProductUpdate, ProductResponse, ProductResult, ProductListResult
)
from .order import (
    OrderItemCreate, OrderItemResponse, OrderCreate, OrderStatusUpdate, OrderResponse,
    OrderResult, OrderListResult, ShippingFeesResult
)
from .auth import UserRegister, UserLogin, UserResponse, TokenResult, ProfileResult, TokenData
from .invoice import (
    InvoiceGenerate,
    InvoiceLinkUpdate,
    InvoiceResponse,
    InvoiceDetail,
    InvoiceResult,
    InvoiceDetailResult,
    InvoiceListResult,
    WhatsAppLinkResult
)
from .extras import (
    FinanceRecordCreate,
    FinanceRecordResponse,
    FinanceTotals,
    FinanceSummary,
    FinanceListResult,
    FinanceRecordResult,
    FinanceSummaryResult,
    UnboxingPhotoResponse,
    UnboxingPhotoResult,
    UnboxingPhotoListResult,
    MessageResult,
    DashboardStats,
    DashboardStatsResult
)

__all__ = [
    "ProductBase", "ProductCreate", "ProductUpdate", "ProductResponse", "ProductResult", "ProductListResult",
    "OrderItemCreate", "OrderItemResponse", "OrderCreate", "OrderStatusUpdate", "OrderResponse",
    "OrderResult", "OrderListResult", "ShippingFeesResult",
    "UserRegister", "UserLogin", "UserResponse", "TokenResult", "ProfileResult", "TokenData",
    "InvoiceGenerate", "InvoiceLinkUpdate", "InvoiceResponse", "InvoiceDetail", "InvoiceResult",
    "InvoiceDetailResult", "InvoiceListResult", "WhatsAppLinkResult",
    "FinanceRecordCreate", "FinanceRecordResponse", "FinanceTotals", "FinanceSummary",
    "FinanceListResult", "FinanceRecordResult", "FinanceSummaryResult",
    "UnboxingPhotoResponse", "UnboxingPhotoResult", "UnboxingPhotoListResult",
    "MessageResult", "DashboardStats", "DashboardStatsResult"
]
