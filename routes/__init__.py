from fastapi import APIRouter
from .auth import router as auth_router
from .products import router as products_router
from .orders import router as orders_router
from .invoices import router as invoices_router
from .finance import router as finance_router
from .unboxing import router as unboxing_router
from .dashboard import router as dashboard_router
from .health import router as health_router

# Create main API router
api_router = APIRouter()

# Include all route modules
api_router.include_router(auth_router, tags=["Authentication"])
api_router.include_router(products_router, tags=["Products"])
api_router.include_router(orders_router, tags=["Orders"])
api_router.include_router(invoices_router, tags=["Invoices"])
api_router.include_router(finance_router, tags=["Finance"])
api_router.include_router(unboxing_router, tags=["Unboxing"])
api_router.include_router(dashboard_router, tags=["Dashboard"])
api_router.include_router(health_router, tags=["Health"])

__all__ = ["api_router"]
