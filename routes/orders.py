from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session
from typing import Optional

from database import get_db
from models import User
import schemas
from auth import get_current_admin, get_current_user, get_optional_user
from services import OrderService, InvalidInput, NotFound
from services.order_service import SHIPPING_FEES
from .limiter import limiter

router = APIRouter(prefix="/api/orders", tags=["Orders"])


@router.get("", response_model=schemas.OrderListResult)
async def get_orders(
    skip: int = 0,
    limit: int = 100,
    status_filter: Optional[str] = Query(None, alias="status"),
    date: Optional[str] = None,  # Format: YYYY-MM-DD
    search: Optional[str] = None,  # Search by order ID
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    """Get all orders (Admin only)"""
    orders = OrderService.get_orders(db, skip, limit, status_filter, date, search)
    return {"success": True, "orders": orders}


@router.get("/shipping-fees", response_model=schemas.ShippingFeesResult)
async def get_shipping_fees():
    """Shipping fee per method, as used to price new orders"""
    return {"success": True, "shipping_fees": SHIPPING_FEES}


@router.get("/user/my-orders", response_model=schemas.OrderListResult)
async def get_my_orders(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get orders placed by the logged-in user"""
    return {"success": True, "orders": OrderService.get_user_orders(db, current_user.id)}


@router.get("/{order_id}", response_model=schemas.OrderResult)
async def get_order(
    order_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get a single order; customers can only see their own"""
    return {"success": True, "order": OrderService.get_visible_order(db, order_id, current_user)}


@router.post("", response_model=schemas.OrderResult, status_code=status.HTTP_201_CREATED)
@limiter.limit("10/minute")
async def create_order(
    request: Request,
    order: schemas.OrderCreate,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user)
):
    """Place an order; prices come from the current catalog"""
    customer_name = order.customer_name or (current_user.name if current_user else None)
    customer_email = order.customer_email or (current_user.email if current_user else None)
    if not customer_name or not order.customer_phone or not customer_email:
        raise InvalidInput("Customer name, phone and email are required")

    order_data = {
        "user_id": current_user.id if current_user else None,
        "customer_name": customer_name,
        "customer_phone": order.customer_phone,
        "customer_email": customer_email,
        "shipping_method": order.shipping_method,
        "notes": order.notes or None,
    }
    items = [item.dict() for item in order.items]

    created_order = OrderService.create_order(db, order_data, items, declared_total=order.total_amount)
    return {"success": True, "message": "Order created successfully", "order": created_order}


@router.put("/{order_id}/status", response_model=schemas.OrderResult)
@limiter.limit("30/minute")
async def update_order_status(
    request: Request,
    order_id: int,
    order_update: schemas.OrderStatusUpdate,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    """Move an order to a new status (Admin only)"""
    db_order = OrderService.get_order(db, order_id)
    if not db_order:
        raise NotFound("Order not found")

    db_order = OrderService.update_order_status(db, db_order, order_update.status)
    return {"success": True, "message": "Order status updated successfully", "order": db_order}
