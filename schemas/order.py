from pydantic import BaseModel, EmailStr, Field
from typing import Dict, List, Literal, Optional
from datetime import datetime

OrderStatus = Literal["pending", "processing", "packing", "shipped", "completed", "cancelled"]
ShippingMethod = Literal["standard", "express"]


class OrderItemCreate(BaseModel):
    product_id: int
    quantity: int = Field(..., gt=0)


class OrderItemResponse(BaseModel):
    id: int
    product_id: int
    product_name: str
    unit_price: float
    quantity: int
    price: float

    class Config:
        from_attributes = True


class OrderCreate(BaseModel):
    # Contact fields may be omitted by a logged-in customer; they default from the profile
    customer_name: Optional[str] = Field(default=None, min_length=1)
    customer_phone: Optional[str] = Field(default=None, min_length=1)
    customer_email: Optional[EmailStr] = None
    items: List[OrderItemCreate] = Field(..., min_length=1)
    total_amount: Optional[float] = Field(default=None, ge=0)
    shipping_method: ShippingMethod = "standard"
    notes: Optional[str] = None


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


class OrderResponse(BaseModel):
    id: int
    user_id: Optional[int] = None
    customer_name: str
    customer_phone: str
    customer_email: str
    total_amount: float
    shipping_method: str
    shipping_fee: float
    notes: Optional[str] = None
    status: str
    item_count: int
    created_at: datetime
    updated_at: datetime
    order_items: List[OrderItemResponse]

    class Config:
        from_attributes = True


class OrderResult(BaseModel):
    success: bool = True
    message: Optional[str] = None
    order: OrderResponse


class OrderListResult(BaseModel):
    success: bool = True
    orders: List[OrderResponse]


class ShippingFeesResult(BaseModel):
    success: bool = True
    shipping_fees: Dict[str, float]
