from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from .order import OrderItemResponse


class InvoiceGenerate(BaseModel):
    order_id: int
    customer_phone: str = Field(..., min_length=1)


class InvoiceLinkUpdate(BaseModel):
    customer_phone: str = Field(..., min_length=1)


class InvoiceResponse(BaseModel):
    id: int
    order_id: int
    invoice_number: str
    whatsapp_link: str
    status: str
    customer_name: str
    customer_phone: str
    customer_email: str
    total_amount: float
    order_status: str
    created_at: datetime

    class Config:
        from_attributes = True


class InvoiceDetail(InvoiceResponse):
    order_date: datetime
    items: List[OrderItemResponse]


class InvoiceResult(BaseModel):
    success: bool = True
    message: Optional[str] = None
    invoice: InvoiceResponse
    whatsapp_link: str


class InvoiceDetailResult(BaseModel):
    success: bool = True
    invoice: InvoiceDetail


class InvoiceListResult(BaseModel):
    success: bool = True
    invoices: List[InvoiceResponse]


class WhatsAppLinkResult(BaseModel):
    success: bool = True
    message: Optional[str] = None
    whatsapp_link: str
