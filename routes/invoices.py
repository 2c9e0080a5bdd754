from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_db
from models import User
import schemas
from auth import get_current_admin, get_current_user
from services import InvoiceService, NotFound

router = APIRouter(prefix="/api/invoices", tags=["Invoices"])


@router.get("", response_model=schemas.InvoiceListResult)
async def get_invoices(
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    """Get all invoices (Admin only)"""
    return {"success": True, "invoices": InvoiceService.get_invoices(db)}


@router.get("/{invoice_id}", response_model=schemas.InvoiceDetailResult)
async def get_invoice(
    invoice_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get a single invoice with its items; customers can only see their own"""
    return {"success": True, "invoice": InvoiceService.get_visible_invoice(db, invoice_id, current_user)}


@router.post("/generate", response_model=schemas.InvoiceResult, status_code=status.HTTP_201_CREATED)
async def generate_invoice(
    payload: schemas.InvoiceGenerate,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    """Generate an invoice and its WhatsApp link for an order (Admin only)"""
    invoice = InvoiceService.generate_invoice(db, payload.order_id, payload.customer_phone)
    return {
        "success": True,
        "message": "Invoice generated successfully",
        "invoice": invoice,
        "whatsapp_link": invoice.whatsapp_link
    }


@router.put("/{invoice_id}/whatsapp-link", response_model=schemas.WhatsAppLinkResult)
async def update_whatsapp_link(
    invoice_id: int,
    payload: schemas.InvoiceLinkUpdate,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    """Rebuild an invoice's WhatsApp link from the current order (Admin only)"""
    invoice = InvoiceService.get_invoice(db, invoice_id)
    if not invoice:
        raise NotFound("Invoice not found")

    invoice = InvoiceService.regenerate_link(db, invoice, payload.customer_phone)
    return {
        "success": True,
        "message": "WhatsApp link updated successfully",
        "whatsapp_link": invoice.whatsapp_link
    }
