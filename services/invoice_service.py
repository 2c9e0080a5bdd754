import logging
import os
import random
import re
import time
from typing import List, Optional
from urllib.parse import quote

from dotenv import load_dotenv
from sqlalchemy.orm import Session, joinedload

from models import Invoice, Order, User
from .errors import Conflict, InvalidInput, NotFound

load_dotenv()

logger = logging.getLogger(__name__)

STORE_NAME = os.getenv("STORE_NAME", "K-Pop Merchandise Store")
STORE_BANK_NAME = os.getenv("STORE_BANK_NAME", "BCA")
STORE_BANK_ACCOUNT = os.getenv("STORE_BANK_ACCOUNT", "1234567890")
STORE_BANK_HOLDER = os.getenv("STORE_BANK_HOLDER", STORE_NAME)

WHATSAPP_BASE_URL = "https://wa.me/"

# Characters encodeURIComponent leaves alone
_URI_COMPONENT_SAFE = "-_.!~*'()"


def format_rupiah(amount: float) -> str:
    """Format an amount the way id-ID locales print it: ``Rp 1.250.000``."""
    if float(amount).is_integer():
        text = f"{int(amount):,}".replace(",", ".")
    else:
        text = f"{amount:,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"Rp {text}"


def phone_digits(phone: str) -> str:
    return re.sub(r"[^0-9]", "", phone or "")


def generate_invoice_number() -> str:
    return f"INV-{int(time.time() * 1000)}-{random.randint(0, 999)}"


def build_order_message(order: Order, invoice_number: str) -> str:
    """Render the pre-filled WhatsApp text for an order."""
    item_lines = "\n".join(
        f"• {item.product_name} x{item.quantity} - {format_rupiah(item.price)}"
        for item in order.order_items
    )

    return (
        f"Halo {order.customer_name}! 👋\n\n"
        f"Terima kasih sudah berbelanja di {STORE_NAME}! 🎵✨\n\n"
        f"📋 *Detail Pesanan:*\n"
        f"No. Order: #{order.id}\n"
        f"No. Invoice: {invoice_number}\n"
        f"Nama: {order.customer_name}\n\n"
        f"📦 *Item Pesanan:*\n{item_lines}\n\n"
        f"Ongkir ({order.shipping_method}): {format_rupiah(order.shipping_fee)}\n"
        f"Total: {format_rupiah(order.total_amount)}\n\n"
        f"Status: {order.status.upper()}\n\n"
        f"💳 *Pembayaran:*\n"
        f"Transfer ke rekening berikut:\n"
        f"{STORE_BANK_NAME}: {STORE_BANK_ACCOUNT}\n"
        f"Atas Nama: {STORE_BANK_HOLDER}\n\n"
        f"Kirim bukti transfer ke nomor ini setelah pembayaran.\n\n"
        f"Terima kasih! 🙏\n\n"
        f"Salam,\n{STORE_NAME} 💜"
    )


def build_whatsapp_link(phone: str, message: str) -> str:
    digits = phone_digits(phone)
    if not digits:
        raise InvalidInput("Customer phone number must contain digits")
    return f"{WHATSAPP_BASE_URL}{digits}?text={quote(message, safe=_URI_COMPONENT_SAFE)}"


class InvoiceService:
    @staticmethod
    def _query(db: Session):
        return db.query(Invoice).options(
            joinedload(Invoice.order).joinedload(Order.order_items)
        )

    @staticmethod
    def get_invoices(db: Session) -> List[Invoice]:
        return InvoiceService._query(db).order_by(Invoice.created_at.desc(), Invoice.id.desc()).all()

    @staticmethod
    def get_invoice(db: Session, invoice_id: int) -> Optional[Invoice]:
        return InvoiceService._query(db).filter(Invoice.id == invoice_id).first()

    @staticmethod
    def get_visible_invoice(db: Session, invoice_id: int, user: User) -> Invoice:
        invoice = InvoiceService.get_invoice(db, invoice_id)
        if not invoice or (not user.is_admin and invoice.order.user_id != user.id):
            raise NotFound("Invoice not found")
        return invoice

    @staticmethod
    def _unused_invoice_number(db: Session) -> str:
        invoice_number = generate_invoice_number()
        while db.query(Invoice.id).filter(Invoice.invoice_number == invoice_number).first():
            invoice_number = generate_invoice_number()
        return invoice_number

    @staticmethod
    def generate_invoice(db: Session, order_id: int, customer_phone: str) -> Invoice:
        order = db.query(Order).options(joinedload(Order.order_items)).filter(Order.id == order_id).first()
        if not order:
            raise NotFound("Order not found")
        if order.invoice is not None:
            raise Conflict("Invoice already exists for this order; regenerate its WhatsApp link instead")

        invoice_number = InvoiceService._unused_invoice_number(db)
        whatsapp_link = build_whatsapp_link(customer_phone, build_order_message(order, invoice_number))

        db_invoice = Invoice(order_id=order.id, invoice_number=invoice_number, whatsapp_link=whatsapp_link)
        db.add(db_invoice)
        db.commit()
        db.refresh(db_invoice)
        logger.info("Invoice %s generated for order %s", invoice_number, order.id)
        return db_invoice

    @staticmethod
    def regenerate_link(db: Session, db_invoice: Invoice, customer_phone: str) -> Invoice:
        message = build_order_message(db_invoice.order, db_invoice.invoice_number)
        db_invoice.whatsapp_link = build_whatsapp_link(customer_phone, message)
        db.commit()
        db.refresh(db_invoice)
        return db_invoice
