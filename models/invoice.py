from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from .base import Base


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False, unique=True)
    invoice_number = Column(String(50), nullable=False, unique=True)
    whatsapp_link = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default="unpaid")
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    order = relationship("Order", back_populates="invoice")

    @property
    def customer_name(self):
        return self.order.customer_name

    @property
    def customer_phone(self):
        return self.order.customer_phone

    @property
    def customer_email(self):
        return self.order.customer_email

    @property
    def total_amount(self):
        return self.order.total_amount

    @property
    def order_status(self):
        return self.order.status

    @property
    def order_date(self):
        return self.order.created_at

    @property
    def items(self):
        return self.order.order_items
