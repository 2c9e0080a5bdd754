from sqlalchemy import Column, Integer, String, Float, DateTime, Text
from datetime import datetime
from .base import Base

PRODUCT_TYPES = ("PO", "Ready")


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Float, nullable=False)
    type = Column(String(10), nullable=False, default="Ready")  # PO = pre-order
    stock = Column(Integer, nullable=False, default=0)
    image_url = Column(String(500), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
