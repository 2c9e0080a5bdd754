from sqlalchemy import func, or_
from sqlalchemy.orm import Session
from models import Product, OrderItem
from typing import List, Optional

from .errors import Conflict


class ProductService:
    @staticmethod
    def get_products(db: Session, skip: int = 0, limit: int = 100, product_type: str = None,
                     search: str = None) -> List[Product]:
        query = db.query(Product)
        if product_type:
            query = query.filter(Product.type == product_type)
        if search:
            term = f"%{search.lower()}%"
            query = query.filter(or_(
                func.lower(Product.name).like(term),
                func.lower(Product.description).like(term),
            ))
        return query.order_by(Product.created_at.desc(), Product.id.desc()).offset(skip).limit(limit).all()

    @staticmethod
    def get_product(db: Session, product_id: int) -> Optional[Product]:
        return db.query(Product).filter(Product.id == product_id).first()

    @staticmethod
    def create_product(db: Session, product_data: dict) -> Product:
        db_product = Product(**product_data)
        db.add(db_product)
        db.commit()
        db.refresh(db_product)
        return db_product

    @staticmethod
    def update_product(db: Session, db_product: Product, update_data: dict) -> Product:
        for key, value in update_data.items():
            setattr(db_product, key, value)
        db.commit()
        db.refresh(db_product)
        return db_product

    @staticmethod
    def delete_product(db: Session, db_product: Product):
        # Order lines keep a reference to the product they were bought from
        referenced = db.query(func.count(OrderItem.id)).filter(OrderItem.product_id == db_product.id).scalar()
        if referenced:
            raise Conflict("Product has existing orders and cannot be deleted")
        db.delete(db_product)
        db.commit()
