import logging
import os
from datetime import datetime
from typing import List, Optional

from dotenv import load_dotenv
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from models import Order, OrderItem, Product, User
from .errors import InvalidInput, NotFound
from .finance_service import FinanceService

load_dotenv()

logger = logging.getLogger(__name__)

SHIPPING_FEES = {
    "standard": float(os.getenv("SHIPPING_FEE_STANDARD", "0")),
    "express": float(os.getenv("SHIPPING_FEE_EXPRESS", "50000")),
}

ORDER_STATUSES = ("pending", "processing", "shipped", "completed", "cancelled")
STATUS_ALIASES = {"packing": "processing"}

TOTAL_TOLERANCE = 0.01


def normalize_status(status: str) -> str:
    status = STATUS_ALIASES.get(status, status)
    if status not in ORDER_STATUSES:
        raise InvalidInput(f"Invalid status. Allowed: {', '.join(ORDER_STATUSES)}")
    return status


class OrderService:
    @staticmethod
    def get_orders(db: Session, skip: int = 0, limit: int = 100, status_filter: str = None,
                   date_str: str = None, search: str = None) -> List[Order]:
        query = db.query(Order).options(joinedload(Order.order_items))

        if status_filter:
            query = query.filter(Order.status == normalize_status(status_filter))

        if date_str:
            try:
                filter_date = datetime.strptime(date_str, "%Y-%m-%d").date()
            except ValueError:
                raise InvalidInput("Invalid date format, expected YYYY-MM-DD")
            start_of_day = datetime.combine(filter_date, datetime.min.time())
            end_of_day = datetime.combine(filter_date, datetime.max.time())
            query = query.filter(Order.created_at >= start_of_day, Order.created_at <= end_of_day)

        if search:
            try:
                order_id = int(search.replace('#', '').strip())
                query = query.filter(Order.id == order_id)
            except ValueError:
                query = query.filter(Order.id == -1)

        return query.order_by(Order.created_at.desc(), Order.id.desc()).offset(skip).limit(limit).all()

    @staticmethod
    def get_user_orders(db: Session, user_id: int) -> List[Order]:
        return (
            db.query(Order)
            .options(joinedload(Order.order_items))
            .filter(Order.user_id == user_id)
            .order_by(Order.created_at.desc(), Order.id.desc())
            .all()
        )

    @staticmethod
    def get_order(db: Session, order_id: int) -> Optional[Order]:
        return db.query(Order).options(joinedload(Order.order_items)).filter(Order.id == order_id).first()

    @staticmethod
    def get_visible_order(db: Session, order_id: int, user: User) -> Order:
        """Admins see every order, customers only their own; anything else is reported as missing."""
        order = OrderService.get_order(db, order_id)
        if not order or (not user.is_admin and order.user_id != user.id):
            raise NotFound("Order not found")
        return order

    @staticmethod
    def create_order(db: Session, order_data: dict, items_data: List[dict],
                     declared_total: Optional[float] = None) -> Order:
        """Write the order header and its priced lines in one transaction.

        ``items_data`` holds ``{"product_id", "quantity"}`` dicts. Each line is
        priced from the product's current price and that price is copied onto the
        line. The stored total is the sum of the lines plus the shipping fee; a
        ``declared_total`` that disagrees is rejected. On any failure nothing
        from this call is left in the database.
        """
        if not items_data:
            raise InvalidInput("Order must contain at least one item")
        for item in items_data:
            if item.get("quantity") is None or item["quantity"] <= 0:
                raise InvalidInput("Item quantity must be greater than zero")

        shipping_method = order_data.get("shipping_method", "standard")
        if shipping_method not in SHIPPING_FEES:
            raise InvalidInput(f"Unknown shipping method '{shipping_method}'")
        shipping_fee = SHIPPING_FEES[shipping_method]

        try:
            db_order = Order(
                **order_data,
                shipping_fee=shipping_fee,
                total_amount=0,
                status="pending",
            )
            db.add(db_order)
            db.flush()  # Get order.id for items

            subtotal = 0
            for item_data in items_data:
                line = OrderService._price_line(db, item_data)
                db.add(OrderItem(order_id=db_order.id, **line))
                subtotal += line["price"]

            total_amount = subtotal + shipping_fee
            if declared_total is not None and abs(declared_total - total_amount) > TOTAL_TOLERANCE:
                raise InvalidInput(
                    f"Order total mismatch: declared {declared_total:g}, computed {total_amount:g}"
                )
            db_order.total_amount = total_amount

            db.commit()
            db.refresh(db_order)
            logger.info("Order %s created with %d item(s), total %s", db_order.id, len(items_data), total_amount)
            return db_order
        except Exception:
            # Rollback entire transaction if any part fails
            db.rollback()
            raise

    @staticmethod
    def _price_line(db: Session, item_data: dict) -> dict:
        product = db.query(Product).filter(Product.id == item_data["product_id"]).first()
        if not product:
            raise NotFound(f"Product {item_data['product_id']} not found")

        quantity = item_data["quantity"]
        return {
            "product_id": product.id,
            "product_name": product.name,
            "unit_price": product.price,
            "quantity": quantity,
            "price": product.price * quantity,
        }

    @staticmethod
    def update_order_status(db: Session, db_order: Order, status: str) -> Order:
        # Any known status may be set from any other
        status = normalize_status(status)
        if db_order.status != status:
            logger.info("Order %s status %s -> %s", db_order.id, db_order.status, status)
            db_order.status = status
            db.commit()
            db.refresh(db_order)
        return db_order

    @staticmethod
    def get_dashboard_stats(db: Session) -> dict:
        total_orders = db.query(func.count(Order.id)).scalar()
        pending_orders = db.query(func.count(Order.id)).filter(Order.status == "pending").scalar()
        completed_orders = db.query(func.count(Order.id)).filter(Order.status == "completed").scalar()

        total_revenue = db.query(func.sum(Order.total_amount)).filter(
            Order.status == "completed"
        ).scalar() or 0

        total_products = db.query(func.count(Product.id)).scalar()
        in_stock_products = db.query(func.count(Product.id)).filter(Product.stock > 0).scalar()

        totals = FinanceService.get_totals(db)

        return {
            "total_orders": total_orders,
            "pending_orders": pending_orders,
            "completed_orders": completed_orders,
            "total_revenue": float(total_revenue),
            "total_products": total_products,
            "in_stock_products": in_stock_products,
            **totals,
        }
