"""Create all tables and seed an admin account plus a starter catalog.

Run once: ``python -m scripts.init_db``
"""
import os
import sys

from dotenv import load_dotenv
from sqlalchemy import func

from database import Base, engine, SessionLocal
from models import Product, User, ROLE_ADMIN
from auth import get_password_hash

load_dotenv()

STARTER_PRODUCTS = [
    {
        "name": "BTS - Proof (Standard Edition)",
        "description": "Anthology album, includes photobook and random photocard",
        "price": 350000,
        "type": "Ready",
        "stock": 25,
    },
    {
        "name": "BLACKPINK Official Light Stick Ver.2",
        "description": "Official hammer-bong, Bluetooth connection supported",
        "price": 650000,
        "type": "Ready",
        "stock": 10,
    },
    {
        "name": "NewJeans - Get Up (Bunny Beach Bag)",
        "description": "Pre-order, ships 3-4 weeks after the order closes",
        "price": 420000,
        "type": "PO",
        "stock": 0,
    },
    {
        "name": "SEVENTEEN - FML (Carat Version)",
        "description": "Mini album, random member version",
        "price": 180000,
        "type": "Ready",
        "stock": 40,
    },
    {
        "name": "Stray Kids SKZOO Plush",
        "description": "Pre-order plush, 20cm, choose member in notes",
        "price": 275000,
        "type": "PO",
        "stock": 0,
    },
]


def init_database() -> bool:
    """Initialize database with tables and seed data"""
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        admin_email = os.getenv("ADMIN_EMAIL", "admin@kpopstore.com")
        admin_password = os.getenv("ADMIN_PASSWORD", "password123")
        admin_name = os.getenv("ADMIN_NAME", "Admin User")

        if not db.query(User).filter(User.email == admin_email).first():
            db.add(User(
                email=admin_email,
                password_hash=get_password_hash(admin_password),
                name=admin_name,
                role=ROLE_ADMIN
            ))
            print(f"Admin user created: {admin_email}")

        products_count = db.query(func.count(Product.id)).scalar()
        if products_count == 0:
            db.add_all(Product(**data) for data in STARTER_PRODUCTS)
            print(f"Added {len(STARTER_PRODUCTS)} products")

        db.commit()
        print("Tables ready: users, products, orders, order_items, invoices, unboxing_photos, finance_records")
        print("Database initialized successfully!")
        return True

    except Exception as e:
        print(f"Error initializing database: {e}")
        db.rollback()
        return False
    finally:
        db.close()


def main():
    sys.exit(0 if init_database() else 1)


if __name__ == "__main__":
    main()
