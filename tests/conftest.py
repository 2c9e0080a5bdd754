import os
import tempfile

# Must be set before the app, database or services modules are imported
_TMP_DIR = tempfile.mkdtemp(prefix="kpop-store-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["UPLOAD_DIR"] = os.path.join(_TMP_DIR, "uploads")
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ["MAX_FILE_SIZE"] = "2048"
os.environ["SHIPPING_FEE_STANDARD"] = "0"
os.environ["SHIPPING_FEE_EXPRESS"] = "50000"

import pytest
from fastapi.testclient import TestClient

from app import app
from auth import create_user_token, get_password_hash
from database import Base, SessionLocal, engine
from models import Product, User, ROLE_ADMIN, ROLE_CUSTOMER
from routes.limiter import limiter

PASSWORD = "secret123"


@pytest.fixture(autouse=True)
def reset_state():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    limiter.reset()
    yield


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def _create_user(email, name, role):
    session = SessionLocal()
    try:
        user = User(email=email, password_hash=get_password_hash(PASSWORD), name=name, role=role)
        session.add(user)
        session.commit()
        session.refresh(user)
        session.expunge(user)
        return user
    finally:
        session.close()


@pytest.fixture
def customer():
    return _create_user("rina@mail.com", "Rina", ROLE_CUSTOMER)


@pytest.fixture
def admin():
    return _create_user("admin@kpopstore.com", "Admin User", ROLE_ADMIN)


@pytest.fixture
def customer_headers(customer):
    return {"Authorization": f"Bearer {create_user_token(customer)}"}


@pytest.fixture
def admin_headers(admin):
    return {"Authorization": f"Bearer {create_user_token(admin)}"}


@pytest.fixture
def make_product():
    def _make(name="BTS - Proof", price=100000, type="Ready", stock=10, description="Album"):
        session = SessionLocal()
        try:
            product = Product(name=name, price=price, type=type, stock=stock, description=description)
            session.add(product)
            session.commit()
            session.refresh(product)
            session.expunge(product)
            return product
        finally:
            session.close()
    return _make


@pytest.fixture
def order_payload():
    def _payload(items, total_amount=None, **overrides):
        payload = {
            "customer_name": "Rina",
            "customer_phone": "+6281234",
            "customer_email": "r@x.com",
            "items": items,
        }
        if total_amount is not None:
            payload["total_amount"] = total_amount
        payload.update(overrides)
        return payload
    return _payload
