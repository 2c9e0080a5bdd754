from auth import verify_password
from models import Product, User
from scripts import set_admin
from scripts.init_db import STARTER_PRODUCTS, init_database


def test_init_database_seeds_admin_and_catalog(db, monkeypatch):
    monkeypatch.setenv("ADMIN_EMAIL", "owner@kpopstore.com")
    monkeypatch.setenv("ADMIN_PASSWORD", "owner-pass")

    assert init_database() is True

    admin = db.query(User).filter(User.email == "owner@kpopstore.com").one()
    assert admin.role == "admin"
    assert verify_password("owner-pass", admin.password_hash)
    assert db.query(Product).count() == len(STARTER_PRODUCTS)


def test_init_database_is_idempotent(db, make_product):
    make_product(name="Existing")

    assert init_database() is True
    assert init_database() is True

    assert db.query(User).filter(User.role == "admin").count() == 1
    assert [p.name for p in db.query(Product).all()] == ["Existing"]


def test_set_admin_creates_account(db, capsys):
    assert set_admin.main(["--email", "boss@mail.com", "--password", "boss-pass", "--name", "Boss"]) == 0

    user = db.query(User).filter(User.email == "boss@mail.com").one()
    assert user.role == "admin"
    assert user.name == "Boss"
    assert "Admin created: boss@mail.com" in capsys.readouterr().out


def test_set_admin_promotes_existing_customer(db, customer):
    assert set_admin.set_admin(customer.email, "new-pass", "Rina Admin") == "updated"

    user = db.query(User).filter(User.email == customer.email).one()
    assert user.role == "admin"
    assert verify_password("new-pass", user.password_hash)
    assert db.query(User).count() == 1


def test_set_admin_requires_email_and_password(capsys):
    assert set_admin.main(["--email", "boss@mail.com"]) == 1
    assert "Missing --email or --password" in capsys.readouterr().out
