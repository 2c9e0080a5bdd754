import re
from urllib.parse import parse_qs, urlparse

import pytest

from models import Invoice
from services.errors import InvalidInput
from services.invoice_service import (
    build_whatsapp_link,
    format_rupiah,
    generate_invoice_number,
    phone_digits,
)


@pytest.fixture
def order_id(client, make_product, order_payload):
    product = make_product(name="BTS - Proof", price=100000)
    response = client.post("/api/orders", json=order_payload(
        [{"product_id": product.id, "quantity": 2}], total_amount=200000
    ))
    return response.json()["order"]["id"]


def test_format_rupiah_uses_dot_grouping():
    assert format_rupiah(200000) == "Rp 200.000"
    assert format_rupiah(1250000.0) == "Rp 1.250.000"
    assert format_rupiah(0) == "Rp 0"
    assert format_rupiah(1234.5) == "Rp 1.234,50"


def test_phone_digits_strips_formatting():
    assert phone_digits("+62 812-3456-789") == "628123456789"
    assert phone_digits("") == ""


def test_invoice_number_format():
    assert re.fullmatch(r"INV-\d+-\d{1,3}", generate_invoice_number())


def test_whatsapp_link_encodes_message():
    link = build_whatsapp_link("+6281234", "Halo Rina!\nTotal: Rp 1.000 & ongkir (express)")

    assert link.startswith("https://wa.me/6281234?text=")
    assert "%0A" in link
    assert "%20" in link
    assert "%26" in link
    assert "(express)" in link
    assert "+" not in link.split("?text=", 1)[1]


def test_whatsapp_link_needs_digits():
    with pytest.raises(InvalidInput):
        build_whatsapp_link("no phone", "hi")


def test_generate_invoice_for_order(client, admin_headers, order_id):
    response = client.post("/api/invoices/generate", headers=admin_headers, json={
        "order_id": order_id, "customer_phone": "+6281234"
    })

    assert response.status_code == 201
    body = response.json()
    invoice = body["invoice"]
    assert re.fullmatch(r"INV-\d+-\d{1,3}", invoice["invoice_number"])
    assert invoice["status"] == "unpaid"
    assert invoice["total_amount"] == 200000
    assert invoice["customer_name"] == "Rina"
    assert body["whatsapp_link"] == invoice["whatsapp_link"]

    link = urlparse(body["whatsapp_link"])
    assert link.netloc == "wa.me"
    assert link.path == "/6281234"
    message = parse_qs(link.query)["text"][0]
    assert "Rina" in message
    assert "BTS - Proof x2" in message
    assert "Rp 200.000" in message
    assert invoice["invoice_number"] in message


def test_second_invoice_for_same_order_conflicts(client, admin_headers, order_id, db):
    payload = {"order_id": order_id, "customer_phone": "+6281234"}
    client.post("/api/invoices/generate", headers=admin_headers, json=payload)

    response = client.post("/api/invoices/generate", headers=admin_headers, json=payload)

    assert response.status_code == 409
    assert db.query(Invoice).count() == 1


def test_generate_for_missing_order_is_404(client, admin_headers):
    response = client.post("/api/invoices/generate", headers=admin_headers, json={
        "order_id": 9999, "customer_phone": "+6281234"
    })
    assert response.status_code == 404


def test_generate_is_admin_only(client, customer_headers, order_id):
    response = client.post("/api/invoices/generate", headers=customer_headers, json={
        "order_id": order_id, "customer_phone": "+6281234"
    })
    assert response.status_code == 403


def test_regenerate_link_keeps_invoice_number(client, admin_headers, order_id):
    created = client.post("/api/invoices/generate", headers=admin_headers, json={
        "order_id": order_id, "customer_phone": "+6281234"
    }).json()["invoice"]

    response = client.put(f"/api/invoices/{created['id']}/whatsapp-link", headers=admin_headers, json={
        "customer_phone": "0812-9999"
    })

    assert response.status_code == 200
    link = response.json()["whatsapp_link"]
    assert link.startswith("https://wa.me/08129999?text=")
    assert created["invoice_number"] in parse_qs(urlparse(link).query)["text"][0]


def test_regenerate_missing_invoice_is_404(client, admin_headers):
    response = client.put("/api/invoices/42/whatsapp-link", headers=admin_headers, json={"customer_phone": "0812"})
    assert response.status_code == 404


def test_invoice_detail_includes_items(client, admin_headers, order_id):
    created = client.post("/api/invoices/generate", headers=admin_headers, json={
        "order_id": order_id, "customer_phone": "+6281234"
    }).json()["invoice"]

    response = client.get(f"/api/invoices/{created['id']}", headers=admin_headers)

    assert response.status_code == 200
    detail = response.json()["invoice"]
    assert detail["order_status"] == "pending"
    assert [item["quantity"] for item in detail["items"]] == [2]

    listing = client.get("/api/invoices", headers=admin_headers).json()["invoices"]
    assert [inv["id"] for inv in listing] == [created["id"]]


def test_customer_sees_only_own_invoices(client, admin_headers, customer_headers, make_product, order_payload, order_id):
    product = make_product(name="Own")
    own_order = client.post(
        "/api/orders", headers=customer_headers,
        json=order_payload([{"product_id": product.id, "quantity": 1}])
    ).json()["order"]

    foreign = client.post("/api/invoices/generate", headers=admin_headers, json={
        "order_id": order_id, "customer_phone": "+6281234"
    }).json()["invoice"]
    own = client.post("/api/invoices/generate", headers=admin_headers, json={
        "order_id": own_order["id"], "customer_phone": "+6281234"
    }).json()["invoice"]

    assert client.get(f"/api/invoices/{own['id']}", headers=customer_headers).status_code == 200
    assert client.get(f"/api/invoices/{foreign['id']}", headers=customer_headers).status_code == 404
    assert client.get("/api/invoices", headers=customer_headers).status_code == 403
