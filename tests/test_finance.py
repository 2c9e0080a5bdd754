from datetime import datetime

from models import FinanceRecord


def _add_record(db, type, amount, created_at, description=None):
    record = FinanceRecord(type=type, amount=amount, description=description, created_at=created_at)
    db.add(record)
    db.commit()
    return record


def test_create_record_is_stamped_with_admin(client, admin, admin_headers):
    response = client.post("/api/finance", headers=admin_headers, json={
        "type": "expense", "description": "Bubble wrap", "amount": 25000
    })

    assert response.status_code == 201
    record = response.json()["record"]
    assert record["user_id"] == admin.id
    assert record["type"] == "expense"
    assert record["amount"] == 25000


def test_create_record_validates_payload(client, admin_headers):
    bad_type = client.post("/api/finance", headers=admin_headers, json={"type": "refund", "amount": 10})
    assert bad_type.status_code == 400

    bad_amount = client.post("/api/finance", headers=admin_headers, json={"type": "income", "amount": 0})
    assert bad_amount.status_code == 400


def test_list_summary_covers_filtered_rows(client, admin_headers, db):
    _add_record(db, "income", 500000, datetime(2026, 9, 1, 10))
    _add_record(db, "income", 300000, datetime(2026, 10, 2, 10))
    _add_record(db, "expense", 120000, datetime(2026, 10, 3, 23, 59))

    everything = client.get("/api/finance", headers=admin_headers).json()
    assert len(everything["records"]) == 3
    assert everything["summary"] == {"total_income": 800000, "total_expense": 120000, "profit": 680000}

    october = client.get("/api/finance", headers=admin_headers, params={
        "start_date": "2026-10-01", "end_date": "2026-10-03"
    }).json()
    assert [r["amount"] for r in october["records"]] == [120000, 300000]
    assert october["summary"]["profit"] == 180000

    expenses = client.get("/api/finance", headers=admin_headers, params={"type": "expense"}).json()
    assert [r["type"] for r in expenses["records"]] == ["expense"]
    assert expenses["summary"]["total_income"] == 0


def test_list_rejects_malformed_date(client, admin_headers):
    response = client.get("/api/finance", headers=admin_headers, params={"start_date": "October"})
    assert response.status_code == 400


def test_summary_reports_margin(client, admin_headers, db):
    _add_record(db, "income", 400000, datetime(2026, 10, 1))
    _add_record(db, "expense", 100000, datetime(2026, 10, 2))

    summary = client.get("/api/finance/summary", headers=admin_headers).json()["summary"]

    assert summary["profit"] == 300000
    assert summary["profit_margin"] == 75.0


def test_summary_margin_is_zero_without_income(client, admin_headers, db):
    _add_record(db, "expense", 100000, datetime(2026, 10, 2))

    summary = client.get("/api/finance/summary", headers=admin_headers).json()["summary"]

    assert summary["profit"] == -100000
    assert summary["profit_margin"] == 0


def test_delete_record(client, admin_headers, db):
    record_id = _add_record(db, "income", 1000, datetime(2026, 10, 1)).id

    response = client.delete(f"/api/finance/{record_id}", headers=admin_headers)
    assert response.status_code == 200

    missing = client.delete(f"/api/finance/{record_id}", headers=admin_headers)
    assert missing.status_code == 404


def test_finance_is_admin_only(client, customer_headers):
    assert client.get("/api/finance", headers=customer_headers).status_code == 403
    assert client.get("/api/finance/summary").status_code == 401
