"""End-to-end scenarios: dashboard and transaction detail views for a small trader"""

import pytest
from datetime import timedelta
from fastapi.testclient import TestClient


@pytest.fixture
def ledger(today):
    """A quarter's worth of invoices and bills as the storage layer returns them"""

    def _due(days_overdue: int) -> str:
        return (today - timedelta(days=days_overdue)).isoformat()

    return [
        {"id": 1, "transaction_type": "sales_invoice", "status": "pending", "amount": "42500.00",
         "balance_due": "42500.00", "due_date": _due(-15), "party_id": 11},
        {"id": 2, "transaction_type": "sales_invoice", "status": "partially_paid", "amount": "25000.00",
         "balance_due": "18750.00", "due_date": _due(20), "party_id": 12},
        {"id": 3, "transaction_type": "sales_invoice", "status": "overdue", "amount": "9000.00",
         "balance_due": "9000.00", "due_date": _due(50), "party_id": 12},
        {"id": 4, "transaction_type": "sales_invoice", "status": "paid", "amount": "15000.00",
         "balance_due": "0", "due_date": _due(80), "party_id": 11},
        {"id": 5, "transaction_type": "sales_invoice", "status": "draft", "amount": "3000.00",
         "balance_due": "3000.00", "due_date": None, "party_id": 13},
        {"id": 6, "transaction_type": "purchase_bill", "status": "pending", "amount": "12000.00",
         "balance_due": "12000.00", "due_date": _due(95), "party_id": 21},
        {"id": 7, "transaction_type": "purchase_bill", "status": "pending", "amount": "4000.00",
         "balance_due": "4000.00", "due_date": None, "party_id": 22},
        {"id": 8, "transaction_type": "receipt", "status": "completed", "amount": "6250.00",
         "balance_due": None, "due_date": None, "party_id": 12},
    ]


@pytest.mark.integration
def test_dashboard_totals_consistent_with_ageing(client: TestClient, ledger):
    """
    Dashboard shows open totals next to the ageing cards.

    Open totals include open bills without a due date; ageing does not, so
    payables ageing is smaller than open payables by exactly that bill.
    """
    open_balances = client.post("/v1/open-balances", json={"transactions": ledger}).json()
    receivables = client.post("/v1/ageing/receivables", json={"transactions": ledger}).json()
    payables = client.post("/v1/ageing/payables", json={"transactions": ledger}).json()

    assert open_balances["receivables"] == {"total": 70250, "count": 3}
    assert receivables["totals"]["total"] == open_balances["receivables"]["total"]
    assert receivables["totals"]["current"] == 42500
    assert receivables["totals"]["days_1_to_30"] == 18750
    assert receivables["totals"]["days_31_to_60"] == 9000

    assert open_balances["payables"] == {"total": 16000, "count": 2}
    assert payables["totals"]["days_60_plus"] == 12000
    assert open_balances["payables"]["total"] - payables["totals"]["total"] == 4000


@pytest.mark.integration
def test_customer_detail_ageing_percentages(client: TestClient, ledger):
    """Customer 12 owes 18750 at 1-30 days and 9000 at 31-60 days"""
    response = client.post(
        "/v1/ageing/party/12",
        params={"transaction_type": "sales_invoice"},
        json={"transactions": ledger},
    )

    buckets = {b["range"]: b for b in response.json()["buckets"]}
    assert buckets["1-30 days"]["amount"] == 18750
    assert buckets["1-30 days"]["percentage"] == pytest.approx(18750 / 27750 * 100)
    assert buckets["31-60 days"]["percentage"] == pytest.approx(9000 / 27750 * 100)
    assert buckets["Current"]["percentage"] == 0
    assert sum(b["percentage"] for b in buckets.values()) == pytest.approx(100)


@pytest.mark.integration
def test_invoice_list_badges(client: TestClient, ledger):
    """Badges override stored status; the open flag does not"""
    results = client.post("/v1/status/resolve", json={"transactions": ledger}).json()["results"]
    badges = {r["id"]: r["display_status"] for r in results}

    assert badges[1] == "pending"
    assert badges[2] == "overdue"
    assert badges[4] == "paid"
    assert badges[5] == "draft"
    assert badges[8] == "completed"


@pytest.mark.integration
def test_transaction_detail_gst_table(client: TestClient):
    """Detail view for a two-product invoice sold within the state"""
    response = client.post(
        "/v1/tax-breakup",
        json={
            "is_inter_state": False,
            "line_items": [
                {"amount": "200.00", "tax_rate": "18", "tax_amount": "36.00"},
                {"amount": "500.00", "tax_rate": "12", "tax_amount": "60.00"},
            ],
        },
    )

    data = response.json()
    assert [r["rate"] for r in data["rows"]] == [18, 12]
    assert data["rows"][0]["cgst"] == 18
    assert data["rows"][1]["sgst"] == 30
    assert data["totals"] == {"taxable_amount": 700, "cgst": 48, "sgst": 48, "igst": 0, "total": 96}
    assert data["line_item_totals"]["grand_total"] == 796
