"""Pytest fixtures for testing"""

import pytest
from datetime import date, datetime, timedelta
from fastapi.testclient import TestClient
from ledger_gateway.api.main import create_app
from ledger_gateway.api.dependencies import get_lenient, get_now
from ledger_gateway.domain.models import Transaction, TransactionLineItem


# Fixed clock so bucket boundaries are deterministic
TODAY = date(2024, 6, 30)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def client(today) -> TestClient:
    """FastAPI test client with the reference clock pinned to today"""
    app = create_app()
    app.dependency_overrides[get_now] = lambda: datetime.combine(today, datetime.min.time())
    return TestClient(app)


@pytest.fixture
def lenient_client(today) -> TestClient:
    """Test client that coerces malformed numbers to zero"""
    app = create_app()
    app.dependency_overrides[get_now] = lambda: datetime.combine(today, datetime.min.time())
    app.dependency_overrides[get_lenient] = lambda: True
    return TestClient(app)


@pytest.fixture
def make_transaction(today):
    """Factory for domain transactions due `days_overdue` days before today"""

    def _make(
        status: str = "pending",
        balance_due="100",
        days_overdue: int | None = 0,
        transaction_type: str = "sales_invoice",
        party_id=1,
        amount="100",
    ) -> Transaction:
        return Transaction(
            transaction_type=transaction_type,
            status=status,
            amount=amount,
            balance_due=balance_due,
            due_date=None if days_overdue is None else today - timedelta(days=days_overdue),
            transaction_date=today - timedelta(days=60),
            party_id=party_id,
        )

    return _make


@pytest.fixture
def transaction_payload(today):
    """Factory for JSON transaction bodies, as the API receives them"""

    def _payload(status="pending", balance_due="100", days_overdue=0, transaction_type="sales_invoice", **extra):
        body = {
            "transaction_type": transaction_type,
            "status": status,
            "amount": "1000",
            "balance_due": balance_due,
            "due_date": (today - timedelta(days=days_overdue)).isoformat() if days_overdue is not None else None,
        }
        body.update(extra)
        return body

    return _payload


@pytest.fixture
def sample_transactions(make_transaction) -> list[Transaction]:
    """Mixed receivables and payables across every bucket"""
    return [
        make_transaction("pending", "42500", days_overdue=-10, party_id=1),
        make_transaction("partially_paid", "18750", days_overdue=12, party_id=1),
        make_transaction("overdue", "5000", days_overdue=45, party_id=2),
        make_transaction("overdue", "2500", days_overdue=90, party_id=2),
        make_transaction("paid", "0", days_overdue=100, party_id=1),
        make_transaction("draft", "9000", days_overdue=20, party_id=3),
        make_transaction("pending", "7000", days_overdue=5, transaction_type="purchase_bill", party_id=9),
        make_transaction("pending", "3000", days_overdue=75, transaction_type="purchase_bill", party_id=9),
    ]


@pytest.fixture
def gst_line_items() -> list[TransactionLineItem]:
    return [
        TransactionLineItem(amount=1000, tax_rate=18, tax_amount=180),
        TransactionLineItem(amount=500, tax_rate=5, tax_amount=25),
    ]
