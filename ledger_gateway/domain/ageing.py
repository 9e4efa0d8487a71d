"""Receivables/payables ageing - buckets open balances by days past due"""

from decimal import Decimal
from typing import Any, Iterable, List, Optional

from ledger_gateway.domain.models import (
    AgeingBucket,
    AgeingSummary,
    DateLike,
    OpenBalance,
    Transaction,
)
from ledger_gateway.domain.status import resolve_is_open
from ledger_gateway.utils.date_utils import days_past
from ledger_gateway.utils.number_utils import ZERO, to_decimal

RECEIVABLE_TYPE = "sales_invoice"
PAYABLE_TYPE = "purchase_bill"

BUCKET_LABELS = ("Current", "1-30 days", "31-60 days", "60+ days")

HUNDRED = Decimal("100")


def bucket_for(diff_days: int) -> str:
    """
    Map days past due to an AgeingSummary field.

    Boundaries are inclusive: day 30 is still 1-30, day 31 starts 31-60.
    """
    if diff_days <= 0:
        return "current"
    elif diff_days <= 30:
        return "days_1_to_30"
    elif diff_days <= 60:
        return "days_31_to_60"
    else:
        return "days_60_plus"


def compute_ageing(
    transactions: Iterable[Transaction],
    reference_now: DateLike,
    lenient: bool = False,
) -> AgeingSummary:
    """
    Sum balance due of open transactions into ageing buckets.

    Skipped (not errors):
    - transactions whose stored status is not open
    - transactions without a due date
    - transactions with an unknown (None) balance due

    Type filtering is the caller's job; see compute_receivables_ageing and
    compute_payables_ageing.

    Raises:
        MalformedInputError: a balance due is not numeric (unless lenient)
    """
    summary = AgeingSummary()

    for txn in transactions:
        if not resolve_is_open(txn.status) or txn.due_date is None:
            continue

        balance = to_decimal(txn.balance_due, "balance_due", lenient)
        if balance is None:
            continue

        field = bucket_for(days_past(txn.due_date, reference_now))
        setattr(summary, field, getattr(summary, field) + balance)

    return summary


def to_buckets(summary: AgeingSummary) -> List[AgeingBucket]:
    """Attach percentage of total to each bucket (all zero when nothing is owed)"""
    amounts = [
        summary.current,
        summary.days_1_to_30,
        summary.days_31_to_60,
        summary.days_60_plus,
    ]
    total = summary.total

    return [
        AgeingBucket(
            range=label,
            amount=amount,
            percentage=(amount / total * HUNDRED) if total != ZERO else ZERO,
        )
        for label, amount in zip(BUCKET_LABELS, amounts)
    ]


def compute_ageing_buckets(
    transactions: Iterable[Transaction],
    reference_now: DateLike,
    lenient: bool = False,
) -> List[AgeingBucket]:
    """Ageing buckets with percentages, in display order"""
    return to_buckets(compute_ageing(transactions, reference_now, lenient))


def filter_by_type(transactions: Iterable[Transaction], transaction_type: str) -> List[Transaction]:
    """Keep only transactions of the given type"""
    return [t for t in transactions if t.transaction_type == transaction_type]


def filter_by_party(transactions: Iterable[Transaction], party_id: Any) -> List[Transaction]:
    """Keep only transactions with the given counterparty (compared as strings)"""
    wanted = str(party_id)
    return [t for t in transactions if t.party_id is not None and str(t.party_id) == wanted]


def compute_receivables_ageing(
    transactions: Iterable[Transaction],
    reference_now: DateLike,
    lenient: bool = False,
) -> AgeingSummary:
    """Ageing over sales invoices"""
    return compute_ageing(filter_by_type(transactions, RECEIVABLE_TYPE), reference_now, lenient)


def compute_payables_ageing(
    transactions: Iterable[Transaction],
    reference_now: DateLike,
    lenient: bool = False,
) -> AgeingSummary:
    """Ageing over purchase bills"""
    return compute_ageing(filter_by_type(transactions, PAYABLE_TYPE), reference_now, lenient)


def compute_party_ageing(
    transactions: Iterable[Transaction],
    party_id: Any,
    reference_now: DateLike,
    transaction_type: Optional[str] = None,
    lenient: bool = False,
) -> AgeingSummary:
    """Ageing for a single customer or vendor, optionally narrowed to one type"""
    selected = filter_by_party(transactions, party_id)
    if transaction_type is not None:
        selected = filter_by_type(selected, transaction_type)
    return compute_ageing(selected, reference_now, lenient)


def summarize_open_balances(transactions: Iterable[Transaction], lenient: bool = False) -> OpenBalance:
    """
    Count open transactions and total their known balance due.

    Every open transaction is counted; one with an unknown balance adds
    nothing to the total.
    """
    total = ZERO
    count = 0

    for txn in transactions:
        if not resolve_is_open(txn.status):
            continue
        count += 1
        balance = to_decimal(txn.balance_due, "balance_due", lenient)
        if balance is not None:
            total += balance

    return OpenBalance(total=total, count=count)
