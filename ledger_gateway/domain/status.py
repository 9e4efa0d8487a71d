"""Transaction status rules - display status override and open/closed predicate"""

import logging
from typing import Any, List, Optional

from ledger_gateway.domain.exceptions import MalformedInputError
from ledger_gateway.utils.date_utils import DateLike, is_after
from ledger_gateway.utils.number_utils import ZERO, to_decimal

logger = logging.getLogger(__name__)

# Statuses that still carry an outstanding balance for ageing and totals
OPEN_STATUSES = frozenset({"pending", "overdue", "partially_paid"})

_INVOICE_FLOW = ["draft", "pending", "approved", "completed", "paid"]
_ORDER_FLOW = ["draft", "sent", "accepted", "processing", "completed"]
_QUOTATION_FLOW = ["draft", "sent", "responded", "accepted", "rejected"]
_DEFAULT_FLOW = ["draft", "pending", "approved", "completed"]

STATUS_FLOWS = {
    "sales_invoice": _INVOICE_FLOW,
    "purchase_bill": _INVOICE_FLOW,
    "sales_order": _ORDER_FLOW,
    "purchase_order": _ORDER_FLOW,
    "quotation": _QUOTATION_FLOW,
    "purchase_quotation": _QUOTATION_FLOW,
}


def resolve_display_status(
    status: str,
    due_date: Optional[DateLike],
    balance_due: Any,
    reference_now: DateLike,
    lenient: bool = False,
) -> str:
    """
    Derive the status shown on a transaction badge.

    Rules (first match wins):
    - balance due present and zero -> "paid"
    - balance due positive and reference_now past the due date -> "overdue"
    - otherwise the stored status unchanged

    A malformed balance is treated like an unknown one when lenient, so the
    badge falls back to the stored status instead of reading "paid".

    Raises:
        MalformedInputError: balance_due is not numeric (unless lenient)
    """
    try:
        balance = to_decimal(balance_due, "balance_due")
    except MalformedInputError:
        if not lenient:
            raise
        logger.warning(
            "Ignoring malformed balance for display status",
            extra={"field": "balance_due", "value": repr(balance_due)},
        )
        return status

    if balance is None:
        return status

    if balance == ZERO:
        return "paid"

    if balance > ZERO and due_date is not None and is_after(reference_now, due_date):
        return "overdue"

    return status


def resolve_is_open(status: Optional[str]) -> bool:
    """
    True when the stored status still counts toward receivables/payables.

    Only the stored status matters here: a "pending" invoice with zero
    balance is still open, even though its badge reads "paid".
    """
    return status in OPEN_STATUSES


def get_status_flow(transaction_type: str) -> List[str]:
    """Ordered lifecycle statuses for a transaction type"""
    return list(STATUS_FLOWS.get(transaction_type, _DEFAULT_FLOW))
