"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from ledger_gateway.utils.date_utils import DateLike


@dataclass
class Transaction:
    """Sales/purchase transaction as supplied by the storage layer"""

    transaction_type: str  # "sales_invoice", "purchase_bill", ...
    status: str  # "draft", "pending", "partially_paid", ...
    amount: Any
    balance_due: Any = None
    due_date: Optional[DateLike] = None
    transaction_date: Optional[DateLike] = None
    party_id: Optional[Any] = None
    id: Optional[Any] = None


@dataclass
class TransactionLineItem:
    """Single line on a transaction; tax_amount is pre-computed upstream"""

    amount: Any
    tax_rate: Any = None
    tax_amount: Any = None


@dataclass
class AgeingSummary:
    """Open balances split by days past due"""

    current: Decimal = Decimal("0")
    days_1_to_30: Decimal = Decimal("0")
    days_31_to_60: Decimal = Decimal("0")
    days_60_plus: Decimal = Decimal("0")

    @property
    def total(self) -> Decimal:
        return self.current + self.days_1_to_30 + self.days_31_to_60 + self.days_60_plus


@dataclass
class AgeingBucket:
    """Ageing bucket with its share of the total, for display"""

    range: str
    amount: Decimal
    percentage: Decimal


@dataclass
class OpenBalance:
    """Outstanding total across open transactions"""

    total: Decimal
    count: int


@dataclass
class TaxBreakupRow:
    """GST split for all line items sharing a tax rate"""

    rate: Decimal
    taxable_amount: Decimal
    cgst: Decimal
    sgst: Decimal
    igst: Decimal
    total: Decimal


@dataclass
class TaxBreakupTotals:
    """Sum of every tax breakup row"""

    taxable_amount: Decimal
    cgst: Decimal
    sgst: Decimal
    igst: Decimal
    total: Decimal


@dataclass
class LineItemTotals:
    """Pre-tax, tax and grand totals over a transaction's line items"""

    total_amount: Decimal
    total_tax_amount: Decimal
    grand_total: Decimal
