"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional, Union

from ledger_gateway.domain.models import Transaction, TransactionLineItem

# Numbers may arrive as JSON numbers or as decimal strings ("42500.00");
# non-numeric strings are left for the domain layer to reject or coerce.
Numeric = Union[Decimal, str]


class TransactionSchema(BaseModel):
    """Transaction snapshot supplied by the caller"""

    id: Optional[Union[int, str]] = None
    transaction_type: str = Field(..., min_length=1, description="e.g. sales_invoice, purchase_bill")
    status: str = Field(..., min_length=1, description="Stored lifecycle status")
    amount: Optional[Numeric] = None
    balance_due: Optional[Numeric] = None
    due_date: Optional[Union[datetime, date]] = None
    transaction_date: Optional[Union[datetime, date]] = None
    party_id: Optional[Union[int, str]] = None

    def to_domain(self) -> Transaction:
        return Transaction(
            id=self.id,
            transaction_type=self.transaction_type,
            status=self.status,
            amount=self.amount,
            balance_due=self.balance_due,
            due_date=self.due_date,
            transaction_date=self.transaction_date,
            party_id=self.party_id,
        )


class LineItemSchema(BaseModel):
    """Transaction line with pre-computed tax"""

    amount: Optional[Numeric] = None
    tax_rate: Optional[Numeric] = None
    tax_amount: Optional[Numeric] = None

    def to_domain(self) -> TransactionLineItem:
        return TransactionLineItem(amount=self.amount, tax_rate=self.tax_rate, tax_amount=self.tax_amount)


class TransactionsRequest(BaseModel):
    """Request body carrying a transaction list and optional as-of date"""

    transactions: List[TransactionSchema] = Field(default_factory=list)
    as_of: Optional[Union[datetime, date]] = Field(None, description="Evaluate as of this date or instant instead of now")


# Status


class StatusResult(BaseModel):
    id: Optional[Union[int, str]] = None
    stored_status: str
    display_status: str
    is_open: bool


class StatusResponse(BaseModel):
    """Response for POST /v1/status/resolve"""

    results: List[StatusResult]


class StatusFlowResponse(BaseModel):
    """Response for GET /v1/status/flow/{transaction_type}"""

    transaction_type: str
    flow: List[str]


# Ageing


class AgeingTotalsSchema(BaseModel):
    current: float
    days_1_to_30: float
    days_31_to_60: float
    days_60_plus: float
    total: float


class AgeingBucketSchema(BaseModel):
    range: str
    amount: float
    percentage: float


class AgeingResponse(BaseModel):
    """Response for POST /v1/ageing and its scoped variants"""

    as_of: date
    totals: AgeingTotalsSchema
    buckets: List[AgeingBucketSchema]


class OpenBalanceSchema(BaseModel):
    total: float
    count: int


class OpenBalancesResponse(BaseModel):
    """Response for POST /v1/open-balances"""

    receivables: OpenBalanceSchema
    payables: OpenBalanceSchema


# Tax


class TaxBreakupRequest(BaseModel):
    """Request body for POST /v1/tax-breakup

    Either give is_inter_state directly or the counterparty's party_state,
    which is compared against the configured home state.
    """

    line_items: List[LineItemSchema] = Field(default_factory=list)
    is_inter_state: Optional[bool] = None
    party_state: Optional[str] = None


class TaxBreakupRowSchema(BaseModel):
    rate: float
    taxable_amount: float
    cgst: float
    sgst: float
    igst: float
    total: float


class TaxBreakupTotalsSchema(BaseModel):
    taxable_amount: float
    cgst: float
    sgst: float
    igst: float
    total: float


class LineItemTotalsSchema(BaseModel):
    total_amount: float
    total_tax_amount: float
    grand_total: float


class TaxBreakupResponse(BaseModel):
    """Response for POST /v1/tax-breakup"""

    is_inter_state: bool
    rows: List[TaxBreakupRowSchema]
    totals: TaxBreakupTotalsSchema
    line_item_totals: LineItemTotalsSchema


# Validation


class ValidationResponse(BaseModel):
    """Response for POST /v1/transactions/validate"""

    valid: bool
