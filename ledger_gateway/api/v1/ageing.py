"""POST /v1/ageing[...] and /v1/open-balances - receivables/payables ageing endpoints"""

import time
import logging
from datetime import datetime
from typing import Callable, List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from ledger_gateway.api.v1.schemas import (
    AgeingBucketSchema,
    AgeingResponse,
    AgeingTotalsSchema,
    OpenBalanceSchema,
    OpenBalancesResponse,
    TransactionsRequest,
)
from ledger_gateway.api.dependencies import get_lenient, get_now, get_request_id
from ledger_gateway.domain.ageing import (
    PAYABLE_TYPE,
    RECEIVABLE_TYPE,
    compute_ageing,
    filter_by_party,
    filter_by_type,
    summarize_open_balances,
    to_buckets,
)
from ledger_gateway.domain.exceptions import MalformedInputError
from ledger_gateway.domain.models import Transaction
from ledger_gateway.infrastructure.observability.logging import log_ageing
from ledger_gateway.infrastructure.observability.metrics import (
    record_ageing,
    record_computation,
    record_malformed_input,
)

router = APIRouter()


def _run_ageing(
    scope: str,
    request_body: TransactionsRequest,
    request: Request,
    now: datetime,
    lenient: bool,
    select: Callable[[List[Transaction]], List[Transaction]] = lambda txns: txns,
) -> AgeingResponse:
    """Shared flow: select transactions, bucket, record, shape the response"""
    start_time = time.time()
    request_id = get_request_id(request)
    reference_now = request_body.as_of or now

    transactions = select([t.to_domain() for t in request_body.transactions])

    try:
        summary = compute_ageing(transactions, reference_now, lenient=lenient)
    except MalformedInputError as e:
        record_malformed_input(e.field)
        logging.warning(f"Malformed input: {e}", extra={"request_id": request_id, "scope": scope})
        raise HTTPException(status_code=422, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    record_ageing(scope, summary)
    log_ageing(request_id, scope, len(transactions), float(summary.total), duration_ms)

    as_of = reference_now.date() if isinstance(reference_now, datetime) else reference_now

    return AgeingResponse(
        as_of=as_of,
        totals=AgeingTotalsSchema(
            current=float(summary.current),
            days_1_to_30=float(summary.days_1_to_30),
            days_31_to_60=float(summary.days_31_to_60),
            days_60_plus=float(summary.days_60_plus),
            total=float(summary.total),
        ),
        buckets=[
            AgeingBucketSchema(range=b.range, amount=float(b.amount), percentage=float(b.percentage))
            for b in to_buckets(summary)
        ],
    )


@router.post("/ageing", response_model=AgeingResponse)
def ageing(
    request_body: TransactionsRequest,
    request: Request,
    now: datetime = Depends(get_now),
    lenient: bool = Depends(get_lenient),
):
    """
    Bucket open balances of the given transactions by days past due.

    The caller has already narrowed the list (e.g. to one type); use the
    receivables/payables endpoints to have the type filter applied here.
    """
    return _run_ageing("all", request_body, request, now, lenient)


@router.post("/ageing/receivables", response_model=AgeingResponse)
def receivables_ageing(
    request_body: TransactionsRequest,
    request: Request,
    now: datetime = Depends(get_now),
    lenient: bool = Depends(get_lenient),
):
    """Ageing over sales invoices only"""
    return _run_ageing(
        "receivables", request_body, request, now, lenient,
        select=lambda txns: filter_by_type(txns, RECEIVABLE_TYPE),
    )


@router.post("/ageing/payables", response_model=AgeingResponse)
def payables_ageing(
    request_body: TransactionsRequest,
    request: Request,
    now: datetime = Depends(get_now),
    lenient: bool = Depends(get_lenient),
):
    """Ageing over purchase bills only"""
    return _run_ageing(
        "payables", request_body, request, now, lenient,
        select=lambda txns: filter_by_type(txns, PAYABLE_TYPE),
    )


@router.post("/ageing/party/{party_id}", response_model=AgeingResponse)
def party_ageing(
    party_id: str,
    request_body: TransactionsRequest,
    request: Request,
    transaction_type: Optional[str] = Query(None, description="Narrow to one transaction type"),
    now: datetime = Depends(get_now),
    lenient: bool = Depends(get_lenient),
):
    """Ageing for one customer or vendor (customer/vendor detail page)"""

    def select(txns: List[Transaction]) -> List[Transaction]:
        selected = filter_by_party(txns, party_id)
        if transaction_type:
            selected = filter_by_type(selected, transaction_type)
        return selected

    return _run_ageing("party", request_body, request, now, lenient, select=select)


@router.post("/open-balances", response_model=OpenBalancesResponse)
def open_balances(
    request_body: TransactionsRequest,
    request: Request,
    lenient: bool = Depends(get_lenient),
):
    """Outstanding receivables and payables totals for the dashboard"""
    request_id = get_request_id(request)
    transactions = [t.to_domain() for t in request_body.transactions]

    try:
        receivables = summarize_open_balances(filter_by_type(transactions, RECEIVABLE_TYPE), lenient=lenient)
        payables = summarize_open_balances(filter_by_type(transactions, PAYABLE_TYPE), lenient=lenient)
    except MalformedInputError as e:
        record_malformed_input(e.field)
        logging.warning(f"Malformed input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    record_computation("open_balances")

    return OpenBalancesResponse(
        receivables=OpenBalanceSchema(total=float(receivables.total), count=receivables.count),
        payables=OpenBalanceSchema(total=float(payables.total), count=payables.count),
    )
