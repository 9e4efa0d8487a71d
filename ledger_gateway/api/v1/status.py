"""POST /v1/status/resolve, GET /v1/status/flow - transaction status endpoints"""

import logging
from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException, Request

from ledger_gateway.api.v1.schemas import (
    StatusFlowResponse,
    StatusResponse,
    StatusResult,
    TransactionsRequest,
)
from ledger_gateway.api.dependencies import get_lenient, get_now, get_request_id
from ledger_gateway.domain.exceptions import MalformedInputError
from ledger_gateway.domain.status import get_status_flow, resolve_display_status, resolve_is_open
from ledger_gateway.infrastructure.observability.metrics import record_computation, record_malformed_input

router = APIRouter()


@router.post("/status/resolve", response_model=StatusResponse)
def resolve_statuses(
    request_body: TransactionsRequest,
    request: Request,
    now: datetime = Depends(get_now),
    lenient: bool = Depends(get_lenient),
):
    """
    Resolve the badge status of each transaction.

    display_status applies the paid/overdue override; is_open reflects the
    stored status only and is what ageing and totals use.
    """
    request_id = get_request_id(request)
    reference_now = request_body.as_of or now

    try:
        results = [
            StatusResult(
                id=txn.id,
                stored_status=txn.status,
                display_status=resolve_display_status(
                    txn.status, txn.due_date, txn.balance_due, reference_now, lenient=lenient
                ),
                is_open=resolve_is_open(txn.status),
            )
            for txn in request_body.transactions
        ]
    except MalformedInputError as e:
        record_malformed_input(e.field)
        logging.warning(f"Malformed input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    record_computation("status")
    return StatusResponse(results=results)


@router.get("/status/flow/{transaction_type}", response_model=StatusFlowResponse)
def status_flow(transaction_type: str):
    """Lifecycle steps shown on the transaction detail timeline"""
    return StatusFlowResponse(transaction_type=transaction_type, flow=get_status_flow(transaction_type))
