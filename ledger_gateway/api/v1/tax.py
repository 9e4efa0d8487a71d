"""POST /v1/tax-breakup - GST breakup for a transaction's line items"""

import time
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Request

from ledger_gateway.api.v1.schemas import (
    LineItemTotalsSchema,
    TaxBreakupRequest,
    TaxBreakupResponse,
    TaxBreakupRowSchema,
    TaxBreakupTotalsSchema,
)
from ledger_gateway.api.dependencies import get_lenient, get_request_id
from ledger_gateway.config import settings
from ledger_gateway.domain.exceptions import MalformedInputError
from ledger_gateway.domain.tax import calculate_line_item_totals, compute_tax_breakup, summarize_tax_breakup
from ledger_gateway.infrastructure.observability.logging import log_tax_breakup
from ledger_gateway.infrastructure.observability.metrics import record_computation, record_malformed_input

router = APIRouter()


def resolve_inter_state(is_inter_state: Optional[bool], party_state: Optional[str]) -> bool:
    """
    Explicit flag wins; otherwise compare the party's state with ours.

    Without either, supply is treated as inter-state (IGST), matching the
    detail view when the party's state is unknown.
    """
    if is_inter_state is not None:
        return is_inter_state
    if party_state is None:
        return True
    return party_state.strip().casefold() != settings.home_state.strip().casefold()


@router.post("/tax-breakup", response_model=TaxBreakupResponse)
def tax_breakup(
    request_body: TaxBreakupRequest,
    request: Request,
    lenient: bool = Depends(get_lenient),
):
    """
    Group line items by GST rate and split tax into CGST/SGST or IGST.

    Returns one row per rate (first-seen order), the totals row and the
    transaction's pre-tax/tax/grand totals.
    """
    start_time = time.time()
    request_id = get_request_id(request)
    inter_state = resolve_inter_state(request_body.is_inter_state, request_body.party_state)
    line_items = [item.to_domain() for item in request_body.line_items]

    try:
        rows = compute_tax_breakup(line_items, inter_state, lenient=lenient)
        line_item_totals = calculate_line_item_totals(line_items, lenient=lenient)
    except MalformedInputError as e:
        record_malformed_input(e.field)
        logging.warning(f"Malformed input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    totals = summarize_tax_breakup(rows)

    duration_ms = (time.time() - start_time) * 1000
    record_computation("tax_breakup")
    log_tax_breakup(request_id, len(line_items), len(rows), inter_state, duration_ms)

    return TaxBreakupResponse(
        is_inter_state=inter_state,
        rows=[
            TaxBreakupRowSchema(
                rate=float(row.rate),
                taxable_amount=float(row.taxable_amount),
                cgst=float(row.cgst),
                sgst=float(row.sgst),
                igst=float(row.igst),
                total=float(row.total),
            )
            for row in rows
        ],
        totals=TaxBreakupTotalsSchema(
            taxable_amount=float(totals.taxable_amount),
            cgst=float(totals.cgst),
            sgst=float(totals.sgst),
            igst=float(totals.igst),
            total=float(totals.total),
        ),
        line_item_totals=LineItemTotalsSchema(
            total_amount=float(line_item_totals.total_amount),
            total_tax_amount=float(line_item_totals.total_tax_amount),
            grand_total=float(line_item_totals.grand_total),
        ),
    )
