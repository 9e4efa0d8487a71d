"""POST /v1/transactions/validate - business validation before save"""

import logging
from fastapi import APIRouter, HTTPException, Request

from ledger_gateway.api.v1.schemas import TransactionSchema, ValidationResponse
from ledger_gateway.api.dependencies import get_request_id
from ledger_gateway.domain.exceptions import InvalidTransactionError, MalformedInputError
from ledger_gateway.domain.validation import validate_transaction
from ledger_gateway.infrastructure.observability.metrics import record_computation, record_malformed_input

router = APIRouter()


@router.post("/transactions/validate", response_model=ValidationResponse)
def validate(request_body: TransactionSchema, request: Request):
    """Reject transactions missing a date or party, or with a non-positive amount"""
    request_id = get_request_id(request)

    try:
        validate_transaction(request_body.to_domain())
    except MalformedInputError as e:
        record_malformed_input(e.field)
        logging.warning(f"Malformed input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))
    except InvalidTransactionError as e:
        logging.info(f"Transaction rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    record_computation("validation")
    return ValidationResponse(valid=True)
