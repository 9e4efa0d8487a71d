"""Business validation for incoming transactions"""

from ledger_gateway.domain.exceptions import InvalidTransactionError
from ledger_gateway.domain.models import Transaction
from ledger_gateway.utils.number_utils import ZERO, to_decimal


def validate_transaction(transaction: Transaction) -> None:
    """
    Check the rules every transaction must satisfy before it is stored.

    Raises:
        InvalidTransactionError: missing date, missing party, or non-positive amount
        MalformedInputError: amount is not numeric
    """
    if transaction.transaction_date is None:
        raise InvalidTransactionError("Transaction date is required")

    if transaction.party_id is None or transaction.party_id == "":
        raise InvalidTransactionError("Party is required")

    amount = to_decimal(transaction.amount, "amount")
    if amount is None or amount <= ZERO:
        raise InvalidTransactionError("Transaction amount must be greater than 0")
