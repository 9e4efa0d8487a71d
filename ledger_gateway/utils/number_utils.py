"""Decimal parsing for monetary and rate fields"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from ledger_gateway.domain.exceptions import MalformedInputError

ZERO = Decimal("0")

logger = logging.getLogger(__name__)


def to_decimal(value: Any, field: str, lenient: bool = False) -> Optional[Decimal]:
    """
    Parse a numeric field into a Decimal.

    Accepts Decimal, int, float and numeric strings (storage serializes
    decimal columns as strings). None and blank strings mean "absent" and
    return None.

    Raises:
        MalformedInputError: value is not a finite number and lenient is False.
            With lenient=True the value is logged and treated as 0.
    """
    if value is None:
        return None

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None

    try:
        if isinstance(value, bool):
            raise TypeError("bool is not a number")
        if isinstance(value, float):
            # Go through str so 0.1 stays 0.1 instead of its binary expansion
            parsed = Decimal(str(value))
        else:
            parsed = Decimal(value)
        if not parsed.is_finite():
            raise ValueError("non-finite number")
    except (InvalidOperation, TypeError, ValueError):
        if not lenient:
            raise MalformedInputError(field, value)
        logger.warning(
            "Coercing malformed numeric input to zero",
            extra={"field": field, "value": repr(value)},
        )
        return ZERO

    return parsed


def to_amount(value: Any, field: str, lenient: bool = False) -> Decimal:
    """Like to_decimal, but an absent value counts as zero"""
    parsed = to_decimal(value, field, lenient)
    return ZERO if parsed is None else parsed
