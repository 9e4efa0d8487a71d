"""Domain-specific exceptions"""

from typing import Any


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class MalformedInputError(DomainException):
    """A numeric field (amount, balance, tax) holds a non-numeric value"""

    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value
        super().__init__(f"Malformed value for {field}: {value!r}")


class InvalidTransactionError(DomainException):
    """Transaction fails business validation rules"""

    pass
