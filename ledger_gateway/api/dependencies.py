"""Dependency injection for FastAPI endpoints"""

from datetime import datetime, timezone

from fastapi import Request
from ledger_gateway.config import settings


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_lenient() -> bool:
    """Whether malformed numeric input is coerced to zero instead of rejected"""
    return settings.malformed_input_policy == "coerce"


def get_now() -> datetime:
    """Reference clock for status and ageing; overridden in tests"""
    return datetime.now(timezone.utc)
