"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from ledger_gateway.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_ageing(
    request_id: str,
    scope: str,
    transaction_count: int,
    total: float,
    duration_ms: float,
) -> None:
    """Log structured ageing outcome (scope: all, receivables, payables, party)"""
    logging.info(
        "Ageing computed",
        extra={
            "request_id": request_id,
            "step": "ageing_complete",
            "scope": scope,
            "transaction_count": transaction_count,
            "outstanding_total": total,
            "duration_ms": duration_ms,
        },
    )


def log_tax_breakup(
    request_id: str,
    line_item_count: int,
    rate_count: int,
    is_inter_state: bool,
    duration_ms: float,
) -> None:
    """Log structured tax breakup outcome"""
    logging.info(
        "Tax breakup computed",
        extra={
            "request_id": request_id,
            "step": "tax_breakup_complete",
            "line_item_count": line_item_count,
            "rate_count": rate_count,
            "supply": "inter_state" if is_inter_state else "intra_state",
            "duration_ms": duration_ms,
        },
    )
