"""Prometheus metrics for monitoring ageing, tax breakup and input quality"""

from prometheus_client import Counter, Histogram

from ledger_gateway.domain.models import AgeingSummary

# Computation metrics
computation_counter = Counter(
    "ledger_computation_total",
    "Financial computations performed",
    ["kind"],  # status | ageing | open_balances | tax_breakup | validation
)

ageing_amount_counter = Counter(
    "ledger_ageing_amount_total",
    "Outstanding amount placed into each ageing bucket",
    ["scope", "bucket"],  # scope: all | receivables | payables | party
)

# Input quality
malformed_input_counter = Counter(
    "ledger_malformed_input_total",
    "Requests rejected for non-numeric amount/balance/tax fields",
    ["field"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_computation(kind: str) -> None:
    computation_counter.labels(kind=kind).inc()


def record_ageing(scope: str, summary: AgeingSummary) -> None:
    """Record ageing distribution so overdue drift is visible over time"""
    record_computation("ageing")
    for bucket, amount in (
        ("current", summary.current),
        ("1-30", summary.days_1_to_30),
        ("31-60", summary.days_31_to_60),
        ("60+", summary.days_60_plus),
    ):
        # Counters cannot decrease; negative balances (credits) are not tracked
        if amount > 0:
            ageing_amount_counter.labels(scope=scope, bucket=bucket).inc(float(amount))


def record_malformed_input(field: str) -> None:
    malformed_input_counter.labels(field=field).inc()
