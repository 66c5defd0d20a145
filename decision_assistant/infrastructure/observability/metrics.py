"""Prometheus metrics for monitoring advice calls, saved decisions and calculation health"""

from prometheus_client import Counter, Histogram

# History metrics
decisions_saved_counter = Counter(
    "decision_assistant_decisions_saved_total",
    "Finalized decisions added to history",
    ["kind"],  # yes_no | multiple_choice | financial_spending | financial_analysis | weighted_analysis
)

decisions_deleted_counter = Counter(
    "decision_assistant_decisions_deleted_total",
    "Decisions removed from history",
)

# Advice service metrics
advice_requests_counter = Counter(
    "decision_assistant_advice_requests_total",
    "AI advice requests",
    ["operation", "outcome"],  # outcome: success | failure
)

advice_latency_histogram = Histogram(
    "advice_latency_seconds",
    "AI advice service response time",
    buckets=[0.5, 1.0, 2.5, 5.0, 10.0, 20.0, 30.0, 60.0],
)

advice_failure_counter = Counter(
    "advice_failures_total",
    "Failed AI advice service attempts (including retried ones)",
)

# Calculation metrics
uncomputable_totals_counter = Counter(
    "decision_assistant_uncomputable_totals_total",
    "Financial totals that evaluated to a non-finite value",
    ["option"],  # financing | consortium
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_advice(operation: str, succeeded: bool) -> None:
    """Record outcome of an advice request"""
    outcome = "success" if succeeded else "failure"
    advice_requests_counter.labels(operation=operation, outcome=outcome).inc()


def record_decision_saved(kind: str) -> None:
    decisions_saved_counter.labels(kind=kind).inc()
