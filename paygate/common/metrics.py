"""Prometheus metric definitions for the gateway."""

from prometheus_client import Counter, Histogram, generate_latest
from starlette.responses import Response


http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["service", "route", "method", "status_code"],
)
http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration seconds",
    ["service", "route", "method"],
)
payment_intent_requests_total = Counter(
    "payment_intent_requests_total",
    "Payment intent creation requests received",
    ["service"],
)
payment_intent_created_total = Counter(
    "payment_intent_created_total",
    "Payment intents created at the processor",
    ["service", "currency"],
)
payment_intent_failures_total = Counter(
    "payment_intent_failures_total",
    "Payment intent requests that did not produce a client secret",
    ["service", "reason"],
)
payment_intent_latency_seconds = Histogram(
    "payment_intent_latency_seconds",
    "Time spent waiting on the payment processor",
    ["service"],
)


def metrics_response() -> Response:
    """Expose all registered Prometheus metrics in text format."""

    return Response(content=generate_latest(), media_type="text/plain")
