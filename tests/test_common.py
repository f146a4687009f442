"""Tests for shared startup and logging helpers."""

import logging

from paygate.common.config import GatewaySettings
from paygate.common.logging import ContextFilter, trace_id_ctx
from paygate.common.startup import _redacted


def test_startup_config_redacts_secrets():
    assert _redacted("stripe_secret_key", "sk_live_abc") == "<redacted>"
    assert _redacted("currency", "inr") == "inr"
    assert _redacted("otel_exporter_otlp_endpoint", None) == "<unset>"


def test_context_filter_injects_trace_id():
    record = logging.LogRecord("paygate", logging.INFO, __file__, 1, "msg", None, None)
    token = trace_id_ctx.set("trace-42")
    try:
        assert ContextFilter("payment-intent-gateway").filter(record) is True
    finally:
        trace_id_ctx.reset(token)

    assert record.service_name == "payment-intent-gateway"
    assert record.trace_id == "trace-42"


def test_settings_defaults_from_env(monkeypatch):
    monkeypatch.setenv("STRIPE_SECRET_KEY", "sk_test_env")
    monkeypatch.setenv("PORT", "8080")

    settings = GatewaySettings(_env_file=None)

    assert settings.stripe_secret_key == "sk_test_env"
    assert settings.port == 8080
    assert settings.host == "0.0.0.0"
    assert settings.currency == "inr"
    assert settings.automatic_payment_methods is True
